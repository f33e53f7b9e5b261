"""Configuration of the verifier generator."""

import tomllib
from dataclasses import dataclass, field, fields, replace
from pathlib import Path
from typing import Self

from zksolidity.exceptions import ConfigurationError

CONFIG_TABLE = "zksolidity"


@dataclass(frozen=True)
class GeneratorConfig:
    """Settings of the verifier generator.

    Attributes:
        output_dir (Path): Directory in which generated contracts are written.
        source_extension (str): Extension of the generated files.
        solidity_version (str): Version constraint written in the `pragma solidity` directive.
        license (str): SPDX license identifier written at the top of the generated files.
        libs_import_path (str): Import path of the directory containing `Pairing.sol` and `Groth16.sol`.
        interfaces_import_path (str): Import path of the directory containing the `I<ContractName>.sol`
            interfaces.
        protocol (str): The only proof system accepted in verifying keys.
        supported_curves (tuple[str, ...]): Curves accepted in verifying keys.
        create_output_dir (bool): If `True`, create `output_dir` when it is missing.
    """

    output_dir: Path = Path("contracts")
    source_extension: str = "sol"
    solidity_version: str = "^0.8.17"
    license: str = "MIT OR Apache-2.0"
    libs_import_path: str = "./libs"
    interfaces_import_path: str = "./interfaces"
    protocol: str = "groth16"
    supported_curves: tuple[str, ...] = field(default=("bn128", "bn254"))
    create_output_dir: bool = False

    @classmethod
    def from_dict(cls, data: dict, base_dir: Path | None = None) -> Self:
        """Construct an instance of `Self` from a dictionary.

        Args:
            data (dict): The settings. Keys not listed here are rejected.
            base_dir (Path | None): Directory against which a relative `output_dir` is resolved. If `None`,
                `output_dir` is kept as given.
        """
        known = {f.name: f for f in fields(cls)}
        kwargs = {}
        for key, value in data.items():
            if key not in known:
                msg = f"Unknown configuration key: {key}"
                raise ConfigurationError(msg)
            match key:
                case "output_dir":
                    if not isinstance(value, str):
                        msg = f"The configuration key {key} must be a string: {key}: {value!r}"
                        raise ConfigurationError(msg)
                    value = Path(value)
                    if base_dir is not None and not value.is_absolute():
                        value = base_dir / value
                case "supported_curves":
                    if not isinstance(value, list) or not all(isinstance(curve, str) for curve in value):
                        msg = f"The configuration key {key} must be a list of strings: {key}: {value!r}"
                        raise ConfigurationError(msg)
                    value = tuple(value)
                case "create_output_dir":
                    if not isinstance(value, bool):
                        msg = f"The configuration key {key} must be a boolean: {key}: {value!r}"
                        raise ConfigurationError(msg)
                case _:
                    if not isinstance(value, str):
                        msg = f"The configuration key {key} must be a string: {key}: {value!r}"
                        raise ConfigurationError(msg)
            kwargs[key] = value
        return cls(**kwargs)

    @classmethod
    def from_toml(cls, path: str | Path) -> Self:
        """Load the configuration from the `[zksolidity]` table of a TOML file.

        A relative `output_dir` is resolved against the directory containing the file.

        Args:
            path (str | Path): Path to the TOML file.
        """
        path = Path(path)
        try:
            with Path.open(path, "rb") as f:
                config = tomllib.load(f)
        except OSError as e:
            msg = f"Cannot read configuration file {path}: {e}"
            raise ConfigurationError(msg) from e
        except tomllib.TOMLDecodeError as e:
            msg = f"Invalid TOML in configuration file {path}: {e}"
            raise ConfigurationError(msg) from e

        table = config.get(CONFIG_TABLE, {})
        if not isinstance(table, dict):
            msg = f"The entry {CONFIG_TABLE} in {path} must be a table"
            raise ConfigurationError(msg)
        return cls.from_dict(table, base_dir=path.resolve().parent)

    def with_overrides(self, **overrides) -> Self:
        """Return a copy of self in which the settings not set to `None` in `overrides` are replaced."""
        overrides = {key: value for key, value in overrides.items() if value is not None}
        if "output_dir" in overrides:
            overrides["output_dir"] = Path(overrides["output_dir"])
        return replace(self, **overrides)
