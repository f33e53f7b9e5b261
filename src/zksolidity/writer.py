"""Write generated verifiers to disk."""

import logging
import os
import tempfile
from pathlib import Path

from zksolidity.config import GeneratorConfig
from zksolidity.exceptions import WriteFailureError
from zksolidity.groth16.loader import load_verifying_key
from zksolidity.groth16.model.verifier import Groth16SolidityVerifier, VerifierContractSource

logger = logging.getLogger(__name__)


def default_file_mode() -> int:
    """Return the mode `open` gives to new files under the current umask."""
    # The umask can only be read by setting it
    umask = os.umask(0)
    os.umask(umask)
    return 0o666 & ~umask


def write_verifier_contract(
    source: VerifierContractSource, output_dir: str | Path, create_output_dir: bool = False
) -> Path:
    """Write `source` to `output_dir / source.file_name`.

    The source is written to a temporary file in `output_dir`, which then replaces the destination. If
    writing fails, the destination is left untouched and the temporary file is removed.

    Args:
        source (VerifierContractSource): The generated source.
        output_dir (str | Path): The directory in which to write the source.
        create_output_dir (bool): If `True`, create `output_dir` when it is missing. Defaults to `False`.

    Returns:
        The path of the written file.

    Raises:
        WriteFailureError: If `output_dir` does not exist (and is not created) or cannot be written to.
    """
    output_dir = Path(output_dir)
    destination = output_dir / source.file_name

    try:
        if create_output_dir:
            output_dir.mkdir(parents=True, exist_ok=True)
        if not output_dir.is_dir():
            msg = f"The output directory does not exist: {output_dir}"
            raise WriteFailureError(msg)

        fd, tmp_name = tempfile.mkstemp(dir=output_dir, prefix=f".{source.file_name}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8", newline="\n") as f:
                f.write(source.text)
            # mkstemp creates the file readable by the owner only
            Path(tmp_name).chmod(default_file_mode())
            Path(tmp_name).replace(destination)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise
    except WriteFailureError:
        raise
    except OSError as e:
        msg = f"Cannot write {destination}: {e.strerror or e}"
        raise WriteFailureError(msg) from e

    logger.info("Wrote %s", destination)
    return destination


def generate_verifier(
    vkey_path: str | Path, contract_name: str, config: GeneratorConfig | None = None
) -> Path:
    """Generate the Solidity verifier of a verifying key and write it to `config.output_dir`.

    Args:
        vkey_path (str | Path): Path to the verifying key, in JSON.
        contract_name (str): Name of the contract, also used as the name of the file.
        config (GeneratorConfig | None): Settings of the generator. Defaults to `GeneratorConfig()`.

    Returns:
        The path of the written file.
    """
    config = config if config is not None else GeneratorConfig()

    verifying_key = load_verifying_key(vkey_path, config)
    logger.info(
        "Loaded %s verifying key over %s with %d public inputs from %s",
        verifying_key.protocol,
        verifying_key.curve,
        verifying_key.n_public,
        vkey_path,
    )

    source = Groth16SolidityVerifier(config).verifier_contract(verifying_key, contract_name)
    logger.debug("Generated sections: %s", ", ".join(section.name for section in source.sections))

    return write_verifier_contract(source, config.output_dir, create_output_dir=config.create_output_dir)
