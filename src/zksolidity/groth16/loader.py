"""Load Groth16 verifying keys exported by the trusted setup."""

import json
import re
from pathlib import Path

from zksolidity.config import GeneratorConfig
from zksolidity.exceptions import DescriptorNotFoundError, MalformedDescriptorError
from zksolidity.types.verifying_key import G1Point, G2Point, GTElement, Groth16VerifyingKeyDescriptor

# Coordinates are stored in uint256 words, which have at most 78 decimal digits
DECIMAL = re.compile(r"0|[1-9][0-9]{0,77}")
UINT256_BOUND = 2**256

# Affine points may be exported in projective form, with z = 1
G1_PROJECTIVE_ONE = [1]
G2_PROJECTIVE_ONE = [[1, 0]]


def _require(data: dict, key: str):
    if key not in data:
        msg = f"Missing field in verifying key: {key}"
        raise MalformedDescriptorError(msg)
    return data[key]


def _as_list(value, name: str, lengths: tuple[int, ...]) -> list:
    if not isinstance(value, list) or len(value) not in lengths:
        expected = " or ".join(str(length) for length in lengths)
        msg = f"The field {name} must be a list of length {expected}: {name}: {value!r}"
        raise MalformedDescriptorError(msg)
    return value


def parse_coordinate(value, name: str) -> int:
    """Parse a coordinate given either as a JSON integer or as a decimal string.

    Args:
        value: The coordinate as found in the verifying key.
        name (str): Path of the coordinate in the verifying key, used in error messages.

    Returns:
        The coordinate as a non-negative integer.

    Example:
        >>> parse_coordinate("12", "vk_alpha_1[0]")
        12
    """
    if type(value) is int and 0 <= value < UINT256_BOUND:
        return value
    if isinstance(value, str) and DECIMAL.fullmatch(value) and int(value) < UINT256_BOUND:
        return int(value)
    # repr of an integer over the conversion limit raises
    shown = f"<{value.bit_length()}-bit integer>" if type(value) is int and value > 0 else repr(value)
    if len(shown) > 80:  # noqa: PLR2004
        shown = f"{shown[:80]}..."
    msg = f"The field {name} must be a non-negative decimal integer below 2^256: {name}: {shown}"
    raise MalformedDescriptorError(msg)


def parse_g1_point(value, name: str) -> G1Point:
    """Parse a point in G1 given as `[x, y]` or `[x, y, 1]`."""
    coordinates = _as_list(value, name, (2, 3))
    parsed = [parse_coordinate(c, f"{name}[{i}]") for i, c in enumerate(coordinates)]
    if parsed[2:] not in ([], G1_PROJECTIVE_ONE):
        msg = f"The point {name} must be in affine form: {name}[2]: {coordinates[2]!r}"
        raise MalformedDescriptorError(msg)
    return G1Point(x=parsed[0], y=parsed[1])


def parse_g2_point(value, name: str) -> G2Point:
    """Parse a point in G2 given as `[[x0, x1], [y0, y1]]` or `[[x0, x1], [y0, y1], [1, 0]]`."""
    coordinates = _as_list(value, name, (2, 3))
    parsed = []
    for i, coordinate in enumerate(coordinates):
        components = _as_list(coordinate, f"{name}[{i}]", (2,))
        parsed.append([parse_coordinate(c, f"{name}[{i}][{j}]") for j, c in enumerate(components)])
    if parsed[2:] not in ([], G2_PROJECTIVE_ONE):
        msg = f"The point {name} must be in affine form: {name}[2]: {coordinates[2]!r}"
        raise MalformedDescriptorError(msg)
    return G2Point(x=tuple(parsed[0]), y=tuple(parsed[1]))


def parse_gt_element(value, name: str) -> GTElement:
    """Parse an element of GT = Fq12 given as two elements of Fq6, each made of three elements of Fq2."""
    halves = _as_list(value, name, (2,))
    out = []
    for i, half in enumerate(halves):
        elements = _as_list(half, f"{name}[{i}]", (3,))
        out.append(
            tuple(
                tuple(
                    parse_coordinate(c, f"{name}[{i}][{j}][{k}]")
                    for k, c in enumerate(_as_list(element, f"{name}[{i}][{j}]", (2,)))
                )
                for j, element in enumerate(elements)
            )
        )
    return tuple(out)


def parse_verifying_key(data, config: GeneratorConfig | None = None) -> Groth16VerifyingKeyDescriptor:
    """Validate the content of a verifying key and turn it into a `Groth16VerifyingKeyDescriptor`.

    Args:
        data: The decoded JSON content of the verifying key.
        config (GeneratorConfig | None): Configuration providing the accepted protocol and curves. Defaults
            to `GeneratorConfig()`.

    Returns:
        The verifying key, with all its fields validated.

    Raises:
        MalformedDescriptorError: If a field is missing or does not have the expected shape, if the protocol
            or the curve are not supported, or if the number of input commitments is not `nPublic + 1`.
    """
    config = config if config is not None else GeneratorConfig()

    if not isinstance(data, dict):
        msg = f"The verifying key must be a JSON object, not {type(data).__name__}"
        raise MalformedDescriptorError(msg)

    protocol = _require(data, "protocol")
    if protocol != config.protocol:
        msg = f"Unsupported protocol: {protocol!r}, expected {config.protocol!r}"
        raise MalformedDescriptorError(msg)

    curve = _require(data, "curve")
    if curve not in config.supported_curves:
        msg = f"Unsupported curve: {curve!r}, expected one of {', '.join(config.supported_curves)}"
        raise MalformedDescriptorError(msg)

    n_public = _require(data, "nPublic")
    if type(n_public) is not int or n_public < 0:
        msg = f"The field nPublic must be a non-negative integer: nPublic: {n_public!r}"
        raise MalformedDescriptorError(msg)

    ic = _require(data, "IC")
    if not isinstance(ic, list) or len(ic) != n_public + 1:
        found = len(ic) if isinstance(ic, list) else type(ic).__name__
        msg = f"The field IC must be a list of nPublic + 1 points: nPublic: {n_public}, IC: {found}"
        raise MalformedDescriptorError(msg)

    alpha_beta_12 = data.get("vk_alphabeta_12")

    return Groth16VerifyingKeyDescriptor(
        protocol=protocol,
        curve=curve,
        n_public=n_public,
        alpha_1=parse_g1_point(_require(data, "vk_alpha_1"), "vk_alpha_1"),
        beta_2=parse_g2_point(_require(data, "vk_beta_2"), "vk_beta_2"),
        gamma_2=parse_g2_point(_require(data, "vk_gamma_2"), "vk_gamma_2"),
        delta_2=parse_g2_point(_require(data, "vk_delta_2"), "vk_delta_2"),
        ic=tuple(parse_g1_point(point, f"IC[{i}]") for i, point in enumerate(ic)),
        alpha_beta_12=parse_gt_element(alpha_beta_12, "vk_alphabeta_12") if alpha_beta_12 is not None else None,
    )


def load_verifying_key(path: str | Path, config: GeneratorConfig | None = None) -> Groth16VerifyingKeyDescriptor:
    """Read a verifying key from a JSON file.

    Args:
        path (str | Path): Path to the JSON file.
        config (GeneratorConfig | None): Configuration providing the accepted protocol and curves.

    Raises:
        DescriptorNotFoundError: If the file cannot be read.
        MalformedDescriptorError: If the file is not valid JSON or is not a valid verifying key.
    """
    path = Path(path)
    try:
        with Path.open(path, encoding="utf-8") as f:
            content = f.read()
    except OSError as e:
        msg = f"Cannot read verifying key {path}: {e.strerror or e}"
        raise DescriptorNotFoundError(msg) from e
    except UnicodeDecodeError as e:
        msg = f"The verifying key {path} is not UTF-8 text: {e}"
        raise MalformedDescriptorError(msg) from e

    try:
        data = json.loads(content)
    except (ValueError, RecursionError) as e:
        # ValueError covers JSONDecodeError and integer literals over the conversion limit
        msg = f"The verifying key {path} is not valid JSON: {e}"
        raise MalformedDescriptorError(msg) from e

    return parse_verifying_key(data, config)
