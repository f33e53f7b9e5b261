import copy

import pytest

from zksolidity.config import GeneratorConfig
from zksolidity.exceptions import DescriptorNotFoundError, MalformedDescriptorError
from zksolidity.groth16.loader import load_verifying_key, parse_coordinate, parse_verifying_key
from zksolidity.types.verifying_key import G1Point, G2Point


def test_load_verifying_key(make_vkey, write_vkey):
    data = make_vkey(n_public=2)
    verifying_key = load_verifying_key(write_vkey(data))

    assert verifying_key.protocol == "groth16"
    assert verifying_key.curve == "bn128"
    assert verifying_key.n_public == 2
    assert verifying_key.alpha_1 == G1Point(1, 2)
    assert verifying_key.beta_2 == G2Point(
        (int(data["vk_beta_2"][0][0]), int(data["vk_beta_2"][0][1])),
        (int(data["vk_beta_2"][1][0]), int(data["vk_beta_2"][1][1])),
    )
    assert verifying_key.gamma_2 == G2Point((11, 12), (13, 14))
    assert verifying_key.delta_2 == G2Point((21, 22), (23, 24))
    assert verifying_key.ic == (G1Point(1, 2), G1Point(3, 4), G1Point(5, 6))
    assert verifying_key.alpha_beta_12 == (((1, 2), (3, 4), (5, 6)), ((7, 8), (9, 10), (11, 12)))


def test_affine_form(make_vkey):
    projective = parse_verifying_key(make_vkey(projective=True))
    affine = parse_verifying_key(make_vkey(projective=False))

    assert projective == affine


def test_integer_coordinates(make_vkey):
    data = make_vkey(n_public=0)
    data["vk_alpha_1"] = [7, 8]
    data["IC"] = [[0, 5, 1]]

    verifying_key = parse_verifying_key(data)

    assert verifying_key.alpha_1 == G1Point(7, 8)
    assert verifying_key.ic == (G1Point(0, 5),)


def test_alpha_beta_is_optional(make_vkey):
    data = make_vkey()
    del data["vk_alphabeta_12"]

    assert parse_verifying_key(data).alpha_beta_12 is None


def test_missing_file(tmp_path):
    with pytest.raises(DescriptorNotFoundError, match="Cannot read verifying key"):
        load_verifying_key(tmp_path / "missing.json")


def test_missing_file_is_file_not_found_error(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_verifying_key(tmp_path / "missing.json")


@pytest.mark.parametrize("content", ["", "{", "not json", '{"protocol": "groth16",}'])
def test_invalid_json(write_vkey, content):
    with pytest.raises(MalformedDescriptorError, match="not valid JSON"):
        load_verifying_key(write_vkey(content))


@pytest.mark.parametrize("content", ["[]", '"groth16"', "42", "null"])
def test_not_an_object(write_vkey, content):
    with pytest.raises(MalformedDescriptorError, match="must be a JSON object"):
        load_verifying_key(write_vkey(content))


@pytest.mark.parametrize(
    "field", ["protocol", "curve", "nPublic", "vk_alpha_1", "vk_beta_2", "vk_gamma_2", "vk_delta_2", "IC"]
)
def test_missing_field(make_vkey, field):
    data = make_vkey()
    del data[field]

    with pytest.raises(MalformedDescriptorError, match=f"Missing field in verifying key: {field}"):
        parse_verifying_key(data)


def mutate(data: dict, path: tuple, value) -> dict:
    out = copy.deepcopy(data)
    target = out
    for key in path[:-1]:
        target = target[key]
    target[path[-1]] = value
    return out


@pytest.mark.parametrize(
    ("path", "value", "message"),
    [
        (("protocol",), "plonk", "Unsupported protocol"),
        (("curve",), "bls12381", "Unsupported curve"),
        (("nPublic",), -1, "nPublic"),
        (("nPublic",), "2", "nPublic"),
        (("nPublic",), True, "nPublic"),
        (("vk_alpha_1",), ["1"], r"vk_alpha_1 must be a list of length 2 or 3"),
        (("vk_alpha_1",), ["1", "2", "1", "1"], r"vk_alpha_1 must be a list of length 2 or 3"),
        (("vk_alpha_1",), ["1", "2", "0"], r"vk_alpha_1 must be in affine form"),
        (("vk_alpha_1",), "12", r"vk_alpha_1 must be a list"),
        (("vk_alpha_1", 0), "-1", r"vk_alpha_1\[0\] must be a non-negative decimal integer"),
        (("vk_alpha_1", 0), "0x1f", r"vk_alpha_1\[0\]"),
        (("vk_alpha_1", 1), "012", r"vk_alpha_1\[1\]"),
        (("vk_alpha_1", 1), 1.5, r"vk_alpha_1\[1\]"),
        (("vk_alpha_1", 1), None, r"vk_alpha_1\[1\]"),
        (("vk_beta_2",), [["1", "2"]], r"vk_beta_2 must be a list of length 2 or 3"),
        (("vk_beta_2", 0), ["1", "2", "3"], r"vk_beta_2\[0\] must be a list of length 2"),
        (("vk_beta_2", 1), "1", r"vk_beta_2\[1\] must be a list of length 2"),
        (("vk_gamma_2", 1, 0), "abc", r"vk_gamma_2\[1\]\[0\]"),
        (("vk_delta_2", 2), ["0", "1"], r"vk_delta_2 must be in affine form"),
        (("IC",), {"0": ["1", "2"]}, "The field IC must be a list of nPublic \\+ 1 points"),
        (("IC", 1), ["1"], r"IC\[1\] must be a list of length 2 or 3"),
        (("IC", 2, 1), "-5", r"IC\[2\]\[1\]"),
        (("vk_alphabeta_12",), [[["1", "2"]] * 3], "vk_alphabeta_12 must be a list of length 2"),
        (("vk_alphabeta_12", 1, 2), ["1"], r"vk_alphabeta_12\[1\]\[2\] must be a list of length 2"),
    ],
)
def test_malformed_field(make_vkey, path, value, message):
    with pytest.raises(MalformedDescriptorError, match=message):
        parse_verifying_key(mutate(make_vkey(), path, value))


@pytest.mark.parametrize("n_ic", [0, 1, 2, 4])
def test_wrong_number_of_input_commitments(make_vkey, n_ic):
    data = make_vkey(n_public=2)
    data["IC"] = data["IC"][:n_ic] if n_ic <= 3 else [*data["IC"], ["7", "8", "1"]]

    with pytest.raises(MalformedDescriptorError, match="nPublic \\+ 1"):
        parse_verifying_key(data)


def test_supported_curves_from_config(make_vkey):
    data = make_vkey()
    data["curve"] = "bls12381"
    config = GeneratorConfig(supported_curves=("bls12381",))

    assert parse_verifying_key(data, config).curve == "bls12381"
    with pytest.raises(MalformedDescriptorError, match="Unsupported curve"):
        parse_verifying_key(make_vkey(), config)


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("0", 0),
        ("1", 1),
        (
            "21888242871839275222246405745257275088696311157297823662689037894645226208582",
            21888242871839275222246405745257275088696311157297823662689037894645226208582,
        ),
        (17, 17),
    ],
)
def test_parse_coordinate(value, expected):
    assert parse_coordinate(value, "x") == expected


@pytest.mark.parametrize("value", ["", " 1", "1 ", "+1", "-1", "1e3", "00", False, -3, [1]])
def test_parse_invalid_coordinate(value):
    with pytest.raises(MalformedDescriptorError):
        parse_coordinate(value, "x")


@pytest.mark.parametrize(
    "value",
    [
        "1" * 5000,
        "1" * 79,
        str(2**256),
        2**256,
        2**20000,
    ],
    ids=["str-5000-digits", "str-79-digits", "str-2^256", "int-2^256", "int-2^20000"],
)
def test_coordinate_above_uint256(make_vkey, value):
    data = mutate(make_vkey(), ("vk_alpha_1", 0), value)

    with pytest.raises(MalformedDescriptorError, match=r"vk_alpha_1\[0\] must be a non-negative decimal integer below"):
        parse_verifying_key(data)


def test_largest_uint256_coordinate(make_vkey):
    data = mutate(make_vkey(), ("vk_alpha_1", 0), str(2**256 - 1))

    assert parse_verifying_key(data).alpha_1.x == 2**256 - 1


@pytest.mark.parametrize(
    "content",
    [
        '{"nPublic": ' + "1" * 5000 + "}",
        "[" * 100000 + "]" * 100000,
        '{"vk_alpha_1": [' + "1" * 5000 + ', "2"]}',
    ],
)
def test_json_beyond_parser_limits(write_vkey, content):
    with pytest.raises(MalformedDescriptorError, match="not valid JSON"):
        load_verifying_key(write_vkey(content))
