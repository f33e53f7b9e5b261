import json
from pathlib import Path

import pytest

# Coordinates of the generators of BN254, used as realistic field elements
G1_X = "1"
G1_Y = "2"
G2_X = [
    "10857046999023057135944570762232829481370756359578518086990519993285655852781",
    "11559732032986387107991004021392285783925812861821192530917403151452391805634",
]
G2_Y = [
    "8495653923123431417604973247489272438418190587263600148770280649306958101930",
    "4082367875863433681332203403145435568316851327593401208105741076214120093531",
]


def pytest_addoption(parser):
    parser.addoption(
        "--save-generated",
        action="store",
        nargs="?",
        const="generated_contracts",
        help="Save the generated Solidity verifiers in the specified directory",
    )


@pytest.fixture
def save_generated_folder(request):
    return request.config.getoption("--save-generated")


def vkey_dict(n_public: int = 2, projective: bool = True) -> dict:
    """Return a verifying key in the format exported by snarkjs, with IC[i] = (2i + 1, 2i + 2)."""
    g1_one = ["1"] if projective else []
    g2_one = [["1", "0"]] if projective else []
    return {
        "protocol": "groth16",
        "curve": "bn128",
        "nPublic": n_public,
        "vk_alpha_1": [G1_X, G1_Y, *g1_one],
        "vk_beta_2": [G2_X, G2_Y, *g2_one],
        "vk_gamma_2": [["11", "12"], ["13", "14"], *g2_one],
        "vk_delta_2": [["21", "22"], ["23", "24"], *g2_one],
        "vk_alphabeta_12": [
            [["1", "2"], ["3", "4"], ["5", "6"]],
            [["7", "8"], ["9", "10"], ["11", "12"]],
        ],
        "IC": [[str(2 * i + 1), str(2 * i + 2), *g1_one] for i in range(n_public + 1)],
    }


@pytest.fixture
def make_vkey():
    return vkey_dict


@pytest.fixture
def write_vkey(tmp_path):
    def write(data, name: str = "vkey.json") -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(data) if not isinstance(data, str) else data, encoding="utf-8")
        return path

    return write
