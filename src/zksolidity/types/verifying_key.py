"""Groth16 verifying keys."""

from dataclasses import dataclass
from typing import TypeAlias

from zksolidity.exceptions import MalformedDescriptorError


def _check_coordinate(value: int, name: str) -> None:
    if type(value) is not int or value < 0:
        msg = f"The coordinate {name} must be a non-negative integer: {name}: {value!r}"
        raise MalformedDescriptorError(msg)


@dataclass(frozen=True, init=False)
class G1Point:
    """Point of the base-field group G1, in affine coordinates.

    Attributes:
        x (int): The x-coordinate.
        y (int): The y-coordinate.
    """

    x: int
    y: int

    def __init__(self, x: int, y: int):
        """Initialise G1Point.

        Args:
            x (int): The x-coordinate.
            y (int): The y-coordinate.
        """
        _check_coordinate(x, "x")
        _check_coordinate(y, "y")
        object.__setattr__(self, "x", x)
        object.__setattr__(self, "y", y)


@dataclass(frozen=True, init=False)
class G2Point:
    """Point of the twisted-field group G2, in affine coordinates.

    Every coordinate is an element of Fq2 written as `c0 + c1 * u` and stored as `(c0, c1)`, which is the
    order used by the proving system.

    Attributes:
        x (tuple[int, int]): The x-coordinate `(x_c0, x_c1)`.
        y (tuple[int, int]): The y-coordinate `(y_c0, y_c1)`.
    """

    x: tuple[int, int]
    y: tuple[int, int]

    def __init__(self, x: tuple[int, int], y: tuple[int, int]):
        """Initialise G2Point.

        Args:
            x (tuple[int, int]): The x-coordinate `(x_c0, x_c1)`.
            y (tuple[int, int]): The y-coordinate `(y_c0, y_c1)`.
        """
        for name, coordinate in (("x", x), ("y", y)):
            if len(coordinate) != 2:  # noqa: PLR2004
                msg = f"The coordinate {name} must have exactly two components: {name}: {coordinate!r}"
                raise MalformedDescriptorError(msg)
            for i, component in enumerate(coordinate):
                _check_coordinate(component, f"{name}[{i}]")
        object.__setattr__(self, "x", tuple(x))
        object.__setattr__(self, "y", tuple(y))


GTElement: TypeAlias = tuple[tuple[tuple[int, int], ...], ...]


@dataclass(frozen=True)
class Groth16VerifyingKeyDescriptor:
    r"""Class encapsulating a Groth16 verifying key as exported by the trusted setup.

    Attributes:
        protocol (str): The proof system, `groth16`.
        curve (str): The pairing-friendly curve, e.g. `bn128`.
        n_public (int): Number of public inputs of the circuit.
        alpha_1 (G1Point): The element alpha in G1.
        beta_2 (G2Point): The element beta in G2.
        gamma_2 (G2Point): The element gamma in G2.
        delta_2 (G2Point): The element delta in G2.
        ic (tuple[G1Point, ...]): The input commitments, for which the verifier computes
                ic[0] + \sum_{i >= 1} pub[i-1] * ic[i]
            where pub[i] is the i-th public input. Its length is `n_public + 1`.
        alpha_beta_12 (GTElement | None): The pairing e(alpha, beta), if the setup exported it. It is not
            needed by the Solidity verifier.
    """

    protocol: str
    curve: str
    n_public: int
    alpha_1: G1Point
    beta_2: G2Point
    gamma_2: G2Point
    delta_2: G2Point
    ic: tuple[G1Point, ...]
    alpha_beta_12: GTElement | None = None

    def __post_init__(self):
        if type(self.n_public) is not int or self.n_public < 0:
            msg = f"The number of public inputs must be a non-negative integer: n_public: {self.n_public!r}"
            raise MalformedDescriptorError(msg)
        object.__setattr__(self, "ic", tuple(self.ic))
        if len(self.ic) != self.n_public + 1:
            msg = "The number of input commitments must be n_public + 1: "
            msg += f"n_public: {self.n_public}, len(ic): {len(self.ic)}"
            raise MalformedDescriptorError(msg)
