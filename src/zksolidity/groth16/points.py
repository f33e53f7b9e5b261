"""Format elements of the verifying key as Solidity literals.

The Solidity `Pairing` library represents an element `c0 + c1 * u` of Fq2 as `[c1, c0]`, while the proving
system stores it as `[c0, c1]`. The components of every Fq2 coordinate of a G2 point are therefore swapped
when formatted. Points in G1 are formatted in stored order.
"""

from dataclasses import dataclass

from zksolidity.types.verifying_key import G1Point, G2Point, GTElement


@dataclass(frozen=True)
class FormattedG1Point:
    """Decimal literals of a point in G1, in the order expected by `Pairing.G1Point`.

    Attributes:
        x (str): The x-coordinate.
        y (str): The y-coordinate.
    """

    x: str
    y: str


@dataclass(frozen=True)
class FormattedG2Point:
    """Decimal literals of a point in G2, in the order expected by `Pairing.G2Point`.

    Attributes:
        x (tuple[str, str]): The x-coordinate `(x_c1, x_c0)`.
        y (tuple[str, str]): The y-coordinate `(y_c1, y_c0)`.
    """

    x: tuple[str, str]
    y: tuple[str, str]


def format_field_element(value: int) -> str:
    """Return the decimal literal of a field element.

    Example:
        >>> format_field_element(42)
        '42'
    """
    return str(value)


def format_g1_point(point: G1Point) -> FormattedG1Point:
    """Format a point in G1 as `(x, y)`."""
    return FormattedG1Point(x=format_field_element(point.x), y=format_field_element(point.y))


def format_g2_point(point: G2Point) -> FormattedG2Point:
    """Format a point in G2 as `((x_c1, x_c0), (y_c1, y_c0))`.

    Example:
        >>> format_g2_point(G2Point(x=(1, 2), y=(3, 4)))
        FormattedG2Point(x=('2', '1'), y=('4', '3'))
    """
    return FormattedG2Point(
        x=(format_field_element(point.x[1]), format_field_element(point.x[0])),
        y=(format_field_element(point.y[1]), format_field_element(point.y[0])),
    )


def format_gt_element(element: GTElement) -> list[list[list[str]]]:
    """Format an element of GT in stored order."""
    return [[[format_field_element(c) for c in fq2] for fq2 in fq6] for fq6 in element]
