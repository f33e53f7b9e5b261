"""types package.

This package provides custom types.

Modules:
    - verifying_key: Represents a Groth16 verifying key, with its elements in G1 (`G1Point`), G2 (`G2Point`) and
        GT (`GTElement`).

Usage example:
    Representing the element alpha of a verifying key, `alpha = (x,y)` with `x`, `y` in F_q:

    >>> from zksolidity.types.verifying_key import G1Point
    >>>
    >>> alpha_1 = G1Point(x=1, y=2)
"""
