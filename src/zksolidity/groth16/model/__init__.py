"""Groth16 verifier contracts.

Modules:
    - verifier: implement class Groth16SolidityVerifier.
"""
