"""groth16 package.

This package provides modules for generating Solidity contracts that verify Groth16 proofs.

Modules:
    - loader: Loads and validates verifying keys exported by the trusted setup.
    - points: Formats the elements of a verifying key as Solidity literals.
    - model: Contains a module for constructing Solidity contracts that perform Groth16 proof verification.

Usage example:
    Write the verifier for the verifying key in `vkey.json` to `contracts/JoinSplitVerifier.sol`:

    >>> from zksolidity.config import GeneratorConfig
    >>> from zksolidity.writer import generate_verifier
    >>>
    >>> generate_verifier("vkey.json", "JoinSplitVerifier", GeneratorConfig(output_dir="contracts"))
"""
