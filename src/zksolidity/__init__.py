"""zksolidity: A Python package for generating Solidity verifiers of zero-knowledge proofs.

The `zksolidity` package turns the verifying key produced by the trusted setup of a Groth16 circuit into the
source of a Solidity contract that verifies proofs for that circuit. The contract hard codes the verifying key
and delegates the pairing arithmetic to the `Pairing` and `Groth16` Solidity libraries.

Usage example:
    Generate the source of a verifier for the verifying key in `vkey.json`:

    >>> from zksolidity.groth16.loader import load_verifying_key
    >>> from zksolidity.groth16.model.verifier import Groth16SolidityVerifier
    >>>
    >>> verifying_key = load_verifying_key("vkey.json")
    >>> source = Groth16SolidityVerifier().verifier_contract(verifying_key, "JoinSplitVerifier")
    >>> source.file_name
    'JoinSplitVerifier.sol'
"""
