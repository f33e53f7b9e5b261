"""Command line interface.

Usage:
    zksolidity-verifier <vkey_path> <contract_name> [--output-dir DIR] [--config FILE]

Example:
    zksolidity-verifier build/vkey.json JoinSplitVerifier --output-dir contracts
"""

import argparse
import logging
import sys

from zksolidity.config import GeneratorConfig
from zksolidity.exceptions import ZkSolidityError
from zksolidity.groth16.loader import load_verifying_key
from zksolidity.groth16.model.verifier import Groth16SolidityVerifier
from zksolidity.writer import generate_verifier

logger = logging.getLogger(__name__)

parser = argparse.ArgumentParser(
    prog="zksolidity-verifier",
    description="Given a Groth16 verifying key exported by the trusted setup, generate a Solidity contract \
        that verifies single proofs and batches of proofs against it",
)
parser.add_argument("vkey_path", type=str, help="Path to the verifying key (JSON)")
parser.add_argument("contract_name", type=str, help="Name of the contract, also used as the name of the file")
parser.add_argument("--output-dir", type=str, help="Directory in which to write the contract", required=False)
parser.add_argument(
    "--config", type=str, help="TOML configuration file with a [zksolidity] table", required=False
)
parser.add_argument(
    "--create-output-dir",
    action="store_true",
    default=None,
    help="Create the output directory if it does not exist",
)
parser.add_argument("--stdout", action="store_true", help="Print the contract instead of writing it")
parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")


def main(argv: list[str] | None = None) -> int:
    """Run the command line interface and return the exit code."""
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO, format="%(levelname)s: %(message)s")

    try:
        config = GeneratorConfig.from_toml(args.config) if args.config is not None else GeneratorConfig()
        config = config.with_overrides(output_dir=args.output_dir, create_output_dir=args.create_output_dir)

        if args.stdout:
            verifying_key = load_verifying_key(args.vkey_path, config)
            source = Groth16SolidityVerifier(config).verifier_contract(verifying_key, args.contract_name)
            sys.stdout.write(source.text)
        else:
            generate_verifier(args.vkey_path, args.contract_name, config)
    except ZkSolidityError as e:
        logger.error("%s", e)  # noqa: TRY400
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
