"""Exceptions raised while generating Solidity verifiers.

Every exception derives from `ZkSolidityError`, and additionally from the builtin exception closest to
its meaning, so that callers can catch either.
"""


class ZkSolidityError(Exception):
    """Base class for the errors raised by zksolidity."""


class DescriptorNotFoundError(ZkSolidityError, FileNotFoundError):
    """The verifying key descriptor could not be read from the given path."""


class MalformedDescriptorError(ZkSolidityError, ValueError):
    """The verifying key descriptor is not valid JSON or does not have the expected shape."""


class InvalidContractNameError(ZkSolidityError, ValueError):
    """The contract name is not a valid Solidity identifier."""


class WriteFailureError(ZkSolidityError, OSError):
    """The generated source could not be written to the output directory."""


class ConfigurationError(ZkSolidityError, ValueError):
    """The generator configuration is unreadable or invalid."""
