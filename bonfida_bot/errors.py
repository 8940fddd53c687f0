"""Custom exceptions for the Bonfida Bot SDK."""

from typing import Dict


class BonfidaBotError(Exception):
    """Base exception for all Bonfida Bot SDK errors."""

    pass


class IntegerRangeError(BonfidaBotError, ValueError):
    """Raised when an integer does not fit its fixed-width field."""

    def __init__(self, value: int, bits: int):
        self.value = value
        self.bits = bits
        self.max_value = 2**bits - 1
        super().__init__(
            f"u{bits} value out of range: {value} (must be 0-{self.max_value})"
        )


class InvalidEnumValueError(BonfidaBotError, ValueError):
    """Raised when a value is not a member of its enumeration."""

    def __init__(self, enum_name: str, value: object):
        self.enum_name = enum_name
        self.value = value
        super().__init__(f"Invalid {enum_name}: {value!r}")


class ArityMismatchError(BonfidaBotError):
    """Raised when paired lists do not have matching lengths."""

    def __init__(self, counts: Dict[str, int]):
        self.counts = counts
        details = ", ".join(f"{name}={count}" for name, count in counts.items())
        super().__init__(f"Mismatched list lengths: {details}")


class MissingAccountError(BonfidaBotError):
    """Raised when a mandatory account address is not supplied."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Missing required account: {name}")


class InvalidInstructionDataError(BonfidaBotError):
    """Raised when instruction data cannot be decoded."""

    def __init__(self, message: str):
        super().__init__(f"Invalid instruction data: {message}")


class InvalidAccountDataError(BonfidaBotError):
    """Raised when account data cannot be deserialized."""

    def __init__(self, message: str):
        super().__init__(f"Invalid account data: {message}")
