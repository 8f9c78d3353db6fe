"""brainkey exceptions hierarchy."""

from typing import Any, Optional

__all__ = [
    "BrainkeyError",
    "InvalidInputError",
    "ChecksumMismatchError",
    "CryptoError",
    "ArithmeticFailure",
    "CurveViolation",
    "RecoveryFailureError",
    "SigningExhaustedError",
]


class BrainkeyError(Exception):
    """Base exception for all brainkey errors."""

    def __init__(
        self,
        message: str,
        code: Optional[int] = None,
        data: Optional[Any] = None
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.data = data

    def __str__(self) -> str:
        if self.code:
            return f"[{self.code}] {self.message}"
        return self.message


class InvalidInputError(BrainkeyError):
    """Raised when an argument is malformed or out of range."""
    pass


class ChecksumMismatchError(InvalidInputError):
    """Raised when an embedded checksum does not match its payload."""
    pass


class CryptoError(BrainkeyError):
    """Raised when cryptographic operation fails."""
    pass


class ArithmeticFailure(CryptoError):
    """Raised when a modular operation has no valid result."""
    pass


class CurveViolation(CryptoError):
    """Raised when a point or coordinate does not lie on the curve."""
    pass


class RecoveryFailureError(CryptoError):
    """Raised when a public key cannot be recovered from a signature."""
    pass


class SigningExhaustedError(RecoveryFailureError):
    """Raised when no canonical, recoverable signature was found in time."""

    def __init__(
        self,
        attempts: int,
        message: Optional[str] = None
    ) -> None:
        if message is None:
            message = f"Unable to find canonical signature after {attempts} attempts"
        super().__init__(message)
        self.attempts = attempts
