"""
PeerShare - Custom Exception Classes and Error Codes

This module defines all custom exceptions and error codes used throughout
PeerShare. Each error has a unique code for logging and debugging.

Error details never carry key material, plaintext or authentication tags;
only lengths and type names are recorded.

Author: orpheus497
Version: 1.0.0
"""

from enum import Enum
from typing import Any, Dict, Optional


class ErrorCode(Enum):
    """Enumeration of all PeerShare error codes."""

    # General Errors (E001-E099)
    E001_UNKNOWN_ERROR = "E001"
    E002_INVALID_ARGUMENT = "E002"
    E003_FILE_NOT_FOUND = "E003"

    # Crypto Errors (E100-E199)
    E102_AUTHENTICATION_FAILED = "E102"
    E103_INVALID_KEY = "E103"
    E104_INVALID_ENVELOPE = "E104"
    E105_ENTROPY_UNAVAILABLE = "E105"
    E106_KEY_DERIVATION_FAILED = "E106"
    E107_INVALID_TEXT = "E107"

    # Config Errors (E700-E799)
    E700_CONFIG_ERROR = "E700"
    E701_CONFIG_LOAD_FAILED = "E701"
    E702_CONFIG_SAVE_FAILED = "E702"
    E703_INVALID_CONFIG = "E703"
    E704_CONFIG_PARSE_ERROR = "E704"


class PeerShareError(Exception):
    """Base exception class for all recoverable PeerShare errors.

    Attributes:
        code: Error code from ErrorCode enum
        message: Human-readable error message
        details: Additional error details (optional)
    """

    def __init__(self, code: ErrorCode, message: str, details: Optional[Dict[str, Any]] = None):
        """Initialize a PeerShare error.

        Args:
            code: Error code from ErrorCode enum
            message: Human-readable error message
            details: Additional error context (optional)
        """
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(f"[{code.value}] {message}")

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary for serialization.

        Returns:
            Dictionary containing error information
        """
        return {"code": self.code.value, "message": self.message, "details": self.details}


class KeyFormatError(PeerShareError):
    """Exception raised when a key string is not valid base64 or does not
    decode to exactly 32 bytes.
    """

    def __init__(
        self,
        code: ErrorCode = ErrorCode.E103_INVALID_KEY,
        message: str = "Invalid key format",
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(code, message, details)


class EnvelopeFormatError(PeerShareError):
    """Exception raised for malformed, corrupted or truncated envelopes.

    This is distinct from AuthenticationFailure: the envelope could not
    even be parsed, so the cipher was never run.
    """

    def __init__(
        self,
        code: ErrorCode = ErrorCode.E104_INVALID_ENVELOPE,
        message: str = "Invalid envelope format",
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(code, message, details)


class AuthenticationFailure(PeerShareError):
    """Exception raised when the GCM tag does not verify.

    Signals tampering, corruption or use of the wrong key. No plaintext
    is ever attached to this exception.
    """

    def __init__(
        self,
        code: ErrorCode = ErrorCode.E102_AUTHENTICATION_FAILED,
        message: str = "Authentication failed: message was tampered with or the key is wrong",
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(code, message, details)


class ConfigError(PeerShareError):
    """Exception raised for configuration failures.

    This includes loading, parsing, and validating configuration files.
    """

    def __init__(
        self,
        code: ErrorCode = ErrorCode.E700_CONFIG_ERROR,
        message: str = "Configuration operation failed",
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(code, message, details)


class EntropyError(RuntimeError):
    """Fatal error raised when the secure random source is unavailable.

    Not a subclass of PeerShareError. There is no fallback to a weaker source.
    """

    def __init__(self, message: str = "Secure random source unavailable"):
        self.code = ErrorCode.E105_ENTROPY_UNAVAILABLE
        self.message = message
        super().__init__(f"[{self.code.value}] {message}")
