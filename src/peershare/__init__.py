"""
PeerShare - Authenticated encryption for peer-to-peer sharing

Symmetric AES-256-GCM encryption of text messages and files, a
base64 envelope format (nonce || ciphertext || tag), and short random
invite codes for sharing between peers.

Author: orpheus497
Version: 1.0.0
License: MIT
"""

__version__ = "1.0.0"
__author__ = "orpheus497"
__license__ = "MIT"

from .constants import APP_NAME, VERSION
from .crypto import (
    decrypt_bytes,
    decrypt_file,
    decrypt_file_data,
    decrypt_text,
    derive_key,
    encrypt_bytes,
    encrypt_file,
    encrypt_file_data,
    encrypt_text,
    generate_key,
    generate_salt,
    is_valid_key,
)
from .envelope import Envelope, decode_envelope, encode_envelope, pack, unpack
from .errors import (
    AuthenticationFailure,
    ConfigError,
    EntropyError,
    EnvelopeFormatError,
    ErrorCode,
    KeyFormatError,
    PeerShareError,
)
from .invite import generate_invite_code, generate_password
from .random_source import SYSTEM_RANDOM, SecureRandom

__all__ = [
    "APP_NAME",
    "VERSION",
    "SYSTEM_RANDOM",
    "AuthenticationFailure",
    "ConfigError",
    "EntropyError",
    "Envelope",
    "EnvelopeFormatError",
    "ErrorCode",
    "KeyFormatError",
    "PeerShareError",
    "SecureRandom",
    "decode_envelope",
    "decrypt_bytes",
    "decrypt_file",
    "decrypt_file_data",
    "decrypt_text",
    "derive_key",
    "encode_envelope",
    "encrypt_bytes",
    "encrypt_file",
    "encrypt_file_data",
    "encrypt_text",
    "generate_invite_code",
    "generate_key",
    "generate_password",
    "generate_salt",
    "is_valid_key",
    "pack",
    "unpack",
    "__author__",
    "__license__",
    "__version__",
]
