"""
PeerShare - Symmetric authenticated encryption.

Created by orpheus497

This module implements the payload encryption used to share text
messages and files between peers:
- 256-bit random keys transported as base64
- AES-256-GCM authenticated encryption with a fresh 96-bit nonce per call
- No associated data; the envelope is nonce || ciphertext || tag
- Optional Argon2id derivation of a key from a shared password

All cryptographic operations use well-tested, open-source libraries:
- cryptography library (Apache 2.0/BSD License)
- argon2-cffi (MIT License)
"""

import base64
import binascii
import logging
from pathlib import Path
from typing import Optional, Union

from argon2.exceptions import HashingError
from argon2.low_level import Type, hash_secret_raw
from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives.ciphers.aead import AESGCM

from .constants import (
    ARGON2_MEMORY_COST,
    ARGON2_PARALLELISM,
    ARGON2_TIME_COST,
    KEY_SIZE,
    NONCE_SIZE,
    SALT_SIZE,
)
from .envelope import decode_envelope, encode_envelope, pack, unpack
from .errors import (
    AuthenticationFailure,
    ErrorCode,
    KeyFormatError,
    PeerShareError,
)
from .random_source import SecureRandom, get_random

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def generate_key(rng: Optional[SecureRandom] = None) -> str:
    """
    Generate a fresh 256-bit key and return it base64-encoded.

    Raises EntropyError if the secure random source is unavailable.
    """
    key = get_random(rng).token_bytes(KEY_SIZE)
    return base64.b64encode(key).decode("ascii")


def decode_key(key: str) -> bytes:
    """
    Decode a base64 key string to its 32 raw bytes.

    Raises KeyFormatError if the string is not valid base64 or does not
    decode to exactly KEY_SIZE bytes.
    """
    try:
        raw = base64.b64decode(key, validate=True)
    except (binascii.Error, ValueError, TypeError) as e:
        raise KeyFormatError(
            message="Key is not valid base64",
            details={"error": type(e).__name__},
        ) from None

    if len(raw) != KEY_SIZE:
        raise KeyFormatError(
            message=f"Key must decode to {KEY_SIZE} bytes, got {len(raw)}",
            details={"length": len(raw), "expected": KEY_SIZE},
        )
    return raw


def is_valid_key(key: str) -> bool:
    """Return True if key decodes to exactly 32 bytes."""
    try:
        decode_key(key)
    except KeyFormatError:
        return False
    return True


def generate_salt(rng: Optional[SecureRandom] = None) -> bytes:
    """Generate a random 16-byte salt for derive_key."""
    return get_random(rng).token_bytes(SALT_SIZE)


def derive_key(password: str, salt: bytes) -> str:
    """
    Derive a key from a shared password using Argon2id.

    Parameters:
        - Time cost: 3 iterations
        - Memory cost: 65536 KB (64 MB)
        - Parallelism: 1 thread
        - 16-byte salt, which both peers must use

    The result is an ordinary base64 key string, usable with
    encrypt_bytes/decrypt_bytes; the envelope format is unchanged.
    """
    if len(salt) != SALT_SIZE:
        raise PeerShareError(
            ErrorCode.E002_INVALID_ARGUMENT,
            f"Salt must be {SALT_SIZE} bytes",
            {"length": len(salt)},
        )
    try:
        key = hash_secret_raw(
            secret=password.encode("utf-8"),
            salt=salt,
            time_cost=ARGON2_TIME_COST,
            memory_cost=ARGON2_MEMORY_COST,
            parallelism=ARGON2_PARALLELISM,
            hash_len=KEY_SIZE,
            type=Type.ID,
        )
    except HashingError as e:
        raise PeerShareError(
            ErrorCode.E106_KEY_DERIVATION_FAILED, f"Key derivation failed: {e}"
        ) from e
    return base64.b64encode(key).decode("ascii")


def _seal(data: bytes, key: bytes, rng: Optional[SecureRandom]) -> bytes:
    aesgcm = AESGCM(key)
    nonce = get_random(rng).token_bytes(NONCE_SIZE)  # fresh per call, never reused
    ciphertext = aesgcm.encrypt(nonce, bytes(data), None)
    return pack(nonce, ciphertext)


def _open(raw: bytes, key: bytes) -> bytes:
    aesgcm = AESGCM(key)
    envelope = unpack(raw)
    try:
        return aesgcm.decrypt(envelope.nonce, envelope.body, None)
    except InvalidTag:
        logger.debug(f"Authentication failed for envelope of {len(raw)} bytes")
        raise AuthenticationFailure(details={"length": len(raw)}) from None


def encrypt_bytes(data: bytes, key: str, rng: Optional[SecureRandom] = None) -> str:
    """
    Encrypt binary data with AES-256-GCM.

    Returns the base64 envelope string. Raises KeyFormatError for a bad key.
    """
    return encode_envelope(_seal(data, decode_key(key), rng))


def decrypt_bytes(envelope: str, key: str) -> bytes:
    """
    Decrypt a base64 envelope string produced by encrypt_bytes.

    Raises:
        KeyFormatError: key is malformed
        EnvelopeFormatError: envelope is not base64 or shorter than 28 bytes
        AuthenticationFailure: tag did not verify (tamper or wrong key)
    """
    key_bytes = decode_key(key)
    return _open(decode_envelope(envelope), key_bytes)


def encrypt_text(text: str, key: str, rng: Optional[SecureRandom] = None) -> str:
    """Encrypt a text message (UTF-8) and return the base64 envelope."""
    try:
        data = text.encode("utf-8")
    except UnicodeEncodeError:
        raise PeerShareError(
            ErrorCode.E107_INVALID_TEXT,
            "Message cannot be encoded as UTF-8 text",
            {"length": len(text)},
        ) from None
    return encrypt_bytes(data, key, rng)


def decrypt_text(envelope: str, key: str) -> str:
    """Decrypt a base64 envelope and decode the plaintext as UTF-8."""
    plaintext = decrypt_bytes(envelope, key)
    try:
        return plaintext.decode("utf-8")
    except UnicodeDecodeError:
        raise PeerShareError(
            ErrorCode.E107_INVALID_TEXT,
            "Decrypted payload is not valid UTF-8 text",
            {"length": len(plaintext)},
        ) from None


def encrypt_file_data(data: bytes, key: str, rng: Optional[SecureRandom] = None) -> bytes:
    """Encrypt file content and return the raw envelope bytes."""
    return _seal(data, decode_key(key), rng)


def decrypt_file_data(raw: bytes, key: str) -> bytes:
    """Decrypt raw envelope bytes produced by encrypt_file_data."""
    return _open(raw, decode_key(key))


def encrypt_file(src: PathLike, dst: PathLike, key: str, rng: Optional[SecureRandom] = None) -> int:
    """
    Encrypt the file at src into a raw envelope file at dst.

    Returns the number of bytes written.
    """
    src_path = Path(src)
    if not src_path.is_file():
        raise PeerShareError(
            ErrorCode.E003_FILE_NOT_FOUND, f"File not found: {src_path}", {"path": str(src_path)}
        )

    sealed = encrypt_file_data(src_path.read_bytes(), key, rng)
    dst_path = Path(dst)
    dst_path.parent.mkdir(parents=True, exist_ok=True)
    dst_path.write_bytes(sealed)

    logger.info(f"Encrypted {src_path.name} ({len(sealed)} bytes)")
    return len(sealed)


def decrypt_file(src: PathLike, dst: PathLike, key: str) -> int:
    """
    Decrypt the raw envelope file at src into dst.

    dst is only written once authentication has succeeded.
    Returns the number of plaintext bytes written.
    """
    src_path = Path(src)
    if not src_path.is_file():
        raise PeerShareError(
            ErrorCode.E003_FILE_NOT_FOUND, f"File not found: {src_path}", {"path": str(src_path)}
        )

    plaintext = decrypt_file_data(src_path.read_bytes(), key)
    dst_path = Path(dst)
    dst_path.parent.mkdir(parents=True, exist_ok=True)
    dst_path.write_bytes(plaintext)

    logger.info(f"Decrypted {src_path.name} ({len(plaintext)} bytes)")
    return len(plaintext)
