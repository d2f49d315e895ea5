"""
PeerShare - Envelope codec.

Created by orpheus497

An envelope is the 12-byte nonce followed by the AES-256-GCM output
(ciphertext with the 16-byte tag appended). Its transport form is
standard base64.

    +-----------+---------------------+----------+
    | nonce(12) | ciphertext (N)      | tag (16) |
    +-----------+---------------------+----------+

The codec only checks the minimum length; authenticity is verified by
the cipher during decryption.
"""

import base64
import binascii
import logging
from typing import NamedTuple

from .constants import MIN_ENVELOPE_SIZE, NONCE_SIZE
from .errors import EnvelopeFormatError

logger = logging.getLogger(__name__)


class Envelope(NamedTuple):
    """Parsed envelope: nonce plus ciphertext-with-tag."""

    nonce: bytes
    body: bytes


def pack(nonce: bytes, body: bytes) -> bytes:
    """
    Concatenate a nonce and a ciphertext body into raw envelope bytes.

    Raises ValueError if the nonce is not NONCE_SIZE bytes.
    """
    if len(nonce) != NONCE_SIZE:
        raise ValueError(f"Nonce must be {NONCE_SIZE} bytes, got {len(nonce)}")
    return bytes(nonce) + bytes(body)


def unpack(data: bytes) -> Envelope:
    """
    Split raw envelope bytes into nonce and body.

    Raises EnvelopeFormatError if the data is shorter than
    nonce + tag (28 bytes).
    """
    if len(data) < MIN_ENVELOPE_SIZE:
        logger.debug(f"Rejected envelope of {len(data)} bytes")
        raise EnvelopeFormatError(
            message=f"Envelope too short: {len(data)} bytes, need at least {MIN_ENVELOPE_SIZE}",
            details={"length": len(data), "minimum": MIN_ENVELOPE_SIZE},
        )
    return Envelope(nonce=bytes(data[:NONCE_SIZE]), body=bytes(data[NONCE_SIZE:]))


def encode_envelope(raw: bytes) -> str:
    """Encode raw envelope bytes as a base64 string."""
    return base64.b64encode(raw).decode("ascii")


def decode_envelope(text: str) -> bytes:
    """
    Decode a base64 envelope string to raw bytes.

    Decoding is strict: characters outside the base64 alphabet or bad
    padding raise EnvelopeFormatError.
    """
    try:
        return base64.b64decode(text, validate=True)
    except (binascii.Error, ValueError, TypeError) as e:
        raise EnvelopeFormatError(
            message="Envelope is not valid base64",
            details={"error": type(e).__name__},
        ) from None


def parse_envelope(text: str) -> Envelope:
    """Decode and unpack a base64 envelope string."""
    return unpack(decode_envelope(text))
