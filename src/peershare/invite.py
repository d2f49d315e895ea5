"""
PeerShare - Invite codes and transfer passwords.

Created by orpheus497

Invite codes are short, human-shareable strings with no relationship to
any key material. Each character is an independent uniform draw from the
secure random source (rejection sampled, so there is no modulo bias).
"""

from typing import Optional

from .constants import (
    INVITE_CODE_ALPHABET,
    INVITE_CODE_LENGTH,
    PASSWORD_ALPHABET,
    PASSWORD_LENGTH,
)
from .random_source import SecureRandom, get_random


def _random_string(alphabet: str, length: int, rng: Optional[SecureRandom]) -> str:
    source = get_random(rng)
    return "".join(source.choice(alphabet) for _ in range(length))


def generate_invite_code(rng: Optional[SecureRandom] = None) -> str:
    """
    Generate an 8-character invite code over A-Z0-9.

    Raises EntropyError if the secure random source is unavailable.
    """
    return _random_string(INVITE_CODE_ALPHABET, INVITE_CODE_LENGTH, rng)


def is_valid_invite_code(code: str) -> bool:
    """Check that code has the invite code shape."""
    return len(code) == INVITE_CODE_LENGTH and all(c in INVITE_CODE_ALPHABET for c in code)


def generate_password(rng: Optional[SecureRandom] = None) -> str:
    """Generate a random 16-character password for derive_key."""
    return _random_string(PASSWORD_ALPHABET, PASSWORD_LENGTH, rng)
