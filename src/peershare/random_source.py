"""
PeerShare - Secure random source.

Created by orpheus497

Every key, nonce, salt and invite code is drawn through a SecureRandom
instance. The default instance delegates to the operating system CSPRNG via
the secrets module, which is safe to share between threads.
"""

import logging
import secrets
from typing import Optional

from .errors import EntropyError

logger = logging.getLogger(__name__)


class SecureRandom:
    """
    Cryptographically secure random source.

    Callers may pass their own instance (for example a deterministic
    subclass in tests); the library never falls back to the random module.
    """

    def token_bytes(self, n: int) -> bytes:
        """Return n random bytes."""
        try:
            return secrets.token_bytes(n)
        except (OSError, NotImplementedError) as e:
            logger.critical(f"Secure random source failed: {type(e).__name__}")
            raise EntropyError(f"Secure random source unavailable: {e}") from e

    def randbelow(self, upper: int) -> int:
        """Return a uniform random integer in [0, upper)."""
        try:
            return secrets.randbelow(upper)
        except (OSError, NotImplementedError) as e:
            logger.critical(f"Secure random source failed: {type(e).__name__}")
            raise EntropyError(f"Secure random source unavailable: {e}") from e

    def choice(self, alphabet: str) -> str:
        """Return one character of alphabet chosen uniformly."""
        return alphabet[self.randbelow(len(alphabet))]


SYSTEM_RANDOM = SecureRandom()


def get_random(rng: Optional[SecureRandom] = None) -> SecureRandom:
    """Return rng, or the shared system source when rng is None."""
    return SYSTEM_RANDOM if rng is None else rng
