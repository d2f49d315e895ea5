"""
PeerShare - Invite code tests.

Created by orpheus497

Tests for invite code shape and distribution, and transfer passwords.
"""

import re
from collections import Counter

import pytest

from peershare import invite
from peershare.constants import INVITE_CODE_ALPHABET, PASSWORD_ALPHABET
from peershare.errors import EntropyError
from peershare.random_source import SecureRandom


def test_invite_code_shape():
    """Test that invite codes are 8 characters over A-Z0-9."""
    for _ in range(1000):
        code = invite.generate_invite_code()
        assert re.fullmatch(r"[A-Z0-9]{8}", code)
        assert invite.is_valid_invite_code(code)


def test_invite_code_validation():
    """Test the invite code shape check."""
    assert invite.is_valid_invite_code("AB12CD34")
    assert not invite.is_valid_invite_code("ab12cd34")
    assert not invite.is_valid_invite_code("AB12CD3")
    assert not invite.is_valid_invite_code("AB12CD345")
    assert not invite.is_valid_invite_code("AB12-D34")


@pytest.mark.slow
def test_invite_code_distribution():
    """Test that characters over 100,000 codes are close to uniform."""
    counts = Counter()
    for _ in range(100000):
        counts.update(invite.generate_invite_code())

    total = sum(counts.values())
    expected = total / len(INVITE_CODE_ALPHABET)

    assert set(counts) == set(INVITE_CODE_ALPHABET)
    for char in INVITE_CODE_ALPHABET:
        assert abs(counts[char] - expected) < expected * 0.05, char

    # 35 degrees of freedom; 90 is far beyond the 99.99th percentile
    chi_square = sum((counts[c] - expected) ** 2 / expected for c in INVITE_CODE_ALPHABET)
    assert chi_square < 90


def test_invite_code_uses_draw_order():
    """Test that characters are emitted in the order they are drawn."""

    class SequenceRandom(SecureRandom):
        def __init__(self):
            self.values = iter([0, 1, 25, 26, 35, 2, 3, 4])

        def randbelow(self, upper):
            assert upper == 36
            return next(self.values)

    assert invite.generate_invite_code(rng=SequenceRandom()) == "ABZ09CDE"


def test_invite_code_entropy_failure(monkeypatch):
    """Test that an unavailable random source is fatal."""

    def broken(upper):
        raise NotImplementedError("no urandom")

    monkeypatch.setattr("peershare.random_source.secrets.randbelow", broken)

    with pytest.raises(EntropyError):
        invite.generate_invite_code()


def test_password_shape():
    """Test transfer passwords."""
    password = invite.generate_password()

    assert len(password) == 16
    assert all(c in PASSWORD_ALPHABET for c in password)
    assert invite.generate_password() != password
