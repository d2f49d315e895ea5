"""
PeerShare - Command line tests.

Created by orpheus497

End-to-end tests of the peershare command.
"""

import base64

import pytest

from peershare import crypto, invite
from peershare.main import EXIT_ENTROPY, EXIT_ERROR, EXIT_OK, main


@pytest.fixture
def run(temp_dir, clean_env, capsys):
    """Run the CLI with an isolated config and return (code, stdout, stderr)."""

    def _run(*argv):
        code = main(["--config", str(temp_dir / "config.toml"), *argv])
        captured = capsys.readouterr()
        return code, captured.out, captured.err

    return _run


def test_keygen(run):
    """Test that keygen prints a valid key."""
    code, out, _ = run("keygen")

    assert code == EXIT_OK
    assert crypto.is_valid_key(out.strip())


def test_keygen_with_password(run):
    """Test that a password and salt reproduce the same key."""
    salt = base64.b64encode(bytes(16)).decode()

    code, out, _ = run("keygen", "--password", "hunter2", "--salt", salt)

    assert code == EXIT_OK
    key_line, salt_line = out.strip().splitlines()
    assert key_line == crypto.derive_key("hunter2", bytes(16))
    assert salt_line == f"salt: {salt}"


def test_text_round_trip(run):
    """Test encrypting and decrypting a message through the CLI."""
    key = crypto.generate_key()

    code, envelope, _ = run("encrypt", "--key", key, "--text", "hello")
    assert code == EXIT_OK

    code, out, _ = run("decrypt", "--key", key, "--envelope", envelope.strip())
    assert code == EXIT_OK
    assert out.strip() == "hello"


def test_file_round_trip(run, temp_dir):
    """Test encrypting and decrypting a file through the CLI."""
    key = crypto.generate_key()
    src = temp_dir / "photo.jpg"
    src.write_bytes(b"\xff\xd8\xff\xe0 not really a jpeg")

    code, _, _ = run("encrypt", "--key", key, "--in", str(src), "--out", str(temp_dir / "p.enc"))
    assert code == EXIT_OK

    code, _, _ = run(
        "decrypt", "--key", key, "--in", str(temp_dir / "p.enc"), "--out", str(temp_dir / "p.jpg")
    )
    assert code == EXIT_OK
    assert (temp_dir / "p.jpg").read_bytes() == src.read_bytes()


def test_file_requires_out(run, temp_dir):
    """Test that --in without --out is an error reported on stderr."""
    code, out, err = run("encrypt", "--key", crypto.generate_key(), "--in", str(temp_dir / "x"))

    assert code == EXIT_ERROR
    assert out == ""
    assert "--out is required" in err


def test_salt_without_password(run):
    """Test that --salt alone is an error reported on stderr."""
    code, out, err = run("keygen", "--salt", "AAAA")

    assert code == EXIT_ERROR
    assert out == ""
    assert "--salt requires --password" in err


def test_encrypt_unencodable_text(run):
    """Test that text that is not valid UTF-8 exits with an error code."""
    code, out, err = run("encrypt", "--key", crypto.generate_key(), "--text", "caf\udce9")

    assert code == EXIT_ERROR
    assert out == ""
    assert "E107" in err


def test_wrong_key(run):
    """Test that authentication failures exit with an error code."""
    envelope = crypto.encrypt_text("secret", crypto.generate_key())

    code, out, err = run("decrypt", "--key", crypto.generate_key(), "--envelope", envelope)

    assert code == EXIT_ERROR
    assert "secret" not in out
    assert "E102" in err


def test_malformed_envelope(run):
    """Test that a malformed envelope is reported as a format error."""
    code, _, err = run("decrypt", "--key", crypto.generate_key(), "--envelope", "!!!")

    assert code == EXIT_ERROR
    assert "E104" in err


def test_bad_key(run):
    """Test that a malformed key is reported."""
    code, _, err = run("encrypt", "--key", "short", "--text", "hi")

    assert code == EXIT_ERROR
    assert "E103" in err


def test_invite(run):
    """Test invite code output."""
    code, out, _ = run("invite")

    assert code == EXIT_OK
    assert invite.is_valid_invite_code(out.strip())


def test_password(run):
    """Test transfer password output."""
    code, out, _ = run("password")

    assert code == EXIT_OK
    assert len(out.strip()) == 16


def test_entropy_failure(run, monkeypatch):
    """Test that an entropy failure exits with the fatal code."""

    def broken(n):
        raise OSError("no entropy")

    monkeypatch.setattr("peershare.random_source.secrets.token_bytes", broken)

    code, _, err = run("keygen")

    assert code == EXIT_ENTROPY
    assert "Fatal" in err


def test_qr_data_url(run):
    """Test QR data URL output."""
    pytest.importorskip("qrcode")
    pytest.importorskip("PIL")

    code, out, _ = run("qr", "AB12CD34", "--data-url")

    assert code == EXIT_OK
    assert out.strip().startswith("data:image/png;base64,")


def test_qr_data_url_uses_config(run, temp_dir):
    """Test that the data URL honours the configured QR settings."""
    pytest.importorskip("qrcode")
    pytest.importorskip("PIL")

    (temp_dir / "config.toml").write_text('[qr]\nerror_correction = "X"\n')

    code, out, err = run("qr", "AB12CD34", "--data-url")

    assert code == EXIT_ERROR
    assert out == ""
    assert "E002" in err


def test_qr_png(run, temp_dir):
    """Test writing a QR PNG file."""
    pytest.importorskip("qrcode")
    pytest.importorskip("PIL")

    target = temp_dir / "invite.png"
    code, _, _ = run("qr", "AB12CD34", "--png", str(target), "--size", "128")

    assert code == EXIT_OK
    assert target.read_bytes().startswith(b"\x89PNG")


def test_version(capsys):
    """Test --version output."""
    with pytest.raises(SystemExit) as exc_info:
        main(["--version"])

    assert exc_info.value.code == 0
    assert "PeerShare 1.0.0" in capsys.readouterr().out
