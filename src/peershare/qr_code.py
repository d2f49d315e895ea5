"""
PeerShare - QR Code Generation for Sharing Invite Codes and Envelopes

This module renders any UTF-8 string (an invite code, a key or an envelope)
as a QR code. It has no cryptographic role: data is passed through as is.
Requires optional dependencies: qrcode and pillow.

Install with: pip install peershare-crypto[qr]

Author: orpheus497
Version: 1.0.0
"""

import base64
import io
import logging

from .constants import (
    QR_DATA_URL_PREFIX,
    QR_DEFAULT_BORDER,
    QR_DEFAULT_ERROR_CORRECTION,
    QR_DEFAULT_SIZE,
)
from .errors import ErrorCode, PeerShareError

logger = logging.getLogger(__name__)

# Try to import optional dependencies
try:
    import qrcode
    from qrcode.exceptions import DataOverflowError

    QRCODE_AVAILABLE = True
except ImportError:
    QRCODE_AVAILABLE = False
    logger.debug("qrcode not available - QR code features disabled")

try:
    from PIL import Image

    PIL_AVAILABLE = True
except ImportError:
    PIL_AVAILABLE = False
    logger.debug("pillow not available - PNG export disabled")


def is_qr_available() -> bool:
    """Check if QR code features are available.

    Returns:
        True if both qrcode and pillow can be imported
    """
    return QRCODE_AVAILABLE and PIL_AVAILABLE


def _require_qr() -> None:
    if not is_qr_available():
        raise PeerShareError(
            ErrorCode.E001_UNKNOWN_ERROR,
            "QR code generation not available - install qrcode and pillow",
        )


def generate_qr_code(
    data: str,
    error_correction: str = QR_DEFAULT_ERROR_CORRECTION,
    box_size: int = 10,
    border: int = QR_DEFAULT_BORDER,
) -> "qrcode.QRCode":
    """Generate a QR code from data.

    Args:
        data: Data to encode in QR code
        error_correction: Error correction level (L, M, Q, H)
        box_size: Size of each box in pixels
        border: Border size in boxes

    Returns:
        QR code object

    Raises:
        PeerShareError: If QR code generation is not available or fails
    """
    _require_qr()

    error_levels = {
        "L": qrcode.constants.ERROR_CORRECT_L,  # 7% correction
        "M": qrcode.constants.ERROR_CORRECT_M,  # 15% correction
        "Q": qrcode.constants.ERROR_CORRECT_Q,  # 25% correction
        "H": qrcode.constants.ERROR_CORRECT_H,  # 30% correction
    }
    error_level = error_levels.get(error_correction.upper())
    if error_level is None:
        raise PeerShareError(
            ErrorCode.E002_INVALID_ARGUMENT,
            f"Unknown QR error correction level: {error_correction}",
            {"error_correction": error_correction},
        )

    try:
        qr = qrcode.QRCode(
            version=None,  # Smallest version that fits
            error_correction=error_level,
            box_size=box_size,
            border=border,
        )
        qr.add_data(data.encode("utf-8"))
        qr.make(fit=True)
    except (ValueError, DataOverflowError) as e:
        raise PeerShareError(
            ErrorCode.E001_UNKNOWN_ERROR, f"QR code generation failed: {e}", {"length": len(data)}
        ) from e

    logger.debug(f"Generated QR code: {len(data)} characters, version {qr.version}")
    return qr


def generate_qr_png(
    data: str,
    size: int = QR_DEFAULT_SIZE,
    error_correction: str = QR_DEFAULT_ERROR_CORRECTION,
    border: int = QR_DEFAULT_BORDER,
) -> bytes:
    """Render data as a square black-on-white PNG.

    Args:
        data: Data to encode
        size: Width and height of the image in pixels
        error_correction: Error correction level (L, M, Q, H)
        border: Border size in boxes

    Returns:
        PNG image bytes
    """
    if size <= 0:
        raise PeerShareError(
            ErrorCode.E002_INVALID_ARGUMENT, "QR image size must be positive", {"size": size}
        )

    qr = generate_qr_code(data, error_correction=error_correction, box_size=1, border=border)

    raw = io.BytesIO()
    qr.make_image(fill_color="black", back_color="white").save(raw)
    raw.seek(0)

    with Image.open(raw) as img:
        scaled = img.convert("RGB").resize((size, size), Image.NEAREST)

    out = io.BytesIO()
    scaled.save(out, format="PNG")
    return out.getvalue()


def generate_qr_base64(
    data: str,
    size: int = QR_DEFAULT_SIZE,
    error_correction: str = QR_DEFAULT_ERROR_CORRECTION,
    border: int = QR_DEFAULT_BORDER,
) -> str:
    """Render data as a PNG and return it base64-encoded."""
    png = generate_qr_png(data, size=size, error_correction=error_correction, border=border)
    return base64.b64encode(png).decode("ascii")


def generate_qr_data_url(
    data: str,
    size: int = QR_DEFAULT_SIZE,
    error_correction: str = QR_DEFAULT_ERROR_CORRECTION,
    border: int = QR_DEFAULT_BORDER,
) -> str:
    """Render data as an inline data:image/png;base64 URL for web display."""
    return QR_DATA_URL_PREFIX + generate_qr_base64(
        data, size=size, error_correction=error_correction, border=border
    )


def display_qr_terminal(data: str, border: int = QR_DEFAULT_BORDER) -> str:
    """Render data as block-character art for the terminal.

    Args:
        data: Data to encode
        border: Border size in boxes

    Returns:
        ASCII art representation of QR code
    """
    qr = generate_qr_code(data, border=border)
    matrix = qr.get_matrix()

    lines = []
    for row in matrix:
        lines.append("".join("  " if cell else "██" for cell in row))

    return "\n".join(lines)
