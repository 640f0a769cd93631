"""Shared test fixtures."""

import io

import pytest
import qrcode
from PIL import Image


def png_bytes(img) -> bytes:
    buf = io.BytesIO()
    img.save(buf, "PNG")
    return buf.getvalue()


@pytest.fixture
def solid_png():
    """A valid PNG with no QR code in it."""
    return png_bytes(Image.new("RGB", (100, 100), (255, 0, 0)))


@pytest.fixture
def external_png():
    """Build a QR PNG with python-qrcode directly, outside the pipeline."""

    def _make(data: str) -> bytes:
        qr = qrcode.QRCode(
            error_correction=qrcode.constants.ERROR_CORRECT_M,
            box_size=10,
            border=4,
        )
        qr.add_data(data)
        qr.make(fit=True)
        return png_bytes(qr.make_image(fill_color="black", back_color="white").convert("L"))

    return _make
