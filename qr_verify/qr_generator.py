"""Render QR codes to exact-size PNG images."""

import io
import logging

import qrcode
from qrcode.exceptions import DataOverflowError
from qrcode.util import MODE_8BIT_BYTE, QRData
from PIL import Image

from qr_verify import DEFAULT_SIZE, QUIET_ZONE
from qr_verify.errors import EncodeError
from qr_verify.options import Strength

logger = logging.getLogger(__name__)

ERROR_CORRECTION = {
    Strength.LOW: qrcode.constants.ERROR_CORRECT_L,
    Strength.MEDIUM: qrcode.constants.ERROR_CORRECT_M,
    Strength.HIGH: qrcode.constants.ERROR_CORRECT_Q,
    Strength.HIGHEST: qrcode.constants.ERROR_CORRECT_H,
}


def error_correction(strength: Strength) -> int:
    """Map a Strength to the python-qrcode constant (Medium for unknown values)."""
    return ERROR_CORRECTION.get(strength, qrcode.constants.ERROR_CORRECT_M)


def generate_qr_code(
    data: str,
    strength: Strength = Strength.MEDIUM,
    size: int = DEFAULT_SIZE,
    fill_color: str = "black",
    back_color: str = "white",
) -> tuple[Image.Image, int]:
    """Generate a QR code image of exactly ``size`` x ``size`` pixels.

    The payload is always encoded in byte mode so that the capacity table
    applies to any UTF-8 text. Modules are drawn at the largest whole-pixel
    scale that fits and the symbol is centered on a background-colored canvas,
    which keeps module edges crisp for the decoder.

    Args:
        data: The text to encode.
        strength: Error correction level.
        size: Output image size in pixels (square).
        fill_color: Color of the dark modules.
        back_color: Background color.

    Returns:
        Tuple of (PIL Image, QR symbol version).

    Raises:
        EncodeError: If the data is empty, overflows version 40, or the
            symbol cannot fit into the requested size.
    """
    if not data:
        raise EncodeError("QR data cannot be empty.")

    qr = qrcode.QRCode(
        error_correction=error_correction(strength),
        box_size=1,
        border=QUIET_ZONE,
    )
    qr.add_data(QRData(data.encode("utf-8"), mode=MODE_8BIT_BYTE))
    try:
        qr.make(fit=True)
    except DataOverflowError as e:
        raise EncodeError(f"failed to create QR code: data does not fit at {strength} recovery") from e

    modules = qr.modules_count + 2 * QUIET_ZONE
    scale = size // modules
    if scale < 1:
        raise EncodeError(
            f"failed to scale QR code: version {qr.version} needs at least "
            f"{modules}x{modules} pixels, got {size}x{size}"
        )
    qr.box_size = scale

    greyscale = fill_color == "black" and back_color == "white"
    mode = "L" if greyscale else "RGBA"

    symbol = qr.make_image(fill_color=fill_color, back_color=back_color)
    symbol = symbol.convert(mode)

    canvas = Image.new(mode, (size, size), back_color)
    offset = (size - symbol.size[0]) // 2
    canvas.paste(symbol, (offset, offset))

    logger.debug(
        "Rendered version %d symbol at %s recovery, %d px/module", qr.version, strength, scale
    )
    return canvas, qr.version


def to_png_bytes(img: Image.Image) -> bytes:
    """Encode an image as PNG and return the bytes."""
    buf = io.BytesIO()
    img.save(buf, "PNG")
    return buf.getvalue()
