"""Image loading, QR decoding, and round-trip verification."""

import io
import logging
import os
from dataclasses import dataclass

from PIL import Image, ImageOps
import zxingcpp

from qr_verify import QUIET_ZONE
from qr_verify.errors import DecodeError, VerificationError
from qr_verify.options import Strength

logger = logging.getLogger(__name__)

PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"

# Images smaller than this are upscaled on the try-harder pass.
_MIN_DECODE_SIDE = 200


@dataclass(frozen=True)
class DecodeHints:
    """Decoder effort settings.

    pure_barcode reads the image as a bare, axis-aligned symbol with a quiet
    zone and nothing else, which is what generated images are. try_harder
    adds a full detection pass (rotation, downscaling) over a normalized copy
    of the image when the first one finds nothing.
    """

    try_harder: bool = True
    pure_barcode: bool = True


def load_png(png_bytes: bytes) -> Image.Image:
    """Open PNG bytes as a fully loaded PIL Image.

    Raises:
        DecodeError: If the bytes are not a valid PNG image.
    """
    if not png_bytes.startswith(PNG_SIGNATURE):
        raise DecodeError("failed to decode PNG: missing PNG signature")
    try:
        img = Image.open(io.BytesIO(png_bytes))
        img.load()
        return img
    except (OSError, SyntaxError, Image.DecompressionBombError) as e:
        raise DecodeError(f"failed to decode PNG: {e}") from e


def _normalized(img: Image.Image) -> Image.Image:
    """Greyscale copy with a white quiet zone, upscaled if small."""
    gray = img.convert("L")
    pad = max(gray.size) // 10 + QUIET_ZONE
    gray = ImageOps.expand(gray, border=pad, fill=255)
    if min(gray.size) < _MIN_DECODE_SIDE:
        factor = -(-_MIN_DECODE_SIDE // min(gray.size))
        gray = gray.resize((gray.size[0] * factor, gray.size[1] * factor), Image.NEAREST)
    return gray


def decode_qr(img: Image.Image, hints: DecodeHints = DecodeHints()) -> str:
    """Read a QR code from an image and return its text.

    Args:
        img: The image to scan.
        hints: Decoder effort settings.

    Returns:
        The decoded text.

    Raises:
        DecodeError: If no QR code can be read from the image.
    """
    passes = [(img.convert("L"), hints.pure_barcode)]
    if hints.try_harder:
        passes.append((_normalized(img), False))

    for candidate, pure in passes:
        results = zxingcpp.read_barcodes(
            candidate,
            formats=zxingcpp.BarcodeFormat.QRCode,
            try_rotate=not pure,
            try_downscale=not pure,
            is_pure=pure,
        )
        if results:
            return _payload_text(results[0])
        logger.debug("No QR code found on %dx%d pass (pure=%s)", *candidate.size, pure)

    raise DecodeError("failed to read QR code: no QR code found in image")


def _payload_text(result) -> str:
    """Text of a decoded symbol, taken from its raw bytes as UTF-8.

    Byte-mode data carries no charset, so decoders guess one for ``text``;
    reading the raw bytes keeps UTF-8 payloads from being misread as
    Shift-JIS or Latin-1. Symbols whose bytes are not UTF-8 (e.g. an ECI
    charset set by another encoder) use the decoder's own conversion.
    """
    try:
        return result.bytes.decode("utf-8")
    except UnicodeDecodeError:
        return result.text


def verify_qr(
    png_bytes: bytes,
    expected: str,
    strength: Strength = Strength.MEDIUM,
) -> None:
    """Check that a PNG image decodes to exactly the expected text.

    The comparison is byte-for-byte: no case folding, trimming or Unicode
    normalization. ``strength`` is only recorded on a mismatch; for images
    made elsewhere the level is unknown and Medium is reported.

    Raises:
        DecodeError: If the image is not a PNG or holds no readable QR code.
        VerificationError: If a QR code was read but its text differs.
    """
    img = load_png(png_bytes)
    decoded = decode_qr(img)
    if decoded != expected:
        raise VerificationError(original=expected, decoded=decoded, strength=strength)


def verify_file(path: str, expected: str) -> None:
    """Verify a PNG file on disk. See verify_qr.

    Raises:
        FileNotFoundError: If the file doesn't exist.
    """
    if not os.path.exists(path):
        raise FileNotFoundError(f"Image not found: {path}")
    with open(path, "rb") as f:
        verify_qr(f.read(), expected)


def save_output(png_bytes: bytes, output_path: str) -> str:
    """Write PNG bytes to the desired output path, creating parent directories.

    Returns:
        The output path where the image was saved.
    """
    os.makedirs(os.path.dirname(output_path) or ".", exist_ok=True)
    with open(output_path, "wb") as f:
        f.write(png_bytes)
    return output_path


def cleanup_temp_files(*paths: str) -> None:
    """Remove temporary files, ignoring ones that are already gone."""
    for path in paths:
        if path:
            try:
                os.unlink(path)
            except OSError as e:
                logger.debug("Could not remove %s: %s", path, e)
