"""Verified QR generation with automatic recovery-level escalation."""

import logging

from qr_verify import DEFAULT_SIZE
from qr_verify.errors import (
    DataTooLargeError,
    DecodeError,
    EncodeError,
    EscalationError,
    VerificationError,
)
from qr_verify.image_utils import save_output, verify_qr
from qr_verify.options import EncodeOptions, EncodeResult, Strength, check_capacity
from qr_verify.qr_generator import generate_qr_code, to_png_bytes

logger = logging.getLogger(__name__)

# Levels tried, in order, when the caller does not pin one.
RECOVERY_LADDER = (Strength.MEDIUM, Strength.HIGH, Strength.HIGHEST)

_RETRYABLE = (DataTooLargeError, EncodeError, DecodeError, VerificationError)


def build_result(
    image: bytes,
    data: str,
    strength: Strength,
    size: int = DEFAULT_SIZE,
    version: int | None = None,
) -> EncodeResult:
    """Package a verified image with the level that actually succeeded."""
    return EncodeResult(image=image, data=data, strength=strength, size=size, version=version)


def _encode_and_verify(data: str, strength: Strength, options: EncodeOptions) -> EncodeResult:
    """One capacity check, encode, and verify at a single level."""
    check_capacity(data, strength)

    img, version = generate_qr_code(
        data,
        strength=strength,
        size=options.size,
        fill_color=options.fill_color,
        back_color=options.back_color,
    )
    png = to_png_bytes(img)

    verify_qr(png, data, strength=strength)

    return build_result(png, data, strength, options.size, version)


def encode_detailed(data: str, options: EncodeOptions | None = None) -> EncodeResult:
    """Generate a QR code and prove it decodes back to ``data``.

    With an explicit ``options.strength`` the code is generated once at that
    level and any failure is raised as-is. Without one, generation starts at
    Medium and moves up through High and Highest until a level round-trips.

    Args:
        data: The text to encode.
        options: Generation parameters. Defaults to EncodeOptions().

    Returns:
        EncodeResult whose ``strength`` is the level that succeeded.

    Raises:
        DataTooLargeError: If the data exceeds the starting level's capacity.
        EncodeError, DecodeError, VerificationError: Pinned-level failures.
        EscalationError: If every escalation step failed.
    """
    options = options or EncodeOptions()

    if options.strength is not None:
        return _encode_and_verify(data, options.strength, options)

    # Reject up front, before the encoder ever sees the data.
    check_capacity(data, RECOVERY_LADDER[0])

    attempted = []
    last_error = None
    for strength in RECOVERY_LADDER:
        attempted.append(strength)
        try:
            result = _encode_and_verify(data, strength, options)
        except _RETRYABLE as e:
            logger.info("Attempt at %s recovery failed: %s", strength, e)
            last_error = e
            continue
        if len(attempted) > 1:
            logger.info("Escalated to %s recovery after %d attempts", strength, len(attempted))
        return result

    raise EscalationError(attempted, last_error) from last_error


def encode(data: str, options: EncodeOptions | None = None) -> bytes:
    """Generate a verified QR code and return the PNG bytes."""
    return encode_detailed(data, options).image


def encode_to_file(data: str, output_path: str, options: EncodeOptions | None = None) -> str:
    """Generate a verified QR code and write it to ``output_path``.

    Returns:
        The output path where the image was saved.
    """
    return save_output(encode(data, options), output_path)


def quick(data: str) -> bytes:
    """Verified QR code with all defaults (escalating from Medium, 256px)."""
    return encode(data)
