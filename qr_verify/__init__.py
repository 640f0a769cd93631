"""QR Verify: QR code generation that proves every code decodes back to its input."""

__version__ = "1.0.0"

# Shared constants
DEFAULT_SIZE = 256  # Output image size in pixels (square)
QUIET_ZONE = 4  # Border width in modules required by the QR standard
DEMO_DATA = "Hello, QR World!"

from qr_verify.options import (  # noqa: E402
    CAPACITY,
    MAX_BYTES_HIGH,
    MAX_BYTES_HIGHEST,
    MAX_BYTES_LOW,
    MAX_BYTES_MEDIUM,
    EncodeOptions,
    EncodeResult,
    Strength,
    max_bytes,
)
from qr_verify.errors import (  # noqa: E402
    DataTooLargeError,
    DecodeError,
    EncodeError,
    EscalationError,
    QRVerifyError,
    VerificationError,
)
from qr_verify.image_utils import decode_qr, verify_file, verify_qr  # noqa: E402
from qr_verify.pipeline import encode, encode_detailed, encode_to_file, quick  # noqa: E402

__all__ = [
    "CAPACITY",
    "MAX_BYTES_HIGH",
    "MAX_BYTES_HIGHEST",
    "MAX_BYTES_LOW",
    "MAX_BYTES_MEDIUM",
    "DataTooLargeError",
    "DecodeError",
    "EncodeError",
    "EncodeOptions",
    "EncodeResult",
    "EscalationError",
    "QRVerifyError",
    "Strength",
    "VerificationError",
    "decode_qr",
    "encode",
    "encode_detailed",
    "encode_to_file",
    "max_bytes",
    "quick",
    "verify_file",
    "verify_qr",
]
