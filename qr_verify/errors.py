"""Exceptions raised by the encode/verify pipeline.

Every error has a safe ``summary()`` that never contains payload text, and a
``detail()`` that may, for debugging.
"""


class QRVerifyError(Exception):
    """Base class for all pipeline failures."""

    def summary(self) -> str:
        return str(self)

    def detail(self) -> str:
        return self.summary()


class DataTooLargeError(QRVerifyError, ValueError):
    """Payload exceeds the capacity of the largest QR symbol at a given level."""

    def __init__(self, size: int, limit: int, strength):
        self.size = size
        self.limit = limit
        self.strength = strength
        super().__init__(
            f"data too large: {size} bytes exceeds {limit} byte limit for {strength} recovery"
        )


class EncodeError(QRVerifyError):
    """The QR encoder rejected the input or could not render it."""


class DecodeError(QRVerifyError):
    """No readable QR code was found in the image."""


class VerificationError(QRVerifyError):
    """A QR code was read, but its content differs from what was expected."""

    def __init__(self, original: str, decoded: str, strength):
        self.original = original
        self.decoded = decoded
        self.strength = strength
        # args hold only the length summary; the payload lives in attributes.
        super().__init__(
            f"verification failed: decoded length {len(decoded.encode('utf-8'))} "
            f"does not match original length {len(original.encode('utf-8'))} "
            f"(recovery: {strength})"
        )

    def detail(self) -> str:
        return (
            f"verification failed: decoded {self.decoded!r} does not match "
            f"original {self.original!r} (recovery: {self.strength})"
        )


class EscalationError(QRVerifyError):
    """Every recovery level in the escalation ladder failed."""

    def __init__(self, attempted, last_error: QRVerifyError):
        self.attempted = tuple(attempted)
        self.last_error = last_error
        levels = ", ".join(str(s) for s in self.attempted)
        super().__init__(f"no recovery level produced a verified QR code (tried {levels}): {last_error}")

    def detail(self) -> str:
        levels = ", ".join(str(s) for s in self.attempted)
        return (
            f"no recovery level produced a verified QR code (tried {levels}): "
            f"{self.last_error.detail()}"
        )
