"""Recovery levels, capacity limits, and the request/result types."""

from dataclasses import dataclass
from enum import IntEnum
from types import MappingProxyType

from qr_verify import DEFAULT_SIZE
from qr_verify.errors import DataTooLargeError


class Strength(IntEnum):
    """QR error correction level. Higher values trade capacity for redundancy."""

    LOW = 0       # ~7% error correction (L)
    MEDIUM = 1    # ~15% error correction (M)
    HIGH = 2      # ~25% error correction (Q)
    HIGHEST = 3   # ~30% error correction (H)

    def __str__(self) -> str:
        return self.name.capitalize()

    @classmethod
    def from_name(cls, name: str) -> "Strength":
        """Parse a level name such as "low" or "Highest".

        Raises:
            ValueError: If the name is not one of low, medium, high, highest.
        """
        try:
            return cls[name.strip().upper()]
        except KeyError:
            valid = ", ".join(s.name.lower() for s in cls)
            raise ValueError(f"invalid recovery level {name!r}, must be: {valid}") from None


# Byte-mode capacity of QR version 40, the largest standard symbol.
MAX_BYTES_LOW = 2953
MAX_BYTES_MEDIUM = 2331
MAX_BYTES_HIGH = 1663
MAX_BYTES_HIGHEST = 1273

CAPACITY = MappingProxyType({
    Strength.LOW: MAX_BYTES_LOW,
    Strength.MEDIUM: MAX_BYTES_MEDIUM,
    Strength.HIGH: MAX_BYTES_HIGH,
    Strength.HIGHEST: MAX_BYTES_HIGHEST,
})


def max_bytes(strength) -> int:
    """Return the maximum payload in bytes for a level (Medium for unknown values)."""
    return CAPACITY.get(strength, MAX_BYTES_MEDIUM)


def check_capacity(data: str, strength: Strength) -> int:
    """Fail fast if data cannot fit a QR symbol at this level.

    Returns:
        The payload size in UTF-8 bytes.

    Raises:
        DataTooLargeError: If the payload exceeds the level's capacity.
    """
    size = len(data.encode("utf-8"))
    limit = max_bytes(strength)
    if size > limit:
        raise DataTooLargeError(size, limit, strength)
    return size


@dataclass
class EncodeOptions:
    """Parameters for verified QR generation.

    ``strength=None`` starts at Medium and escalates on verification failure;
    an explicit strength is used as-is with no retry.
    """

    strength: Strength | None = None
    size: int = DEFAULT_SIZE
    fill_color: str = "black"
    back_color: str = "white"

    def __post_init__(self):
        if self.size < 1:
            raise ValueError(f"size must be a positive number of pixels, got {self.size}")
        if self.strength is not None:
            self.strength = Strength(self.strength)


@dataclass(frozen=True)
class EncodeResult:
    """A verified QR code with metadata about how it was produced."""

    image: bytes          # PNG image bytes
    data: str             # Verified input data
    strength: Strength    # Level that actually round-tripped
    size: int             # Image dimensions in pixels
    version: int | None = None  # QR symbol version (1-40)
