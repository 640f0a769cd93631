"""CLI entry point for QR Verify."""

import argparse
import logging
import sys
import tempfile

from qr_verify import DEFAULT_SIZE, DEMO_DATA, __version__
from qr_verify.pipeline import encode_detailed
from qr_verify.errors import QRVerifyError
from qr_verify.image_utils import cleanup_temp_files, save_output, verify_file, verify_qr
from qr_verify.options import EncodeOptions, Strength

STRENGTH_NAMES = ["low", "medium", "high", "highest"]


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="qr-verify",
        description="Generate QR codes that are proven to decode back to their input.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Generate a verified QR code (escalates recovery level if needed)
  qr-verify encode "https://example.com" -o qr.png

  # Pin the recovery level and size
  qr-verify encode "https://example.com" -o qr.png -r high -s 512

  # Check an existing image (exit 0 on match, 1 otherwise)
  qr-verify verify qr.png "https://example.com"
        """,
    )

    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    # encode
    enc = subparsers.add_parser("encode", help="Generate a verified QR code")
    enc.add_argument("data", help="Text or URL to encode")
    enc.add_argument(
        "--output", "-o",
        default="qr.png",
        help="Output image path (default: qr.png)",
    )
    enc.add_argument(
        "--recovery", "-r",
        default=None,
        type=str.lower,
        choices=STRENGTH_NAMES,
        help="Recovery level. Omit to start at medium and escalate on verification failure",
    )
    enc.add_argument(
        "--size", "-s",
        type=int,
        default=DEFAULT_SIZE,
        help=f"Image size in pixels (square). Default: {DEFAULT_SIZE}",
    )
    enc.add_argument(
        "--fill",
        default="black",
        help="Color of the dark modules. Default: black",
    )
    enc.add_argument(
        "--background",
        default="white",
        help="Background color. Default: white",
    )

    # verify
    ver = subparsers.add_parser(
        "verify",
        help="Verify a QR code image",
        description="Reads the PNG file and verifies it decodes to the expected data. "
                    "Exit 0 on success, exit 1 on failure.",
    )
    ver.add_argument("file", help="PNG image to check")
    ver.add_argument("expected", help="Text the QR code must contain")
    ver.add_argument(
        "--show-data",
        action="store_true",
        help="On mismatch, print the decoded and expected text (may expose sensitive data)",
    )

    # demo
    subparsers.add_parser(
        "demo",
        help="Demonstrate the encode/verify workflow",
        description=f"Encodes {DEMO_DATA!r} to a temp file, verifies it, shows the "
                    "result metadata, and cleans up.",
    )

    return parser


def _encode_command(args) -> int:
    strength = Strength.from_name(args.recovery) if args.recovery else None
    options = EncodeOptions(
        strength=strength,
        size=args.size,
        fill_color=args.fill,
        back_color=args.background,
    )

    result = encode_detailed(args.data, options)
    output_path = save_output(result.image, args.output)

    print(
        f"Created {output_path} ({result.size}x{result.size}, "
        f"recovery: {str(result.strength).lower()}, version: {result.version})"
    )
    if strength is None and result.strength != Strength.MEDIUM:
        print(f"  Escalated from medium to {str(result.strength).lower()} to pass verification")
    return 0


def _verify_command(args) -> int:
    try:
        verify_file(args.file, args.expected)
    except QRVerifyError as e:
        message = e.detail() if args.show_data else e.summary()
        print(f"Verification failed: {message}", file=sys.stderr)
        return 1

    print("Verification passed")
    return 0


def _demo_command(args) -> int:
    print(f"Demo: Encoding {DEMO_DATA!r}")

    tmp = tempfile.NamedTemporaryFile(suffix=".png", prefix="qr_verify_demo_", delete=False)
    tmp.close()

    try:
        result = encode_detailed(DEMO_DATA)
        save_output(result.image, tmp.name)
        print(f"  ✓ Created temporary QR code at {tmp.name}")

        print("  Verifying...")
        with open(tmp.name, "rb") as f:
            verify_qr(f.read(), DEMO_DATA)
        print("  ✓ Verification passed!")

        print("QR Code Details:")
        print(f"  Recovery: {result.strength}")
        print(f"  Size:     {result.size}x{result.size}")
        print(f"  Version:  {result.version}")
        return 0
    finally:
        print("Cleaning up...")
        cleanup_temp_files(tmp.name)


COMMANDS = {
    "encode": _encode_command,
    "verify": _verify_command,
    "demo": _demo_command,
}


def main(argv: list[str] | None = None) -> int:
    parser = create_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    try:
        return COMMANDS[args.command](args)
    except QRVerifyError as e:
        print(f"\n  ERROR: {e.summary()}", file=sys.stderr)
        return 1
    except (ValueError, OSError) as e:
        print(f"\n  ERROR: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
