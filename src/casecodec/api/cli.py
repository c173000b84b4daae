"""
Command-line interface for the case codec.

Provides encode, decode and roundtrip commands.
"""
from __future__ import annotations

import argparse
import sys

from ..codec.errors import CaseCodecError
from ..config import LOG_LEVELS, load_config
from ..logging import configure_logging, get_logger

logger = get_logger(__name__)


def _show(data: bytes) -> str:
    return data.decode("utf-8", "surrogateescape")


def cmd_encode(args: argparse.Namespace) -> int:
    """Case-encode text and print the marker stream."""
    from ..codec.factory import create_case_codec
    from ..normalize.classifier import iter_fragments

    codec = create_case_codec(encode_case=args.config.encode_case and not args.identity)
    result = codec.encode_all(iter_fragments(args.text))
    print(_show(result.text))
    if args.offsets:
        print(f"Offsets: {result.norm_to_orig}")
    return 0


def cmd_decode(args: argparse.Namespace) -> int:
    """Decode a marker stream back to original casing."""
    from ..codec.decoder import decode

    print(_show(decode(args.stream.encode("utf-8", "surrogateescape"))))
    return 0


def cmd_roundtrip(args: argparse.Namespace) -> int:
    """Validate encode/decode roundtrip."""
    from ..validate import validate_roundtrip

    result = validate_roundtrip(args.text)
    print(f"Text: {args.text}")
    print(f"Result: {result}")
    if args.offsets:
        print(f"Offsets: {result.offsets}")
    return 0 if result.valid else 1


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="casecodec",
        description="Reversible case encoding for canonical text streams",
    )
    parser.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        type=str.upper,
        default=None,
        help="Log level (default: CASECODEC_LOG_LEVEL or INFO)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    encode_parser = subparsers.add_parser("encode", help="Encode text")
    encode_parser.add_argument("text", help="Text to encode")
    encode_parser.add_argument("--offsets", action="store_true",
                               help="Print the revert-marker offset table")
    encode_parser.add_argument("--identity", action="store_true",
                               help="Skip case encoding, print the classified stream")
    encode_parser.set_defaults(func=cmd_encode)

    decode_parser = subparsers.add_parser("decode", help="Decode a marker stream")
    decode_parser.add_argument("stream", help="Encoded stream")
    decode_parser.set_defaults(func=cmd_decode)

    roundtrip_parser = subparsers.add_parser("roundtrip", help="Validate roundtrip")
    roundtrip_parser.add_argument("text", help="Text to validate")
    roundtrip_parser.add_argument("--offsets", action="store_true",
                                  help="Print the revert-marker offset table")
    roundtrip_parser.set_defaults(func=cmd_roundtrip)

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    config = load_config()
    configure_logging(args.log_level or config.log_level)
    args.config = config

    if args.command is None:
        parser.print_help()
        return 2

    try:
        return args.func(args)
    except CaseCodecError as e:
        logger.error("casecodec.failed", command=args.command, error=str(e))
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
