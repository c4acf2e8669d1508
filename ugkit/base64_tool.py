"""Base64 encoder and decoder with a small command-line front end.

Trailing bytes of the last group are filled with ``=`` bytes before that
group is encoded, so encoded text never carries padding characters.
"""

from __future__ import annotations

import string
import sys
from collections.abc import Sequence

_ALPHABET = string.ascii_uppercase + string.ascii_lowercase + string.digits + "+/"
_DECODE = {char: index for index, char in enumerate(_ALPHABET)}
_VALID = frozenset(_ALPHABET + "=")
_FILL = ord("=")


class InvalidBase64Error(ValueError):
    """Raised when text cannot be decoded as base64."""


def _encode_group(group: bytes) -> str:
    b0, b1, b2 = group
    return (
        _ALPHABET[b0 >> 2]
        + _ALPHABET[((b0 & 0b11) << 4) | (b1 >> 4)]
        + _ALPHABET[((b1 & 0b1111) << 2) | (b2 >> 6)]
        + _ALPHABET[b2 & 0b111111]
    )


def _decode_group(group: str) -> bytes:
    try:
        c0, c1, c2, c3 = (_DECODE[char] for char in group)
    except KeyError as exc:
        raise InvalidBase64Error(f"character {exc.args[0]!r} has no base64 value") from None
    return bytes(
        (
            ((c0 << 2) | (c1 >> 4)) & 0xFF,
            (((c1 & 0b1111) << 4) | (c2 >> 2)) & 0xFF,
            (((c2 & 0b11) << 6) | c3) & 0xFF,
        )
    )


def encode(text: str | bytes) -> str:
    """Encode text (UTF-8 for str) into base64 characters."""
    data = text.encode("utf-8") if isinstance(text, str) else bytes(text)
    return "".join(
        _encode_group(data[start:start + 3].ljust(3, bytes((_FILL,))))
        for start in range(0, len(data), 3)
    )


def decode(text: str) -> bytes:
    """Decode base64 characters; every group of four yields three bytes."""
    if len(text) % 4 != 0 or any(char not in _VALID for char in text):
        raise InvalidBase64Error("Invalid base64 string")
    return b"".join(_decode_group(text[start:start + 4]) for start in range(0, len(text), 4))


def main(argv: Sequence[str] | None = None) -> int:
    """Run ``encode <text>`` or ``decode <text>`` and print the result."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        print("Please specify an operation", file=sys.stderr)
        return 1

    operation, rest = args[0], args[1:]
    if operation == "encode":
        if not rest:
            print("Please specify a string to encode", file=sys.stderr)
            return 0
        encoded = encode(rest[0])
        print(encoded)
        print("".join(f"0x{ord(char):x} " for char in encoded))
    elif operation == "decode":
        if not rest:
            print("Please specify a string to decode", file=sys.stderr)
            return 0
        try:
            decoded = decode(rest[0])
        except InvalidBase64Error as exc:
            print(exc, file=sys.stderr)
            return 0
        print(decoded.decode("utf-8", errors="replace"))
    else:
        print(f"Unknown operation: {operation}", file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())