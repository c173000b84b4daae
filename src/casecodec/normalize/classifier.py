"""Reference prefix normalizer with identity classification.

Stands in for the production normalizer at the codec boundary: it consumes
one UTF-8 character per step and yields a classified fragment:

    uppercase letter   ->  b"U" + case-folded letter
    space              ->  b" "
    punctuation        ->  b"P" + the character
    anything else      ->  the character unchanged

Uppercase letters whose case mapping does not round-trip one-to-one are
left as neutral content, so decoding always restores the original bytes.
Invalid UTF-8 bytes pass through one at a time.
"""

from __future__ import annotations

import unicodedata
from typing import Iterator

from ..codec.encoder import CaseEncoder, EncodeResult
from ..codec.factory import create_case_codec
from ..core.fragment import Fragment
from ..core.markers import Marker


def _char_length(lead: int) -> int:
    """Byte length of a UTF-8 sequence from its lead byte."""
    if lead < 0x80:
        return 1
    if 0xC0 <= lead <= 0xDF:
        return 2
    if 0xE0 <= lead <= 0xEF:
        return 3
    if 0xF0 <= lead <= 0xF7:
        return 4
    return 1  # continuation or invalid lead


def _is_upper(char: str) -> bool:
    lower = char.lower()
    return (char.isupper() and char.isalpha()
            and len(lower) == 1 and lower.upper() == char)


def _is_punct(char: str) -> bool:
    return unicodedata.category(char).startswith("P")


def normalize_prefix(data: bytes) -> tuple[Fragment, int]:
    """Classify the first character of ``data``.

    Returns:
        (fragment, consumed) where consumed is the number of bytes of
        ``data`` used. Empty input yields an empty fragment.
    """
    if not data:
        return Fragment(b"", 0), 0

    length = min(_char_length(data[0]), len(data))
    raw = data[:length]
    try:
        char = raw.decode("utf-8")
    except UnicodeDecodeError:
        raw = data[:1]
        return Fragment(raw, 1), 1

    if char == " ":
        text = Marker.SPACE.value
    elif _is_upper(char):
        text = Marker.UPPER.value + char.lower().encode("utf-8")
    elif _is_punct(char):
        text = Marker.PUNCT.value + raw
    else:
        text = raw
    return Fragment(text, len(raw)), len(raw)


def iter_fragments(data: bytes | str) -> Iterator[Fragment]:
    """Pull fragments from ``data`` until it is exhausted."""
    if isinstance(data, str):
        data = data.encode("utf-8", "surrogateescape")
    pos = 0
    while pos < len(data):
        fragment, consumed = normalize_prefix(data[pos:pos + 4])
        yield fragment
        pos += consumed


def normalize(text: bytes | str, encode_case: bool = True) -> EncodeResult:
    """Run text through the normalizer and the case codec.

    With encode_case=False the identity codec is used and the result is the
    plain classified stream.
    """
    codec = create_case_codec(encode_case=encode_case)
    return codec.encode_all(iter_fragments(text))


def encode_text(text: bytes | str) -> EncodeResult:
    """Convenience function: case-encode text with a fresh encoder."""
    return CaseEncoder().encode_all(iter_fragments(text))
