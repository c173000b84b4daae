"""Case marker alphabet and fragment classification.

Canonical text is case-folded, so the uppercase ASCII bytes below can never
occur in it. That makes them safe to use as in-band markers:

  U  start of an all-caps run (one anchor for the whole run)
  T  title case: exactly the next letter was uppercase
  L  zero-width revert: the all-caps run ends here
  P  punctuation fragment from the normalizer (stripped on encode)

A space byte is a word boundary. Any other leading byte is neutral content
and passes through untouched.
"""

from enum import Enum


class Marker(Enum):
    UPPER = b"U"
    TITLE = b"T"
    LOWER = b"L"
    PUNCT = b"P"
    SPACE = b" "

    @property
    def byte(self) -> int:
        return self.value[0]

    @property
    def char(self) -> str:
        return self.value.decode("ascii")


class FragmentKind(Enum):
    UPPER = "upper"
    LOWER = "lower"
    PUNCT = "punct"
    SPACE = "space"
    NEUTRAL = "neutral"


# Leading byte -> kind, for the bytes the normalizer may tag a fragment with.
_KIND_BY_LEAD = {
    Marker.UPPER.byte: FragmentKind.UPPER,
    Marker.LOWER.byte: FragmentKind.LOWER,
    Marker.PUNCT.byte: FragmentKind.PUNCT,
    Marker.SPACE.byte: FragmentKind.SPACE,
}

# Bytes that only ever appear in an encoded stream as markers.
MARKER_BYTES = frozenset(
    m.byte for m in (Marker.UPPER, Marker.TITLE, Marker.LOWER, Marker.PUNCT)
)

MARKER_BY_CHAR = {m.char: m for m in Marker}


def classify_fragment(text: bytes) -> FragmentKind:
    """Classify a normalizer fragment by its leading byte."""
    if not text:
        return FragmentKind.NEUTRAL
    return _KIND_BY_LEAD.get(text[0], FragmentKind.NEUTRAL)


def count_markers(stream: bytes) -> dict[Marker, int]:
    """Count the case markers in an encoded stream."""
    return {m: stream.count(m.value)
            for m in (Marker.UPPER, Marker.TITLE, Marker.LOWER)}
