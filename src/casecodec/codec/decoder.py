"""Case decoder: marker-augmented canonical stream back to original casing.

Inverse of the encoder's run compression. One ``U`` anchor uppercases every
following letter until an ``L`` revert or a word boundary; one ``T`` anchor
uppercases exactly one letter.
"""

from __future__ import annotations

from enum import Enum

from ..core.markers import MARKER_BY_CHAR, Marker
from .errors import CaseDecodeError


class DecoderState(Enum):
    IDLE = "idle"
    TITLE_PENDING = "title_pending"   # saw T, waiting for its letter
    RUN_PENDING = "run_pending"       # saw U, waiting for the first letter
    IN_RUN = "in_run"


_PENDING = (DecoderState.TITLE_PENDING, DecoderState.RUN_PENDING)


class CaseDecoder:
    """Streaming decoder for one encoded input.

    ``step`` takes one character of the stream and returns the character to
    emit, or None for a consumed marker. ``decode`` runs a whole byte stream.
    """

    def __init__(self) -> None:
        self.state = DecoderState.IDLE
        self.position = 0

    def step(self, char: str) -> str | None:
        marker = MARKER_BY_CHAR.get(char)
        at = self.position
        self.position += len(char.encode("utf-8", "surrogateescape"))

        if marker is Marker.TITLE or marker is Marker.UPPER:
            if self.state in _PENDING:
                raise CaseDecodeError(f"case anchor {char!r} follows an anchor with no letter", at)
            self.state = (DecoderState.TITLE_PENDING if marker is Marker.TITLE
                          else DecoderState.RUN_PENDING)
            return None

        if marker is Marker.LOWER:
            if self.state is not DecoderState.IN_RUN:
                raise CaseDecodeError("revert marker outside an uppercase run", at)
            self.state = DecoderState.IDLE
            return None

        if marker is Marker.PUNCT:
            raise CaseDecodeError("punctuation marker in encoded stream", at)

        if char.isalpha():
            if self.state is DecoderState.TITLE_PENDING:
                self.state = DecoderState.IDLE
                return char.upper()
            if self.state is DecoderState.RUN_PENDING:
                self.state = DecoderState.IN_RUN
                return char.upper()
            if self.state is DecoderState.IN_RUN:
                return char.upper()
            return char

        # Space, punctuation or neutral content: a word boundary.
        if self.state in _PENDING:
            raise CaseDecodeError(f"case anchor followed by non-letter {char!r}", at)
        self.state = DecoderState.IDLE
        return char

    def finish(self) -> None:
        if self.state in _PENDING:
            raise CaseDecodeError("case anchor at end of stream", self.position)
        self.state = DecoderState.IDLE

    def decode(self, stream: bytes) -> bytes:
        """Decode a complete encoded stream."""
        text = stream.decode("utf-8", "surrogateescape")
        parts = []
        for char in text:
            out = self.step(char)
            if out is not None:
                parts.append(out)
        self.finish()
        return "".join(parts).encode("utf-8", "surrogateescape")


def decode(stream: bytes) -> bytes:
    """Convenience function: decode a stream with a fresh decoder."""
    return CaseDecoder().decode(stream)
