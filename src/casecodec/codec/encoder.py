"""Case encoder: fragment stream to marker-augmented canonical bytes.

The normalizer hands over one classified fragment at a time. The encoder
keeps at most one marker per uppercase run:

    "Hello"  ->  Thello        one capital, rest of the word lowercase
    "NASA"   ->  UnasaL        anchor + case-folded run + revert marker
    "NASA."  ->  Unasa.        punctuation ends a run without a revert

A lone capital cannot be told apart from the start of an all-caps run until
the next fragment arrives, so the anchor position is held as an index into
the output buffer and patched (U -> T) once the run closes.

Every inserted revert marker consumes no input, so its original byte offset
is recorded in ``norm_to_orig``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

from ..core.fragment import Fragment
from ..core.markers import FragmentKind, Marker
from .errors import CaseCodecError


@dataclass
class EncodeResult:
    """Output of one encoding pass."""
    text: bytes
    norm_to_orig: list[int] = field(default_factory=list)
    run_count: int = 0

    def __str__(self) -> str:
        return self.text.decode("utf-8", "surrogateescape")


class CaseEncoder:
    """Single-pass, single-input case encoder.

    Each call to ``encode`` decides first and appends second: the fragment is
    classified against the open run, the run state is updated (which may
    patch the anchor or append a revert marker), and only then are the bytes
    that survive appended. Nothing is appended and later rolled back.
    """

    def __init__(self) -> None:
        self._buffer = bytearray()
        self.norm_to_orig: list[int] = []
        self._anchor: int | None = None
        self._run_length = 0
        self._run_count = 0
        self._last_offset = 0
        self._end_offset = 0
        self._drained = 0
        self._finished = False

    @property
    def output(self) -> bytes:
        return bytes(self._buffer)

    @property
    def run_open(self) -> bool:
        return self._anchor is not None

    @property
    def finished(self) -> bool:
        return self._finished

    def encode(self, fragment: Fragment, index: int = 0,
               original_offset: int = 0) -> bool:
        """Encode one fragment.

        Args:
            fragment: Normalizer output for this step.
            index: Sub-step within a multi-step fragment. Only sub-step 0
                drives the run state; later sub-steps pass through.
            original_offset: Byte offset of the fragment in the original input.

        Returns:
            True if the fragment text was kept as given, False if its marker
            byte was dropped and only the payload was appended.
        """
        if self._finished:
            raise CaseCodecError("encoder already finished; create a new one per input")
        if original_offset < self._last_offset:
            raise CaseCodecError(
                f"original offsets must not decrease: {original_offset} < {self._last_offset}"
            )
        self._last_offset = original_offset

        if index > 0:
            self._buffer += fragment.text
            self._end_offset = original_offset + fragment.consumed
            return True

        # Empty or truncated fragment: end of stream.
        if fragment.is_empty or (fragment.kind is FragmentKind.UPPER
                                 and not fragment.payload):
            self.finish(original_offset)
            return False

        keep, emit = self._decide(fragment, original_offset)
        self._buffer += emit
        self._end_offset = original_offset + fragment.consumed
        return keep

    def _decide(self, fragment: Fragment, original_offset: int) -> tuple[bool, bytes]:
        kind = fragment.kind

        if kind is FragmentKind.UPPER:
            if self._anchor is None:
                self._anchor = len(self._buffer)
                self._run_length = 1
                return True, fragment.text
            # Rest of the run is regenerated from the anchor by the decoder.
            self._run_length += 1
            return False, fragment.payload

        if kind is FragmentKind.PUNCT:
            self._close_run(original_offset, revert=False)
            return False, fragment.payload

        self._close_run(original_offset, revert=True)
        if kind is FragmentKind.LOWER:
            return False, fragment.payload
        return True, fragment.text

    def _close_run(self, original_offset: int, revert: bool) -> None:
        if self._anchor is None:
            return
        if self._run_length == 1:
            self._buffer[self._anchor] = Marker.TITLE.byte
        elif revert:
            self._buffer += Marker.LOWER.value
            self.norm_to_orig.append(original_offset)
        self._anchor = None
        self._run_length = 0
        self._run_count += 1

    def finish(self, original_offset: int | None = None) -> EncodeResult:
        """Close the stream, treating end of input as a word boundary.

        Safe to call more than once; only the first call has an effect.
        """
        if not self._finished:
            if original_offset is None:
                original_offset = self._end_offset
            self._close_run(max(original_offset, self._last_offset), revert=True)
            self._finished = True
        return self.result()

    def drain(self) -> bytes:
        """Return output bytes that can no longer change, not yet drained.

        While a run is open its anchor may still be patched, so output stops
        just before the anchor.
        """
        end = len(self._buffer) if self._anchor is None else self._anchor
        chunk = bytes(self._buffer[self._drained:end])
        self._drained = end
        return chunk

    def result(self) -> EncodeResult:
        return EncodeResult(
            text=self.output,
            norm_to_orig=list(self.norm_to_orig),
            run_count=self._run_count,
        )

    def encode_all(self, fragments: Iterable[Fragment]) -> EncodeResult:
        """Encode a whole fragment stream and finish it."""
        offset = 0
        for fragment in fragments:
            self.encode(fragment, 0, offset)
            if self._finished:
                break
            offset += fragment.consumed
        return self.finish(offset)
