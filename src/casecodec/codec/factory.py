"""Codec construction.

One codec instance handles one direction for one input. Asking for both
directions at once is a configuration error and is rejected here rather
than in the per-fragment path.
"""

from __future__ import annotations

from typing import Iterable, Union

from ..core.fragment import Fragment
from ..logging import get_logger
from .decoder import CaseDecoder
from .encoder import CaseEncoder, EncodeResult
from .errors import CaseCodecConfigError, CaseCodecError

logger = get_logger(__name__)


class IdentityCaseCodec:
    """Pass-through codec used when case handling is switched off."""

    def __init__(self) -> None:
        self._buffer = bytearray()
        self._finished = False

    @property
    def output(self) -> bytes:
        return bytes(self._buffer)

    @property
    def norm_to_orig(self) -> list[int]:
        return []

    def encode(self, fragment: Fragment, index: int = 0,
               original_offset: int = 0) -> bool:
        if self._finished:
            raise CaseCodecError("codec already finished; create a new one per input")
        self._buffer += fragment.text
        return True

    def finish(self, original_offset: int | None = None) -> EncodeResult:
        self._finished = True
        return EncodeResult(text=self.output)

    def encode_all(self, fragments: Iterable[Fragment]) -> EncodeResult:
        for fragment in fragments:
            self.encode(fragment)
        return self.finish()

    def decode(self, stream: bytes) -> bytes:
        return stream


CaseCodec = Union[CaseEncoder, CaseDecoder, IdentityCaseCodec]


def create_case_codec(encode_case: bool = False, decode_case: bool = False) -> CaseCodec:
    """Create the codec for the requested direction.

    Raises:
        CaseCodecConfigError: if both encode_case and decode_case are set.
    """
    if encode_case and decode_case:
        logger.error("case_codec.invalid_config", encode_case=True, decode_case=True)
        raise CaseCodecConfigError("Cannot set both encode_case=True and decode_case=True")
    if encode_case:
        return CaseEncoder()
    if decode_case:
        return CaseDecoder()
    return IdentityCaseCodec()
