"""
Round-trip validation: text -> encoded stream -> text.

Uses SHA-256 hashes to verify byte-perfect reconstruction.
"""
from __future__ import annotations

import hashlib
from dataclasses import dataclass, field
from typing import Iterable

from .codec.decoder import CaseDecoder
from .codec.errors import CaseCodecError
from .core.markers import Marker, count_markers
from .normalize.classifier import encode_text


@dataclass
class RoundtripResult:
    """Result of a round-trip check."""
    valid: bool
    original_hash: str
    reconstructed_hash: str
    original_length: int
    encoded_length: int
    markers: dict[Marker, int] = field(default_factory=dict)
    offsets: list[int] = field(default_factory=list)
    error_message: str | None = None

    def __str__(self) -> str:
        status = "VALID" if self.valid else "INVALID"
        msg = f"[{status}] "
        if self.valid:
            msg += f"Hash: {self.original_hash[:16]}... "
            msg += f"({self.original_length} -> {self.encoded_length} bytes)"
        else:
            msg += f"Original: {self.original_hash[:16]}..., "
            msg += f"Reconstructed: {self.reconstructed_hash[:16]}..."
            if self.error_message:
                msg += f" - {self.error_message}"
        return msg


def compute_hash(data: bytes) -> str:
    """Compute SHA-256 hash of data."""
    return hashlib.sha256(data).hexdigest()


def validate_roundtrip(text: bytes | str) -> RoundtripResult:
    """Encode text, decode it again and compare with the original."""
    original = text.encode("utf-8", "surrogateescape") if isinstance(text, str) else text
    original_hash = compute_hash(original)

    encoded = encode_text(original)
    try:
        reconstructed = CaseDecoder().decode(encoded.text)
    except CaseCodecError as e:
        return RoundtripResult(
            valid=False,
            original_hash=original_hash,
            reconstructed_hash="",
            original_length=len(original),
            encoded_length=len(encoded.text),
            markers=count_markers(encoded.text),
            offsets=encoded.norm_to_orig,
            error_message=str(e),
        )

    reconstructed_hash = compute_hash(reconstructed)
    return RoundtripResult(
        valid=original_hash == reconstructed_hash,
        original_hash=original_hash,
        reconstructed_hash=reconstructed_hash,
        original_length=len(original),
        encoded_length=len(encoded.text),
        markers=count_markers(encoded.text),
        offsets=encoded.norm_to_orig,
    )


def validate_corpus(texts: Iterable[bytes | str]) -> list[tuple[int, RoundtripResult]]:
    """
    Validate every text in a corpus.

    Returns list of (index, result) for any failures.
    """
    failures = []
    for i, text in enumerate(texts):
        result = validate_roundtrip(text)
        if not result.valid:
            failures.append((i, result))
    return failures
