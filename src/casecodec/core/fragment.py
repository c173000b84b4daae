"""Fragment: one classified step of normalizer output."""

from dataclasses import dataclass

from .markers import FragmentKind, classify_fragment

# Kinds whose leading byte is a marker rather than content.
_TAGGED = (FragmentKind.UPPER, FragmentKind.LOWER, FragmentKind.PUNCT)


@dataclass(frozen=True, slots=True)
class Fragment:
    """Normalized text for one step plus the original bytes it consumed.

    ``text[0]`` is the classification byte. For tagged kinds (U, L, P) the
    rest of ``text`` is the payload; spaces and neutral content are their
    own payload.
    """
    text: bytes
    consumed: int

    def __post_init__(self) -> None:
        if self.consumed < 0:
            raise ValueError(f"consumed must be >= 0, got {self.consumed}")

    @property
    def kind(self) -> FragmentKind:
        return classify_fragment(self.text)

    @property
    def marker(self) -> int | None:
        return self.text[0] if self.text else None

    @property
    def payload(self) -> bytes:
        if self.kind in _TAGGED:
            return self.text[1:]
        return self.text

    @property
    def is_empty(self) -> bool:
        return not self.text

    def __str__(self) -> str:
        return f"{self.text!r}/{self.consumed}"
