"""Case codec exceptions."""


class CaseCodecError(ValueError):
    """Base class for case codec failures."""


class CaseDecodeError(CaseCodecError):
    """Encoded stream is malformed: stray revert marker or dangling anchor."""

    def __init__(self, message: str, position: int) -> None:
        super().__init__(f"{message} at byte {position}")
        self.position = position


class CaseCodecConfigError(CaseCodecError):
    """Codec was requested with an invalid combination of options."""
