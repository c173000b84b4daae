"""Environment configuration for the case codec."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _get_env(key: str, default: Optional[str] = None) -> Optional[str]:
    value = os.getenv(key)
    if value is not None:
        value = value.strip()
        if value == "":
            return default
        return value
    return default


def _get_bool(key: str, default: bool) -> bool:
    value = _get_env(key)
    if value is None:
        return default
    value_lower = value.lower()
    if value_lower in {"1", "true", "t", "yes", "y", "on"}:
        return True
    if value_lower in {"0", "false", "f", "no", "n", "off"}:
        return False
    raise ValueError(f"Environment variable {key} must be a boolean")


@dataclass(slots=True)
class CodecConfig:
    log_level: str
    encode_case: bool


def load_config() -> CodecConfig:
    log_level = _get_env("CASECODEC_LOG_LEVEL", "INFO").upper()
    if log_level not in LOG_LEVELS:
        raise ValueError(f"CASECODEC_LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}")

    return CodecConfig(
        log_level=log_level,
        encode_case=_get_bool("CASECODEC_ENCODE_CASE", True),
    )
