"""Configuration helpers for the canned responder."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional


logger = logging.getLogger(__name__)

PACKAGE_DATA_DIR = Path(__file__).resolve().parent / "data"
DEFAULT_RESPONSES_NAME = "responses.txt"
DEFAULT_DEFAULTS_NAME = "default.txt"
FALLBACK_RESPONSE = "Could you elaborate on that?"


def _optional_int(value: Optional[str]) -> Optional[int]:
    if value is None or not value.strip():
        return None
    try:
        return int(value)
    except ValueError:
        logger.warning("Ignoring non-integer RESPONDER_SEED %r", value)
        return None


@dataclass(slots=True)
class Settings:
    """Runtime settings with environment overrides."""

    resource_dir: Path = PACKAGE_DATA_DIR
    responses_name: str = DEFAULT_RESPONSES_NAME
    defaults_name: str = DEFAULT_DEFAULTS_NAME
    fallback_response: str = FALLBACK_RESPONSE
    seed: Optional[int] = None

    @classmethod
    def load(cls) -> "Settings":
        """Construct settings from environment variables when available."""

        return cls(
            resource_dir=Path(
                os.environ.get("RESPONDER_RESOURCE_DIR", PACKAGE_DATA_DIR.as_posix())
            ),
            responses_name=os.environ.get(
                "RESPONDER_RESPONSES_NAME", DEFAULT_RESPONSES_NAME
            ),
            defaults_name=os.environ.get("RESPONDER_DEFAULTS_NAME", DEFAULT_DEFAULTS_NAME),
            fallback_response=os.environ.get("RESPONDER_FALLBACK", FALLBACK_RESPONSE),
            seed=_optional_int(os.environ.get("RESPONDER_SEED")),
        )


__all__ = [
    "Settings",
    "DEFAULT_DEFAULTS_NAME",
    "DEFAULT_RESPONSES_NAME",
    "FALLBACK_RESPONSE",
    "PACKAGE_DATA_DIR",
]
