"""Dataclasses describing parsed response resources."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


@dataclass(slots=True, frozen=True)
class ResponseEntry:
    keywords: Tuple[str, ...]
    text: str


@dataclass(slots=True, frozen=True)
class LoadError:
    resource: str
    error: Exception


__all__ = ["ResponseEntry", "LoadError"]
