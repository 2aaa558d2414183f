"""Exceptions raised while loading and serving canned responses."""

from __future__ import annotations

from typing import Optional


class ResponderError(Exception):
    """Base class for all responder errors."""


class ResourceNotFound(ResponderError, FileNotFoundError):
    """A named resource could not be located by the reader."""

    def __init__(self, resource: str, detail: Optional[str] = None) -> None:
        self.resource = resource
        message = f"Unable to open {resource}"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)


class MalformedInput(ResponderError, ValueError):
    """Two or more consecutive blank lines were found in a resource."""

    def __init__(self, resource: str, line: int) -> None:
        self.resource = resource
        self.line = line
        super().__init__(
            f"Encountered two or more consecutive blank lines in {resource} (line {line})"
        )


class EmptyDefaultList(ResponderError, IndexError):
    """No default response is available to pick from."""


__all__ = ["ResponderError", "ResourceNotFound", "MalformedInput", "EmptyDefaultList"]
