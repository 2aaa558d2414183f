"""Load keyed and default responses into immutable in-memory structures."""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Tuple

from .config import DEFAULT_DEFAULTS_NAME, DEFAULT_RESPONSES_NAME, FALLBACK_RESPONSE
from .errors import MalformedInput, ResourceNotFound
from .parser import parse_default_responses, parse_keyed_responses
from .resources import ResourceReader
from .schemas import LoadError


logger = logging.getLogger(__name__)


class ResponseStore:
    """Own the keyword map and the default responses read from two resources.

    Loading never raises for missing, malformed or unreadable resources. The
    failure is logged and recorded in :attr:`load_errors`, the keyword map keeps
    whatever was parsed before the failure, and the default list falls back to
    ``fallback_response`` when nothing could be read.
    """

    def __init__(
        self,
        reader: ResourceReader,
        responses_name: str = DEFAULT_RESPONSES_NAME,
        defaults_name: str = DEFAULT_DEFAULTS_NAME,
        fallback_response: str = FALLBACK_RESPONSE,
    ) -> None:
        self.reader = reader
        self.responses_name = responses_name
        self.defaults_name = defaults_name
        self.fallback_response = fallback_response
        self._responses: Dict[str, str] = {}
        self._defaults: List[str] = []
        self._errors: List[LoadError] = []
        self._load()

    # ------------------------------------------------------------------
    # Public API

    @property
    def responses(self) -> Mapping[str, str]:
        return MappingProxyType(self._responses)

    @property
    def default_responses(self) -> Tuple[str, ...]:
        return tuple(self._defaults)

    @property
    def load_errors(self) -> Tuple[LoadError, ...]:
        return tuple(self._errors)

    def lookup(self, word: str) -> Optional[str]:
        return self._responses.get(word)

    def keywords(self) -> List[str]:
        return sorted(self._responses)

    # ------------------------------------------------------------------
    # Internal helpers

    def _load(self) -> None:
        self._fill_response_map()
        self._fill_default_responses()

    def _read(self, name: str) -> Optional[str]:
        try:
            return self.reader(name)
        except (OSError, UnicodeDecodeError) as exc:
            self._record(name, exc)
        return None

    def _record(self, name: str, exc: Exception) -> None:
        self._errors.append(LoadError(resource=name, error=exc))
        if isinstance(exc, ResourceNotFound):
            logger.warning("%s", exc)
        elif isinstance(exc, MalformedInput):
            logger.error("Error loading responses: %s", exc)
        else:
            logger.error("Error loading responses from %s: %s", name, exc)

    def _fill_response_map(self) -> None:
        name = self.responses_name
        text = self._read(name)
        if text is None:
            return
        try:
            for entry in parse_keyed_responses(text, name):
                for key in entry.keywords:
                    if key in self._responses:
                        logger.debug("Keyword %r in %s overrides an earlier entry", key, name)
                    self._responses[key] = entry.text
        except MalformedInput as exc:
            self._record(name, exc)
        logger.info("Loaded %d keywords from %s", len(self._responses), name)

    def _fill_default_responses(self) -> None:
        name = self.defaults_name
        text = self._read(name)
        if text is not None:
            try:
                for response in parse_default_responses(text, name):
                    self._defaults.append(response)
            except MalformedInput as exc:
                self._record(name, exc)
        if not self._defaults:
            # Make sure we have at least one response.
            self._defaults.append(self.fallback_response)
        logger.info("Loaded %d default responses from %s", len(self._defaults), name)


__all__ = ["ResponseStore"]
