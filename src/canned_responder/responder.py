"""Keyword-triggered response generation."""

from __future__ import annotations

import random
from typing import Iterable, Mapping, Optional, Tuple

from .config import Settings
from .picker import DefaultPicker, RandomSource
from .resources import FileResourceReader, MappingResourceReader, ResourceReader
from .store import ResponseStore


class ResponseGenerator:
    """Answer a set of input words with a canned response.

    If any input word is a known keyword its response is returned. The words
    are examined in whatever order the collection iterates, so when several
    words are keywords any of their responses may come back. Otherwise one of
    the default responses is chosen at random.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        reader: Optional[ResourceReader] = None,
        rng: Optional[RandomSource] = None,
    ) -> None:
        self.settings = settings or Settings.load()
        self.reader = reader or FileResourceReader(self.settings.resource_dir)
        self.store = ResponseStore(
            self.reader,
            responses_name=self.settings.responses_name,
            defaults_name=self.settings.defaults_name,
            fallback_response=self.settings.fallback_response,
        )
        if rng is None:
            rng = random.Random(self.settings.seed)
        self.picker = DefaultPicker(self.store.default_responses, rng)

    @classmethod
    def from_texts(
        cls,
        keyed: Optional[str] = None,
        defaults: Optional[str] = None,
        rng: Optional[RandomSource] = None,
        settings: Optional[Settings] = None,
    ) -> "ResponseGenerator":
        """Build a generator from in-memory resource text.

        A resource passed as ``None`` behaves like a missing file.
        """

        settings = settings or Settings()
        texts = {}
        if keyed is not None:
            texts[settings.responses_name] = keyed
        if defaults is not None:
            texts[settings.defaults_name] = defaults
        return cls(settings=settings, reader=MappingResourceReader(texts), rng=rng)

    @property
    def responses(self) -> Mapping[str, str]:
        return self.store.responses

    @property
    def default_responses(self) -> Tuple[str, ...]:
        return self.store.default_responses

    def generate(self, words: Iterable[str]) -> str:
        """Return the response for the first recognized word, or a default."""

        for word in words:
            response = self.store.lookup(word)
            if response is not None:
                return response
        return self.picker.pick()


def create_responder(
    settings: Optional[Settings] = None,
    reader: Optional[ResourceReader] = None,
    rng: Optional[RandomSource] = None,
) -> ResponseGenerator:
    """Construct a :class:`ResponseGenerator`; resource problems never raise."""

    return ResponseGenerator(settings=settings, reader=reader, rng=rng)


__all__ = ["ResponseGenerator", "create_responder"]
