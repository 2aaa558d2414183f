"""Uniform random selection over the default responses."""

from __future__ import annotations

import random
from typing import Optional, Protocol, Sequence, Tuple

from .errors import EmptyDefaultList


class RandomSource(Protocol):
    def randrange(self, stop: int) -> int:
        ...


class DefaultPicker:
    """Pick one default response per call.

    The random source is injected so tests can seed it. A shared
    ``random.Random`` is safe to use from several threads; callers that want
    independent streams pass one instance per thread.
    """

    def __init__(
        self,
        responses: Sequence[str],
        rng: Optional[RandomSource] = None,
    ) -> None:
        self._responses: Tuple[str, ...] = tuple(responses)
        self.rng = rng if rng is not None else random.Random()

    @property
    def responses(self) -> Tuple[str, ...]:
        return self._responses

    def pick(self) -> str:
        if not self._responses:
            raise EmptyDefaultList("No default responses to pick from")
        index = self.rng.randrange(len(self._responses))
        return self._responses[index]


__all__ = ["DefaultPicker", "RandomSource"]
