"""Parsers for the blank-line separated response resource format.

Both resources share one grammar: blocks of non-blank lines separated by a
single blank line. Keyed resources open every block with a comma separated key
line. Two or more consecutive blank lines are a :class:`MalformedInput` error.

The parsers are generators so that callers keep every entry yielded before an
error is raised.
"""

from __future__ import annotations

import logging
from typing import Iterator, List, Tuple

from .errors import MalformedInput
from .schemas import ResponseEntry


logger = logging.getLogger(__name__)


def _is_blank(line: str) -> bool:
    return not line.strip()


def iter_blocks(text: str, resource: str) -> Iterator[Tuple[int, List[str]]]:
    """Yield ``(first_line_number, lines)`` for every block in ``text``."""

    block: List[str] = []
    start = 0
    blank_run = 0
    for number, line in enumerate(text.splitlines(), start=1):
        if _is_blank(line):
            blank_run += 1
            if blank_run >= 2:
                raise MalformedInput(resource, number)
            if block:
                yield start, block
                block = []
            continue
        blank_run = 0
        if not block:
            start = number
        block.append(line)
    if block:
        yield start, block


def normalize_key(raw: str) -> str:
    """Trim a keyword and drop every double quote character."""

    return raw.strip().replace('"', "")


def parse_key_line(line: str) -> Tuple[str, ...]:
    keys = []
    for raw in line.split(","):
        key = normalize_key(raw)
        if not key:
            logger.debug("Skipping empty key in key line %r", line)
            continue
        keys.append(key)
    return tuple(keys)


def parse_keyed_responses(text: str, resource: str = "<keyed>") -> Iterator[ResponseEntry]:
    """Yield one :class:`ResponseEntry` per complete keyed block."""

    for start, lines in iter_blocks(text, resource):
        keys = parse_key_line(lines[0])
        body = "\n".join(lines[1:])
        if not keys or not body:
            logger.debug("Dropping incomplete block at %s:%d", resource, start)
            continue
        yield ResponseEntry(keywords=keys, text=body)


def parse_default_responses(text: str, resource: str = "<defaults>") -> Iterator[str]:
    """Yield the text of every block in a default-response resource."""

    for _, lines in iter_blocks(text, resource):
        yield "\n".join(lines)


__all__ = [
    "iter_blocks",
    "normalize_key",
    "parse_key_line",
    "parse_keyed_responses",
    "parse_default_responses",
]
