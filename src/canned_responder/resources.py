"""Resource readers returning the raw text of a named response resource."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Dict, Mapping

from .errors import ResourceNotFound


ResourceReader = Callable[[str], str]


@dataclass(slots=True)
class FileResourceReader:
    """Read resources as UTF-8 text files below ``base_path``."""

    base_path: Path

    def __post_init__(self) -> None:
        self.base_path = Path(self.base_path).expanduser().resolve()

    def path_for(self, name: str) -> Path:
        return self.base_path / name

    def __call__(self, name: str) -> str:
        path = self.path_for(name)
        if not path.is_file():
            raise ResourceNotFound(name, str(path))
        return path.read_text(encoding="utf-8")


@dataclass(slots=True)
class MappingResourceReader:
    """Serve resources from an in-memory mapping of name to text."""

    texts: Dict[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        self.texts = dict(self.texts)

    @classmethod
    def of(cls, texts: Mapping[str, str]) -> "MappingResourceReader":
        return cls(dict(texts))

    def __call__(self, name: str) -> str:
        try:
            return self.texts[name]
        except KeyError:
            raise ResourceNotFound(name) from None


__all__ = ["ResourceReader", "FileResourceReader", "MappingResourceReader"]
