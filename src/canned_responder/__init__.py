"""Keyword-triggered canned response package."""

from .config import Settings
from .errors import EmptyDefaultList, MalformedInput, ResourceNotFound, ResponderError
from .parser import parse_default_responses, parse_keyed_responses
from .picker import DefaultPicker
from .resources import FileResourceReader, MappingResourceReader
from .responder import ResponseGenerator, create_responder
from .schemas import LoadError, ResponseEntry
from .store import ResponseStore

__all__ = [
    "Settings",
    "ResponseGenerator",
    "create_responder",
    "ResponseStore",
    "DefaultPicker",
    "FileResourceReader",
    "MappingResourceReader",
    "ResponseEntry",
    "LoadError",
    "parse_keyed_responses",
    "parse_default_responses",
    "ResponderError",
    "ResourceNotFound",
    "MalformedInput",
    "EmptyDefaultList",
]
