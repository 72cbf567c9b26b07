"""File boundary: reading and writing YINI documents on disk."""

from __future__ import annotations

from pathlib import Path

from .config import FormatterConfig, ParserConfig
from .document import Document
from .formatter import serialize
from .parser import parse


class FileError(Exception):
    def __init__(self, message: str, path: str | Path):
        super().__init__(message)
        self.path = Path(path)


def read_text(path: str | Path) -> str:
    try:
        return Path(path).read_text(encoding="utf-8")
    except OSError as e:
        raise FileError(f"Cannot open file: {path}", path) from e


def write_text(path: str | Path, text: str) -> Path:
    destination = Path(path)
    try:
        destination.write_text(text, encoding="utf-8")
    except OSError as e:
        raise FileError(f"Cannot write to file: {path}", path) from e
    return destination


def load(path: str | Path, config: ParserConfig | None = None) -> Document:
    return parse(read_text(path), config=config)


def dump(document: Document, path: str | Path, config: FormatterConfig | None = None) -> Path:
    return write_text(path, serialize(document, config=config))


__all__ = ["FileError", "dump", "load", "read_text", "write_text"]
