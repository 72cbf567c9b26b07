"""Section tree and document container."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Iterable, Iterator

from pydantic import BaseModel, Field

from .nodes import Value, YiniValue, to_value

if TYPE_CHECKING:
    from .config import FormatterConfig, ParserConfig


class SectionNotFoundError(KeyError):
    def __init__(self, name: str):
        super().__init__(f"Section not found: {name}")
        self.name = name


class Section(BaseModel):
    values: dict[str, YiniValue] = Field(default_factory=dict)
    sections: dict[str, Section] = Field(default_factory=dict)

    # Values ------------------------------------------------------------------
    def get(self, key: str) -> Value:
        try:
            return self.values[key]
        except KeyError:
            raise KeyError(f"Key not found: {key}") from None

    def set(self, key: str, value: Any) -> None:
        self.values[key] = to_value(value)

    def has_value(self, key: str) -> bool:
        return key in self.values

    def __getitem__(self, key: str) -> Value:
        return self.get(key)

    def __setitem__(self, key: str, value: Any) -> None:
        self.set(key, value)

    def __contains__(self, key: object) -> bool:
        return key in self.values

    # Sections ----------------------------------------------------------------
    def section(self, name: str) -> Section:
        child = self.sections.get(name)
        if child is None:
            child = self.sections[name] = Section()
        return child

    def get_section(self, name: str) -> Section:
        try:
            return self.sections[name]
        except KeyError:
            raise SectionNotFoundError(name) from None

    def has_section(self, name: str) -> bool:
        return name in self.sections

    def navigate(self, path: Iterable[str]) -> Section:
        current = self
        for name in path:
            current = current.section(name)
        return current

    def iter_values(self) -> Iterator[tuple[str, Value]]:
        return iter(self.values.items())

    def iter_sections(self) -> Iterator[tuple[str, Section]]:
        return iter(self.sections.items())

    def clear(self) -> None:
        self.values.clear()
        self.sections.clear()

    def to_dict(self) -> dict[str, Any]:
        """Nested native dict of values followed by child sections.

        Values and sections live in separate namespaces, so a key and a child
        section may share a name; the child section wins in the dict.
        """
        result: dict[str, Any] = {key: value.to_python() for key, value in self.values.items()}
        for name, child in self.sections.items():
            result[name] = child.to_dict()
        return result


@dataclass
class Document:
    root: Section = field(default_factory=Section)

    @classmethod
    def parse(cls, text: str, config: ParserConfig | None = None) -> Document:
        from .parser import parse

        return parse(text, config=config)

    def serialize(self, config: FormatterConfig | None = None) -> str:
        from .formatter import serialize

        return serialize(self, config=config)

    def get(self, key: str) -> Value:
        return self.root.get(key)

    def set(self, key: str, value: Any) -> None:
        self.root.set(key, value)

    def has_value(self, key: str) -> bool:
        return self.root.has_value(key)

    def section(self, name: str) -> Section:
        return self.root.section(name)

    def get_section(self, name: str) -> Section:
        return self.root.get_section(name)

    def has_section(self, name: str) -> bool:
        return self.root.has_section(name)

    def navigate(self, path: Iterable[str]) -> Section:
        return self.root.navigate(path)

    def clear(self) -> None:
        self.root.clear()

    def to_dict(self) -> dict[str, Any]:
        return self.root.to_dict()

    def __getitem__(self, key: str) -> Value:
        return self.root.get(key)

    def __setitem__(self, key: str, value: Any) -> None:
        self.root.set(key, value)

    def __contains__(self, key: object) -> bool:
        return key in self.root


__all__ = ["Document", "Section", "SectionNotFoundError"]
