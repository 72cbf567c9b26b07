"""Formatter that renders a Document tree back into YINI text."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from .config import DEFAULT_FORMATTER_CONFIG, FormatterConfig, resolve_config
from .document import Document, Section
from .lexer import DEPTH_MARKER
from .logger import get_logger
from .nodes import ArrayValue, BoolValue, FloatValue, StringValue, Value, format_float


def format_value(value: Value) -> str:
    if isinstance(value, StringValue):
        return f"'{value.data}'"
    if isinstance(value, BoolValue):
        return "true" if value.data else "false"
    if isinstance(value, ArrayValue):
        return "[" + ", ".join(format_value(item) for item in value.data) + "]"
    if isinstance(value, FloatValue):
        return format_float(value.data)
    return str(value.data)


@dataclass
class YiniFormatter:
    indent_width: int = 4
    enable_logger: bool = False
    logger: logging.Logger = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        self.logger = get_logger("yini.formatter", self.enable_logger)

    @classmethod
    def from_config(cls, config: FormatterConfig | None = None) -> YiniFormatter:
        resolved = resolve_config(config or {}, DEFAULT_FORMATTER_CONFIG)
        return cls(indent_width=resolved["indent_width"], enable_logger=resolved["enable_logger"])

    def format_document(self, document: Document) -> str:
        lines = self.format_section(document.root)
        self.logger.info(f"Formatted document into {len(lines)} line(s)")
        return "".join(f"{line}\n" for line in lines)

    def format_section(self, section: Section, name: str | None = None, level: int = 0) -> list[str]:
        """Render ``section`` and its descendants.

        ``name`` is ``None`` for the root, which has no header and whose keys
        are not indented. Named sections at ``level`` get a header indented by
        ``level`` steps and carrying ``level + 1`` depth markers.
        """
        is_root = name is None
        lines: list[str] = []
        if not is_root:
            lines.append(f"{self._indent(level)}{DEPTH_MARKER * (level + 1)} {name}")

        key_level = level if is_root else level + 1
        for key, value in section.iter_values():
            lines.append(self.format_entry(key, value, key_level))

        child_level = level if is_root else level + 1
        for index, (child_name, child) in enumerate(section.iter_sections()):
            if not is_root or index > 0:
                lines.append("")
            self.logger.debug(f"Formatting section '{child_name}' at level {child_level}")
            lines.extend(self.format_section(child, child_name, child_level))
        return lines

    def format_entry(self, key: str, value: Value, level: int) -> str:
        return f"{self._indent(level)}{key} = {format_value(value)}"

    def _indent(self, level: int) -> str:
        return "" if level <= 0 else " " * (self.indent_width * level)


def serialize(document: Document, config: FormatterConfig | None = None) -> str:
    return YiniFormatter.from_config(config).format_document(document)


__all__ = ["YiniFormatter", "format_value", "serialize"]
