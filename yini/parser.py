"""Parser that turns YINI text into a Document tree."""

from __future__ import annotations

import math
import re

from .config import DEFAULT_PARSER_CONFIG, ParserConfig, resolve_config
from .document import Document, Section
from .lexer import Token, TokenType, YiniLexer, trim
from .logger import get_logger
from .nodes import ArrayValue, BoolValue, FloatValue, IntValue, StringValue, Value

KEY_VALUE_SEPARATOR = "="
QUOTES = ("'", '"')
ARRAY_OPEN = "["
ARRAY_CLOSE = "]"
ARRAY_SEPARATOR = ","
TRUE_WORDS = {"true", "yes", "on"}
FALSE_WORDS = {"false", "no", "off"}

INT_PATTERN = re.compile(r"[+-]?[0-9]+")
FLOAT_PATTERN = re.compile(r"[+-]?(?:[0-9]+\.[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


class ParseError(Exception):
    def __init__(self, line: int, message: str):
        super().__init__(f"Parse error at line {line}: {message}")
        self.line = line
        self.message = message


class SectionStack:
    """Names of the currently open sections, outermost first.

    A header of depth ``d`` is applied as ``truncate_to(d - 1)`` followed by
    ``push(name)``. Truncating to a size larger than the stack pads it with
    empty names, so a jump of several levels opens unnamed intermediates.
    """

    def __init__(self):
        self._names: list[str] = []

    def truncate_to(self, size: int) -> None:
        del self._names[size:]
        self._names.extend([""] * (size - len(self._names)))

    def push(self, name: str) -> None:
        self._names.append(name)

    def open(self, depth: int, name: str) -> None:
        self.truncate_to(depth - 1)
        self.push(name)

    @property
    def path(self) -> tuple[str, ...]:
        return tuple(self._names)

    def __len__(self) -> int:
        return len(self._names)


def split_top_level(text: str) -> list[str]:
    """Flat top-level split: every ``,`` separates, regardless of quotes or brackets."""
    return text.split(ARRAY_SEPARATOR)


def parse_number(text: str) -> Value | None:
    if "." in text:
        if FLOAT_PATTERN.fullmatch(text):
            result = float(text)
            if math.isinf(result):  # out of range, kept as text
                return None
            return FloatValue(result)
        return None
    if INT_PATTERN.fullmatch(text):
        try:
            return IntValue(int(text))
        except ValueError:  # exceeds the interpreter's digit limit
            return None
    return None


def parse_value(text: str) -> Value:
    trimmed = trim(text)
    if not trimmed:
        return StringValue("")

    if len(trimmed) >= 2 and trimmed[0] in QUOTES and trimmed[-1] == trimmed[0]:
        return StringValue(trimmed[1:-1])

    if trimmed[0] == ARRAY_OPEN and trimmed[-1] == ARRAY_CLOSE:
        items: list[Value] = []
        for piece in split_top_level(trimmed[1:-1]):
            piece = trim(piece)
            if piece:
                items.append(parse_value(piece))
        return ArrayValue(items)

    lowered = trimmed.lower()
    if lowered in TRUE_WORDS:
        return BoolValue(True)
    if lowered in FALSE_WORDS:
        return BoolValue(False)

    number = parse_number(trimmed)
    if number is not None:
        return number

    return StringValue(trimmed)


class YiniParser:
    def __init__(self, text: str, config: ParserConfig | None = None):
        self.text = text
        self.config = resolve_config(config or {}, DEFAULT_PARSER_CONFIG)
        self.logger = get_logger("yini.parser", self.config["enable_logger"])
        self.stack = SectionStack()

    def parse(self) -> Document:
        self.logger.info("Parser started")
        tokens = YiniLexer(self.text, config=self.config["lexer_config"]).tokenize()
        document = Document()
        self.stack = SectionStack()
        for token in tokens:
            if token.type == TokenType.EOF:
                break
            try:
                if token.type == TokenType.HEADER:
                    self._parse_header(document, token)
                else:
                    self._parse_assignment(document, token)
            except ParseError as e:
                self.logger.error(e)
                raise
        self.logger.info("Parser finished")
        return document

    def _current_section(self, document: Document) -> Section:
        return document.navigate(self.stack.path)

    def _parse_header(self, document: Document, token: Token) -> None:
        name = trim(token.value[token.depth :])
        self.stack.open(token.depth, name)
        self.logger.debug(f"Opened section {'/'.join(self.stack.path)} at line {token.line}")
        if self.config["materialize_headers"]:
            self._current_section(document)

    def _parse_assignment(self, document: Document, token: Token) -> None:
        key, separator, raw_value = token.value.partition(KEY_VALUE_SEPARATOR)
        if not separator:
            raise ParseError(token.line, f"Invalid line format: {token.value}")
        key = trim(key)
        if not key:
            raise ParseError(token.line, f"Empty key: {token.value}")
        try:
            value = parse_value(raw_value)
        except (ValueError, RecursionError) as e:
            raise ParseError(token.line, f"Invalid value for '{key}': {e}") from e
        self._current_section(document).set(key, value)
        self.logger.debug(f"Set {key} = {value!r} at line {token.line}")


def parse(text: str, config: ParserConfig | None = None) -> Document:
    return YiniParser(text, config=config).parse()


__all__ = [
    "ParseError",
    "SectionStack",
    "YiniParser",
    "parse",
    "parse_number",
    "parse_value",
    "split_top_level",
]
