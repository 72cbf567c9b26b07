"""YINI configuration format: parsing and serialization utilities."""

from .config import FormatterConfig, LexerConfig, LoggerConfig, ParserConfig
from .nodes import (
    ArrayValue,
    BoolValue,
    ConversionError,
    FloatValue,
    IntValue,
    StringValue,
    Value,
    YiniValue,
    to_value,
)
from .document import Document, Section, SectionNotFoundError
from .lexer import Token, TokenType, YiniLexer
from .parser import ParseError, SectionStack, YiniParser, parse, parse_value, split_top_level
from .formatter import YiniFormatter, format_value, serialize
from .files import FileError, dump, load

__all__ = [
    "FormatterConfig",
    "LexerConfig",
    "LoggerConfig",
    "ParserConfig",
    "ArrayValue",
    "BoolValue",
    "ConversionError",
    "FloatValue",
    "IntValue",
    "StringValue",
    "Value",
    "YiniValue",
    "to_value",
    "Document",
    "Section",
    "SectionNotFoundError",
    "Token",
    "TokenType",
    "YiniLexer",
    "ParseError",
    "SectionStack",
    "YiniParser",
    "parse",
    "parse_value",
    "split_top_level",
    "YiniFormatter",
    "format_value",
    "serialize",
    "FileError",
    "dump",
    "load",
]
