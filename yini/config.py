import logging
from typing import Mapping, NotRequired, TypedDict, TypeVar


class LoggerConfig(TypedDict):
    name: NotRequired[str]
    is_enabled: NotRequired[bool]
    level: NotRequired[int]
    format: NotRequired[str]


class LoggerConfigRequired(TypedDict):
    name: str
    is_enabled: bool
    level: int
    format: str


class LexerConfig(TypedDict):
    enable_logger: NotRequired[bool]


class LexerConfigRequired(TypedDict):
    enable_logger: bool


class ParserConfig(TypedDict):
    enable_logger: NotRequired[bool]
    materialize_headers: NotRequired[bool]
    lexer_config: NotRequired[LexerConfig]


class ParserConfigRequired(TypedDict):
    enable_logger: bool
    materialize_headers: bool
    lexer_config: LexerConfig


class FormatterConfig(TypedDict):
    enable_logger: NotRequired[bool]
    indent_width: NotRequired[int]


class FormatterConfigRequired(TypedDict):
    enable_logger: bool
    indent_width: int


DEFAULT_LOGGER_CONFIG: LoggerConfigRequired = {
    "name": "yini",
    "is_enabled": True,
    "level": logging.DEBUG,
    "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
}

DEFAULT_LEXER_CONFIG: LexerConfigRequired = {"enable_logger": False}

DEFAULT_PARSER_CONFIG: ParserConfigRequired = {
    "enable_logger": False,
    "materialize_headers": True,
    "lexer_config": {},
}

DEFAULT_FORMATTER_CONFIG: FormatterConfigRequired = {"enable_logger": False, "indent_width": 4}


T = TypeVar("T", bound=Mapping)


def resolve_config(config: Mapping | None, default_config: T) -> T:
    """Overlay the known keys of a partial ``config`` onto a copy of ``default_config``.

    Keys the defaults do not declare are ignored.
    """
    _config = dict(default_config)
    if config:
        for key in _config:
            if key in config:
                _config[key] = config[key]
    return _config  # type: ignore[return-value]
