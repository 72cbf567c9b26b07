"""Comment stripping and line classification for YINI text."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

from .config import DEFAULT_LEXER_CONFIG, LexerConfig, resolve_config
from .logger import get_logger

LINE_COMMENT = "//"
BLOCK_COMMENT_OPEN = "/*"
BLOCK_COMMENT_CLOSE = "*/"
DEPTH_MARKER = "^"
WHITESPACE = " \t\r\n"


class TokenType(Enum):
    HEADER = auto()
    ASSIGNMENT = auto()
    EOF = auto()


@dataclass(slots=True)
class Token:
    type: TokenType
    value: str
    depth: int
    line: int


def trim(text: str) -> str:
    return text.strip(WHITESPACE)


def count_depth_markers(line: str) -> int:
    count = 0
    for char in line:
        if char != DEPTH_MARKER:
            break
        count += 1
    return count


def strip_line_comment(line: str) -> str:
    position = line.find(LINE_COMMENT)
    return line if position == -1 else line[:position]


def strip_block_comments(text: str) -> tuple[str, list[int]]:
    """Remove ``/* ... */`` spans and map each resulting line to its original line.

    Spans are matched literally: the first ``*/`` after an opener closes it.
    An unterminated opener drops the rest of the text. Returns the cleaned
    text together with the 1-based original line number on which every line
    of the cleaned text starts.
    """
    kept: list[tuple[int, int]] = []
    cursor = 0
    while True:
        start = text.find(BLOCK_COMMENT_OPEN, cursor)
        if start == -1:
            kept.append((cursor, len(text)))
            break
        kept.append((cursor, start))
        end = text.find(BLOCK_COMMENT_CLOSE, start + len(BLOCK_COMMENT_OPEN))
        if end == -1:
            break
        cursor = end + len(BLOCK_COMMENT_CLOSE)

    pieces: list[str] = []
    origins = [1]
    scanned = 0
    line = 1
    for begin, stop in kept:
        index = text.find("\n", begin, stop)
        while index != -1:
            line += text.count("\n", scanned, index)
            scanned = index
            origins.append(line + 1)
            index = text.find("\n", index + 1, stop)
        pieces.append(text[begin:stop])
    return "".join(pieces), origins


class YiniLexer:
    def __init__(self, text: str, config: LexerConfig | None = None):
        self.text = text
        self.config = resolve_config(config or {}, DEFAULT_LEXER_CONFIG)
        self.logger = get_logger("yini.lexer", self.config["enable_logger"])
        self.tokens: list[Token] = []

    def tokenize(self) -> list[Token]:
        self.logger.info("Starting tokenization")
        self.tokens = []
        cleaned, origins = strip_block_comments(self.text)
        for index, raw_line in enumerate(cleaned.split("\n")):
            line_number = origins[index]
            line = trim(strip_line_comment(raw_line))
            if not line:
                continue
            depth = count_depth_markers(line)
            token_type = TokenType.HEADER if depth else TokenType.ASSIGNMENT
            self._add_token(token_type, line, depth, line_number)
        self._add_token(TokenType.EOF, "", 0, origins[-1])
        self.logger.info("Tokenization complete")
        return self.tokens

    def _add_token(self, token_type: TokenType, value: str, depth: int, line: int) -> None:
        self.logger.debug(f"Adding token {token_type} with value '{value}' at line {line}")
        self.tokens.append(Token(token_type, value, depth, line))


__all__ = [
    "BLOCK_COMMENT_CLOSE",
    "BLOCK_COMMENT_OPEN",
    "DEPTH_MARKER",
    "LINE_COMMENT",
    "Token",
    "TokenType",
    "YiniLexer",
    "count_depth_markers",
    "strip_block_comments",
    "strip_line_comment",
    "trim",
]
