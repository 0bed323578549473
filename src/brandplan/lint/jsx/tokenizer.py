"""
Tokenizer for JavaScript expressions found inside JSX attribute braces.

Covers the lexical subset needed to recognize class-name bearing shapes:
strings, template literals (with nested interpolations), numbers,
identifiers and punctuators. Comments are skipped. Regular expression
literals are not recognized.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import StrEnum, auto


class TokenKind(StrEnum):
    """Token types for JavaScript expressions."""

    STRING = auto()
    TEMPLATE = auto()
    NUMBER = auto()
    IDENT = auto()
    PUNCT = auto()
    EOF = auto()


@dataclass(frozen=True)
class Token:
    """A single token; ``pos`` is the offset into the tokenized source."""

    kind: TokenKind
    value: str
    pos: int
    # TEMPLATE only: raw static segments and interpolation sources
    quasis: tuple[str, ...] = field(default=())
    interpolations: tuple[str, ...] = field(default=())

    def is_punct(self, *values: str) -> bool:
        return self.kind == TokenKind.PUNCT and self.value in values


class JsTokenError(Exception):
    """Error during expression tokenization."""

    def __init__(self, message: str, pos: int) -> None:
        super().__init__(message)
        self.pos = pos


# Longest first
_PUNCTUATORS: tuple[str, ...] = (
    ">>>=",
    "...",
    "===",
    "!==",
    "**=",
    "<<=",
    ">>=",
    ">>>",
    "&&=",
    "||=",
    "??=",
    "=>",
    "==",
    "!=",
    "<=",
    ">=",
    "&&",
    "||",
    "??",
    "?.",
    "++",
    "--",
    "+=",
    "-=",
    "*=",
    "/=",
    "%=",
    "&=",
    "|=",
    "^=",
    "**",
    "<<",
    ">>",
    "{",
    "}",
    "(",
    ")",
    "[",
    "]",
    ";",
    ",",
    "<",
    ">",
    "+",
    "-",
    "*",
    "/",
    "%",
    "&",
    "|",
    "^",
    "!",
    "~",
    "?",
    ":",
    "=",
    ".",
    "@",
    "#",
)

_NUMBER_RE = re.compile(
    r"0[xX][0-9a-fA-F_]+n?|0[bB][01_]+n?|0[oO][0-7_]+n?|(\d[\d_]*\.?[\d_]*|\.\d[\d_]*)([eE][+-]?\d+)?n?"
)
_IDENT_RE = re.compile(r"[A-Za-z_$\u0080-\uffff][\w$\u0080-\uffff]*")

_ESCAPES: dict[str, str] = {
    "n": "\n",
    "t": "\t",
    "r": "\r",
    "b": "\b",
    "f": "\f",
    "v": "\v",
    "0": "\0",
}


def tokenize(source: str) -> list[Token]:
    """Tokenize a JavaScript expression into a list of tokens."""
    tokens: list[Token] = []
    i = 0
    n = len(source)

    while i < n:
        c = source[i]

        if c.isspace():
            i += 1
            continue

        # Comments
        if source.startswith("//", i):
            end = source.find("\n", i)
            i = n if end == -1 else end + 1
            continue
        if source.startswith("/*", i):
            end = source.find("*/", i + 2)
            if end == -1:
                raise JsTokenError("Unterminated comment", i)
            i = end + 2
            continue

        if c in ('"', "'"):
            end, value = read_string(source, i)
            tokens.append(Token(TokenKind.STRING, value, i))
            i = end
            continue

        if c == "`":
            end, quasis, interpolations = read_template(source, i)
            tokens.append(
                Token(
                    TokenKind.TEMPLATE,
                    source[i:end],
                    i,
                    quasis=tuple(quasis),
                    interpolations=tuple(interpolations),
                )
            )
            i = end
            continue

        if c.isdigit() or (c == "." and i + 1 < n and source[i + 1].isdigit()):
            m = _NUMBER_RE.match(source, i)
            assert m is not None
            tokens.append(Token(TokenKind.NUMBER, m.group(0), i))
            i = m.end()
            continue

        m = _IDENT_RE.match(source, i)
        if m:
            tokens.append(Token(TokenKind.IDENT, m.group(0), i))
            i = m.end()
            continue

        for punct in _PUNCTUATORS:
            if source.startswith(punct, i):
                # `?.5` is a conditional followed by a number
                if punct == "?." and i + 2 < n and source[i + 2].isdigit():
                    continue
                tokens.append(Token(TokenKind.PUNCT, punct, i))
                i += len(punct)
                break
        else:
            raise JsTokenError(f"Unexpected character: {c!r}", i)

    tokens.append(Token(TokenKind.EOF, "", n))
    return tokens


def read_string(source: str, start: int) -> tuple[int, str]:
    """Read a quoted string literal; returns (end offset, unescaped value)."""
    quote = source[start]
    i = start + 1
    n = len(source)
    chars: list[str] = []

    while i < n:
        c = source[i]
        if c == "\\":
            if i + 1 >= n:
                raise JsTokenError("Unterminated escape sequence", i)
            nxt = source[i + 1]
            if nxt == "\n":
                i += 2
                continue
            chars.append(_ESCAPES.get(nxt, nxt))
            i += 2
            continue
        if c == quote:
            return i + 1, "".join(chars)
        if c == "\n":
            raise JsTokenError("Unterminated string literal", start)
        chars.append(c)
        i += 1

    raise JsTokenError("Unterminated string literal", start)


def read_template(source: str, start: int) -> tuple[int, list[str], list[str]]:
    """Read a template literal.

    Returns:
        (end offset, raw static segments, interpolation sources)
    """
    i = start + 1
    n = len(source)
    quasis: list[str] = []
    interpolations: list[str] = []
    segment_start = i

    while i < n:
        c = source[i]
        if c == "\\":
            i += 2
            continue
        if c == "`":
            quasis.append(source[segment_start:i])
            return i + 1, quasis, interpolations
        if c == "$" and source.startswith("${", i):
            quasis.append(source[segment_start:i])
            close = find_closing(source, i + 1)
            interpolations.append(source[i + 2 : close])
            i = close + 1
            segment_start = i
            continue
        i += 1

    raise JsTokenError("Unterminated template literal", start)


_CLOSERS = {"{": "}", "(": ")", "[": "]"}


def find_closing(source: str, start: int) -> int:
    """Offset of the bracket closing the one at ``start``.

    Strings, template literals and comments are skipped.

    Raises:
        JsTokenError: If the bracket is never closed.
    """
    stack = [_CLOSERS[source[start]]]
    i = start + 1
    n = len(source)

    while i < n:
        c = source[i]
        if c in ('"', "'"):
            i, _ = read_string(source, i)
            continue
        if c == "`":
            i, _, _ = read_template(source, i)
            continue
        if source.startswith("//", i):
            end = source.find("\n", i)
            i = n if end == -1 else end + 1
            continue
        if source.startswith("/*", i):
            end = source.find("*/", i + 2)
            if end == -1:
                break
            i = end + 2
            continue
        if c in _CLOSERS:
            stack.append(_CLOSERS[c])
        elif c in ")]}":
            if c != stack[-1]:
                raise JsTokenError(f"Mismatched {c!r}", i)
            stack.pop()
            if not stack:
                return i
        i += 1

    raise JsTokenError("Unterminated bracket", start)
