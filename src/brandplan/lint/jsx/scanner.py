"""
JSX element scanner.

Finds opening JSX tags in ``.jsx``/``.tsx`` source text and reads their
attributes. The source is walked as JavaScript until an element begins, so
markup inside strings, template literals and comments is never matched,
and JSX text is never lexed as JavaScript. Attribute values in braces are parsed with the expression
parser. Anything that does not read as a well-formed opening tag
(TypeScript generics, comparisons, ...) is skipped rather than reported.
"""

from __future__ import annotations

import bisect
import logging
import re
from dataclasses import dataclass, field

from brandplan.core.ir.expressions import Expr, StringLiteral
from brandplan.core.ir.lint import ElementContext, SourceLocation

from .parser import parse_attribute_expression

logger = logging.getLogger(__name__)

_TAG_NAME_RE = re.compile(r"[A-Za-z_$][\w$.:\-]*")
_TAG_START_RE = re.compile(r"<[A-Za-z_$>]")
_ATTR_NAME_RE = re.compile(r"[A-Za-z_$][\w$:\-]*")
_WORD_RE = re.compile(r"[\w$\u0080-\uffff]+")

# A `<` or `/` after these begins an element or regex rather than an operator
_EXPRESSION_PRECEDERS = frozenset("([{,;:?=!&|^~+-*%<>")
_EXPRESSION_KEYWORDS = frozenset(
    {"return", "yield", "await", "typeof", "void", "delete", "throw"}
    | {"case", "default", "in", "of", "else", "do"}
)


@dataclass(frozen=True)
class JsxAttribute:
    """One attribute on an opening tag; ``value`` is None when valueless."""

    name: str
    value: Expr | None
    offset: int


@dataclass(frozen=True)
class JsxElement:
    """An opening (or self-closing) JSX tag."""

    tag_name: str
    offset: int
    attributes: list[JsxAttribute] = field(default_factory=list)


class LineIndex:
    """Maps string offsets to 1-indexed line/column positions."""

    def __init__(self, source: str) -> None:
        self._starts = [0] + [m.end() for m in re.finditer(r"\n", source)]

    def location(self, offset: int) -> SourceLocation:
        line = bisect.bisect_right(self._starts, offset)
        return SourceLocation(line=line, column=offset - self._starts[line - 1] + 1)


class _ScanError(Exception):
    """Raised when a candidate tag or bracket never completes."""


def _skip_whitespace(source: str, i: int) -> int:
    n = len(source)
    while i < n and source[i].isspace():
        i += 1
    return i


def _skip_comment(source: str, i: int) -> int:
    """Offset after the comment starting at ``i``, or ``i`` if there is none."""
    if source.startswith("//", i):
        end = source.find("\n", i)
        return len(source) if end == -1 else end + 1
    if source.startswith("/*", i):
        end = source.find("*/", i + 2)
        if end == -1:
            raise _ScanError("Unterminated comment")
        return end + 2
    return i


def _skip_string(source: str, i: int) -> int:
    """Offset after a quoted JS string; stops at the line end if unterminated."""
    quote = source[i]
    n = len(source)
    j = i + 1
    while j < n:
        c = source[j]
        if c == "\\":
            j += 2
            continue
        if c == quote:
            return j + 1
        if c == "\n":
            return j
        j += 1
    return n


def _skip_regex(source: str, i: int) -> int | None:
    """Offset after a regex literal at ``i``, or None if it is not one."""
    n = len(source)
    j = i + 1
    in_class = False
    while j < n:
        c = source[j]
        if c == "\\":
            j += 2
            continue
        if c == "\n":
            return None
        if c == "[":
            in_class = True
        elif c == "]":
            in_class = False
        elif c == "/" and not in_class:
            j += 1
            while j < n and source[j].isalpha():
                j += 1
            return j
        j += 1
    return None


def _expression_can_start(prev: str, prev_word: str | None) -> bool:
    if prev_word is not None:
        return prev_word in _EXPRESSION_KEYWORDS
    return prev == "" or prev in _EXPRESSION_PRECEDERS


class _Scanner:
    """Walks JavaScript source, switching to JSX rules inside elements.

    JS strings, template literals, regex literals and comments are skipped,
    so markup-looking text inside them is never read as an element. JSX
    text between tags is not lexed as JavaScript.
    """

    def __init__(self, source: str) -> None:
        self.source = source
        self.elements: list[JsxElement] = []

    def scan_js(self, i: int, closer: str | None = None) -> int:
        """Scan JavaScript from ``i``.

        With ``closer`` set, stop at the unbalanced closing bracket and
        return its offset. Otherwise scan to the end of the source.
        """
        source = self.source
        n = len(source)
        depth = 0
        prev = ""
        prev_word: str | None = None

        while i < n:
            c = source[i]

            if c.isspace():
                i += 1
                continue

            if source.startswith(("//", "/*"), i):
                i = _skip_comment(source, i)
                continue

            if c in ('"', "'"):
                i = _skip_string(source, i)
                prev, prev_word = c, None
                continue

            if c == "`":
                i = self._skip_template(i)
                prev, prev_word = c, None
                continue

            word = _WORD_RE.match(source, i)
            if word:
                prev, prev_word = "a", word.group(0)
                i = word.end()
                continue

            can_start = _expression_can_start(prev, prev_word)
            prev_word = None

            if c == "/" and can_start:
                end = _skip_regex(source, i)
                if end is not None:
                    i, prev = end, "/regex"
                    continue

            if c == "<" and can_start and _TAG_START_RE.match(source, i):
                end = self._try_element(i)
                if end is not None:
                    # Sibling elements may follow
                    i, prev = end, ">"
                    continue

            if c in "([{":
                depth += 1
            elif c in ")]}":
                if closer is not None and depth == 0 and c == closer:
                    return i
                depth = max(depth - 1, 0)

            prev = c
            i += 1

        if closer is not None:
            raise _ScanError(f"Unterminated {closer!r}")
        return n

    def _skip_template(self, i: int) -> int:
        source = self.source
        n = len(source)
        j = i + 1
        while j < n:
            c = source[j]
            if c == "\\":
                j += 2
                continue
            if c == "`":
                return j + 1
            if source.startswith("${", j):
                j = self.scan_js(j + 2, "}") + 1
                continue
            j += 1
        raise _ScanError("Unterminated template literal")

    def _try_element(self, start: int) -> int | None:
        """Read the element at ``start``; on failure drop anything it found."""
        mark = len(self.elements)
        try:
            return self.read_element(start)
        except (_ScanError, RecursionError) as e:
            logger.debug("Not an element at offset %d: %s", start, e)
            del self.elements[mark:]
            return None

    def read_element(self, start: int) -> int:
        """Read the element opened at ``start`` and return the offset after it."""
        source = self.source
        n = len(source)
        i = start + 1

        # <>...</> fragment
        if source.startswith(">", i):
            return self.scan_children(i + 1)

        name_match = _TAG_NAME_RE.match(source, i)
        if not name_match:
            raise _ScanError("Missing tag name")
        i = name_match.end()

        # Tag names must end at whitespace or the tag end
        if i < n and not (source[i].isspace() or source[i] in "/>{"):
            raise _ScanError("Malformed tag name")

        element = JsxElement(tag_name=name_match.group(0), offset=start)

        while True:
            i = _skip_whitespace(source, i)
            if i >= n:
                raise _ScanError("Unterminated tag")

            if source.startswith(("//", "/*"), i):
                i = _skip_comment(source, i)
                continue

            if source.startswith("/>", i):
                self.elements.append(element)
                return i + 2
            if source[i] == ">":
                self.elements.append(element)
                return self.scan_children(i + 1)

            if source[i] == "{":
                # {...props}
                close = self.scan_js(i + 1, "}")
                if not source[i + 1 : close].strip().startswith("..."):
                    raise _ScanError("Brace in attribute position")
                i = close + 1
                continue

            attr_match = _ATTR_NAME_RE.match(source, i)
            if not attr_match:
                raise _ScanError("Malformed attribute")
            name = attr_match.group(0)
            attr_offset = i
            i = _skip_whitespace(source, attr_match.end())

            if i >= n or source[i] != "=":
                element.attributes.append(JsxAttribute(name=name, value=None, offset=attr_offset))
                continue

            i = _skip_whitespace(source, i + 1)
            if i >= n:
                raise _ScanError("Missing attribute value")

            c = source[i]
            value: Expr
            if c in ('"', "'"):
                # JSX attribute strings have no escapes
                end = source.find(c, i + 1)
                if end == -1:
                    raise _ScanError("Unterminated attribute string")
                value = StringLiteral(value=source[i + 1 : end])
                i = end + 1
            elif c == "{":
                close = self.scan_js(i + 1, "}")
                value = parse_attribute_expression(source[i + 1 : close])
                i = close + 1
            else:
                raise _ScanError("Unquoted attribute value")

            element.attributes.append(JsxAttribute(name=name, value=value, offset=attr_offset))

    def scan_children(self, i: int) -> int:
        """Scan JSX children up to and including the closing tag."""
        source = self.source
        n = len(source)

        while i < n:
            c = source[i]
            if c == "{":
                i = self.scan_js(i + 1, "}") + 1
            elif source.startswith("</", i):
                end = source.find(">", i)
                return n if end == -1 else end + 1
            elif c == "<" and _TAG_START_RE.match(source, i):
                end = self._try_element(i)
                i = i + 1 if end is None else end
            else:
                i += 1

        return n


def scan_elements(source: str) -> list[JsxElement]:
    """Find every opening JSX tag in ``source``, in source order."""
    scanner = _Scanner(source)
    try:
        scanner.scan_js(0)
    except _ScanError as e:
        logger.debug("Stopped scanning: %s", e)
    return sorted(scanner.elements, key=lambda element: element.offset)


def class_name_contexts(
    element: JsxElement,
    index: LineIndex,
    attribute: str = "className",
) -> list[ElementContext]:
    """Build the element contexts for an element's ``className`` attributes."""
    return [
        ElementContext(
            tag_name=element.tag_name,
            attribute=attr.name,
            location=index.location(attr.offset),
            value=attr.value,
        )
        for attr in element.attributes
        if attr.name == attribute
    ]


__all__ = [
    "JsxAttribute",
    "JsxElement",
    "LineIndex",
    "class_name_contexts",
    "scan_elements",
]
