"""
Recursive descent parser for JavaScript expressions in JSX attributes.

Grammar (precedence low to high), a subset of ECMAScript:
    expr        → arrow | conditional
    arrow       → (IDENT | "(" params ")") "=>" (expr | block)
    conditional → logical ("?" expr ":" expr)?
    logical     → and_expr (("||" | "??") and_expr)*
    and_expr    → binary ("&&" binary)*
    binary      → unary (binop unary)*
    unary       → ("!" | "-" | "+" | "~" | "typeof" | "void" | "await") unary | postfix
    postfix     → primary ("." IDENT | "?." IDENT | "[" expr "]" | call_args | "!")*
    primary     → STRING | TEMPLATE | NUMBER | IDENT | "(" expr ("," expr)* ")"
                | "[" elements "]" | "{" ... "}"

Shapes that can carry class names become dedicated nodes; everything else
becomes ``OtherExpr``.
"""

from __future__ import annotations

import logging

from brandplan.core.ir.expressions import (
    ArrayLiteral,
    CallExpr,
    ConditionalExpr,
    Expr,
    LogicalExpr,
    LogicalOp,
    OtherExpr,
    StringLiteral,
    TemplateLiteral,
)

from .tokenizer import JsTokenError, Token, TokenKind, tokenize

logger = logging.getLogger(__name__)

_BINARY_OPS = frozenset(
    {
        "===",
        "!==",
        "==",
        "!=",
        "<",
        ">",
        "<=",
        ">=",
        "+",
        "-",
        "*",
        "/",
        "%",
        "**",
        "&",
        "|",
        "^",
        "<<",
        ">>",
        ">>>",
    }
)
_BINARY_KEYWORDS = frozenset({"instanceof", "in"})
_UNARY_OPS = frozenset({"!", "-", "+", "~"})
_UNARY_KEYWORDS = frozenset({"typeof", "void", "await", "delete", "new"})
_LITERAL_KEYWORDS = frozenset({"true", "false", "null", "undefined", "this"})


class JsParseError(Exception):
    """Error during expression parsing."""

    def __init__(self, message: str, pos: int = 0) -> None:
        super().__init__(message)
        self.pos = pos


class _Parser:
    """Recursive descent parser for expressions."""

    def __init__(self, source: str, tokens: list[Token]) -> None:
        self.source = source
        self.tokens = tokens
        self.pos = 0

    @property
    def current(self) -> Token:
        return self.tokens[self.pos]

    def peek(self, offset: int = 0) -> Token:
        idx = self.pos + offset
        if idx < len(self.tokens):
            return self.tokens[idx]
        return self.tokens[-1]  # EOF

    def advance(self) -> Token:
        tok = self.tokens[self.pos]
        if self.pos < len(self.tokens) - 1:
            self.pos += 1
        return tok

    def expect(self, value: str) -> Token:
        tok = self.current
        if not tok.is_punct(value):
            raise JsParseError(f"Expected {value!r}, got {tok.value!r}", tok.pos)
        return self.advance()

    def match(self, *values: str) -> Token | None:
        if self.current.is_punct(*values):
            return self.advance()
        return None

    def text(self, start: int, end: int) -> str:
        return self.source[start:end].strip()

    # -- Grammar rules --

    def parse_expr(self) -> Expr:
        """Arrow function or conditional."""
        if self._at_arrow():
            return self.parse_arrow()
        return self.parse_conditional()

    def _at_arrow(self) -> bool:
        tok = self.current
        if tok.kind == TokenKind.IDENT and self.peek(1).is_punct("=>"):
            return True
        if tok.kind == TokenKind.IDENT and tok.value == "async":
            return self.peek(1).kind == TokenKind.IDENT or self.peek(1).is_punct("(")
        if tok.is_punct("("):
            depth = 0
            for idx in range(self.pos, len(self.tokens)):
                t = self.tokens[idx]
                if t.is_punct("(", "[", "{"):
                    depth += 1
                elif t.is_punct(")", "]", "}"):
                    depth -= 1
                    if depth == 0:
                        nxt = self.tokens[idx + 1] if idx + 1 < len(self.tokens) else None
                        return nxt is not None and nxt.is_punct("=>")
                elif t.kind == TokenKind.EOF:
                    return False
        return False

    def parse_arrow(self) -> Expr:
        """Skip an arrow function; its body is not analyzed."""
        start = self.current.pos
        if self.current.kind == TokenKind.IDENT and self.current.value == "async":
            self.advance()
        if self.match("("):
            depth = 1
            while depth:
                tok = self.advance()
                if tok.kind == TokenKind.EOF:
                    raise JsParseError("Unterminated arrow parameters", start)
                if tok.is_punct("(", "[", "{"):
                    depth += 1
                elif tok.is_punct(")", "]", "}"):
                    depth -= 1
        else:
            self.advance()
        self.expect("=>")
        if self.current.is_punct("{"):
            self._skip_braces()
        else:
            self.parse_expr()
        return OtherExpr(kind="arrow", source=self.text(start, self.current.pos))

    def parse_conditional(self) -> Expr:
        """logical ('?' expr ':' expr)?"""
        test = self.parse_logical()
        if self.match("?"):
            consequent = self.parse_expr()
            self.expect(":")
            alternate = self.parse_expr()
            return ConditionalExpr(test=test, consequent=consequent, alternate=alternate)
        return test

    def parse_logical(self) -> Expr:
        """and_expr (('||' | '??') and_expr)*"""
        left = self.parse_and()
        while self.current.is_punct("||", "??"):
            op = LogicalOp.OR if self.advance().value == "||" else LogicalOp.NULLISH
            right = self.parse_and()
            left = LogicalExpr(op=op, left=left, right=right)
        return left

    def parse_and(self) -> Expr:
        """binary ('&&' binary)*"""
        left = self.parse_binary()
        while self.match("&&"):
            right = self.parse_binary()
            left = LogicalExpr(op=LogicalOp.AND, left=left, right=right)
        return left

    def parse_binary(self) -> Expr:
        """unary (binop unary)*; any operator collapses to OtherExpr."""
        start = self.current.pos
        left = self.parse_unary()
        is_binary = False
        while (self.current.kind == TokenKind.PUNCT and self.current.value in _BINARY_OPS) or (
            self.current.kind == TokenKind.IDENT and self.current.value in _BINARY_KEYWORDS
        ):
            self.advance()
            self.parse_unary()
            is_binary = True
        if is_binary:
            return OtherExpr(kind="binary", source=self.text(start, self.current.pos))
        return left

    def parse_unary(self) -> Expr:
        tok = self.current
        if (tok.kind == TokenKind.PUNCT and tok.value in _UNARY_OPS) or (
            tok.kind == TokenKind.IDENT and tok.value in _UNARY_KEYWORDS
        ):
            self.advance()
            self.parse_unary()
            return OtherExpr(kind="unary", source=self.text(tok.pos, self.current.pos))
        return self.parse_postfix()

    def parse_postfix(self) -> Expr:
        """Member access, calls and TypeScript non-null assertions."""
        start = self.current.pos
        expr = self.parse_primary()
        callee_is_name = isinstance(expr, OtherExpr) and expr.kind == "identifier"

        while True:
            if self.current.is_punct(".", "?."):
                self.advance()
                if self.current.is_punct("("):
                    # optional call: fn?.(...)
                    continue
                if self.current.is_punct("["):
                    continue
                if self.current.kind != TokenKind.IDENT:
                    raise JsParseError("Expected property name", self.current.pos)
                self.advance()
                expr = OtherExpr(kind="member", source=self.text(start, self.current.pos))
            elif self.current.is_punct("["):
                self.advance()
                self.parse_expr()
                self.expect("]")
                expr = OtherExpr(kind="member", source=self.text(start, self.current.pos))
                callee_is_name = False
            elif self.current.is_punct("("):
                callee = self.text(start, self.current.pos) if callee_is_name or (
                    isinstance(expr, OtherExpr) and expr.kind == "member"
                ) else "<expression>"
                args = self._parse_arguments()
                expr = CallExpr(callee=callee, args=args)
                callee_is_name = False
            elif self.current.is_punct("!") and not self.peek(1).is_punct("="):
                self.advance()
            elif self.current.kind == TokenKind.TEMPLATE and callee_is_name:
                # tagged template: tw`...`
                self.advance()
                expr = OtherExpr(kind="tagged_template", source=self.text(start, self.current.pos))
                callee_is_name = False
            else:
                return expr

    def _parse_arguments(self) -> list[Expr]:
        """'(' (arg (',' arg)*)? ','? ')'"""
        self.expect("(")
        args: list[Expr] = []
        while not self.current.is_punct(")"):
            args.append(self._parse_spreadable())
            if not self.match(","):
                break
        self.expect(")")
        return args

    def _parse_spreadable(self) -> Expr:
        if self.current.is_punct("..."):
            start = self.advance().pos
            self.parse_expr()
            return OtherExpr(kind="spread", source=self.text(start, self.current.pos))
        return self.parse_expr()

    def parse_primary(self) -> Expr:
        tok = self.current

        if tok.kind == TokenKind.STRING:
            self.advance()
            return StringLiteral(value=tok.value)

        if tok.kind == TokenKind.TEMPLATE:
            self.advance()
            return TemplateLiteral(
                quasis=list(tok.quasis),
                expressions=[parse_attribute_expression(src) for src in tok.interpolations],
            )

        if tok.kind == TokenKind.NUMBER:
            self.advance()
            return OtherExpr(kind="number", source=tok.value)

        if tok.kind == TokenKind.IDENT:
            self.advance()
            kind = "literal" if tok.value in _LITERAL_KEYWORDS else "identifier"
            return OtherExpr(kind=kind, source=tok.value)

        if tok.is_punct("("):
            self.advance()
            expr = self.parse_expr()
            if self.current.is_punct(","):
                while self.match(","):
                    self.parse_expr()
                self.expect(")")
                return OtherExpr(kind="sequence", source=self.text(tok.pos, self.current.pos))
            self.expect(")")
            return expr

        if tok.is_punct("["):
            return self._parse_array()

        if tok.is_punct("{"):
            self._skip_braces()
            return OtherExpr(kind="object", source=self.text(tok.pos, self.current.pos))

        raise JsParseError(f"Unexpected token: {tok.value!r}", tok.pos)

    def _parse_array(self) -> ArrayLiteral:
        """'[' elements ']' with holes"""
        self.expect("[")
        elements: list[Expr | None] = []
        while not self.current.is_punct("]"):
            if self.current.is_punct(","):
                self.advance()
                elements.append(None)
                continue
            elements.append(self._parse_spreadable())
            if not self.match(","):
                break
        self.expect("]")
        return ArrayLiteral(elements=elements)

    def _skip_braces(self) -> None:
        self.expect("{")
        depth = 1
        while depth:
            tok = self.advance()
            if tok.kind == TokenKind.EOF:
                raise JsParseError("Unterminated block", tok.pos)
            if tok.is_punct("{"):
                depth += 1
            elif tok.is_punct("}"):
                depth -= 1


def parse_expr(source: str) -> Expr:
    """Parse a JavaScript expression into an AST.

    Args:
        source: Expression text, e.g. ``cn("flex", active && "p-brand-4")``

    Returns:
        Parsed expression.

    Raises:
        JsParseError: If the expression is outside the supported subset.
    """
    try:
        tokens = tokenize(source)
    except JsTokenError as e:
        raise JsParseError(str(e), e.pos) from e

    parser = _Parser(source, tokens)
    if parser.current.kind == TokenKind.EOF:
        return OtherExpr(kind="empty")

    expr = parser.parse_expr()

    # Ensure all tokens consumed
    if parser.current.kind != TokenKind.EOF:
        # TypeScript `as` / `satisfies` casts
        if parser.current.kind == TokenKind.IDENT and parser.current.value in ("as", "satisfies"):
            return expr
        raise JsParseError(
            f"Unexpected token after expression: {parser.current.value!r}",
            parser.current.pos,
        )

    return expr


def parse_attribute_expression(source: str) -> Expr:
    """Parse an attribute expression, degrading to ``OtherExpr`` on failure."""
    try:
        return parse_expr(source)
    except (JsParseError, RecursionError) as e:
        logger.debug("Unparsed attribute expression %r: %s", source, e)
        return OtherExpr(kind="unparsed", source=source.strip())


__all__ = ["JsParseError", "parse_attribute_expression", "parse_expr"]
