"""
  Lispy Lexer and Parser

Turns source text into a concrete syntax tree of AstNode objects. Every node
carries a tag string, its textual contents and ordered children:

    - root              -> tag ">" with "regex" start/end markers
    - numbers           -> "expr|number|regex"
    - symbols           -> "expr|symbol|regex"
    - strings           -> "expr|string|regex" (contents keep their quotes)
    - comments          -> "expr|comment|regex"
    - ( ... )           -> "expr|sexpr", brackets as "char" children
    - { ... }           -> "expr|qexpr", brackets as "char" children

The tree is raw syntax only; lispy.reader.reader turns it into values.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Iterator, Optional

from lispy.types.errors import LispySyntaxError


TOKEN_RE = re.compile(
    r"(?P<comment>;[^\r\n]*)"  # single-line comment
    r"|(?P<lparen>\()"  # (
    r"|(?P<rparen>\))"  # )
    r"|(?P<lbrace>\{)"  # {
    r"|(?P<rbrace>\})"  # }
    r'|(?P<string>"(?:\\.|[^"\\])*")'  # double-quoted strings
    r"|(?P<number>-?[0-9]+)"  # base-10 integers
    r"|(?P<symbol>[a-zA-Z0-9_+\-*/\\=<>!&]+)",  # everything else
    re.DOTALL,
)

WHITESPACE_RE = re.compile(r"\s+")

CLOSERS = {"lparen": ("rparen", ")"), "lbrace": ("rbrace", "}")}
COMPOUND_TAGS = {"lparen": "expr|sexpr", "lbrace": "expr|qexpr"}

Token = tuple[str, str, int, int]


class AstNode:
    """One node of the concrete syntax tree."""

    __slots__ = ("tag", "contents", "children", "line", "col")

    def __init__(
        self,
        tag: str,
        contents: str = "",
        children: list[AstNode] | None = None,
        line: int = 0,
        col: int = 0,
    ):
        self.tag = tag
        self.contents = contents
        self.children: list[AstNode] = children if children is not None else []
        self.line = line
        self.col = col

    def __repr__(self) -> str:
        if self.children:
            return f"AstNode({self.tag!r}, children={self.children!r})"
        return f"AstNode({self.tag!r}, {self.contents!r})"


def lex(source: str, filename: str = "<stdin>") -> Iterator[Token]:
    """Token generator: yields (token_type, text, line, col) tuples."""
    pos = 0
    n = len(source)
    line, line_start = 1, 0

    while pos < n:
        ws = WHITESPACE_RE.match(source, pos)
        if ws:
            chunk = ws.group()
            newlines = chunk.count("\n")
            if newlines:
                line += newlines
                line_start = pos + chunk.rfind("\n") + 1
            pos = ws.end()
            continue

        m = TOKEN_RE.match(source, pos)
        col = pos - line_start + 1
        if not m:
            if source[pos] == '"':
                raise LispySyntaxError("Unterminated string", filename, line, col)
            raise LispySyntaxError(f"Unexpected character {source[pos]!r}", filename, line, col)
        text = m.group()
        yield m.lastgroup, text, line, col
        newlines = text.count("\n")
        if newlines:
            line += newlines
            line_start = pos + text.rfind("\n") + 1
        pos = m.end()


class TokenStream:
    def __init__(self, token_iter: Iterator[Token], filename: str = "<stdin>"):
        self.tokens = iter(token_iter)
        self.buffer: list[Token] = []
        self.filename = filename

    def peek(self) -> Optional[Token]:
        if not self.buffer:
            try:
                self.buffer.append(next(self.tokens))
            except StopIteration:
                return None
        return self.buffer[0]

    def advance(self) -> Optional[Token]:
        if self.buffer:
            return self.buffer.pop(0)
        return next(self.tokens, None)

    def parse_expr(self) -> Optional[AstNode]:
        tok = self.advance()
        if tok is None:
            return None
        tok_type, text, line, col = tok

        if tok_type in ("number", "symbol", "string", "comment"):
            return AstNode(f"expr|{tok_type}|regex", text, line=line, col=col)

        if tok_type in COMPOUND_TAGS:
            close_type, close_text = CLOSERS[tok_type]
            node = AstNode(COMPOUND_TAGS[tok_type], line=line, col=col)
            node.children.append(AstNode("char", text, line=line, col=col))
            while True:
                nxt = self.peek()
                if nxt is None:
                    raise LispySyntaxError(f"Unmatched '{text}'", self.filename, line, col)
                if nxt[0] == close_type:
                    self.advance()
                    node.children.append(AstNode("char", close_text, line=nxt[2], col=nxt[3]))
                    return node
                if nxt[0] in ("rparen", "rbrace"):
                    raise LispySyntaxError(
                        f"Expected '{close_text}' but found '{nxt[1]}'", self.filename, nxt[2], nxt[3]
                    )
                node.children.append(self.parse_expr())

        raise LispySyntaxError(f"Unexpected '{text}'", self.filename, line, col)

    def parse_all(self) -> Iterator[AstNode]:
        while self.peek() is not None:
            yield self.parse_expr()


def parse(source: str, filename: str = "<stdin>") -> AstNode:
    """Parse a whole unit of source text into a root node tagged ">"."""
    stream = TokenStream(lex(source, filename), filename)
    children = [AstNode("regex")]
    try:
        children.extend(stream.parse_all())
    except RecursionError:
        raise LispySyntaxError("Expression nested too deeply", filename) from None
    children.append(AstNode("regex"))
    return AstNode(">", children=children, line=1, col=1)


def parse_file(path: str | Path) -> AstNode:
    """Read and parse a source file; I/O failures are reported as syntax errors."""
    filename = str(path)
    try:
        source = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise LispySyntaxError(f"Could not open file: {e}", filename) from e
    return parse(source, filename)
