"""Tokenization for the stack language: one character in, at most one token out."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .values import Number


class Primitive(str, Enum):
    ADD = "+"
    SUB = "-"
    FLIP = ":"
    DUPLICATE = "."
    DROP = ";"
    LESS_THAN = "<"
    GREATER_THAN = ">"
    SELECT = "⊏"

    @property
    def glyph(self) -> str:
        return self.value


class TokenKind(str, Enum):
    PRIMITIVE = "primitive"
    LITERAL = "literal"
    LBRACKET = "lbracket"
    RBRACKET = "rbracket"


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    text: str
    pos: int
    end: int
    value: Primitive | Number | None = None

    @classmethod
    def primitive(cls, op: Primitive, pos: int = 0) -> "Token":
        return cls(TokenKind.PRIMITIVE, op.glyph, pos, pos + 1, op)

    @classmethod
    def literal(cls, lit: Number, pos: int = 0, text: str | None = None) -> "Token":
        if text is None:
            text = str(int(lit.value)) if lit.value.is_integer() else repr(lit.value)
        return cls(TokenKind.LITERAL, text, pos, pos + 1, lit)

    @classmethod
    def lbracket(cls, pos: int = 0) -> "Token":
        return cls(TokenKind.LBRACKET, "[", pos, pos + 1)

    @classmethod
    def rbracket(cls, pos: int = 0) -> "Token":
        return cls(TokenKind.RBRACKET, "]", pos, pos + 1)

    def same_as(self, other: "Token") -> bool:
        """Compare by kind and payload, ignoring source spans."""
        return self.kind == other.kind and self.value == other.value

    def __repr__(self) -> str:
        if self.kind is TokenKind.PRIMITIVE:
            return f"Pri({self.value.name})"
        if self.kind is TokenKind.LITERAL:
            return f"Lit({self.value!r})"
        return "LBracket" if self.kind is TokenKind.LBRACKET else "RBracket"


_PRIMITIVES = {op.glyph: op for op in Primitive}
_DIGITS = "0123456789"


class Lexer:
    """Left-to-right scanner over ``source``.

    Digits are lexed one at a time, so ``12`` is the two literals ``1`` and
    ``2``; multi-digit numbers are not part of the language. Characters that
    map to no token, whitespace included, are skipped without error.
    """

    def __init__(self, source: str) -> None:
        self.source = source
        self.pos = 0
        self.tokens: list[Token] = []

    def peek_char(self) -> str | None:
        if self.pos < len(self.source):
            return self.source[self.pos]
        return None

    def next_char(self) -> str | None:
        ch = self.peek_char()
        if ch is not None:
            self.pos += 1
        return ch

    def add_token(self, tok: Token) -> None:
        self.tokens.append(tok)

    def run(self) -> list[Token]:
        while (ch := self.next_char()) is not None:
            start = self.pos - 1
            if ch in _PRIMITIVES:
                self.add_token(Token.primitive(_PRIMITIVES[ch], start))
            elif ch == "[":
                self.add_token(Token.lbracket(start))
            elif ch == "]":
                self.add_token(Token.rbracket(start))
            elif ch in _DIGITS:
                self.add_token(Token.literal(Number(float(_DIGITS.index(ch))), start, ch))
        return self.tokens


def tokenize(source: str) -> list[Token]:
    return Lexer(source).run()
