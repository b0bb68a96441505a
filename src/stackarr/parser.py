"""Parser: splits a token stream into the value stack and the function stack."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from enum import Enum

from .errors import StackArrError
from .evaluator import Stack
from .lexer import Token, TokenKind, tokenize
from .values import Array, Atom, Value

logger = logging.getLogger(__name__)


class ParseErrorKind(str, Enum):
    UNIT = "Unit"


class ParseError(StackArrError):
    """A malformed bracket or a primitive inside an array literal.

    Parse errors are collected, not raised: the parser skips the offending
    token and keeps going so the rest of the program can still run.
    """

    def __init__(self, message: str, start: int, end: int, found: str | None = None) -> None:
        super().__init__(message)
        self.kind = ParseErrorKind.UNIT
        self.message = message
        self.start = start
        self.end = end
        self.found = found

    def _debug_body(self) -> str:
        return self.kind.value

    def __str__(self) -> str:
        found_text = ""
        if self.found is not None:
            found_text = f"; found {self.found}"
        return f"{self.message} at span [{self.start}, {self.end}){found_text}"


class Parser:
    def __init__(self, tokens: Iterable[Token]) -> None:
        self.tokens = list(tokens)
        self.index = 0
        self.stack = Stack()
        self.errors: list[ParseError] = []

    def _advance(self) -> Token | None:
        if self.index >= len(self.tokens):
            return None
        tok = self.tokens[self.index]
        self.index += 1
        return tok

    def _error(self, tok: Token, message: str) -> None:
        err = ParseError(message, tok.pos, tok.end, found=tok.text)
        logger.debug("parse error: %s", err)
        self.errors.append(err)

    def _push_value(self, value: Value) -> None:
        # Values go in at the front: the last literal in the source ends up
        # at the bottom of the stack.
        self.stack.val_stack.insert(0, value)

    def parse(self) -> tuple[Stack, list[ParseError]]:
        while (tok := self._advance()) is not None:
            if tok.kind is TokenKind.LBRACKET:
                self._push_value(self.parse_array())
            elif tok.kind is TokenKind.RBRACKET:
                self._error(tok, "Unexpected ']' outside an array literal")
            elif tok.kind is TokenKind.LITERAL:
                self._push_value(Atom(tok.value))
            else:
                self.stack.fn_stack.append(tok.value)
        return self.stack, self.errors

    def parse_array(self) -> Array:
        """Parse array items up to the matching ``]``.

        Running out of tokens closes the array without an error.
        """
        items: list[Value] = []
        while (tok := self._advance()) is not None:
            if tok.kind is TokenKind.LITERAL:
                items.append(Atom(tok.value))
            elif tok.kind is TokenKind.LBRACKET:
                items.append(self.parse_array())
            elif tok.kind is TokenKind.RBRACKET:
                break
            else:
                self._error(tok, "Primitive inside an array literal")
        return Array(tuple(items))


def parse(source: str | Iterable[Token]) -> tuple[Stack, list[ParseError]]:
    tokens = tokenize(source) if isinstance(source, str) else source
    return Parser(tokens).parse()
