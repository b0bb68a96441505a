"""stackarr public API."""

from .errors import (
    ArrayValueError,
    ArrayValueErrorKind,
    LiteralError,
    LiteralErrorKind,
    StackArrError,
    StackError,
    StackErrorKind,
)
from .evaluator import RunResult, Stack, run, run_with_errors
from .lexer import Lexer, Primitive, Token, TokenKind, tokenize
from .parser import ParseError, ParseErrorKind, Parser, parse
from .values import Array, Atom, Number, Value, array, atom, format_value

try:
    from .arrays import from_jax, to_jax
except ModuleNotFoundError as exc:
    if exc.name and exc.name.startswith("jax"):
        _jax_import_error = exc

        def to_jax(*_args, **_kwargs):
            raise ModuleNotFoundError(
                "jax is required for to_jax(). Install runtime deps first."
            ) from _jax_import_error

        def from_jax(*_args, **_kwargs):
            raise ModuleNotFoundError(
                "jax is required for from_jax(). Install runtime deps first."
            ) from _jax_import_error

    else:
        raise

__all__ = [
    "Lexer",
    "Token",
    "TokenKind",
    "Primitive",
    "tokenize",
    "Parser",
    "ParseError",
    "ParseErrorKind",
    "parse",
    "Stack",
    "RunResult",
    "run",
    "run_with_errors",
    "Number",
    "Atom",
    "Array",
    "Value",
    "atom",
    "array",
    "format_value",
    "to_jax",
    "from_jax",
    "StackArrError",
    "LiteralError",
    "LiteralErrorKind",
    "ArrayValueError",
    "ArrayValueErrorKind",
    "StackError",
    "StackErrorKind",
]
