"""Runtime value model: numeric literals, atoms, nested arrays and the dyadic ops over them."""

from __future__ import annotations

import math
import numbers
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Callable, Union

from .errors import ArrayValueError, LiteralError, LiteralErrorKind


@dataclass(frozen=True)
class Number:
    """Scalar numeric literal; the only literal kind so far."""

    value: float

    def __repr__(self) -> str:
        return f"Number({self.value!r})"


Literal = Number


@dataclass(frozen=True)
class Atom:
    literal: Literal

    def __repr__(self) -> str:
        return f"Atom({self.literal!r})"


@dataclass(frozen=True)
class Array:
    items: tuple["Value", ...] = ()

    def __repr__(self) -> str:
        return f"Array([{', '.join(repr(item) for item in self.items)}])"


Value = Union[Atom, Array]

LiteralOp = Callable[[Literal, Literal], Literal]


# --- literal operations --------------------------------------------------
#
# Operands arrive in pop order: ``a`` is the former top of the stack and
# ``b`` the value beneath it.


def as_number(lit: object) -> float:
    if isinstance(lit, Number):
        return lit.value
    raise LiteralError(LiteralErrorKind.NOT_NUMBER)


def as_number_whole(lit: object) -> int:
    num = as_number(lit)
    if not float(num).is_integer():
        raise LiteralError(LiteralErrorKind.EXPECTED_WHOLE)
    return int(num)


def dyadic_nums(a: object, b: object, f: Callable[[float, float], float]) -> Number:
    if isinstance(a, Number) and isinstance(b, Number):
        return Number(float(f(a.value, b.value)))
    raise LiteralError(LiteralErrorKind.UNIT)


def lit_add(a: Literal, b: Literal) -> Number:
    return dyadic_nums(a, b, lambda x, y: x + y)


def lit_sub(a: Literal, b: Literal) -> Number:
    return dyadic_nums(a, b, lambda x, y: y - x)


def lit_lt(a: Literal, b: Literal) -> Number:
    return dyadic_nums(a, b, lambda x, y: 1.0 if y < x else 0.0)


def lit_gt(a: Literal, b: Literal) -> Number:
    return dyadic_nums(a, b, lambda x, y: 1.0 if y > x else 0.0)


# --- value operations ----------------------------------------------------


def dyadic_lits(a: Value, b: Value, f: LiteralOp) -> Value:
    """Apply a literal op structurally, broadcasting atoms over arrays.

    Equal-length arrays pair up elementwise; an atom meets every element of
    an array. The ``a``/``b`` orientation is kept at every level.
    """
    if isinstance(a, Atom) and isinstance(b, Atom):
        try:
            return Atom(f(a.literal, b.literal))
        except LiteralError as err:
            raise ArrayValueError.lit(err) from err
    if isinstance(a, Array) and isinstance(b, Array):
        if len(a.items) != len(b.items):
            raise ArrayValueError.shape_mismatch(len(a.items), len(b.items))
        return Array(tuple(dyadic_lits(x, y, f) for x, y in zip(a.items, b.items)))
    if isinstance(b, Array):
        return Array(tuple(dyadic_lits(a, y, f) for y in b.items))
    return Array(tuple(dyadic_lits(x, b, f) for x in a.items))


def add(a: Value, b: Value) -> Value:
    return dyadic_lits(a, b, lit_add)


def sub(a: Value, b: Value) -> Value:
    return dyadic_lits(a, b, lit_sub)


def lt(a: Value, b: Value) -> Value:
    return dyadic_lits(a, b, lit_lt)


def gt(a: Value, b: Value) -> Value:
    return dyadic_lits(a, b, lit_gt)


def _checked(conv: Callable[[object], object], lit: object):
    try:
        return conv(lit)
    except LiteralError as err:
        raise ArrayValueError.lit(err) from err


def select(a: Value, b: Value) -> Value:
    """Index ``b`` by ``a``; an array of indices selects elementwise."""
    if isinstance(a, Array):
        return Array(tuple(select(item, b) for item in a.items))

    if isinstance(b, Atom):
        num = _checked(as_number, a.literal)
        if num == 0:
            return b
        raise ArrayValueError.out_of_bounds(Atom(Number(num)))

    i = _checked(as_number_whole, a.literal)
    if i < 0:
        raise ArrayValueError.out_of_bounds(a)
    if i < len(b.items):
        return b.items[i]
    raise ArrayValueError.out_of_bounds(Atom(Number(float(i))))


# --- construction and inspection ------------------------------------------


def is_value(obj: object) -> bool:
    return isinstance(obj, (Atom, Array))


def as_atom(value: Value) -> Literal | None:
    if isinstance(value, Atom):
        return value.literal
    return None


def atom(x: float) -> Atom:
    return Atom(Number(float(x)))


def to_value(obj: object) -> Value:
    """Build a Value from a number, a Value, or a nested sequence of those."""
    if is_value(obj):
        return obj
    if isinstance(obj, Number):
        return Atom(obj)
    if isinstance(obj, numbers.Real):
        return atom(obj)
    if isinstance(obj, Sequence) and not isinstance(obj, (str, bytes)):
        return Array(tuple(to_value(item) for item in obj))
    raise TypeError(f"cannot build a value from {type(obj).__name__}")


def array(*items: object) -> Array:
    return Array(tuple(to_value(item) for item in items))


def shape_of(value: Value) -> tuple[int, ...]:
    if isinstance(value, Array):
        return (len(value.items),)
    return ()


def depth_of(value: Value) -> int:
    if isinstance(value, Atom):
        return 0
    if not value.items:
        return 1
    return 1 + max(depth_of(item) for item in value.items)


def _format_number(num: float) -> str:
    if math.isnan(num):
        return "NaN"
    if math.isinf(num):
        return "∞" if num > 0 else "¯∞"
    text = str(int(abs(num))) if num.is_integer() else repr(abs(num))
    return f"¯{text}" if num < 0 else text


def format_value(value: Value) -> str:
    if isinstance(value, Atom):
        if isinstance(value.literal, Number):
            return _format_number(value.literal.value)
        return repr(value.literal)
    return f"[{' '.join(format_value(item) for item in value.items)}]"
