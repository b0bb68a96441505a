"""Stack evaluator: runs the function stack against the value stack."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable, Final

from . import values
from .errors import ArrayValueError, StackError
from .lexer import Primitive
from .values import Value, is_value

if TYPE_CHECKING:
    from .parser import ParseError

logger = logging.getLogger(__name__)


_DYADIC_OPS: Final[dict[Primitive, Callable[[Value, Value], Value]]] = {
    Primitive.ADD: values.add,
    Primitive.SUB: values.sub,
    Primitive.LESS_THAN: values.lt,
    Primitive.GREATER_THAN: values.gt,
    Primitive.SELECT: values.select,
}


@dataclass
class Stack:
    """Program state: pending primitives and the values they act on.

    The end of each list is its top. ``run`` pops primitives last-in
    first-out, so the primitive written first in the source runs last.
    """

    fn_stack: list[Primitive] = field(default_factory=list)
    val_stack: list[Value] = field(default_factory=list)

    def value_last(self) -> Value:
        if not self.val_stack:
            raise StackError.stack_empty()
        top = self.val_stack[-1]
        if not is_value(top):
            raise StackError.type_mismatch(top)
        return top

    def value_pop(self) -> Value:
        top = self.value_last()
        self.val_stack.pop()
        return top

    def dyadic(self, f: Callable[[Value, Value], Value]) -> None:
        a = self.value_pop()
        b = self.value_pop()
        try:
            result = f(a, b)
        except ArrayValueError as err:
            raise StackError.val(err) from err
        self.val_stack.append(result)

    def add(self) -> None:
        self.dyadic(values.add)

    def sub(self) -> None:
        self.dyadic(values.sub)

    def lt(self) -> None:
        self.dyadic(values.lt)

    def gt(self) -> None:
        self.dyadic(values.gt)

    def select(self) -> None:
        self.dyadic(values.select)

    def flip(self) -> None:
        a = self.value_pop()
        b = self.value_pop()
        self.val_stack.append(a)
        self.val_stack.append(b)

    def duplicate(self) -> None:
        # Values are frozen, so the copy can share structure with the original.
        self.val_stack.append(self.value_last())

    def drop(self) -> None:
        self.value_pop()

    def exec(self, f: Primitive) -> None:
        op = _DYADIC_OPS.get(f)
        if op is not None:
            self.dyadic(op)
        elif f is Primitive.FLIP:
            self.flip()
        elif f is Primitive.DUPLICATE:
            self.duplicate()
        elif f is Primitive.DROP:
            self.drop()
        else:
            raise ValueError(f"Unknown primitive {f!r}")

    def run(self) -> list[Value]:
        while self.fn_stack:
            f = self.fn_stack.pop()
            logger.debug("exec %s on %d value(s)", f.name, len(self.val_stack))
            self.exec(f)
        return self.val_stack


@dataclass(frozen=True)
class RunResult:
    values: tuple[Value, ...] = ()
    error: StackError | None = None
    parse_errors: tuple["ParseError", ...] = ()

    @property
    def ok(self) -> bool:
        return self.error is None

    def __repr__(self) -> str:
        if self.error is not None:
            return f"Err({self.error!r})"
        return f"Ok([{', '.join(repr(v) for v in self.values)}])"


def run(source: str) -> list[Value]:
    """Lex, parse and evaluate ``source``; raises the first StackError.

    Parse errors do not stop the run; use ``run_with_errors`` to see them.
    """
    from .parser import parse

    stack, _ = parse(source)
    return stack.run()


def run_with_errors(source: str) -> RunResult:
    from .parser import parse

    stack, parse_errors = parse(source)
    try:
        result = stack.run()
    except StackError as err:
        return RunResult(error=err, parse_errors=tuple(parse_errors))
    return RunResult(values=tuple(result), parse_errors=tuple(parse_errors))
