"""Structured error types for the literal, value and stack stages."""

from __future__ import annotations

from enum import Enum


class StackArrError(Exception):
    """Base class for structured stackarr errors."""

    def _debug_body(self) -> str:
        return str(self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._debug_body()})"


class LiteralErrorKind(str, Enum):
    UNIT = "Unit"
    NOT_NUMBER = "NotNumber"
    EXPECTED_WHOLE = "ExpectedWhole"


_LITERAL_MESSAGES = {
    LiteralErrorKind.UNIT: "operands are not a supported literal kind",
    LiteralErrorKind.NOT_NUMBER: "literal is not a number",
    LiteralErrorKind.EXPECTED_WHOLE: "expected a whole number",
}


class LiteralError(StackArrError):
    """A literal-level operation received an unusable operand."""

    def __init__(self, kind: LiteralErrorKind) -> None:
        super().__init__(_LITERAL_MESSAGES[kind])
        self.kind = kind

    def _debug_body(self) -> str:
        return self.kind.value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LiteralError):
            return NotImplemented
        return self.kind == other.kind

    __hash__ = StackArrError.__hash__


class ArrayValueErrorKind(str, Enum):
    LIT = "Lit"
    SHAPE_MISMATCH = "ShapeMismatch"
    OUT_OF_BOUNDS = "OutOfBounds"


class ArrayValueError(StackArrError):
    """A value-level operation failed (shape, bounds, or a wrapped literal error)."""

    def __init__(
        self,
        kind: ArrayValueErrorKind,
        message: str,
        *,
        literal_error: LiteralError | None = None,
        value: object | None = None,
    ) -> None:
        super().__init__(message)
        self.kind = kind
        self.literal_error = literal_error
        self.value = value

    @classmethod
    def lit(cls, err: LiteralError) -> "ArrayValueError":
        return cls(ArrayValueErrorKind.LIT, str(err), literal_error=err)

    @classmethod
    def shape_mismatch(cls, left: int, right: int) -> "ArrayValueError":
        return cls(ArrayValueErrorKind.SHAPE_MISMATCH, f"array lengths differ: {left} vs {right}")

    @classmethod
    def out_of_bounds(cls, value: object) -> "ArrayValueError":
        return cls(ArrayValueErrorKind.OUT_OF_BOUNDS, f"index {value!r} is out of bounds", value=value)

    def _debug_body(self) -> str:
        if self.kind is ArrayValueErrorKind.LIT:
            return f"Lit({self.literal_error._debug_body()})"
        if self.kind is ArrayValueErrorKind.OUT_OF_BOUNDS:
            return f"OutOfBounds({self.value!r})"
        return self.kind.value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ArrayValueError):
            return NotImplemented
        return (self.kind, self.literal_error, self.value) == (other.kind, other.literal_error, other.value)

    __hash__ = StackArrError.__hash__


class StackErrorKind(str, Enum):
    STACK_EMPTY = "StackEmpty"
    VAL = "Val"
    TYPE_MISMATCH = "TypeMismatch"


class StackError(StackArrError):
    """Evaluation failure; the first one stops a run."""

    def __init__(
        self,
        kind: StackErrorKind,
        message: str,
        *,
        value_error: ArrayValueError | None = None,
    ) -> None:
        super().__init__(message)
        self.kind = kind
        self.value_error = value_error

    @classmethod
    def stack_empty(cls) -> "StackError":
        return cls(StackErrorKind.STACK_EMPTY, "value stack is empty")

    @classmethod
    def val(cls, err: ArrayValueError) -> "StackError":
        return cls(StackErrorKind.VAL, str(err), value_error=err)

    @classmethod
    def type_mismatch(cls, found: object) -> "StackError":
        return cls(StackErrorKind.TYPE_MISMATCH, f"expected a value on the stack, found {type(found).__name__}")

    def _debug_body(self) -> str:
        if self.kind is StackErrorKind.VAL:
            return f"Val({self.value_error._debug_body()})"
        return self.kind.value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, StackError):
            return NotImplemented
        return (self.kind, self.value_error) == (other.kind, other.value_error)

    __hash__ = StackArrError.__hash__
