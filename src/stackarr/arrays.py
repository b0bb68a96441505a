"""Conversion between rectangular stack values and JAX arrays."""

from __future__ import annotations

import jax.numpy as jnp

from .errors import ArrayValueError
from .values import Array, Atom, Number, Value, as_number


def rectangular_shape(value: Value) -> tuple[int, ...]:
    """Full shape of ``value``; raises SHAPE_MISMATCH when it is ragged."""
    if isinstance(value, Atom):
        return ()
    if not value.items:
        return (0,)
    inner = [rectangular_shape(item) for item in value.items]
    first = inner[0]
    for shape in inner[1:]:
        if shape != first:
            left = first[0] if first else 0
            right = shape[0] if shape else 0
            raise ArrayValueError.shape_mismatch(left, right)
    return (len(value.items), *first)


def _flatten(value: Value, out: list[float]) -> None:
    if isinstance(value, Atom):
        out.append(as_number(value.literal))
        return
    for item in value.items:
        _flatten(item, out)


def to_jax(value: Value, *, dtype=jnp.float32):
    shape = rectangular_shape(value)
    flat: list[float] = []
    _flatten(value, flat)
    return jnp.asarray(flat, dtype=dtype).reshape(shape)


def from_jax(arr) -> Value:
    arr = jnp.asarray(arr)
    if arr.ndim == 0:
        return Atom(Number(float(arr.item())))
    return Array(tuple(from_jax(arr[i]) for i in range(arr.shape[0])))
