# -*- encoding: utf-8 -*-
# @File   : arrays.py
# @Time   : 2024/11/04 20:33:18

"""Arrays kept in a single string slot, as canonical compact JSON.

    flat    [1,2,3]
    matrix  [[1,2],[3,4]]   every row the same length
    jagged  [[1,2],[3]]

Matrix and jagged arrays share their text form, only the
row length check differs.
"""

import json
from typing import Any, Sequence

from ..abstract import ValueFormatError
from ..consts import ArrayShape, ValueKind

__all__ = ['encode_array', 'decode_array']

_ROW = (list, tuple)


def _is_scalar(value: object) -> bool:
    return not isinstance(value, (list, tuple, dict))


def _infer_shape(values: Sequence[Any]) -> ArrayShape | None:
    rows = [isinstance(i, _ROW) for i in values]
    if not any(rows):
        return ArrayShape.FLAT
    if all(rows):
        return ArrayShape.JAGGED
    return None  # rows mixed with scalars


def _check_shape(values: Sequence[Any], shape: ArrayShape) -> bool:
    if shape is ArrayShape.FLAT:
        return all(_is_scalar(i) for i in values)
    if not all(isinstance(i, _ROW) for i in values):
        return False
    if not all(_is_scalar(j) for i in values for j in i):
        return False
    if shape is ArrayShape.MATRIX:
        return len({len(i) for i in values}) <= 1
    return True


def encode_array(
    values: Sequence[Any], shape: ArrayShape | None = None
) -> str:
    """Serialize `values`. Raises `ValueError` when it doesn't have
    `shape` (or, without `shape`, isn't a flat or 2-level array)."""
    if not isinstance(values, _ROW):
        raise ValueError(f'Expected a list, got {type(values).__name__}.')
    if shape is None:
        shape = _infer_shape(values)
    if shape is None or not _check_shape(values, shape):
        raise ValueError(
            f'{values!r} is not a {shape.value if shape else "valid"} array.')
    return json.dumps(values, ensure_ascii=False, separators=(',', ':'))


def _element(value: Any, kind: ValueKind) -> Any:
    match kind:
        case ValueKind.BOOL if isinstance(value, bool):
            return value
        case ValueKind.INT if (isinstance(value, int)
                               and not isinstance(value, bool)):
            return value
        case ValueKind.FLOAT | ValueKind.DOUBLE if (
                isinstance(value, (int, float))
                and not isinstance(value, bool)):
            try:
                return float(value)
            except OverflowError:
                pass
        case ValueKind.STRING if isinstance(value, str):
            return value
    raise ValueFormatError(json.dumps(value), kind.value)


def decode_array(
    text: str,
    shape: ArrayShape | None = None,
    kind: ValueKind | None = None
) -> list[Any]:
    """Parse `text` back into a list (of lists).

    Raises `ValueFormatError` on malformed JSON, a shape other than
    `shape`, or elements other than `kind`.
    """
    label = f'{shape.value} array' if shape else 'array'
    try:
        values = json.loads(text)
    # JSONDecodeError, or ints past the digit limit
    except (ValueError, RecursionError):
        raise ValueFormatError(text, label) from None
    if not isinstance(values, list):
        raise ValueFormatError(text, label)
    if shape is None:
        shape = _infer_shape(values)
    if shape is None or not _check_shape(values, shape):
        raise ValueFormatError(text, label)
    if kind is None:
        return values

    try:
        if shape is ArrayShape.FLAT:
            return [_element(i, kind) for i in values]
        return [[_element(j, kind) for j in i] for i in values]
    except ValueFormatError:
        raise ValueFormatError(text, f'{kind.value} {label}') from None
