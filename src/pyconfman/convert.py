# -*- encoding: utf-8 -*-
# @File   : convert.py
# @Time   : 2024/11/03 14:18:09

"""Stored strings <-> typed values.

Every store keeps plain strings. What happens when one can't be read as
the requested type is up to the store: `TypedAccessor.strict_types`.
INI raises `ValueFormatError`, JSON (and YAML) hand back the default.
"""

import logging
from re import ASCII
from re import compile as regex
from typing import Any, Callable

from .abstract import ValueFormatError
from .consts import ValueKind

__all__ = [
    'parse_bool', 'parse_int', 'parse_float', 'parse_double',
    'to_text', 'convert', 'TypedAccessor'
]

_log = logging.getLogger(__name__)

_INT_LITERAL = regex(r'\s*[+-]?\d+\s*', ASCII)


def parse_bool(text: str) -> bool:
    match text.strip().lower():
        case 'true':
            return True
        case 'false':
            return False
        case _:
            raise ValueFormatError(text, ValueKind.BOOL.value)


def parse_int(text: str) -> int:
    # int() alone would take '1_000' and full width digits.
    if not _INT_LITERAL.fullmatch(text):
        raise ValueFormatError(text, ValueKind.INT.value)
    try:
        return int(text)
    except ValueError:  # past sys.get_int_max_str_digits()
        raise ValueFormatError(text, ValueKind.INT.value) from None


def parse_float(text: str) -> float:
    if '_' in text:
        raise ValueFormatError(text, ValueKind.FLOAT.value)
    try:
        return float(text)
    except ValueError:
        raise ValueFormatError(text, ValueKind.FLOAT.value) from None


def parse_double(text: str) -> float:
    try:
        return parse_float(text)
    except ValueFormatError:
        raise ValueFormatError(text, ValueKind.DOUBLE.value) from None


_CONVERTERS: dict[ValueKind, Callable[[str], Any]] = {
    ValueKind.BOOL: parse_bool,
    ValueKind.INT: parse_int,
    ValueKind.FLOAT: parse_float,
    ValueKind.DOUBLE: parse_double,
    ValueKind.STRING: str,
}


def to_text(value: object) -> str:
    """How a value gets stored. `str()` mostly,
    but floats keep their full precision."""
    if isinstance(value, bool):
        return 'True' if value else 'False'
    if isinstance(value, float):
        return repr(value)
    return str(value)


def convert(text: str, kind: ValueKind) -> Any:
    return _CONVERTERS[kind](text)


class TypedAccessor:
    """Typed getters on top of `get_string()`/`key_exists()`,
    which the store class provides."""

    # raise on unparsable values, or fall back to the default?
    strict_types: bool = True

    def get_typed(
        self, section: str, key: str, default: Any,
        kind: ValueKind | None = None
    ) -> Any:
        if kind is None:
            kind = ValueKind.of(default)
        if kind is None:
            # nothing to convert to; hand out the raw text only
            # when the caller has no default of its own.
            text = self.get_string(section, key, None)  # type: ignore
            return text if default is None else default

        if not self.strict_types and not self.key_exists(  # type: ignore
                section, key):
            return default
        text = self.get_string(  # type: ignore
            section, key, to_text(default))
        try:
            return convert(text, kind)
        except ValueFormatError as e:
            if self.strict_types:
                raise ValueFormatError(
                    text, kind.value, section, key) from e
            _log.debug('[%s] %s = %r is not a valid %s, using %r.',
                       section, key, text, kind.value, default)
            return default

    def get_bool(self, section: str, key: str, default: bool) -> bool:
        return self.get_typed(section, key, default, ValueKind.BOOL)

    def get_int(self, section: str, key: str, default: int) -> int:
        return self.get_typed(section, key, default, ValueKind.INT)

    def get_float(self, section: str, key: str, default: float) -> float:
        return self.get_typed(section, key, default, ValueKind.FLOAT)

    def get_double(self, section: str, key: str, default: float) -> float:
        return self.get_typed(section, key, default, ValueKind.DOUBLE)
