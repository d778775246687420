# -*- encoding: utf-8 -*-
# @File   : consts.py
# @Time   : 2024/11/02 21:52:40

from enum import Enum


class ValueKind(str, Enum):
    """What a stored string may be read as."""
    BOOL = 'boolean'
    INT = 'integer'
    FLOAT = 'float'
    DOUBLE = 'double'
    STRING = 'string'

    @classmethod
    def of(cls, value: object) -> 'ValueKind | None':
        # bool is an int subclass, check it first.
        if isinstance(value, bool):
            return cls.BOOL
        if isinstance(value, int):
            return cls.INT
        if isinstance(value, float):
            return cls.DOUBLE
        if isinstance(value, str):
            return cls.STRING
        return None


class ArrayShape(str, Enum):
    FLAT = 'flat'       # [1, 2, 3]
    MATRIX = 'matrix'   # [[1, 2], [3, 4]], rows of equal length
    JAGGED = 'jagged'   # [[1, 2], [3]]


DEFAULT_ENCODING = 'utf-8'
XML_ROOT_TAG = 'Root'
