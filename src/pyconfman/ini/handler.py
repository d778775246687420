# -*- encoding: utf-8 -*-
# @File   : handler.py
# @Time   : 2024/11/03 17:11:30

from ..consts import DEFAULT_ENCODING
from ..convert import TypedAccessor
from ..handler import MappingConfig
from .parser import IniParser


class IniConfig(MappingConfig, TypedAccessor):
    """INI backed store.

    Typed getters are strict: a present value which doesn't parse
    raises `ValueFormatError` instead of returning the default.
    A missing key parses the default's string form instead.
    """

    strict_types = True

    def __init__(self, path: str, encoding: str = DEFAULT_ENCODING) -> None:
        super().__init__(IniParser(path, encoding))

    @property
    def encoding(self) -> str:
        """Codec used for the next save (may be a guessed one)."""
        return self._parser.encoding  # type: ignore[attr-defined]
