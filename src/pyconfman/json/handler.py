# -*- encoding: utf-8 -*-
# @File   : handler.py
# @Time   : 2024/11/04 21:15:06

import logging
from typing import Any, Sequence

from ..abstract import FileHandler, ValueFormatError
from ..consts import DEFAULT_ENCODING, ArrayShape, ValueKind
from ..convert import TypedAccessor, to_text
from ..handler import MappingConfig
from ..model import SectionStore
from .arrays import decode_array, encode_array
from .parser import JsonParser

_log = logging.getLogger(__name__)


class JsonConfig(MappingConfig, TypedAccessor):
    """JSON backed store.

    Unlike `IniConfig`, typed reads never raise: an unparsable value
    reads as the default, so does a malformed array.
    """

    strict_types = False

    def __init__(
        self, path: str,
        encoding: str = DEFAULT_ENCODING,
        indent: int = 2
    ) -> None:
        super().__init__(self._make_parser(path, encoding, indent))

    @staticmethod
    def _make_parser(
        path: str, encoding: str, indent: int
    ) -> FileHandler[SectionStore]:
        return JsonParser(path, encoding, indent)

    def get(
        self, section: str, key: str, default: Any,
        kind: ValueKind | None = None
    ) -> Any:
        """Read `[section] key` as the type of `default` (or `kind`).

        e.g. `cfg.get('window', 'width', 800)` -> int.
        """
        return self.get_typed(section, key, default, kind)

    def set(self, section: str, key: str, value: Any) -> None:
        self.set_string(section, key, to_text(value))

    def get_array(
        self, section: str, key: str, default: Sequence[Any], *,
        shape: ArrayShape | None = None,
        kind: ValueKind | None = None
    ) -> Any:
        """Read an array stored with `set_array()`.

        Missing key, broken JSON and a wrong shape/element type are
        not told apart: all of them return `default`.
        """
        text = self._store.find_value(section, key)
        if text is None:
            return default
        try:
            return decode_array(text, shape, kind)
        except ValueFormatError:
            _log.debug('[%s] %s = %r is not a usable array, using default.',
                       section, key, text)
            return default

    def set_array(
        self, section: str, key: str, values: Sequence[Any], *,
        shape: ArrayShape | None = None
    ) -> None:
        self.set_string(section, key, encode_array(values, shape))
