# -*- encoding: utf-8 -*-
# @File   : parser.py
# @Time   : 2024/11/04 19:47:51

"""JSON store document:

    ```json
    {
      "section": {
        "key": "value",
        "array": "[1,2,3]"
      }
    }
    ```

Every value is a string, arrays included (see `arrays.py`).
"""

import json
import logging
import warnings
from typing import Any

from ..abstract import FileHandler
from ..consts import DEFAULT_ENCODING
from ..convert import to_text
from ..model import SectionStore

_log = logging.getLogger(__name__)


def _value_text(value: Any) -> str:
    if value is None:
        return ''
    if isinstance(value, str):
        return value
    if isinstance(value, (list, dict)):
        # a literal array typed into the file by hand.
        return json.dumps(value, ensure_ascii=False, separators=(',', ':'))
    return to_text(value)


def load_document(doc: Any, source: str) -> SectionStore:
    """Turn a decoded JSON (or YAML) document into a `SectionStore`.

    Anything that isn't `{section: {key: value}}` is dropped
    with a warning, since the next save would overwrite it.
    """
    ret = SectionStore()
    if doc is None:
        return ret
    if not isinstance(doc, dict):
        warnings.warn(
            f'{source}: expected an object of sections, '
            f'got {type(doc).__name__}. Starting empty.')
        return ret
    for sect, pairs in doc.items():
        if not isinstance(pairs, dict):
            warnings.warn(f'{source}: section "{sect}" is not an object, '
                          'skipped.')
            continue
        ret[str(sect)] = {str(k): _value_text(v) for k, v in pairs.items()}
    return ret


class JsonParser(FileHandler[SectionStore]):
    def __init__(
        self, filename: str,
        encoding: str = DEFAULT_ENCODING,
        indent: int = 2
    ) -> None:
        super().__init__(filename)
        self._codec = encoding
        self._indent = indent

    def read(self) -> SectionStore:
        with open(self._fn, 'r', encoding=self._codec) as fp:
            content = fp.read().removeprefix('\ufeff')  # utf-8 BOM
        if not content.strip():
            _log.debug('%s is empty.', self._fn)
            return SectionStore()
        try:
            doc = json.loads(content)
        # JSONDecodeError, or ints past the digit limit
        except (ValueError, RecursionError) as e:
            warnings.warn(f'{self._fn} is not valid JSON ({e}). '
                          'Starting empty.')
            return SectionStore()
        return load_document(doc, self._fn)

    def write(self, instance: SectionStore) -> None:
        content = json.dumps(instance.to_dict(),
                             ensure_ascii=False, indent=self._indent)
        # encode first: a failure must leave the old file alone.
        raw = content.encode(self._codec)
        with open(self._fn, 'wb') as fp:
            fp.write(raw)
