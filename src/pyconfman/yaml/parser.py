# -*- encoding: utf-8 -*-
# @File   : parser.py
# @Time   : 2024/11/06 23:02:19

"""Same document shape as the JSON store, written as a YAML mapping:

    ```yaml
    section:
      key: value
      array: '[1,2,3]'
    ```

Hand-written scalars like `on: yes` or `port: 8080` are accepted
and stored as text.
"""

import logging
import warnings

import yaml

from ..abstract import FileHandler
from ..consts import DEFAULT_ENCODING
from ..json.parser import load_document
from ..model import SectionStore

_log = logging.getLogger(__name__)


class YamlParser(FileHandler[SectionStore]):
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
        try:
            doc = yaml.safe_load(content)
        # ValueError: ints past the digit limit
        except (yaml.YAMLError, ValueError) as e:
            warnings.warn(f'{self._fn} is not valid YAML ({e}). '
                          'Starting empty.')
            return SectionStore()
        return load_document(doc, self._fn)

    def write(self, instance: SectionStore) -> None:
        content = yaml.safe_dump(instance.to_dict(),
                                 allow_unicode=True,
                                 sort_keys=False,
                                 indent=self._indent)
        # encode first: a failure must leave the old file alone.
        raw = content.encode(self._codec)
        with open(self._fn, 'wb') as fp:
            fp.write(raw)
