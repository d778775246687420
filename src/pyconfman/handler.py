# -*- encoding: utf-8 -*-
# @File   : handler.py
# @Time   : 2024/11/03 15:02:47

import logging

from .abstract import (
    ConfigStore, DuplicateSectionError, FileHandler, NotFoundError
)
from .model import SectionStore

_log = logging.getLogger(__name__)


class MappingConfig(ConfigStore):
    """`ConfigStore` over a `SectionStore`.

    Subclasses only pick the `FileHandler` which turns the file
    into a `SectionStore` and back (and the typed access policy).
    """

    def __init__(self, parser: FileHandler[SectionStore]) -> None:
        self._parser = parser
        self._store = SectionStore()
        self.reload()

    @property
    def path(self) -> str:
        return self._parser.filename

    def reload(self) -> None:
        if not self._parser.exists():
            self._store = SectionStore()
            self._parser.write(self._store)
            _log.info('%s not found, created an empty one.', self.path)
            return
        self._store = self._parser.read()
        _log.debug('Loaded %d sections from %s.', len(self._store), self.path)

    def get_string(self, section: str, key: str, default: str) -> str:
        value = self._store.find_value(section, key)
        return default if value is None else value

    def get_sections(self) -> list[str]:
        return list(self._store)

    def get_keys(self, section: str) -> list[str]:
        return list(self._section(section))

    def get_all_key_values(self, section: str) -> dict[str, str]:
        return self._section(section).copy()

    def section_exists(self, section: str) -> bool:
        return section in self._store

    def key_exists(self, section: str, key: str) -> bool:
        return self._store.find_value(section, key) is not None

    def set_string(self, section: str, key: str, value: str) -> None:
        self._store.set_value(section, key, value)

    def create_section(self, section: str) -> None:
        if section in self._store:
            raise DuplicateSectionError(f"Section '{section}' already exists.")
        self._store.setdefault(section)

    def delete_section(self, section: str) -> None:
        self._section(section)
        del self._store[section]

    def delete_key(self, section: str, key: str) -> None:
        pairs = self._section(section)
        if key not in pairs:
            raise NotFoundError(
                f"Key '{key}' does not exist in section '{section}'.")
        del pairs[key]

    def save_file(self) -> None:
        self._parser.write(self._store)
        _log.debug('Saved %d sections to %s.', len(self._store), self.path)

    def _section(self, section: str) -> dict[str, str]:
        if section not in self._store:
            raise NotFoundError(f"Section '{section}' does not exist.")
        return self._store[section]
