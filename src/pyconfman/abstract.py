# -*- encoding: utf-8 -*-
# @File   : abstract.py
# @Time   : 2024/11/02 21:40:12

from abc import ABCMeta, abstractmethod
from collections.abc import Iterator
from os.path import exists
from typing import TypeVar

T = TypeVar('T')


class ConfigError(Exception):
    """Base class of everything raised by the config stores."""
    pass


class NotFoundError(ConfigError, LookupError):
    """A section (or a key in it) is required to exist but doesn't."""
    pass


class DuplicateSectionError(ConfigError, ValueError):
    pass


class ValueFormatError(ConfigError, ValueError):
    """A stored value can't be read as the requested type."""

    def __init__(
        self, value: str, kind: str,
        section: str | None = None, key: str | None = None
    ) -> None:
        self.value = value
        self.kind = kind
        self.section = section
        self.key = key
        if section is None:
            msg = f"'{value}' is not a valid {kind}."
        else:
            msg = (f"The value '{value}' in section '{section}' "
                   f"for key '{key}' is not a valid {kind}.")
        super().__init__(msg)


class InvalidNameError(ConfigError, ValueError):
    """Section or key name unusable as an XML tag."""
    pass


class FileHandler[T](metaclass=ABCMeta):
    def __init__(self, filename: str) -> None:
        self._fn = filename

    @property
    def filename(self) -> str:
        return self._fn

    def exists(self) -> bool:
        return exists(self._fn)

    @abstractmethod
    def read(self) -> T:
        raise NotImplementedError

    @abstractmethod
    def write(self, instance: T) -> None:
        raise NotImplementedError

    def __str__(self) -> str:
        return self._fn


class ConfigStore(metaclass=ABCMeta):
    """Section -> key -> value store bound to one backing file.

    Loading happens once in `__init__` (and on `reload()`);
    nothing reaches the disk until `save_file()` is called.
    """

    @property
    @abstractmethod
    def path(self) -> str:
        raise NotImplementedError

    @abstractmethod
    def reload(self) -> None:
        raise NotImplementedError

    @abstractmethod
    def get_string(self, section: str, key: str, default: str) -> str:
        raise NotImplementedError

    @abstractmethod
    def get_sections(self) -> list[str]:
        raise NotImplementedError

    @abstractmethod
    def get_keys(self, section: str) -> list[str]:
        raise NotImplementedError

    @abstractmethod
    def get_all_key_values(self, section: str) -> dict[str, str]:
        raise NotImplementedError

    @abstractmethod
    def section_exists(self, section: str) -> bool:
        raise NotImplementedError

    @abstractmethod
    def key_exists(self, section: str, key: str) -> bool:
        raise NotImplementedError

    @abstractmethod
    def set_string(self, section: str, key: str, value: str) -> None:
        raise NotImplementedError

    @abstractmethod
    def create_section(self, section: str) -> None:
        raise NotImplementedError

    @abstractmethod
    def delete_section(self, section: str) -> None:
        raise NotImplementedError

    @abstractmethod
    def delete_key(self, section: str, key: str) -> None:
        raise NotImplementedError

    @abstractmethod
    def save_file(self) -> None:
        raise NotImplementedError

    def __contains__(self, section: object) -> bool:
        return isinstance(section, str) and self.section_exists(section)

    def __iter__(self) -> Iterator[str]:
        return iter(self.get_sections())

    def __len__(self) -> int:
        return len(self.get_sections())

    def __repr__(self) -> str:
        return f'<{type(self).__name__} "{self.path}" ({len(self)} sections)>'
