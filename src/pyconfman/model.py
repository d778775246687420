# -*- encoding: utf-8 -*-
# @File   : model.py
# @Time   : 2024/11/02 22:05:31

"""
Two-level section -> key -> value mapping shared by the INI, JSON
and YAML stores.

Both levels keep insertion order, which is also the order files
get written in.
"""

from collections.abc import Iterator, Mapping, MutableMapping


class SectionStore(MutableMapping[str, dict[str, str]]):
    """Ordered group of sections, each a plain `str: str` dict.

    `store[name]` hands out the section dict itself (not a copy),
    so parsers may fill it in place. Assigning a section copies it,
    as we shouldn't keep ptr to an external dict.
    """

    def __init__(
        self, sections: Mapping[str, Mapping[str, str]] | None = None
    ) -> None:
        self.__raw_dicts: dict[str, dict[str, str]] = {}
        if sections:
            for name, pairs in sections.items():
                self[name] = pairs

    def __getitem__(self, key: str) -> dict[str, str]:
        return self.__raw_dicts[key]

    def __setitem__(self, key: str, value: Mapping[str, str]) -> None:
        self.__raw_dicts[key] = dict(value)

    def __delitem__(self, key: str) -> None:
        del self.__raw_dicts[key]

    def __contains__(self, key: object) -> bool:
        return key in self.__raw_dicts

    def __len__(self) -> int:
        return len(self.__raw_dicts)

    def __iter__(self) -> Iterator[str]:
        return iter(self.__raw_dicts)

    def __repr__(self) -> str:
        return repr(self.__raw_dicts)

    def setdefault(  # type: ignore[override]
        self, key: str, default: Mapping[str, str] | None = None
    ) -> dict[str, str]:
        """Return section `key`, adding it first (empty, or a copy of
        `default`) if it doesn't exist yet."""
        if key not in self.__raw_dicts:
            self.__raw_dicts[key] = dict(default) if default else {}
        return self.__raw_dicts[key]

    def find_value(self, section: str, key: str) -> str | None:
        """`None` if either the section or the key is missing."""
        if section not in self.__raw_dicts:
            return None
        return self.__raw_dicts[section].get(key)

    def set_value(self, section: str, key: str, value: str) -> None:
        self.setdefault(section)[key] = value

    def to_dict(self) -> dict[str, dict[str, str]]:
        """Deep copy as builtin dicts, e.g. for `json.dump()`."""
        return {k: v.copy() for k, v in self.__raw_dicts.items()}

    def clear(self) -> None:
        self.__raw_dicts.clear()
