# -*- encoding: utf-8 -*-
# @File   : handler.py
# @Time   : 2024/11/07 21:30:58

import logging
from re import compile as regex
from xml.etree import ElementTree as et

from ..abstract import (
    ConfigStore, DuplicateSectionError, InvalidNameError, NotFoundError
)
from .parser import XmlParser

_log = logging.getLogger(__name__)

# XML 1.0 (5th ed.) NameStartChar / NameChar, minus ':' (no namespaces).
_NAME_START = (
    'A-Z_a-z\u00C0-\u00D6\u00D8-\u00F6\u00F8-\u02FF\u0370-\u037D'
    '\u037F-\u1FFF\u200C-\u200D\u2070-\u218F\u2C00-\u2FEF\u3001-\uD7FF'
    '\uF900-\uFDCF\uFDF0-\uFFFD\U00010000-\U000EFFFF'
)
_NAME_CHAR = _NAME_START + '\\-.0-9\u00B7\u0300-\u036F\u203F-\u2040'
_XML_NAME = regex(f'[{_NAME_START}][{_NAME_CHAR}]*')


def _child(parent: et.Element, tag: str) -> et.Element | None:
    """First immediate child named `tag`."""
    for i in parent:
        if i.tag == tag:
            return i
    return None


def _text(elem: et.Element) -> str:
    return ''.join(elem.itertext())


def _check_name(name: str) -> str:
    if isinstance(name, str) and _XML_NAME.fullmatch(name):
        # expat has the last word, it reads the file back.
        try:
            et.fromstring(f'<{name}/>')
            return name
        except et.ParseError:
            pass
    raise InvalidNameError(f"'{name}' is not a valid XML element name.")


class XmlConfig(ConfigStore):
    """XML backed store: `<Root><section><key>value</key></section></Root>`.

    String values only, there are no typed getters here.
    """

    def __init__(self, path: str, indent: str = '\t') -> None:
        self._parser = XmlParser(path, indent)
        self._root = XmlParser.new_root()
        self.reload()

    @property
    def path(self) -> str:
        return self._parser.filename

    @property
    def root(self) -> et.Element:
        return self._root

    def reload(self) -> None:
        if not self._parser.exists():
            self._root = XmlParser.new_root()
            self._parser.write(self._root)
            _log.info('%s not found, created an empty one.', self.path)
            return
        self._root = self._parser.read()
        _log.debug('Loaded %d sections from %s.', len(self._root), self.path)

    def get_string(self, section: str, key: str, default: str) -> str:
        if (sect := _child(self._root, section)) is None:
            return default
        if (elem := _child(sect, key)) is None:
            return default
        return _text(elem)

    def get_sections(self) -> list[str]:
        return [i.tag for i in self._root]

    def get_keys(self, section: str) -> list[str]:
        return [i.tag for i in self._section(section)]

    def get_all_key_values(self, section: str) -> dict[str, str]:
        return {i.tag: _text(i) for i in self._section(section)}

    def section_exists(self, section: str) -> bool:
        return _child(self._root, section) is not None

    def key_exists(self, section: str, key: str) -> bool:
        sect = _child(self._root, section)
        return sect is not None and _child(sect, key) is not None

    def set_string(self, section: str, key: str, value: str) -> None:
        sect = _child(self._root, section)
        elem = None if sect is None else _child(sect, key)
        if elem is None:
            _check_name(key)  # before touching the tree
        if sect is None:
            sect = et.SubElement(self._root, _check_name(section))
        if elem is None:
            elem = et.SubElement(sect, key)
        else:
            # replace mixed content, if someone wrote any.
            for i in list(elem):
                elem.remove(i)
        elem.text = value

    def create_section(self, section: str) -> None:
        if self.section_exists(section):
            raise DuplicateSectionError(f"Section '{section}' already exists.")
        et.SubElement(self._root, _check_name(section))

    def delete_section(self, section: str) -> None:
        self._root.remove(self._section(section))

    def delete_key(self, section: str, key: str) -> None:
        sect = self._section(section)
        if (elem := _child(sect, key)) is None:
            raise NotFoundError(
                f"Key '{key}' does not exist in section '{section}'.")
        sect.remove(elem)

    def save_file(self) -> None:
        self._parser.write(self._root)
        _log.debug('Saved %d sections to %s.', len(self._root), self.path)

    def _section(self, section: str) -> et.Element:
        if (sect := _child(self._root, section)) is None:
            raise NotFoundError(f"Section '{section}' does not exist.")
        return sect
