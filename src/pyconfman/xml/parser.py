# -*- encoding: utf-8 -*-
# @File   : parser.py
# @Time   : 2024/11/07 20:41:36

"""XML store document:

    ```xml
    <?xml version="1.0" encoding="utf-8"?>
    <Root>
        <section>
            <key>value</key>
        </section>
    </Root>
    ```

Since the encoding of xml is declared in the file itself,
this serializer always writes 'utf-8'.
"""

import logging
import warnings
from xml.dom import minidom
from xml.etree import ElementTree as et

from ..abstract import FileHandler
from ..consts import XML_ROOT_TAG

_log = logging.getLogger(__name__)


def _strip_layout(elem: et.Element) -> None:
    # drop indentation left by pretty printing,
    # or toprettyxml() would stack it up on every save.
    if elem.text is not None and not elem.text.strip() and len(elem):
        elem.text = None
    if elem.tail is not None and not elem.tail.strip():
        elem.tail = None


class XmlParser(FileHandler[et.Element]):
    def __init__(self, filename: str, indent: str = '\t') -> None:
        super().__init__(filename)
        self._indent = indent

    @staticmethod
    def new_root() -> et.Element:
        return et.Element(XML_ROOT_TAG)

    def read(self) -> et.Element:
        try:
            root = et.parse(self._fn).getroot()
        except et.ParseError as e:
            warnings.warn(f'{self._fn} is not valid XML ({e}). '
                          'Starting empty.')
            return self.new_root()
        if root.tag != XML_ROOT_TAG:
            _log.debug('%s: root element is <%s>, kept as is.',
                       self._fn, root.tag)
        _strip_layout(root)
        for sect in root:
            _strip_layout(sect)
            for key in sect:
                _strip_layout(key)
        return root

    def write(self, instance: et.Element) -> None:
        formatted = minidom.parseString(et.tostring(instance, 'utf-8'))
        raw = formatted.toprettyxml(self._indent, encoding='utf-8')
        with open(self._fn, 'wb') as fp:
            fp.write(raw)
