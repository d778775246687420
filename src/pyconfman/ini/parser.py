# -*- encoding: utf-8 -*-
# @File   : parser.py
# @Time   : 2024/11/03 16:20:55

"""Line-oriented INI reading and writing.

Supported shapes (nothing else is kept):

    ```ini
    ; full line comment
    [section]
    key = value  ; trailing comment
    ```

Lines before the first section header, and lines which are neither
a header nor contain `=`, are dropped without complaint.
Comments are NOT written back on save.
"""

import logging
from io import StringIO, TextIOBase

import chardet

from ..abstract import FileHandler
from ..consts import DEFAULT_ENCODING
from ..model import SectionStore

_log = logging.getLogger(__name__)


class IniParser(FileHandler[SectionStore]):
    def __init__(self, filename: str, encoding: str = DEFAULT_ENCODING):
        super().__init__(filename)
        self._codec = encoding

    @property
    def encoding(self) -> str:
        return self._codec

    @staticmethod
    def readstream(
        buf: TextIOBase, ins: SectionStore | None = None
    ) -> SectionStore:
        """读取解码好的字符串流。

        如没有特殊需求，直接调用`self.read()`便是。
        """
        if ins is None:
            ins = SectionStore()
        this_sect: dict[str, str] | None = None
        lineno = 0
        while i := buf.readline():
            lineno += 1
            if lineno == 1:
                i = i.removeprefix('\ufeff')  # utf-8 BOM
            line = i.strip()
            if not line or line[0] == ';':
                continue
            if line[0] == '[' and line[-1] == ']':
                this_sect = ins.setdefault(line[1:-1].strip())
            elif '=' in line:
                if this_sect is None:
                    _log.debug('Line %d is outside any section, ignored.',
                               lineno)
                    continue
                key, val = line.split('=', 1)
                this_sect[key.strip()] = val.split(';', 1)[0].strip()
        return ins

    def _decode_file(self) -> StringIO:
        with open(self._fn, 'rb') as fp:
            raw = fp.read()

        codec = chardet.detect(raw)
        if codec['encoding'] is None or codec['confidence'] < 0.8:
            codec = {'encoding': DEFAULT_ENCODING}

        # fallbacks
        try:
            buf = raw.decode(codec['encoding'])
            self._codec = codec['encoding']
        except UnicodeDecodeError:
            buf = raw.decode('gbk')
            self._codec = 'gbk'
        _log.info('%s decoded as %s.', self._fn, self._codec)
        return StringIO(buf)

    def read(self) -> SectionStore:
        """Read the whole file.

        When the configured encoding doesn't fit, the codec gets guessed
        with `chardet` and remembered for `write()`.
        """
        try:
            with open(self._fn, 'r', encoding=self._codec) as fp:
                return self.readstream(fp)
        except UnicodeDecodeError:
            return self.readstream(self._decode_file())

    @staticmethod
    def __output_section(
        name: str, pairs: dict[str, str], delimiter: str = ' = '
    ) -> str:
        ret = f'[{name}]\n'
        for k, v in pairs.items():
            ret += f'{k}{delimiter}{v}\n'
        return ret

    def write(
        self, instance: SectionStore, *,
        blank_lines: int = 1,
        delimiter: str = ' = '
    ) -> None:
        """Overwrite the file with `instance`, sections in their order."""
        buffer = ''.join(
            self.__output_section(k, v, delimiter) + '\n' * blank_lines
            for k, v in instance.items()
        )
        # encode first: a failure must leave the old file alone.
        raw = buffer.encode(self._codec)
        with open(self._fn, 'wb') as fp:
            fp.write(raw)

    def __str__(self) -> str:
        return "INI file: " + super().__str__() + f"({self._codec})"
