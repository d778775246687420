# -*- encoding: utf-8 -*-
# @File   : handler.py
# @Time   : 2024/11/06 23:20:44

from ..abstract import FileHandler
from ..json.handler import JsonConfig
from ..model import SectionStore
from .parser import YamlParser


class YamlConfig(JsonConfig):
    """`JsonConfig` persisted as YAML. Same lenient typed reads,
    same array helpers."""

    @staticmethod
    def _make_parser(
        path: str, encoding: str, indent: int
    ) -> FileHandler[SectionStore]:
        return YamlParser(path, encoding, indent)
