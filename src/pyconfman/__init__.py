# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2024/11/02 21:35:08

import logging

from .abstract import (
    ConfigError, ConfigStore, DuplicateSectionError, InvalidNameError,
    NotFoundError, ValueFormatError
)
from .consts import ArrayShape, ValueKind
from .ini import IniConfig, IniParser
from .json import JsonConfig, JsonParser, decode_array, encode_array
from .model import SectionStore
from .xml import XmlConfig, XmlParser
from .yaml import YamlConfig, YamlParser

__all__ = [
    'IniConfig', 'JsonConfig', 'XmlConfig', 'YamlConfig',
    'IniParser', 'JsonParser', 'XmlParser', 'YamlParser',
    'ConfigStore', 'SectionStore', 'ValueKind', 'ArrayShape',
    'encode_array', 'decode_array',
    'ConfigError', 'NotFoundError', 'DuplicateSectionError',
    'ValueFormatError', 'InvalidNameError'
]

logging.basicConfig(level=logging.INFO,
                    format='[%(asctime)s] %(levelname)s: %(message)s')
