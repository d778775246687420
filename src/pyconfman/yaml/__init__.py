# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2024/11/06 23:21:10

from .handler import YamlConfig
from .parser import YamlParser
