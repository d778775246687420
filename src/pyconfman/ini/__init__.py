# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2024/11/03 17:12:02

from .handler import IniConfig
from .parser import IniParser
