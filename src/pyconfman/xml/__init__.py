# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2024/11/07 21:32:15

from .handler import XmlConfig
from .parser import XmlParser
