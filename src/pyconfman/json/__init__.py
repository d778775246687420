# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2024/11/04 21:16:40

from .arrays import decode_array, encode_array
from .handler import JsonConfig
from .parser import JsonParser, load_document
