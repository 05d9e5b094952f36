# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2026/10/19 16:41:15
# @Author : Kariko Lin

import logging

from .config import ConfigFile
from .consts import DecodeKind, FailMode, LineKind
from .decode import Slot
from .errors import (
    InvalidKey,
    KeyNotFound,
    MalformedScript,
    SpecFileError,
    SpecSyntaxError
)
from .lookup import LookupResult, resolve
from .model import ScopedKey, SpecStore
from .parser import SpecParser
from .script import ScriptCursor, ScriptLine
from .tokenizer import tokenize

__all__ = [
    'ConfigFile', 'SpecParser', 'SpecStore', 'ScopedKey',
    'ScriptCursor', 'ScriptLine', 'Slot', 'LookupResult', 'resolve',
    'tokenize', 'DecodeKind', 'FailMode', 'LineKind',
    'SpecFileError', 'KeyNotFound', 'SpecSyntaxError',
    'MalformedScript', 'InvalidKey'
]

logging.basicConfig(level=logging.INFO,
                    format='[%(asctime)s] %(levelname)s: %(message)s')
