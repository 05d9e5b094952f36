# -*- encoding: utf-8 -*-
# @File   : consts.py
# @Time   : 2026/10/19 14:02:11
# @Author : Kariko Lin

from enum import Enum

SCOPE_SEP = '::'
GLOBAL_SECTION = ''

COMMENT_MARKS = ('#', '//')
QUOTE_MARKS = ('"', "'")


class FailMode(str, Enum):
    """What a query does when the key cannot be resolved."""
    RAISE = 'raise'
    RETURN = 'return'


class LineKind(str, Enum):
    BLANK = 'blank'  # also comments
    SECTION = 'section'
    SCRIPT_OPEN = 'script-open'
    SCRIPT_CLOSE = 'script-close'
    SCRIPT_LINE = 'script-line'
    KEY_VALUE = 'key-value'


# format letters of `ConfigFile.get()`.
class DecodeKind(str, Enum):
    INT = 'i'
    FLOAT = 'f'
    STRING = 's'
    BOOL = 'b'
