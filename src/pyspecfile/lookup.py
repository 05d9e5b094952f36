# -*- encoding: utf-8 -*-
# @File   : lookup.py
# @Time   : 2026/10/19 15:12:44
# @Author : Kariko Lin

from typing import NamedTuple

from .consts import GLOBAL_SECTION, SCOPE_SEP
from .model import SpecStore
from .tokenizer import ascii_lower


class LookupResult(NamedTuple):
    found: bool
    scoped_key: str | None
    values: list[str]

    def __bool__(self) -> bool:
        return self.found


def candidates(key: str, section: str = GLOBAL_SECTION) -> list[str]:
    """Scoped keys to try for `key`, most specific first."""
    key = ascii_lower(key)
    if SCOPE_SEP in key:
        return [key]
    ret = [f'{section}{SCOPE_SEP}{key}']
    if section != GLOBAL_SECTION:
        ret.append(f'{GLOBAL_SECTION}{SCOPE_SEP}{key}')
    return ret


def resolve(
    store: SpecStore, key: str, section: str = GLOBAL_SECTION
) -> LookupResult:
    """Find the value list of `key`.

    A fully scoped key (`net::port`) is looked up as is.
    Otherwise `section::key` is tried first, then the global `::key`.
    Never raises; it's up to the caller what a miss means.
    """
    for i in candidates(key, section):
        if i in store:
            return LookupResult(True, i, list(store[i]))
    return LookupResult(False, None, [])
