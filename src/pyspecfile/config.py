# -*- encoding: utf-8 -*-
# @File   : config.py
# @Time   : 2026/10/19 16:20:48
# @Author : Kariko Lin

"""The query side: one loaded spec file plus the policies for reading it.

    ```python
    cfg = ConfigFile()
    if not cfg.load('robot.cfg'):
        ...
    cfg.select_section('net')
    port = cfg.get_int('port')            # net::port, else ::port
    host, port = cfg.get('server', 'si')  # mixed types
    speeds = cfg.get_floats('speeds')     # whole value list
    ```
"""

import logging
from os import PathLike
from typing import Any, TextIO

from .consts import GLOBAL_SECTION, DecodeKind, FailMode
from .decode import Slot, decode_all, decode_into, expand_format
from .dump import dump_specs
from .errors import KeyNotFound
from .lookup import LookupResult, resolve
from .model import SpecStore
from .parser import SpecParser
from .script import ScriptCursor

__all__ = ['ConfigFile']


class ConfigFile:
    def __init__(
        self,
        filename: str | PathLike[str] | None = None, *,
        encoding: str | None = None,
        fail_mode: FailMode | str = FailMode.RAISE,
        strict: bool = False
    ) -> None:
        """Nothing is read until `load()`.

        Args:
            filename: default path for `load()`.
            encoding: tried first; `chardet` takes over if it fails.
            fail_mode: what queries do on unknown keys.
            strict: raise `SpecSyntaxError` on malformed lines
                instead of warning.
        """
        self._fn = filename
        self._codec = encoding
        self._strict = strict
        self._fail_mode = FailMode(fail_mode)
        self._section = GLOBAL_SECTION
        self._specs = SpecStore()

    # === loading ===

    def load(
        self, filename: str | PathLike[str] | None = None, *,
        quiet: bool = False
    ) -> bool:
        """(Re)load specs. `False` if the file is missing or unreadable.

        The failure is logged as a warning, or only at debug level if `quiet`.

        The previous specs are kept on failure, and replaced as a whole
        on success, so there is no stale entry from former loads.
        """
        if filename is not None:
            self._fn = filename
        if self._fn is None:
            raise ValueError('no file to load.')
        try:
            specs = SpecParser(
                self._fn, self._codec, strict=self._strict).read()
        except OSError as e:
            (logging.debug if quiet else logging.warning)(
                f'Failed to open file "{self._fn}":\n  {e}')
            return False
        self._specs = specs
        return True

    @property
    def specs(self) -> SpecStore:
        return self._specs

    def sections(self) -> list[str]:
        return self._specs.sections()

    # === policies ===

    @property
    def current_section(self) -> str:
        return self._section

    def select_section(self, section: str) -> None:
        """Section to try first for unscoped keys. '' means global only."""
        self._section = section

    @property
    def fail_mode(self) -> FailMode:
        return self._fail_mode

    @fail_mode.setter
    def fail_mode(self, mode: FailMode | str) -> None:
        self._fail_mode = FailMode(mode)

    def fail_on_miss(self, flag: bool = True) -> None:
        self._fail_mode = FailMode.RAISE if flag else FailMode.RETURN

    # === queries ===

    def lookup(self, key: str) -> LookupResult:
        """Resolve `key` regardless of the fail mode."""
        return resolve(self._specs, key, self._section)

    def _require(self, key: str) -> LookupResult:
        ret = self.lookup(key)
        if not ret and self._fail_mode is FailMode.RAISE:
            raise KeyNotFound(key)
        return ret

    def exists(self, key: str) -> bool:
        return self.lookup(key).found

    def fetch(self, key: str, *slots: Slot) -> bool:
        """Fill `slots` positionally from the value list of `key`.

        On a miss the slots are left untouched.
        """
        if not (ret := self._require(key)):
            return False
        decode_into(ret.values, slots)
        return True

    def get(
        self, key: str, fmt: str = 'i', count: int | None = None
    ) -> tuple[Any, ...] | None:
        """Decode leading values by format letters.

        `i` int, `f` float, `s` str, `b` bool; one letter per value,
        the last one recycled up to `count`.
        e.g. `cfg.get('window', 'sii')` => `('main', 640, 480)`
        """
        slots = [Slot(i) for i in expand_format(fmt, count)]
        if not self.fetch(key, *slots):
            return None
        return tuple(i.value for i in slots)

    def _get_one_kind(self, key: str, kind: DecodeKind, count: int) -> Any:
        if (ret := self.get(key, kind.value, count)) is None:
            return None
        return ret[0] if count == 1 else ret

    def get_int(self, key: str, count: int = 1) -> Any:
        return self._get_one_kind(key, DecodeKind.INT, count)

    def get_float(self, key: str, count: int = 1) -> Any:
        return self._get_one_kind(key, DecodeKind.FLOAT, count)

    def get_str(self, key: str, count: int = 1) -> Any:
        return self._get_one_kind(key, DecodeKind.STRING, count)

    def get_bool(self, key: str, count: int = 1) -> Any:
        return self._get_one_kind(key, DecodeKind.BOOL, count)

    def get_list(self, key: str, kind: DecodeKind | str) -> list:
        """Decode the whole value list, `[]` on a (silent) miss."""
        return decode_all(self._require(key).values, kind)

    def get_ints(self, key: str) -> list[int]:
        return self.get_list(key, DecodeKind.INT)

    def get_floats(self, key: str) -> list[float]:
        return self.get_list(key, DecodeKind.FLOAT)

    def get_strs(self, key: str) -> list[str]:
        return self.get_list(key, DecodeKind.STRING)

    def get_bools(self, key: str) -> list[bool]:
        return self.get_list(key, DecodeKind.BOOL)

    def get_script(self, key: str) -> ScriptCursor | None:
        """A fresh cursor over the script block (or any value list)."""
        if not (ret := self._require(key)):
            return None
        return ScriptCursor(ret.values)

    def dump_specs(self, stream: TextIO | None = None) -> str:
        return dump_specs(self._specs, stream)

    def __contains__(self, key: str) -> bool:
        return self.exists(key)

    def __str__(self) -> str:
        return f'ConfigFile({self._fn}, section="{self._section}")'
