# -*- encoding: utf-8 -*-
# @File   : model.py
# @Time   : 2026/10/19 14:30:05
# @Author : Kariko Lin

"""The spec store: scoped keys mapped onto value lists.

A value list is either the tokens of a `key = a, b, c` line,
or the untokenized lines of a `{ ... }` script block.
"""

from collections.abc import MutableMapping
from typing import Iterable, Iterator, NamedTuple, Sequence

from .consts import GLOBAL_SECTION, SCOPE_SEP
from .tokenizer import ascii_lower


class ScopedKey(NamedTuple):
    section: str
    key: str

    @classmethod
    def parse(cls, scoped: str) -> 'ScopedKey':
        """`'net::port'` => `ScopedKey('net', 'port')`.

        Base keys never carry `::`, so the last one separates.
        """
        if SCOPE_SEP not in scoped:
            raise ValueError(f'"{scoped}" is not a scoped key.')
        section, key = scoped.rsplit(SCOPE_SEP, 1)
        return cls(section, key)

    @property
    def is_global(self) -> bool:
        return self.section == GLOBAL_SECTION

    def __str__(self) -> str:
        return f'{self.section}{SCOPE_SEP}{self.key}'


class SpecStore(MutableMapping[str, list[str]]):
    """All specs of a loaded file, keyed by scoped key.

    Keys compare case-insensitively, but the spelling used at first
    insertion (mostly the `[Section]` header as written) is kept for display.
    """

    def __init__(self) -> None:
        self.__data: dict[str, list[str]] = {}
        # to maintain original keys for dumping
        self.__keyproxy: dict[str, str] = {}
        self.__scripts: set[str] = set()

    @staticmethod
    def _fold(key: str) -> str:
        return ascii_lower(key)

    def __getitem__(self, key: str) -> list[str]:
        return self.__data[self._fold(key)]

    def __setitem__(self, key: str, value: Sequence[str]) -> None:
        if SCOPE_SEP not in key:
            raise ValueError(f'"{key}" is not a scoped key.')
        folded = self._fold(key)
        self.__keyproxy.setdefault(folded, key)
        self.__data[folded] = list(value)
        # plain assignment always means a tokenized value list.
        self.__scripts.discard(folded)

    def __delitem__(self, key: str) -> None:
        folded = self._fold(key)
        del self.__data[folded]
        del self.__keyproxy[folded]
        self.__scripts.discard(folded)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self._fold(key) in self.__data

    def __iter__(self) -> Iterator[str]:
        return iter(self.__keyproxy.values())

    def __len__(self) -> int:
        return len(self.__data)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SpecStore):
            return NotImplemented
        return (self.__data == other.__data
                and self.__scripts == other.__scripts)

    def __repr__(self) -> str:
        return 'SpecStore { .cnt = %d, .scripts = %d }' % (
            len(self.__data), len(self.__scripts))

    def clear(self) -> None:
        self.__data.clear()
        self.__keyproxy.clear()
        self.__scripts.clear()

    def set_script(self, key: str, lines: Iterable[str]) -> None:
        """Store raw script lines under `key`."""
        self[key] = list(lines)
        self.__scripts.add(self._fold(key))

    def is_script(self, key: str) -> bool:
        return self._fold(key) in self.__scripts

    def sections(self) -> list[str]:
        """Distinct section names in order of appearance ('' is global)."""
        ret: dict[str, str] = {}
        for i in self.__keyproxy.values():
            section = ScopedKey.parse(i).section
            ret.setdefault(self._fold(section), section)
        return list(ret.values())

    def _items(self) -> "zip[tuple[str, list[str]]]":
        """Iterate for each original key and corresponding value list."""
        return zip(self.__keyproxy.values(), self.__data.values())
