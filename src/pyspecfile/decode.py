# -*- encoding: utf-8 -*-
# @File   : decode.py
# @Time   : 2026/10/19 15:25:19
# @Author : Kariko Lin

"""Decoding value-list strings into native types.

Numbers are parsed the forgiving way C's `strtoul()` / `strtod()` do:
the longest valid prefix counts, and nothing valid at all means zero.
"""

from dataclasses import dataclass
from re import IGNORECASE
from re import compile as regex
from typing import Any, Callable, Iterable, Sequence

from .consts import DecodeKind
from .tokenizer import ascii_lower

_INT_PREFIX = regex(
    r'\s*([+-]?)(?:0[xX]([0-9a-fA-F]+)|(0[0-7]*)|([1-9][0-9]*))')
_FLOAT_PREFIX = regex(
    r'\s*[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?'
    r'|inf(?:inity)?|nan)', IGNORECASE)


def decode_int(s: str) -> int:
    """`'0x1F'` => 31, `'010'` => 8, `'12abc'` => 12, `'abc'` => 0."""
    if not (m := _INT_PREFIX.match(s)):
        return 0
    sign, hexa, octal, dec = m.groups()
    if hexa is not None:
        ret = int(hexa, 16)
    elif octal is not None:
        ret = int(octal, 8)
    else:
        ret = int(dec)
    return -ret if sign == '-' else ret


def decode_float(s: str) -> float:
    if not (m := _FLOAT_PREFIX.match(s)):
        return 0.0
    return float(m.group().strip())


def decode_str(s: str) -> str:
    return s


def decode_bool(s: str) -> bool:
    """Non-zero leading digit, or the word "true" (any case)."""
    if s and s[0] in '123456789':
        return True
    return ascii_lower(s) == 'true'


DECODERS: dict[DecodeKind, Callable[[str], Any]] = {
    DecodeKind.INT: decode_int,
    DecodeKind.FLOAT: decode_float,
    DecodeKind.STRING: decode_str,
    DecodeKind.BOOL: decode_bool,
}


def decode(s: str, kind: DecodeKind | str) -> Any:
    return DECODERS[DecodeKind(kind)](s)


def decode_all(values: Iterable[str], kind: DecodeKind | str) -> list:
    func = DECODERS[DecodeKind(kind)]
    return [func(i) for i in values]


def expand_format(fmt: str, count: int | None = None) -> list[DecodeKind]:
    """One decode kind per output position.

    `count` defaults to `len(fmt)`; a short `fmt` recycles its last letter,
    and an empty one means integers.
    e.g. `expand_format('sf', 4)` => `[STRING, FLOAT, FLOAT, FLOAT]`
    """
    kinds = [DecodeKind(i) for i in fmt] or [DecodeKind.INT]
    if count is None:
        count = len(kinds)
    return [kinds[min(i, len(kinds) - 1)] for i in range(count)]


@dataclass
class Slot:
    """A typed output destination, filled by `decode_into()`."""
    kind: DecodeKind
    value: Any = None

    def __post_init__(self) -> None:
        self.kind = DecodeKind(self.kind)


def decode_into(values: Sequence[str], slots: Iterable[Slot]) -> None:
    """Walk values and slots in lockstep.

    Slots past the end of `values` receive the zero value of their kind.
    """
    for i, slot in enumerate(slots):
        slot.value = decode(values[i] if i < len(values) else '', slot.kind)
