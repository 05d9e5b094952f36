# -*- encoding: utf-8 -*-
# @File   : tokenizer.py
# @Time   : 2026/10/19 14:10:52
# @Author : Kariko Lin

"""Lexing helpers shared by the loader and the script cursor.

Everything here works on plain ASCII semantics, i.e. only `A-Z` get folded.
"""

from typing import Iterator

from .consts import QUOTE_MARKS

__all__ = [
    'ascii_lower', 'cleanup', 'parse_to_delimiter', 'scan_tokens', 'tokenize'
]

_LOWER = str.maketrans(
    'ABCDEFGHIJKLMNOPQRSTUVWXYZ',
    'abcdefghijklmnopqrstuvwxyz')


def ascii_lower(s: str) -> str:
    return s.translate(_LOWER)


def cleanup(line: str) -> str:
    """Tabs become spaces, and the line ends at its first CR or LF."""
    for eol in ('\r', '\n'):
        if (idx := line.find(eol)) >= 0:
            line = line[:idx]
    return line.replace('\t', ' ')


def parse_to_delimiter(text: str, delimiter: str, *, lower: bool = True) -> str:
    """Grab a single word, stopping at a space, `delimiter` or the end.

    e.g. `parse_to_delimiter('  Port=80', '=')` => `'port'`
    """
    i, n = 0, len(text)
    while i < n and text[i] == ' ':
        i += 1
    start = i
    while i < n and text[i] != ' ' and text[i] != delimiter:
        i += 1
    word = text[start:i]
    return ascii_lower(word) if lower else word


def scan_tokens(
    line: str, *, lower: bool = False
) -> Iterator[tuple[str, bool]]:
    """Like `tokenize()`, but each token comes with whether it was quoted."""
    i, n = 0, len(line)
    while True:
        while i < n and line[i] == ' ':
            i += 1
        if i >= n:
            return

        quote = None
        if line[i] in QUOTE_MARKS:
            quote = line[i]
            i += 1

        start = i
        if quote:
            while i < n and line[i] != quote:
                i += 1
            token = line[start:i]
            if i < n:  # closing quote
                i += 1
        else:
            while i < n and line[i] not in ' ,':
                i += 1
            token = line[start:i]
            if lower:
                token = ascii_lower(token)

        # `a ,, b` shouldn't produce phantoms, but `""` is a real value.
        if quote or token:
            yield token, quote is not None

        while i < n and line[i] == ' ':
            i += 1
        if i < n and line[i] == ',':
            i += 1


def tokenize(line: str, *, lower: bool = False) -> Iterator[str]:
    """Split a line on unquoted spaces and commas.

    A token starting with `'` or `"` runs until the matching quote
    (or the end of line), keeping spaces, commas and letter case.
    With `lower`, characters of unquoted tokens get ASCII-folded.
    """
    for token, _ in scan_tokens(line, lower=lower):
        yield token
