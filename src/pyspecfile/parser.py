# -*- encoding: utf-8 -*-
# @File   : parser.py
# @Time   : 2026/10/19 14:48:26
# @Author : Kariko Lin

"""Spec file reader.

The format is line oriented:

    ```
    # comment, as is `// comment`
    # a global spec, stored as `::timeout`
    timeout = 30
    [net]
    # stored as `net::port`
    port = 9000
    hosts = alpha, "Beta Gamma"
    init = {
    move 10 20
    wait 5
    }
    ```

Unquoted value tokens are folded to lower case,
script lines are kept as written and only tokenized when consumed.
"""

import logging
import warnings
from dataclasses import dataclass, field
from io import StringIO
from locale import getpreferredencoding
from os import PathLike
from typing import Iterable

import chardet

from .abstract import FileHandler
from .consts import COMMENT_MARKS, SCOPE_SEP, GLOBAL_SECTION, LineKind
from .errors import InvalidKey, MalformedScript, SpecSyntaxError
from .model import SpecStore
from .tokenizer import cleanup, parse_to_delimiter, scan_tokens


def classify(line: str, in_script: bool = False) -> LineKind:
    """Tell what a cleaned-up, left-stripped line is.

    Comments and section headers win even inside a script block.
    """
    if not line or line.startswith(COMMENT_MARKS):
        return LineKind.BLANK
    match line[0]:
        case '[':
            return LineKind.SECTION
        case '{':
            return LineKind.SCRIPT_OPEN
        case '}':
            return LineKind.SCRIPT_CLOSE
    return LineKind.SCRIPT_LINE if in_script else LineKind.KEY_VALUE


@dataclass
class ParseState:
    """Transient state of one load pass."""
    section: str = GLOBAL_SECTION
    in_script: bool = False
    script: list[str] = field(default_factory=list)
    # whatever key line came last, also the target of the next script.
    scoped_key: str | None = None
    # key lines under a rejected `[a::b]` header are dropped.
    skip_section: bool = False
    lineno: int = 0


class SpecParser(FileHandler[SpecStore]):
    def __init__(
        self, filename: str | PathLike[str],
        encoding: str | None = None, *,
        strict: bool = False
    ) -> None:
        super().__init__(filename)
        self._codec = encoding
        self._strict = strict

    @staticmethod
    def _complain(exc: SpecSyntaxError, strict: bool) -> None:
        if strict:
            raise exc
        warnings.warn(str(exc))

    @staticmethod
    def _open_script(state: ParseState, strict: bool) -> None:
        if state.scoped_key is None and not state.skip_section:
            SpecParser._complain(MalformedScript(
                'script block opened without a preceding key line.',
                state.lineno), strict)
        state.script = []
        state.in_script = True

    @staticmethod
    def _close_script(
        state: ParseState, store: SpecStore, strict: bool
    ) -> None:
        if not state.in_script:
            SpecParser._complain(MalformedScript(
                "'}' without an open script block.", state.lineno), strict)
        elif state.scoped_key is not None:
            store.set_script(state.scoped_key, state.script)
        state.script = []
        state.in_script = False

    @staticmethod
    def _read_section(line: str, state: ParseState, strict: bool) -> None:
        section = parse_to_delimiter(line[1:], ']', lower=False)
        state.skip_section = SCOPE_SEP in section
        if state.skip_section:
            state.scoped_key = None
            SpecParser._complain(InvalidKey(
                f'bad section name in "{line}", its keys are dropped.',
                state.lineno), strict)
            return
        state.section = section

    @staticmethod
    def _read_pair(
        line: str, state: ParseState, store: SpecStore, strict: bool
    ) -> None:
        eq = line.find('=')
        marked = [] if eq < 0 else list(scan_tokens(line[eq + 1:], lower=True))
        # `init = {` opens a script named after the line itself.
        opens_script = bool(marked) and marked[-1] == ('{', False)
        if state.skip_section:
            # still swallow the block, so its lines aren't read as keys.
            if opens_script:
                SpecParser._open_script(state, strict)
            return

        key = parse_to_delimiter(line, '=')
        if not key or SCOPE_SEP in key:
            state.scoped_key = None
            SpecParser._complain(InvalidKey(
                f'bad key name in "{line}".', state.lineno), strict)
            return
        state.scoped_key = f'{state.section}{SCOPE_SEP}{key}'

        if opens_script:
            SpecParser._open_script(state, strict)
            return
        store[state.scoped_key] = [token for token, _ in marked]

    @staticmethod
    def readstream(
        lines: Iterable[str],
        store: SpecStore | None = None, *,
        strict: bool = False
    ) -> SpecStore:
        """Parse decoded text lines (a text stream works as well).

        If no special needs, just call `self.read()` instead.
        """
        if store is None:
            store = SpecStore()
        state = ParseState()
        for raw in lines:
            state.lineno += 1
            line = cleanup(raw).lstrip(' ')
            match classify(line, state.in_script):
                case LineKind.BLANK:
                    continue
                case LineKind.SECTION:
                    SpecParser._read_section(line, state, strict)
                case LineKind.SCRIPT_OPEN:
                    SpecParser._open_script(state, strict)
                case LineKind.SCRIPT_CLOSE:
                    SpecParser._close_script(state, store, strict)
                case LineKind.SCRIPT_LINE:
                    state.script.append(line)
                case LineKind.KEY_VALUE:
                    SpecParser._read_pair(line, state, store, strict)

        if state.in_script:
            SpecParser._complain(MalformedScript(
                f'script for "{state.scoped_key}" is not terminated, '
                'dropped.', state.lineno), strict)
        return store

    @staticmethod
    def _decode_file(
        filename: str | PathLike[str], encoding: str | None = None
    ) -> StringIO:
        with open(filename, 'rb') as fp:
            raw = fp.read()

        # same default as `open()`, and `chardet` only when that fails.
        try:
            return StringIO(
                raw.decode(encoding or getpreferredencoding(False)),
                newline=None)
        except UnicodeDecodeError:
            pass

        codec = chardet.detect(raw)
        if codec is None or (codec['confidence'] or 0) < 0.8:
            codec = {'encoding': 'utf-8'}

        # fallbacks
        try:
            buf = raw.decode(codec['encoding'] or 'utf-8')
        except (UnicodeDecodeError, LookupError):
            buf = raw.decode('latin-1')
        return StringIO(buf, newline=None)

    def read(self) -> SpecStore:
        """Read the file this parser points at.

        Raises `OSError` when the file cannot be opened.
        """
        # decoded as a whole before parsing, so a wrong `encoding` never
        # leaves a half-parsed pass (and its warnings) behind.
        ret = self.readstream(
            self._decode_file(self._fn, self._codec), strict=self._strict)
        logging.debug(f'{len(ret)} specs read from {self._fn}.')
        return ret

    def __str__(self) -> str:
        return "Spec file: " + super().__str__() + f"({self._codec})"
