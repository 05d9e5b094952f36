# -*- encoding: utf-8 -*-
# @File   : script.py
# @Time   : 2026/10/19 15:47:02
# @Author : Kariko Lin

from typing import Iterable, Iterator, NamedTuple

from .abstract import SerializedComponents
from .decode import decode_float, decode_int
from .tokenizer import ascii_lower, tokenize


class ScriptLine(NamedTuple):
    ok: bool
    token_count: int
    text: str

    def __bool__(self) -> bool:
        return self.ok


class ScriptCursor(SerializedComponents[ScriptLine]):
    """Walks a script block line by line, then token by token.

        ```python
        script = cfg.get_script('init')
        while line := script.next_line():
            match script.next_token(lower=True):
                case 'move':
                    x, y = script.next_int(), script.next_int()
                case 'wait':
                    secs = script.next_float()
        ```

    Every cursor owns its copy of the lines,
    so several cursors over the same script never disturb each other.
    """

    def __init__(self, lines: Iterable[str] = ()) -> None:
        self._lines: list[str] = []
        self._tokens: list[str] = []
        self._line_index = 0
        self._token_index = 0
        self.assign(lines)

    def assign(self, lines: Iterable[str]) -> None:
        """Re-bind to another script, starting over."""
        self._lines = list(lines)
        self._tokens = []
        self._line_index = self._token_index = 0

    def make_empty(self) -> None:
        self.assign(())

    def rewind(self) -> None:
        """The next `next_line()` fetches the first line again."""
        self._line_index = 0

    @property
    def exhausted(self) -> bool:
        return self._line_index >= len(self._lines)

    @property
    def line_index(self) -> int:
        return self._line_index

    @property
    def tokens(self) -> list[str]:
        """Tokens of the line fetched last."""
        return list(self._tokens)

    @property
    def current(self) -> str:
        """Raw text of the line fetched last, '' before the first fetch."""
        return self._lines[self._line_index - 1] if self._line_index else ''

    def next_line(self) -> ScriptLine:
        if self.exhausted:
            return ScriptLine(False, 0, '')
        text = self._lines[self._line_index]
        self._line_index += 1
        self._tokens = list(tokenize(text))
        self._token_index = 0
        return ScriptLine(True, len(self._tokens), text)

    def _next_raw(self) -> str | None:
        if self._token_index >= len(self._tokens):
            return None
        self._token_index += 1
        return self._tokens[self._token_index - 1]

    def next_token(self, lower: bool = False) -> str:
        if (token := self._next_raw()) is None:
            return ''
        return ascii_lower(token) if lower else token

    def next_int(self) -> int:
        return 0 if (token := self._next_raw()) is None else decode_int(token)

    def next_float(self) -> float:
        return (0.0 if (token := self._next_raw()) is None
                else decode_float(token))

    def __len__(self) -> int:
        return len(self._lines)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._lines))

    def __str__(self) -> str:
        return '\n'.join(self._lines)

    def __repr__(self) -> str:
        return 'ScriptCursor { .lines = %d, .at = %d }' % (
            len(self._lines), self._line_index)
