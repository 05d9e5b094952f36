# -*- encoding: utf-8 -*-
# @File   : errors.py
# @Time   : 2026/10/19 14:05:37
# @Author : Kariko Lin


class SpecFileError(Exception):
    """Base of everything this package raises on purpose."""
    pass


class KeyNotFound(SpecFileError, LookupError):
    """A query could not resolve its key (only in `FailMode.RAISE`)."""
    def __init__(self, key: str) -> None:
        super().__init__(f"config key '{key}' not found")
        self.key = key


class SpecSyntaxError(SpecFileError):
    """To record malformed lines when reading spec files strictly."""
    def __init__(self, msg: str, lineno: int = 0) -> None:
        super().__init__(f'line {lineno}: {msg}' if lineno else msg)
        self.lineno = lineno


class MalformedScript(SpecSyntaxError):
    """Orphaned `}`, target-less `{`, or a script left open at EOF."""
    pass


class InvalidKey(SpecSyntaxError):
    """Empty key name, or one which already carries `::`."""
    pass
