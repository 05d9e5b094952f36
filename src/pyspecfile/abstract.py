# -*- encoding: utf-8 -*-
# @File   : abstract.py
# @Time   : 2026/10/19 14:21:40
# @Author : Kariko Lin

from abc import ABCMeta, abstractmethod
from os import PathLike
from typing import Generic, TypeVar

T = TypeVar('T')


class SerializedComponents(Generic[T], metaclass=ABCMeta):
    """Sequential, rewindable access over some parsed components."""
    @abstractmethod
    def rewind(self) -> None:
        raise NotImplementedError

    @property
    @abstractmethod
    def exhausted(self) -> bool:
        raise NotImplementedError

    @abstractmethod
    def next_line(self) -> T:
        raise NotImplementedError

    @property
    @abstractmethod
    def current(self) -> str:
        raise NotImplementedError

    @abstractmethod
    def __str__(self) -> str:
        raise NotImplementedError


# read only. writing specs back to disk is not something we do.
class FileHandler(Generic[T], metaclass=ABCMeta):
    def __init__(self, filename: str | PathLike[str]) -> None:
        self._fn = filename

    @abstractmethod
    def read(self) -> T:
        raise NotImplementedError

    def __str__(self) -> str:
        return str(self._fn)
