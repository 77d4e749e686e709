#! /usr/bin/env python3
# -*- encoding:utf-8 -*-

"""Character-boundary policies.

A container splits every key into a sequence of atomic characters and joins
recovered sequences back into keys. The policy is fixed per container."""

from abc import ABCMeta, abstractmethod
import unicodedata
from typing import Any, Sequence

ZWJ = '\u200d'
_MARKS = ('Mn', 'Mc', 'Me')


class Characters(metaclass=ABCMeta):
    @property
    @abstractmethod
    def empty(self) -> Sequence: ...
    @abstractmethod
    def split(self, key: Any) -> Sequence: ...
    @abstractmethod
    def join(self, chars: Sequence) -> Any: ...


class Codepoints(Characters):
    """Keys are used as they are: a str is its code points, a tuple its items."""
    def __init__(self, empty: Sequence = '') -> None:
        self._empty = empty
    @property
    def empty(self) -> Sequence:
        return self._empty
    def split(self, key: Any) -> Sequence:
        return key
    def join(self, chars: Sequence) -> Any:
        return chars


def _extends(prev: str, c: str) -> bool:
    if prev.endswith(ZWJ) or c == ZWJ:
        return True
    if unicodedata.combining(c) or unicodedata.category(c) in _MARKS:
        return True
    # emoji skin tone modifiers
    return '\U0001f3fb' <= c <= '\U0001f3ff'


class Clusters(Characters):
    """A str is split into clusters: a base code point with its combining
    marks, variation selectors, skin tone modifiers and ZWJ continuations."""
    @property
    def empty(self) -> Sequence:
        return ()
    def split(self, key: Any) -> Sequence:
        clusters: list[str] = []
        for c in key:
            if clusters and _extends(clusters[-1], c):
                clusters[-1] += c
            else:
                clusters.append(c)
        return tuple(clusters)
    def join(self, chars: Sequence) -> Any:
        return ''.join(chars)


CODEPOINTS = Codepoints()
# keys that are tuples of tokens rather than str
TUPLES = Codepoints(())
CLUSTERS = Clusters()
