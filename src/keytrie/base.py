#! /usr/bin/env python3
# -*- encoding:utf-8 -*-

from abc import ABCMeta, abstractmethod
from collections.abc import Iterable, Mapping, MutableMapping, Sequence
from typing import Any, Iterator, Optional, Self, TypeVar, overload

from keytrie.chars import CODEPOINTS, Characters

_T = TypeVar('_T')
_VT = TypeVar('_VT')


class Trie(MutableMapping[Any, _VT], metaclass=ABCMeta):
    """Container of values keyed by character sequences.

    Every engine answers exact lookups as well as range lookups over all keys
    sharing a prefix (or a suffix, for the suffix trie). Setting a key to None
    removes it; None is never stored.
    """
    chars: Characters

    def __init__(self, init: Optional[Mapping[Any, _VT]] = None, chars: Characters = CODEPOINTS) -> None:
        self.chars = chars
        if init is not None:
            for k, v in init.items():
                self.insert(k, v)

    @classmethod
    def fromstrings(cls, strings: Iterable[str], chars: Characters = CODEPOINTS) -> Self:
        """Build a trie where every string is its own key and value."""
        trie = cls(chars=chars)
        for s in strings:
            trie.insert(s, s)
        return trie

    @property
    @abstractmethod
    def count(self) -> int:
        """Number of values stored, not of nodes."""

    def isempty(self) -> bool:
        return self.count == 0

    @overload
    def get(self, __key: Any) -> _VT | None: ...
    @overload
    def get(self, __key: Any, __default: _VT | _T) -> _VT | _T: ...
    @abstractmethod
    def get(self, __key, __default=None):
        """Value stored at exactly `__key`."""

    @abstractmethod
    def contains(self, key: Any) -> bool:
        """True iff a value is stored at exactly `key`."""

    @abstractmethod
    def contains_any(self, prefix: Any) -> bool:
        """True iff some stored key starts with `prefix` (or equals it)."""

    @abstractmethod
    def values_for(self, prefix: Any) -> list[_VT]:
        """All values whose key starts with `prefix`, in no particular order."""

    @abstractmethod
    def insert(self, key: Any, value: Optional[_VT]) -> None: ...

    @abstractmethod
    def remove(self, key: Any) -> None:
        """Remove the value stored at exactly `key`; no-op if there is none."""

    @abstractmethod
    def remove_all(self, prefix: Any) -> None:
        """Remove every key starting with `prefix`, including `prefix` itself."""

    @abstractmethod
    def dictionary(self) -> dict[Any, _VT]: ...

    @abstractmethod
    def clear(self) -> None:
        """Remove every value."""

    def __getitem__(self, __key: Any) -> _VT:
        v = self.get(__key)
        if v is None:
            raise KeyError(__key)
        return v

    def __setitem__(self, __key: Any, __value: Optional[_VT]) -> None:
        self.insert(__key, __value)

    def __delitem__(self, __key: Any) -> None:
        if not self.contains(__key):
            raise KeyError(__key)
        self.remove(__key)

    def __contains__(self, x: object) -> bool:
        if isinstance(x, Sequence):
            return self.contains(x)
        return False

    def __iter__(self) -> Iterator[Any]:
        return iter(self.dictionary())

    def __len__(self) -> int:
        return self.count

    def __repr__(self) -> str:
        return f'{self.__class__.__qualname__}({self.dictionary()!r})'
