#! /usr/bin/env python3
# -*- encoding:utf-8 -*-

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from operator import attrgetter
from typing import Any, Generic, Optional, TypeVar

from sortedcontainers import SortedKeyList

from keytrie.base import Trie
from keytrie.chars import CODEPOINTS, Characters
from keytrie.util import bisect_first, hasprefix, logger

_ST = TypeVar('_ST', bound=Sequence)
_VT = TypeVar('_VT')


@dataclass
class _Entry(Generic[_ST, _VT]):
    key: _ST
    val: _VT


class SortedArrayTrie(Trie[_VT]):
    """Sorted array of entries answering the same queries as a prefix trie.

    All keys sharing a prefix are contiguous in the array, so a prefix query
    is a range found by two bisections.
    """
    array: SortedKeyList

    def __init__(self, init: Optional[Mapping[Any, _VT]] = None, chars: Characters = CODEPOINTS) -> None:
        self.array = SortedKeyList(key=attrgetter('key'))
        super().__init__(init, chars)

    def index(self, key: Sequence, isprefix: bool = False) -> Optional[int]:
        """Index of the entry at `key`, or with `isprefix` of the first entry
        starting with `key`."""
        if not key:
            # the empty key sorts first and prefixes every key
            if self.array and (isprefix or not self.array[0].key):
                return 0
            return None
        index = bisect_first(self.array, lambda e: e.key >= key)
        if index is None:
            return None
        first = self.array[index].key
        if first == key or isprefix and hasprefix(first, key):
            return index
        return None

    def span(self, prefix: Sequence) -> Optional[range]:
        index = self.index(prefix, isprefix=True)
        if index is None:
            return None
        if not prefix:
            return range(0, len(self.array))
        if index + 1 < len(self.array):
            end = bisect_first(self.array, lambda e: e.key > prefix and not hasprefix(e.key, prefix))
            if end is not None:
                return range(index, end)
        if hasprefix(self.array[-1].key, prefix):
            return range(index, len(self.array))
        return range(index, index + 1)

    @property
    def count(self) -> int:
        return len(self.array)

    def get(self, __key, __default=None):
        index = self.index(self.chars.split(__key))
        if index is None:
            return __default
        return self.array[index].val

    def contains(self, key: Any) -> bool:
        return self.index(self.chars.split(key)) is not None

    def contains_any(self, prefix: Any) -> bool:
        return self.index(self.chars.split(prefix), isprefix=True) is not None

    def values_for(self, prefix: Any) -> list[_VT]:
        r = self.span(self.chars.split(prefix))
        if r is None:
            return []
        return [e.val for e in self.array[r.start:r.stop]]

    def insert(self, key: Any, value: Optional[_VT]) -> None:
        if value is None:
            self.remove(key)
            return
        key = self.chars.split(key)
        index = self.index(key)
        if index is not None:
            self.array[index].val = value
        else:
            # SortedKeyList has no positional insert; add bisects to the same slot
            self.array.add(_Entry(key, value))

    def remove(self, key: Any) -> None:
        index = self.index(self.chars.split(key))
        if index is not None:
            del self.array[index]

    def remove_all(self, prefix: Any) -> None:
        r = self.span(self.chars.split(prefix))
        if r is not None:
            logger.debug('drop %d entries from %d', len(r), r.start)
            del self.array[r.start:r.stop]

    def dictionary(self) -> dict[Any, _VT]:
        return {self.chars.join(e.key): e.val for e in self.array}

    def clear(self) -> None:
        self.array.clear()
