#! /usr/bin/env python3
# -*- encoding:utf-8 -*-

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from io import StringIO
from typing import Any, Callable, Generic, Iterator, Optional, Self, TypeVar

from keytrie.base import Trie
from keytrie.chars import CODEPOINTS, Characters
from keytrie.util import common_length, hasprefix, logger

_ST = TypeVar('_ST', bound=Sequence)
_VT = TypeVar('_VT')


@dataclass
class _TrieNode(Generic[_ST, _VT]):
    """Node of the compressed trie.

    `part` is the fragment shared by every key passing through the node, `nxt`
    maps the first character of each child's fragment to the child, `val` is
    set iff a key ends here and `count` is the number of values in the
    subtree.
    """
    part: _ST
    nxt: dict[Any, Self] = field(default_factory=dict)
    val: Optional[_VT] = None
    count: int = 0

    def __post_init__(self) -> None:
        self.update_count()

    def isempty(self) -> bool:
        return self.val is None and not self.nxt

    def update_count(self) -> None:
        self.count = sum((n.count for n in self.nxt.values()), 0 if self.val is None else 1)

    def child(self, key: _ST, isprefix: bool = False) -> Optional[Self]:
        if not key:
            return None
        node = self.nxt.get(key[0])
        if node is None:
            return None
        if hasprefix(key, node.part) or isprefix and hasprefix(node.part, key):
            return node
        return None

    def find(self, key: _ST, isprefix: bool = False) -> Optional[Self]:
        """Node reached by consuming `key`.

        With `isprefix` the key may also end inside a fragment, in which case
        the node owning that fragment is returned.
        """
        node = self
        while key:
            nxt = node.child(key, isprefix)
            if nxt is None:
                return None
            node, key = nxt, key[len(nxt.part):]
        return node

    def insert(self, key: _ST, value: _VT) -> None:
        if not key:
            self.val = value
        else:
            first = key[0]
            node = self.nxt.get(first)
            if node is None:
                self.nxt[first] = _TrieNode(key, val=value)
            else:
                part = node.part
                length = common_length(part, key)
                if length == len(part) == len(key):
                    node.val = value
                    node.update_count()
                elif length == len(part):
                    node.insert(key[length:], value)
                else:
                    logger.debug('split %r at %d', part, length)
                    node.part = part[length:]
                    if length == len(key):
                        newnode = _TrieNode(part[:length], {node.part[0]: node}, value)
                    else:
                        newnode = _TrieNode(part[:length], {node.part[0]: node})
                        newnode.insert(key[length:], value)
                    self.nxt[first] = newnode
        self.update_count()

    def remove(self, key: _ST, subtree: bool = False) -> bool:
        """Remove the value at `key`, or every value below it with `subtree`.

        Returns whether this node is left empty so the caller can prune it.
        """
        if not key:
            self.val = None
            if subtree:
                self.nxt.clear()
        else:
            first = key[0]
            node = self.nxt.get(first)
            if node is not None:
                if subtree and hasprefix(node.part, key):
                    logger.debug('drop %r with %d values', node.part, node.count)
                    del self.nxt[first]
                elif hasprefix(key, node.part):
                    if node.remove(key[len(node.part):], subtree):
                        del self.nxt[first]
                    else:
                        self.nxt[first] = node.collapse()
        self.update_count()
        return self.isempty()

    def collapse(self) -> Self:
        """Merge a node without value into its only child."""
        if self.val is not None or len(self.nxt) != 1:
            return self
        only = next(iter(self.nxt.values()))
        logger.debug('merge %r into %r', self.part, only.part)
        only.part = self.part + only.part
        return only

    def collect(self) -> list[_VT]:
        values: list[_VT] = []
        stack = [self]
        while stack:
            n = stack.pop()
            if n.val is not None:
                values.append(n.val)
            stack.extend(n.nxt.values())
        return values

    def items(self) -> Iterator[tuple[_ST, _VT]]:
        """Full keys below this node, starting from the node's own fragment."""
        stack = [(self, self.part)]
        while stack:
            n, p = stack.pop()
            if n.val is not None:
                yield p, n.val
            # an empty path may be a str while the keys are tuples
            stack.extend((c, p + c.part if p else c.part) for c in n.nxt.values())

    def stringify(self, sio: StringIO, substringfy: Callable[[Any], str] = str, getval: Optional[Callable[[_VT], str]] = None) -> None:
        sio.write(substringfy(self.part))
        if getval is not None and self.val is not None:
            sio.write('(')
            sio.write(getval(self.val))
            sio.write(')')
        if self.nxt:
            sio.write(':{')
            first = True
            for v in self.nxt.values():
                if first:
                    first = False
                else:
                    sio.write(', ')
                v.stringify(sio, substringfy, getval)
            sio.write('}')

    def __str__(self):
        sio = StringIO()
        self.stringify(sio)
        return sio.getvalue()


class PrefixTrie(Trie[_VT]):
    """Compressed trie indexing keys left to right.

    >>> t = PrefixTrie.fromstrings(['as', 'associatedtype', 'await'])
    >>> sorted(t.values_for('as'))
    ['as', 'associatedtype']
    >>> t.contains_any('ass'), t.contains('ass')
    (True, False)
    """
    root: _TrieNode[Any, _VT]

    def __init__(self, init: Optional[Mapping[Any, _VT]] = None, chars: Characters = CODEPOINTS) -> None:
        self.root = _TrieNode(chars.empty)
        super().__init__(init, chars)

    def _key(self, key: Any) -> Sequence:
        return self.chars.split(key)

    def _unkey(self, chars: Sequence) -> Any:
        return self.chars.join(chars)

    @property
    def count(self) -> int:
        return self.root.count

    def get(self, __key, __default=None):
        node = self.root.find(self._key(__key))
        if node is None or node.val is None:
            return __default
        return node.val

    def contains(self, key: Any) -> bool:
        node = self.root.find(self._key(key))
        return node is not None and node.val is not None

    def contains_any(self, prefix: Any) -> bool:
        node = self.root.find(self._key(prefix), isprefix=True)
        return node is not None and not node.isempty()

    def values_for(self, prefix: Any) -> list[_VT]:
        node = self.root.find(self._key(prefix), isprefix=True)
        if node is None:
            return []
        return node.collect()

    def insert(self, key: Any, value: Optional[_VT]) -> None:
        if value is None:
            self.remove(key)
        else:
            key = self._key(key)
            if not key:
                self.root.part = key
            self.root.insert(key, value)

    def remove(self, key: Any) -> None:
        self.root.remove(self._key(key))

    def remove_all(self, prefix: Any) -> None:
        self.root.remove(self._key(prefix), subtree=True)

    def dictionary(self) -> dict[Any, _VT]:
        return {self._unkey(k): v for k, v in self.root.items()}

    def clear(self) -> None:
        self.root = _TrieNode(self.chars.empty)

    def __str__(self) -> str:
        sio = StringIO()
        sio.write(f'{self.__class__.__qualname__}(')
        self.root.stringify(sio, str, getval=str)
        sio.write(')')
        return sio.getvalue()


class SuffixTrie(PrefixTrie[_VT]):
    """Compressed trie indexing keys right to left.

    Keys and queries are reversed character by character on the way in and
    recovered keys are reversed back, so `values_for`, `contains_any` and
    `remove_all` work on suffixes.

    >>> t = SuffixTrie.fromstrings(['defer', 'super'])
    >>> sorted(t.values_for('er')), t.values_for('fer')
    (['defer', 'super'], ['defer'])
    """

    def _key(self, key: Any) -> Sequence:
        return self.chars.split(key)[::-1]

    def _unkey(self, chars: Sequence) -> Any:
        return self.chars.join(chars[::-1])
