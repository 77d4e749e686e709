#! /usr/bin/env python3
# -*- encoding:utf-8 -*-

from keytrie.array import SortedArrayTrie
from keytrie.base import Trie
from keytrie.chars import CLUSTERS, CODEPOINTS, TUPLES, Characters
from keytrie.trie import PrefixTrie, SuffixTrie
from keytrie.util import bisect_first, logger

__version__ = '0.1.0'

__all__ = [
    'Trie',
    'PrefixTrie',
    'SuffixTrie',
    'SortedArrayTrie',
    'Characters',
    'CODEPOINTS',
    'CLUSTERS',
    'TUPLES',
    'bisect_first',
    'logger',
]
