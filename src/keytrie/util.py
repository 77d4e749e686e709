#! /usr/bin/env python3
# -*- encoding:utf-8 -*-

import logging
import sys
from typing import Callable, Optional, Sequence, TypeVar

_T = TypeVar('_T')
_ST = TypeVar('_ST', bound=Sequence)


def bisect_first(seq: Sequence[_T], predicate: Callable[[_T], bool]) -> Optional[int]:
    """Index of the first element satisfying `predicate`, or None.

    `predicate` must be monotonic over `seq` (False...False, True...True).
    It is evaluated at most ceil(log2(len(seq) + 1)) times.
    """
    start, end = 0, len(seq)
    while start < end:
        mid = (start + end) // 2
        if predicate(seq[mid]):
            end = mid
        else:
            start = mid + 1
    if start < len(seq):
        return start
    return None


def common_length(a: Sequence, b: Sequence) -> int:
    for i in range(min(len(a), len(b))):
        if a[i] != b[i]:
            return i
    return min(len(a), len(b))


def hasprefix(seq: _ST, prefix: _ST) -> bool:
    return len(prefix) <= len(seq) and seq[:len(prefix)] == prefix


logger = logging.Logger('keytrie', 'INFO')
def __init():
    fmt = logging.Formatter('[%(levelname)s] %(filename)s:%(lineno)d: %(message)s', None, '%')
    if not logger.hasHandlers():
        logger.addHandler(logging.StreamHandler(sys.stdout))
    for h in logger.handlers:
        h.setFormatter(fmt)
__init()
del __init
