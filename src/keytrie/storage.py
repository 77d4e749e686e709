#! /usr/bin/env python3
# -*- encoding:utf-8 -*-

from io import TextIOWrapper
import os

import chardet

from keytrie.util import logger


def guess_encoding(name: os.PathLike | str) -> str:
    encoding = 'utf-8'
    try:
        with open(name, 'rb') as f:
            header = f.read(1000)
        guess = chardet.detect(header)['encoding']
        if isinstance(guess, str):
            if guess in ('ascii', 'Windows-1254'):
                guess = 'utf-8'
            encoding = guess
    except OSError as e:
        logger.warning(e)
    return encoding


def filein(name: os.PathLike | str, **kwargs) -> TextIOWrapper:
    return open(name, 'r', encoding=guess_encoding(name), **kwargs)


def load_keywords(name: os.PathLike | str) -> list[str]:
    """Non-empty stripped lines of a keyword file, `#` lines are comments."""
    with filein(name) as f:
        words = [line.strip() for line in f]
    words = [w for w in words if w and not w.startswith('#')]
    logger.debug('loaded %d keywords from %s', len(words), name)
    return words
