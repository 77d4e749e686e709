#! /usr/bin/env python3
# -*- encoding:utf-8 -*-

import argparse
import json

from keytrie.array import SortedArrayTrie
from keytrie.chars import CLUSTERS, CODEPOINTS
from keytrie.storage import load_keywords
from keytrie.trie import PrefixTrie, SuffixTrie
from keytrie.util import logger

kinds = {
    'prefix': PrefixTrie,
    'suffix': SuffixTrie,
    'array': SortedArrayTrie,
}

parser = argparse.ArgumentParser(prog='keytrie', description='index keywords and query them by prefix or suffix')
# fmt: off
parser.add_argument('words', nargs='*',
                    help='keywords, each one is its own key and value')
parser.add_argument('-w', '--words', dest='files', action='append', default=[], metavar='FILE',
                    help='read keywords from FILE (one per line, # starts a comment)')
parser.add_argument('-k', '--kind', choices=sorted(kinds), default='prefix',
                    help='container: prefix trie, suffix trie or sorted array [default: prefix]')
parser.add_argument('--clusters', action='store_true',
                    help='treat combining sequences as single characters')
parser.add_argument('-q', '--query', action='append', default=[],
                    help='print the values of all keys with this prefix (suffix for --kind suffix)')
parser.add_argument('-x', '--exact', action='append', default=[],
                    help='print whether this exact key is stored')
parser.add_argument('-a', '--any', action='append', default=[],
                    help='print whether any key starts (ends) with this')
parser.add_argument('-r', '--remove', action='append', default=[],
                    help='remove this key before querying')
parser.add_argument('-R', '--remove-all', action='append', default=[],
                    help='remove all keys with this prefix (suffix) before querying')
parser.add_argument('-d', '--dump', action='store_true',
                    help='print all stored keys and values as json')
parser.add_argument('-v', '--verbose', action='store_true',
                    help='show debug log')
parser.add_argument('--level',
                    help='log level')
# fmt: on

logger_levels = ('DEBUG', 'INFO', 'WARN', 'WARNING', 'ERROR', 'CRITICAL', 'FATAL')


def main(argv=None) -> int:
    args = parser.parse_args(argv)
    if isinstance(args.level, str) and args.level.upper() in logger_levels:
        logger.setLevel(args.level.upper())
    elif args.verbose:
        logger.setLevel('DEBUG')

    words = list(args.words)
    for name in args.files:
        words.extend(load_keywords(name))
    trie = kinds[args.kind].fromstrings(words, chars=CLUSTERS if args.clusters else CODEPOINTS)
    logger.info('%s holds %d values', args.kind, trie.count)

    for key in args.remove:
        trie.remove(key)
    for prefix in args.remove_all:
        trie.remove_all(prefix)
    if args.remove or args.remove_all:
        logger.info('%d values left', trie.count)

    for prefix in args.query:
        print(' '.join(sorted(trie.values_for(prefix))))
    for key in args.exact:
        print(trie.contains(key))
    for prefix in args.any:
        print(trie.contains_any(prefix))
    if args.dump:
        print(json.dumps(trie.dictionary(), ensure_ascii=False, sort_keys=True))
    return 0


if __name__ == '__main__':
    raise SystemExit(main())
