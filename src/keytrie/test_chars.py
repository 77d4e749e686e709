from keytrie.array import SortedArrayTrie
from keytrie.chars import CLUSTERS, CODEPOINTS, TUPLES
from keytrie.test_trie import check_invariants
from keytrie.trie import PrefixTrie, SuffixTrie
import unittest

# decomposed: e followed by a combining acute accent
ACUTE_E = "e\u0301"
CAFE = "caf" + ACUTE_E
FIANCEE = "fianc" + ACUTE_E + "e"
FAMILY = "\U0001f468\u200d\U0001f469\u200d\U0001f467"


class TestClusters(unittest.TestCase):
    def test_split(self):
        self.assertEqual(CLUSTERS.split(CAFE), ("c", "a", "f", ACUTE_E))
        self.assertEqual(CLUSTERS.split(""), ())
        self.assertEqual(CLUSTERS.split("x" + FAMILY + "y"), ("x", FAMILY, "y"))
        self.assertEqual(CLUSTERS.split("\U0001f44d\U0001f3fd!"), ("\U0001f44d\U0001f3fd", "!"))

    def test_join(self):
        for s in (CAFE, "", FAMILY, "plain"):
            with self.subTest(s=s):
                self.assertEqual(CLUSTERS.join(CLUSTERS.split(s)), s)

    def test_codepoints(self):
        self.assertEqual(CODEPOINTS.split(CAFE), CAFE)
        self.assertEqual(len(CODEPOINTS.split(CAFE)), 5)
        self.assertEqual(CODEPOINTS.empty, "")
        self.assertEqual(TUPLES.empty, ())


class TestClusterTries(unittest.TestCase):
    def test_prefix_boundary(self):
        """Test that a cluster is matched as a whole"""
        by_codepoint = PrefixTrie.fromstrings([CAFE, "cafeteria"])
        by_cluster = PrefixTrie.fromstrings([CAFE, "cafeteria"], chars=CLUSTERS)
        self.assertEqual(sorted(by_codepoint.values_for("cafe")), sorted([CAFE, "cafeteria"]))
        self.assertEqual(by_cluster.values_for("cafe"), ["cafeteria"])
        self.assertEqual(sorted(by_cluster.values_for("caf")), sorted([CAFE, "cafeteria"]))
        self.assertEqual(by_cluster.dictionary(), {CAFE: CAFE, "cafeteria": "cafeteria"})
        check_invariants(by_cluster.root)

    def test_suffix_reversal(self):
        """Test that reversal keeps clusters intact"""
        trie = SuffixTrie.fromstrings([CAFE, FIANCEE, ACUTE_E], chars=CLUSTERS)
        self.assertEqual(sorted(trie.values_for(ACUTE_E)), sorted([CAFE, ACUTE_E]))
        self.assertEqual(trie.values_for("e"), [FIANCEE])
        self.assertEqual(trie.values_for("\u0301"), [])
        self.assertTrue(trie.contains(ACUTE_E))
        self.assertEqual(set(trie.dictionary()), {CAFE, FIANCEE, ACUTE_E})
        trie.remove_all(ACUTE_E)
        self.assertEqual(trie.dictionary(), {FIANCEE: FIANCEE})
        check_invariants(trie.root)

        by_codepoint = SuffixTrie.fromstrings([CAFE, FIANCEE, ACUTE_E])
        self.assertEqual(sorted(by_codepoint.values_for("\u0301")), sorted([CAFE, ACUTE_E]))
        self.assertEqual(set(by_codepoint.dictionary()), {CAFE, FIANCEE, ACUTE_E})

    def test_sorted_array(self):
        trie = SortedArrayTrie.fromstrings([CAFE, "cafeteria", "caff"], chars=CLUSTERS)
        self.assertEqual(trie.values_for("cafe"), ["cafeteria"])
        self.assertEqual(sorted(trie.values_for("caf")), sorted([CAFE, "cafeteria", "caff"]))
        self.assertTrue(trie.contains(CAFE))
        self.assertEqual(set(trie), {CAFE, "cafeteria", "caff"})

    def test_tuples(self):
        """Test keys that are sequences of tokens"""
        trie = PrefixTrie({(1, 2, 3): "a", (1, 2, 4): "b", (2,): "c"}, chars=TUPLES)
        self.assertEqual(sorted(trie.values_for((1, 2))), ["a", "b"])
        self.assertTrue(trie.contains_any((1,)))
        self.assertFalse(trie.contains((1, 2)))
        self.assertEqual(trie.dictionary(), {(1, 2, 3): "a", (1, 2, 4): "b", (2,): "c"})
        array = SortedArrayTrie(trie.dictionary(), chars=TUPLES)
        self.assertEqual(array, trie)
        trie.clear()
        self.assertTrue(trie.isempty())

    def test_tuples_default_chars(self):
        """Test tuple keys without choosing a character policy"""
        data = {(1, 2, 3): "a", (1, 2, 4): "b"}
        for cls in (PrefixTrie, SuffixTrie, SortedArrayTrie):
            with self.subTest(cls=cls.__name__):
                trie = cls(data)
                self.assertEqual(trie.dictionary(), data)
                self.assertEqual(set(trie), set(data))
                self.assertEqual(trie, data)
                self.assertEqual(repr(trie), f"{cls.__name__}({trie.dictionary()!r})")
                self.assertTrue(trie.contains_any(()))
                self.assertEqual(sorted(trie.values_for(())), ["a", "b"])
                trie[()] = "root"
                self.assertEqual(trie.get(()), "root")
                self.assertIn((), trie.dictionary())
                trie.clear()
                self.assertTrue(trie.isempty())
                self.assertEqual(trie.dictionary(), {})
                trie[(5,)] = "e"
                self.assertEqual(trie.dictionary(), {(5,): "e"})

    def test_remove_all_empty_tuple(self):
        """Test that removing every key under the empty tuple empties the container"""
        for cls in (PrefixTrie, SuffixTrie, SortedArrayTrie):
            with self.subTest(cls=cls.__name__):
                trie = cls({(1, 2, 3): "a", (2,): "c"})
                trie.remove_all(())
                self.assertTrue(trie.isempty())


if __name__ == "__main__":
    unittest.main()
