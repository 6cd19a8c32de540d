import tempfile
import unittest
from pathlib import Path

from reelword.core.exceptions import ConfigurationError, DictionaryLoadError
from reelword.core.pattern import pattern
from reelword.data.dictionary import DictionaryConfig, DictionaryIndex
from reelword.data.normalization import clean_word

PALINDROME = [("s1", "s2", "s3", "s2", "s1")]


class NormalizationTests(unittest.TestCase):
    def test_clean_word_trims_and_lowercases(self) -> None:
        self.assertEqual(clean_word("  Radar \n"), "radar")
        self.assertEqual(clean_word("LEVEL"), "level")

    def test_letters_that_lowercase_to_ascii_are_skipped(self) -> None:
        index = DictionaryIndex.build(PALINDROME, ["\u212aayak\n", "kayak\n"])
        self.assertEqual(index.trie_for(pattern("kayak")).words(), ["kayak"])
        self.assertEqual(index.stats.lines_skipped, 1)

    def test_clean_word_rejects_non_words(self) -> None:
        for line in ["", "   \n", "l3vel", "two words", "über", "can't", "\u212aayak", "\u212a"]:
            with self.subTest(line=line):
                self.assertIsNone(clean_word(line))


class DictionaryIndexTests(unittest.TestCase):
    def test_build_keeps_only_required_patterns(self) -> None:
        lines = ["  Radar \n", "level\n", "hello\n", "l3vel\n", "\n", "two words\n", "über\n", "RADAR\n"]
        index = DictionaryIndex.build(PALINDROME, iter(lines))

        trie = index.trie_for((0, 1, 2, 1, 0))
        self.assertEqual(trie.words(), ["level", "radar"])
        self.assertEqual(index.patterns(), ((0, 1, 2, 1, 0),))
        self.assertEqual(len(index), 2)
        self.assertEqual(index.stats.lines_read, 8)
        self.assertEqual(index.stats.words_kept, 2)
        self.assertEqual(index.stats.duplicates, 1)
        self.assertEqual(index.stats.words_discarded, 1)
        self.assertEqual(index.stats.lines_skipped, 4)

    def test_required_pattern_without_words_has_empty_trie(self) -> None:
        index = DictionaryIndex.build(PALINDROME, [])
        trie = index.trie_for(pattern("radar"))
        self.assertEqual(len(trie), 0)
        self.assertFalse(trie.fuzzy_contains((None,) * 5))

    def test_unknown_pattern_is_configuration_error(self) -> None:
        index = DictionaryIndex.build(PALINDROME, ["radar"])
        with self.assertRaises(ConfigurationError):
            index.trie_for((0, 1, 2, 3, 4))
        with self.assertRaises(ConfigurationError):
            index.require([(0, 1, 2, 1, 0), (0, 0)])
        self.assertIn((0, 1, 2, 1, 0), index)
        self.assertNotIn((0, 0), index)

    def test_length_limits(self) -> None:
        solutions = [("a", "b"), ("a", "b", "c", "b", "a")]
        config = DictionaryConfig(min_length=3, max_length=5)
        index = DictionaryIndex.build(solutions, ["at", "radar"], config)
        self.assertEqual(len(index.trie_for((0, 1))), 0)
        self.assertTrue(index.trie_for((0, 1, 2, 1, 0)).contains("radar"))

    def test_from_path_streams_file(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            source = Path(tmpdir) / "words.txt"
            source.write_bytes(b"radar\nLevel\nbad\xffword\nrotor\n")
            index = DictionaryIndex.from_path(PALINDROME, DictionaryConfig(path=source))
            self.assertEqual(index.trie_for(pattern("radar")).words(), ["level", "radar", "rotor"])
            self.assertEqual(index.stats.lines_skipped, 1)

            same = DictionaryIndex.from_path(PALINDROME, source)
            self.assertEqual(len(same), 3)

    def test_missing_file_raises(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            with self.assertRaises(DictionaryLoadError):
                DictionaryIndex.from_path(PALINDROME, Path(tmpdir) / "missing.txt")
            with self.assertRaises(DictionaryLoadError):
                DictionaryIndex.from_path(PALINDROME, tmpdir)


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
