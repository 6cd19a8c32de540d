import unittest

from reelword.core.pattern import pattern, pattern_key


class PatternTests(unittest.TestCase):
    def test_first_occurrence_indices(self) -> None:
        self.assertEqual(pattern(["A", "B", "C", "D", "D"]), (0, 1, 2, 3, 3))
        self.assertEqual(pattern("level"), (0, 1, 2, 1, 0))

    def test_no_repeats_and_all_repeats(self) -> None:
        self.assertEqual(pattern("abcdef"), (0, 1, 2, 3, 4, 5))
        self.assertEqual(pattern(["A", "A", "A"]), (0, 0, 0))
        self.assertEqual(pattern([]), ())

    def test_invariant_under_injective_relabeling(self) -> None:
        reels = ["cherry", "diamond", "cherry", "club", "star"]
        relabelings = [
            {"cherry": "x", "diamond": "y", "club": "z", "star": "w"},
            {"cherry": 7, "diamond": 3, "club": 1, "star": 0},
            {"cherry": "star", "diamond": "club", "club": "diamond", "star": "cherry"},
        ]
        for mapping in relabelings:
            with self.subTest(mapping=mapping):
                self.assertEqual(pattern([mapping[s] for s in reels]), pattern(reels))

    def test_symbols_and_letters_compare_structurally(self) -> None:
        self.assertEqual(pattern(["club", "star", "grapes", "seven", "seven"]), pattern("hello"))
        self.assertNotEqual(pattern(["club", "star", "grapes", "seven", "seven"]), pattern("radar"))

    def test_pattern_key(self) -> None:
        self.assertEqual(pattern_key("radar"), "0.1.2.1.0")
        self.assertEqual(pattern_key((0, 1, 2, 1, 0)), "0.1.2.1.0")


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
