import sys
import unittest
from collections import Counter
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from ats_analyzer.features.keywords import extract_keywords, top_keywords  # noqa: E402
from ats_analyzer.features.utils import first_word, round_half_up  # noqa: E402


class KeywordExtractionTests(unittest.TestCase):
    def test_counts_are_case_insensitive_and_skip_stop_words(self):
        freq = extract_keywords("The Python developer, python! and SQL")
        self.assertEqual(freq, Counter({"python": 2, "developer": 1, "sql": 1}))

    def test_short_tokens_and_posting_filler_are_dropped(self):
        self.assertEqual(extract_keywords("go js ui experience team"), Counter())

    def test_punctuation_is_removed_inside_tokens(self):
        freq = extract_keywords("Node.js and C++ developers")
        self.assertIn("nodejs", freq)
        self.assertIn("developers", freq)
        self.assertNotIn("c", freq)

    def test_empty_text_yields_empty_counter(self):
        self.assertEqual(extract_keywords(""), Counter())

    def test_top_keywords_keeps_first_seen_order_for_ties(self):
        freq = extract_keywords("alpha beta gamma beta")
        self.assertEqual(top_keywords(freq, 20), ["beta", "alpha", "gamma"])
        self.assertEqual(top_keywords(freq, 2), ["beta", "alpha"])
        self.assertEqual(top_keywords(freq, 0), [])


class UtilsTests(unittest.TestCase):
    def test_round_half_up_rounds_halves_up(self):
        self.assertEqual(round_half_up(12.5), 13)
        self.assertEqual(round_half_up(2.5), 3)
        self.assertEqual(round_half_up(66.66), 67)
        self.assertEqual(round_half_up(0.49), 0)

    def test_first_word_strips_non_letters(self):
        self.assertEqual(first_word("Led, then shipped"), "led")
        self.assertEqual(first_word("• Led the team"), "")
        self.assertEqual(first_word(""), "")


if __name__ == "__main__":
    unittest.main()
