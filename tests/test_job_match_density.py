import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from ats_analyzer.features.density import analyze_keyword_density  # noqa: E402
from ats_analyzer.features.job_match import analyze_job_match  # noqa: E402
from ats_analyzer.features.keywords import extract_keywords  # noqa: E402


class JobMatchTests(unittest.TestCase):
    def test_full_match_is_great(self):
        result = analyze_job_match(extract_keywords("Python Django PostgreSQL"), "Python, Django and PostgreSQL")
        self.assertEqual(result.score, 100)
        self.assertEqual(result.max_score, 100)
        self.assertEqual([issue.id for issue in result.issues], ["jd-match-great"])

    def test_half_match_lists_missing_keywords(self):
        result = analyze_job_match(extract_keywords("python django kafka redis"), "python django")
        self.assertEqual(result.score, 50)
        issue = result.issues[0]
        self.assertEqual((issue.id, issue.type), ("jd-match-ok", "warning"))
        self.assertEqual(issue.suggestion, "Consider adding these keywords: kafka, redis")

    def test_low_match_is_critical_and_rounds_half_up(self):
        jd = "python django kafka redis spark hadoop airflow terraform"
        result = analyze_job_match(extract_keywords(jd), "python")
        self.assertEqual(result.score, 13)
        issue = result.issues[0]
        self.assertEqual((issue.id, issue.type), ("jd-match-poor", "critical"))
        self.assertEqual(issue.suggestion, "Missing critical keywords: django, kafka, redis, spark, hadoop")

    def test_only_top_twenty_keywords_are_considered(self):
        jd = " ".join(f"term{index:02d}" for index in range(25))
        resume_text = " ".join(f"term{index:02d}" for index in range(20))
        result = analyze_job_match(extract_keywords(jd), resume_text)
        self.assertEqual(result.score, 100)

    def test_matching_is_substring_based(self):
        result = analyze_job_match(extract_keywords("java"), "javascript")
        self.assertEqual(result.score, 100)

    def test_job_description_without_keywords(self):
        result = analyze_job_match(extract_keywords("the and of to"), "anything")
        self.assertEqual(result.score, 0)
        self.assertEqual([(issue.id, issue.type) for issue in result.issues], [("jd-no-keywords", "warning")])


class KeywordDensityTests(unittest.TestCase):
    def test_low_optimal_and_high_statuses(self):
        keywords = extract_keywords("python python python sql sql kafka")
        resume_text = " ".join(["python"] * 5 + ["sql"] * 2 + ["filler"] * 93)
        entries = analyze_keyword_density(keywords, resume_text)
        by_keyword = {entry.keyword: entry for entry in entries}
        self.assertEqual([entry.keyword for entry in entries], ["python", "sql", "kafka"])
        self.assertEqual(by_keyword["python"].count, 5)
        self.assertAlmostEqual(by_keyword["python"].density, 5.0)
        self.assertEqual(by_keyword["python"].status, "high")
        self.assertEqual(by_keyword["sql"].status, "optimal")
        self.assertEqual(by_keyword["kafka"].count, 0)
        self.assertEqual(by_keyword["kafka"].status, "low")

    def test_boundaries_are_optimal(self):
        keywords = extract_keywords("python sql")
        resume_text = " ".join(["python"] + ["sql"] * 4 + ["filler"] * 95)
        entries = {entry.keyword: entry for entry in analyze_keyword_density(keywords, resume_text)}
        self.assertAlmostEqual(entries["python"].density, 1.0)
        self.assertEqual(entries["python"].status, "optimal")
        self.assertAlmostEqual(entries["sql"].density, 4.0)
        self.assertEqual(entries["sql"].status, "optimal")

    def test_counts_use_word_boundaries(self):
        entries = analyze_keyword_density(extract_keywords("java"), "javascript developer")
        self.assertEqual(entries[0].count, 0)
        self.assertEqual(entries[0].status, "low")

    def test_at_most_five_keywords_are_reported(self):
        keywords = extract_keywords("alpha beta gamma delta epsilon zeta eta theta")
        entries = analyze_keyword_density(keywords, "alpha beta")
        self.assertEqual(len(entries), 5)


if __name__ == "__main__":
    unittest.main()
