import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from ats_analyzer.features.parsing_safety import analyze_parsing_safety  # noqa: E402
from ats_analyzer.features.serialization import serialize_resume  # noqa: E402
from ats_analyzer.schemas.resume import ResumeSnapshot  # noqa: E402


class ParsingSafetyTests(unittest.TestCase):
    def test_clean_text_scores_full_marks(self):
        result = analyze_parsing_safety('{"summary":"Résumé for a naïve café owner"}')
        self.assertEqual(result.score, 20)
        self.assertEqual([issue.id for issue in result.issues], ["parse-chars-ok"])

    def test_fancy_bullets_are_flagged(self):
        for glyph in ("•", "‣", "◦", "⁃", "∙"):
            with self.subTest(glyph=glyph):
                result = analyze_parsing_safety(f"{glyph} Led the team")
                self.assertEqual(result.score, 10)
                self.assertEqual(result.issues[0].id, "parse-chars")
                self.assertEqual(result.issues[0].type, "warning")

    def test_alignment_gaps_are_flagged(self):
        result = analyze_parsing_safety("Engineer    2019 - 2022")
        self.assertEqual(result.score, 10)
        self.assertEqual([issue.id for issue in result.issues], ["parse-chars-ok", "parse-spacing"])

    def test_three_spaces_are_tolerated(self):
        result = analyze_parsing_safety("Engineer   2019")
        self.assertEqual(result.score, 20)

    def test_both_problems_score_zero(self):
        result = analyze_parsing_safety("• Engineer\t\t\t\t2019")
        self.assertEqual(result.score, 0)
        self.assertEqual([issue.id for issue in result.issues], ["parse-chars", "parse-spacing"])

    def test_serialized_resume_keeps_unicode_and_compact_separators(self):
        resume = ResumeSnapshot.model_validate(
            {"personal_info": {"first_name": "José"}, "work_experience": [{"description": ["• Led"]}]}
        )
        text = serialize_resume(resume)
        self.assertIn("José", text)
        self.assertIn("•", text)
        self.assertNotIn(": ", text)
        self.assertNotIn("null", text)
        self.assertEqual(analyze_parsing_safety(text).issues[0].id, "parse-chars")


if __name__ == "__main__":
    unittest.main()
