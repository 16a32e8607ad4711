import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from ats_analyzer.features.contact import analyze_contact  # noqa: E402
from ats_analyzer.features.structure import analyze_structure  # noqa: E402
from ats_analyzer.schemas.resume import ResumeSnapshot  # noqa: E402


def _resume_with_contact(**personal_info) -> ResumeSnapshot:
    return ResumeSnapshot.model_validate({"personal_info": personal_info})


class ContactAnalyzerTests(unittest.TestCase):
    def test_complete_contact_scores_full_marks(self):
        result = analyze_contact(
            _resume_with_contact(
                email="jane@example.com",
                phone="+1 (555) 222-1111",
                location="Austin, TX",
                linkedin="linkedin.com/in/jane",
            )
        )
        self.assertEqual(result.score, 20)
        self.assertEqual(result.max_score, 20)
        self.assertEqual(
            [issue.id for issue in result.issues],
            ["c-email-ok", "c-phone-ok", "c-loc-ok", "c-linkedin-ok"],
        )
        self.assertTrue(all(issue.type == "success" for issue in result.issues))

    def test_empty_contact_scores_zero_with_expected_severities(self):
        result = analyze_contact(_resume_with_contact(email="", phone="", location=""))
        self.assertEqual(result.score, 0)
        severities = {issue.id: issue.type for issue in result.issues}
        self.assertEqual(
            severities,
            {
                "c-email-missing": "critical",
                "c-phone-missing": "critical",
                "c-loc-missing": "warning",
                "c-linkedin-missing": "warning",
            },
        )

    def test_email_without_domain_suffix_is_invalid(self):
        result = analyze_contact(_resume_with_contact(email="jane@localhost"))
        self.assertIn("c-email-missing", [issue.id for issue in result.issues])

    def test_phone_needs_ten_digits_regardless_of_formatting(self):
        ok = analyze_contact(_resume_with_contact(phone="(555) 123-4567"))
        short = analyze_contact(_resume_with_contact(phone="555-1234 ext."))
        self.assertEqual(ok.score, 6)
        self.assertEqual(short.score, 0)

    def test_whitespace_location_counts_as_missing(self):
        result = analyze_contact(_resume_with_contact(location="   "))
        self.assertIn("c-loc-missing", [issue.id for issue in result.issues])


class StructureAnalyzerTests(unittest.TestCase):
    def test_all_sections_present(self):
        resume = ResumeSnapshot.model_validate(
            {
                "work_experience": [{"company": "Acme"}],
                "education": [{"institution": "State U"}],
                "skills": [{"name": "Python"}],
            }
        )
        result = analyze_structure(resume)
        self.assertEqual(result.score, 20)
        self.assertEqual([issue.id for issue in result.issues], ["s-ok"])

    def test_missing_sections_are_reported(self):
        result = analyze_structure(ResumeSnapshot())
        self.assertEqual(result.score, 0)
        self.assertEqual(
            [(issue.id, issue.type) for issue in result.issues],
            [("s-exp-missing", "critical"), ("s-edu-missing", "warning"), ("s-skills-missing", "warning")],
        )

    def test_partial_sections_score_their_points(self):
        resume = ResumeSnapshot.model_validate({"education": [{"institution": "State U"}]})
        result = analyze_structure(resume)
        self.assertEqual(result.score, 6)
        self.assertNotIn("s-ok", [issue.id for issue in result.issues])


if __name__ == "__main__":
    unittest.main()
