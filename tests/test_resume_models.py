import sys
import unittest
from pathlib import Path

from pydantic import ValidationError

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from ats_analyzer.schemas.ats import ATSResult, BulletTip, CategoryResult, Issue  # noqa: E402
from ats_analyzer.schemas.resume import ResumeSnapshot  # noqa: E402


class ResumeSnapshotTests(unittest.TestCase):
    def test_defaults_are_empty(self):
        resume = ResumeSnapshot()
        self.assertIsNone(resume.personal_info.email)
        self.assertEqual(resume.work_experience, [])
        self.assertEqual(resume.skills, [])
        self.assertIsNone(resume.projects)

    def test_unknown_nested_fields_are_ignored(self):
        resume = ResumeSnapshot.model_validate({"personal_info": {"email": "a@b.co", "nickname": "x"}})
        self.assertEqual(resume.personal_info.email, "a@b.co")
        self.assertFalse(hasattr(resume.personal_info, "nickname"))

    def test_unknown_top_level_fields_are_rejected(self):
        with self.assertRaises(ValidationError):
            ResumeSnapshot.model_validate({"theme": "dark"})

    def test_camel_case_keys_are_accepted(self):
        resume = ResumeSnapshot.model_validate(
            {
                "personalInfo": {"firstName": "Ada", "email": "ada@example.com"},
                "workExperience": [{"company": "Acme", "startDate": "2020", "description": ["Led 20% growth"]}],
            }
        )
        self.assertEqual(resume.personal_info.first_name, "Ada")
        self.assertEqual(resume.work_experience[0].start_date, "2020")

    def test_null_lists_become_empty(self):
        resume = ResumeSnapshot.model_validate(
            {
                "personal_info": None,
                "work_experience": [{"company": "Acme", "description": None}],
                "education": [{"institution": "State U", "description": None}],
                "skills": None,
                "projects": [{"name": "CLI", "technologies": None}],
            }
        )
        self.assertEqual(resume.work_experience[0].description, [])
        self.assertEqual(resume.education[0].description, [])
        self.assertEqual(resume.skills, [])
        self.assertEqual(resume.projects[0].technologies, [])
        self.assertIsNone(resume.personal_info.email)

    def test_snapshot_is_immutable(self):
        resume = ResumeSnapshot()
        with self.assertRaises(ValidationError):
            resume.skills = []

    def test_skill_name_is_required(self):
        with self.assertRaises(ValidationError):
            ResumeSnapshot.model_validate({"skills": [{"category": "Tech"}]})


class ResultModelTests(unittest.TestCase):
    def test_category_score_must_be_within_range(self):
        CategoryResult(score=0, max_score=20)
        CategoryResult(score=20, max_score=20)
        with self.assertRaises(ValidationError):
            CategoryResult(score=21, max_score=20)
        with self.assertRaises(ValidationError):
            CategoryResult(score=-1, max_score=20)
        with self.assertRaises(ValidationError):
            CategoryResult(score=0, max_score=0)

    def test_issue_type_is_restricted(self):
        with self.assertRaises(ValidationError):
            Issue(id="x", type="info", message="nope")

    def test_total_score_is_bounded(self):
        with self.assertRaises(ValidationError):
            ATSResult.model_validate(
                {
                    "total_score": 101,
                    "breakdown": {
                        name: {"score": 0, "max_score": 20}
                        for name in ("contact", "structure", "content", "skills", "parsing_safety")
                    },
                }
            )

    def test_tip_priority_is_bounded(self):
        with self.assertRaises(ValidationError):
            BulletTip(id="x", type="info", message="m", priority=6)


if __name__ == "__main__":
    unittest.main()
