from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from ats_analyzer.services import analyze  # noqa: E402


def _resume(**overrides: Any) -> dict[str, Any]:
    base: dict[str, Any] = {
        "personal_info": {
            "first_name": "Test",
            "last_name": "User",
            "email": "test@example.com",
            "phone": "1234567890",
            "location": "City, ST",
            "linkedin": "linkedin.com/in/test",
            "summary": "Summary",
        },
        "work_experience": [],
        "education": [],
        "skills": [],
    }
    base.update(overrides)
    return base


def _role(*bullets: str) -> dict[str, Any]:
    return {
        "id": "1",
        "company": "Co",
        "position": "Pos",
        "location": "Loc",
        "start_date": "2020",
        "current": True,
        "description": list(bullets),
    }


_EDUCATION = [
    {"id": "1", "institution": "Uni", "degree": "BS", "field": "CS", "location": "Loc", "start_date": "2016"}
]

SCENARIOS: list[tuple[str, dict[str, Any]]] = [
    (
        "Perfect Resume",
        _resume(
            work_experience=[
                _role(
                    "Spearheaded a project that increased revenue by 20%.",
                    "Developed a new feature used by 10k+ users.",
                    "Optimized database queries reducing latency by 50%.",
                )
            ],
            education=_EDUCATION,
            skills=[
                {"id": "1", "name": "React", "category": "Tech"},
                {"id": "2", "name": "Node", "category": "Tech"},
            ],
        ),
    ),
    (
        "Weak Verbs & No Metrics",
        _resume(
            work_experience=[
                _role(
                    "Worked on the frontend team.",
                    "Responsible for maintaining code.",
                    "Helped with database migration.",
                )
            ],
            education=_EDUCATION,
            skills=[{"id": "1", "name": "React", "category": "Tech"}],
        ),
    ),
    (
        "Keyword Stuffing",
        _resume(
            work_experience=[_role("Did work.")],
            education=_EDUCATION,
            skills=[
                {"id": "1", "name": "React", "category": "Tech"},
                {"id": "2", "name": "React", "category": "Tech"},
                {"id": "3", "name": "react", "category": "Tech"},
                {"id": "4", "name": "Communication", "category": "Soft"},
                {"id": "5", "name": "Teamwork", "category": "Soft"},
                {"id": "6", "name": "Leadership", "category": "Soft"},
            ],
        ),
    ),
    (
        "Empty / Minimal",
        _resume(personal_info={"first_name": "", "last_name": "", "email": "", "phone": "", "location": ""}),
    ),
]


def main() -> None:
    parser = argparse.ArgumentParser(description="Run canned resume scenarios through the ATS analyzer.")
    parser.add_argument(
        "--job-description",
        default=None,
        help="Optional job description text; enables job-match and keyword-density analysis.",
    )
    parser.add_argument("--json", action="store_true", help="Print full results as JSON instead of a summary.")
    args = parser.parse_args()

    if args.json:
        results = {
            name: analyze(resume, args.job_description).model_dump(mode="json", exclude_none=True)
            for name, resume in SCENARIOS
        }
        print(json.dumps(results, indent=2, ensure_ascii=False))
        return

    print("--- ATS Stress Test Results ---\n")
    for name, resume in SCENARIOS:
        result = analyze(resume, args.job_description)
        critical = sum(1 for issue in result.issues if issue.type == "critical")
        warnings = sum(1 for issue in result.issues if issue.type == "warning")
        print(f"Scenario: {name}")
        print(f"Score: {result.total_score}/100")
        print(f"Critical Issues: {critical}")
        print(f"Warnings: {warnings}")
        print("-----------------------------------")


if __name__ == "__main__":
    main()
