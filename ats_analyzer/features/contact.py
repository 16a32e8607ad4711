from __future__ import annotations

import re

from ats_analyzer.schemas.ats import CategoryResult, Issue
from ats_analyzer.schemas.resume import ResumeSnapshot

MAX_SCORE = 20
_EMAIL_POINTS = 8
_PHONE_POINTS = 6
_LOCATION_POINTS = 4
_LINKEDIN_POINTS = 2
_MIN_PHONE_DIGITS = 10

_EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
_DIGIT_RE = re.compile(r"\d")


def _has_valid_email(email: str | None) -> bool:
    return bool(email and _EMAIL_RE.match(email))


def _phone_digit_count(phone: str | None) -> int:
    return len(_DIGIT_RE.findall(phone or ""))


def analyze_contact(resume: ResumeSnapshot) -> CategoryResult:
    info = resume.personal_info
    score = 0
    issues: list[Issue] = []

    if _has_valid_email(info.email):
        score += _EMAIL_POINTS
        issues.append(Issue(id="c-email-ok", type="success", message="Valid email address found."))
    else:
        issues.append(
            Issue(
                id="c-email-missing",
                type="critical",
                message="Missing or invalid email address.",
                suggestion="Add a professional email address (e.g., gmail.com).",
            )
        )

    if _phone_digit_count(info.phone) >= _MIN_PHONE_DIGITS:
        score += _PHONE_POINTS
        issues.append(Issue(id="c-phone-ok", type="success", message="Valid phone number found."))
    else:
        issues.append(
            Issue(
                id="c-phone-missing",
                type="critical",
                message="Missing or invalid phone number.",
                suggestion=f"Add a phone number with at least {_MIN_PHONE_DIGITS} digits.",
            )
        )

    if (info.location or "").strip():
        score += _LOCATION_POINTS
        issues.append(Issue(id="c-loc-ok", type="success", message="Location found."))
    else:
        issues.append(
            Issue(
                id="c-loc-missing",
                type="warning",
                message="Location is missing.",
                suggestion="Add your City and State/Country (e.g., New York, NY).",
            )
        )

    # Bonus points only; never critical.
    if (info.linkedin or "").strip():
        score += _LINKEDIN_POINTS
        issues.append(Issue(id="c-linkedin-ok", type="success", message="LinkedIn profile linked."))
    else:
        issues.append(
            Issue(
                id="c-linkedin-missing",
                type="warning",
                message="LinkedIn profile not found.",
                suggestion="Adding a LinkedIn URL can increase credibility.",
            )
        )

    return CategoryResult(score=score, max_score=MAX_SCORE, issues=issues)
