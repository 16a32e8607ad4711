from __future__ import annotations

import json

from ats_analyzer.schemas.resume import ResumeSnapshot


def serialize_resume(resume: ResumeSnapshot) -> str:
    """Flatten the snapshot into one compact JSON blob for regex scanning.

    Field order follows the model declaration, unset optional fields are
    dropped and casing is preserved; callers lower-case where they need to.
    """
    payload = resume.model_dump(mode="json", exclude_none=True)
    return json.dumps(payload, ensure_ascii=False, separators=(",", ":"))


def collect_bullets(resume: ResumeSnapshot) -> list[str]:
    bullets: list[str] = []
    for role in resume.work_experience:
        bullets.extend(role.description)
    return bullets
