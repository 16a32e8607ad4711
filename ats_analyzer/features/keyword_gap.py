from __future__ import annotations

import re
from collections import Counter
from dataclasses import dataclass

from ats_analyzer.core.config import get_scoring_value
from ats_analyzer.lexicon import SKILL_CLUSTERS, STOP_WORDS
from ats_analyzer.schemas.ats import Importance, KeywordGapResult, KeywordMatch, MissingKeyword, ResumeSection
from ats_analyzer.schemas.resume import ResumeSnapshot
from ats_analyzer.taxonomy import TaxonomyProvider, get_default_taxonomy_provider

from .utils import round_half_up

_PHRASE_PUNCT_RE = re.compile(r"[^\w\s-]")
_REQUIRED_BLOCK_RE = re.compile(r"required[\s\S]*?(?:preferred|nice to have|$)")
_MIN_PHRASE2_CHARS = 6
_MIN_PHRASE3_CHARS = 9
_HIGH_PHRASE_COUNT = 2
_HIGH_WORD_COUNT = 3

_TECHNICAL_INDICATORS = (
    "javascript", "python", "react", "aws", "sql", "node", "docker", "kubernetes", "typescript", "java",
    "css", "html", "git", "api", "cloud", "data", "machine learning", "ai", "agile", "scrum",
)
_SOFT_SKILL_INDICATORS = (
    "leadership", "communication", "team", "management", "collaboration", "problem solving", "analytical",
)

_SUMMARY_BANDS: tuple[tuple[int, str], ...] = (
    (75, "Strong match! Your resume aligns well with this job."),
    (50, "Good match. Consider adding the missing keywords to strengthen your application."),
    (25, "Moderate match. Review the missing keywords to better tailor your resume."),
)
_WEAK_SUMMARY = "Weak match. This job may require skills not highlighted in your resume."
_EMPTY_SUMMARY = "Enter a job description to analyze"


@dataclass(frozen=True, slots=True)
class JDTerm:
    keyword: str
    importance: Importance


def _is_all_stop_words(phrase: str) -> bool:
    return all(word in STOP_WORDS for word in phrase.split(" "))


def _count_phrases(words: list[str]) -> Counter[str]:
    phrases: Counter[str] = Counter()
    for index in range(len(words) - 1):
        pair = _PHRASE_PUNCT_RE.sub("", " ".join(words[index : index + 2])).strip()
        if len(pair) >= _MIN_PHRASE2_CHARS and not _is_all_stop_words(pair):
            phrases[pair] += 1
        if index < len(words) - 2:
            triple = _PHRASE_PUNCT_RE.sub("", " ".join(words[index : index + 3])).strip()
            if len(triple) >= _MIN_PHRASE3_CHARS and not _is_all_stop_words(triple):
                phrases[triple] += 1
    return phrases


def extract_jd_terms(job_description: str) -> list[JDTerm]:
    """Phrases and single words from a job description, ranked by importance then frequency."""
    text = (job_description or "").lower()
    word_counts = Counter(
        word
        for word in _PHRASE_PUNCT_RE.sub(" ", text).split()
        if len(word) > 2 and word not in STOP_WORDS
    )
    phrases = _count_phrases(text.split())

    required_match = _REQUIRED_BLOCK_RE.search(text)
    required_block = required_match.group(0) if required_match else ""

    terms: list[JDTerm] = []
    seen: set[str] = set()
    # Phrases first; their words are then skipped as single terms.
    for phrase, count in phrases.items():
        if phrase in seen:
            continue
        high = phrase in required_block or count >= _HIGH_PHRASE_COUNT
        terms.append(JDTerm(keyword=phrase, importance="high" if high else "medium"))
        seen.add(phrase)
        seen.update(phrase.split(" "))

    for word, count in word_counts.items():
        if word in seen:
            continue
        high = word in required_block or count >= _HIGH_WORD_COUNT
        terms.append(JDTerm(keyword=word, importance="high" if high else "medium"))
        seen.add(word)

    limit = int(get_scoring_value("keyword_gap.max_keywords", 30))
    ranked = sorted(
        terms,
        key=lambda term: (0 if term.importance == "high" else 1, -word_counts.get(term.keyword, 0)),
    )
    return ranked[:limit]


def _section_texts(resume: ResumeSnapshot) -> dict[ResumeSection, str]:
    experience_parts: list[str] = []
    for role in resume.work_experience:
        experience_parts.extend([role.position or "", role.company or "", *role.description])

    education_parts: list[str] = []
    for entry in resume.education:
        education_parts.extend([entry.degree or "", entry.field or "", entry.institution or "", *entry.description])

    return {
        "skills": " ".join(skill.name for skill in resume.skills).lower(),
        "experience": " ".join(experience_parts).lower(),
        "summary": (resume.personal_info.summary or "").lower(),
        "education": " ".join(education_parts).lower(),
    }


def find_keyword_in_text(keyword: str, text: str, taxonomy: TaxonomyProvider) -> bool:
    """Direct substring match, then any synonym of the keyword, then its skill-cluster trigger."""
    lowered = keyword.lower()
    if lowered in text:
        return True

    _, canonical = taxonomy.normalize_skill(lowered)
    if canonical and any(term in text for term in taxonomy.equivalent_terms(canonical)):
        return True

    for trigger, related in SKILL_CLUSTERS.items():
        if (trigger == lowered or lowered in related) and trigger in text:
            return True
    return False


def suggest_section(keyword: str) -> tuple[str, str]:
    lowered = keyword.lower()
    if any(indicator in lowered for indicator in _TECHNICAL_INDICATORS):
        return "Skills", f'Add "{keyword}" to your skills section'
    if any(indicator in lowered for indicator in _SOFT_SKILL_INDICATORS):
        return "Summary or Experience", f'Demonstrate "{keyword}" through examples in your experience bullets'
    if "certified" in lowered or "certification" in lowered:
        return "Certifications", f'Add "{keyword}" to your certifications section'
    return "Experience", f'Mention "{keyword}" in your experience descriptions'


def _summary_for(match_percentage: int) -> str:
    for threshold, summary in _SUMMARY_BANDS:
        if match_percentage >= threshold:
            return summary
    return _WEAK_SUMMARY


def analyze_keyword_gap(
    resume: ResumeSnapshot,
    job_description: str,
    *,
    taxonomy_provider: TaxonomyProvider | None = None,
) -> KeywordGapResult:
    if not (job_description or "").strip():
        return KeywordGapResult(match_percentage=0, total_keywords=0, summary=_EMPTY_SUMMARY)

    taxonomy = taxonomy_provider or get_default_taxonomy_provider()
    sections = _section_texts(resume)

    found: list[KeywordMatch] = []
    missing: list[MissingKeyword] = []
    terms = extract_jd_terms(job_description)
    for term in terms:
        found_in: list[ResumeSection] = [
            section for section, text in sections.items() if find_keyword_in_text(term.keyword, text, taxonomy)
        ]
        if found_in:
            found.append(KeywordMatch(keyword=term.keyword, found_in=found_in, importance=term.importance))
            continue
        section, tip = suggest_section(term.keyword)
        missing.append(
            MissingKeyword(keyword=term.keyword, importance=term.importance, suggested_section=section, tip=tip)
        )

    total = len(terms)
    match_percentage = round_half_up(len(found) / total * 100) if total else 0
    return KeywordGapResult(
        match_percentage=match_percentage,
        keywords_found=found,
        keywords_missing=missing,
        total_keywords=total,
        summary=_summary_for(match_percentage),
    )
