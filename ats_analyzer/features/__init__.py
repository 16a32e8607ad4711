from .bullet_tips import BulletAnalysis, analyze_bullet, generate_bullet_tips
from .contact import analyze_contact
from .content import analyze_content
from .density import analyze_keyword_density
from .job_match import analyze_job_match
from .keyword_gap import JDTerm, analyze_keyword_gap, extract_jd_terms, find_keyword_in_text, suggest_section
from .keywords import extract_keywords, top_keywords
from .parsing_safety import analyze_parsing_safety
from .serialization import collect_bullets, serialize_resume
from .skills import analyze_skills
from .structure import analyze_structure

__all__ = [
    "extract_keywords",
    "top_keywords",
    "serialize_resume",
    "collect_bullets",
    "analyze_contact",
    "analyze_structure",
    "analyze_content",
    "analyze_skills",
    "analyze_parsing_safety",
    "analyze_job_match",
    "analyze_keyword_density",
    "BulletAnalysis",
    "analyze_bullet",
    "generate_bullet_tips",
    "JDTerm",
    "extract_jd_terms",
    "find_keyword_in_text",
    "suggest_section",
    "analyze_keyword_gap",
]
