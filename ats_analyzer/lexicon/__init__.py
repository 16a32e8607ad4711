from .dictionaries import (
    ACTION_VERBS,
    CLICHES,
    SKILL_CLUSTERS,
    SOFT_SKILLS,
    STANDARD_SECTIONS,
    STOP_WORDS,
    SYNONYMS,
    WEAK_VERBS,
)

__all__ = [
    "ACTION_VERBS",
    "WEAK_VERBS",
    "SOFT_SKILLS",
    "STOP_WORDS",
    "CLICHES",
    "STANDARD_SECTIONS",
    "SKILL_CLUSTERS",
    "SYNONYMS",
]
