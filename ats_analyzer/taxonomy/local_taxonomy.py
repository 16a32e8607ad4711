from __future__ import annotations

import json
from pathlib import Path
from typing import Mapping, Sequence

from ats_analyzer.lexicon import SYNONYMS

from .provider import TaxonomyProvider


class LocalTaxonomy(TaxonomyProvider):
    def __init__(
        self,
        synonyms_path: str | Path | None = None,
        *,
        synonym_groups: Mapping[str, Sequence[str]] | None = None,
    ) -> None:
        if synonyms_path:
            groups = self._load_synonyms(Path(synonyms_path))
        else:
            groups = synonym_groups if synonym_groups is not None else SYNONYMS
        self._groups: dict[str, tuple[str, ...]] = {}
        self._aliases: dict[str, str] = {}
        for canonical, aliases in groups.items():
            key = str(canonical).strip().lower()
            terms = tuple(str(alias).strip().lower() for alias in aliases if str(alias).strip())
            self._groups[key] = (key, *terms)
            self._aliases.setdefault(key, key)
            for term in terms:
                # First group wins when an alias is listed twice.
                self._aliases.setdefault(term, key)

    @staticmethod
    def _load_synonyms(path: Path) -> dict[str, list[str]]:
        with path.open("r", encoding="utf-8") as handle:
            raw = json.load(handle)
        if not isinstance(raw, dict):
            raise ValueError(f"Synonyms file '{path}' must contain a JSON object.")
        return {str(key): [str(item) for item in (value or [])] for key, value in raw.items()}

    def normalize_skill(self, raw: str) -> tuple[str, str | None]:
        normalized = (raw or "").strip().lower()
        return normalized, self._aliases.get(normalized)

    def equivalent_terms(self, canonical_skill_id: str) -> tuple[str, ...]:
        return self._groups.get((canonical_skill_id or "").strip().lower(), ())
