from __future__ import annotations

from typing import Protocol


class TaxonomyProvider(Protocol):
    """Synonym lookup used by keyword-gap matching."""

    def normalize_skill(self, raw: str) -> tuple[str, str | None]:
        """Lower-cased, trimmed text plus the canonical group it belongs to, if any."""

    def equivalent_terms(self, canonical_skill_id: str) -> tuple[str, ...]:
        """Every term of a canonical group, canonical first; empty for unknown groups."""
