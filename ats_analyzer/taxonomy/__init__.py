from functools import lru_cache

from ats_analyzer.core.config import settings

from .local_taxonomy import LocalTaxonomy
from .provider import TaxonomyProvider


@lru_cache(maxsize=1)
def get_default_taxonomy_provider() -> TaxonomyProvider:
    """Built-in synonym groups, or the JSON file named by TAXONOMY_SYNONYMS_PATH."""
    return LocalTaxonomy(settings.taxonomy_synonyms_path)


__all__ = ["LocalTaxonomy", "TaxonomyProvider", "get_default_taxonomy_provider"]
