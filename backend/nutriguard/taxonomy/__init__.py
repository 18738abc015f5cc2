from .keywords import GoalKeywords, resolve_keywords, resolve_goal_avoid, normalize_item
from .registry import KeywordTaxonomy, TaxonomyError, DEFAULT_TAXONOMY, load_taxonomy

__all__ = [
    "GoalKeywords",
    "resolve_keywords",
    "resolve_goal_avoid",
    "normalize_item",
    "KeywordTaxonomy",
    "TaxonomyError",
    "DEFAULT_TAXONOMY",
    "load_taxonomy",
]
