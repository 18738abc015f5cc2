"""
Batch classification of recipe lists by compatibility with one profile.
Buckets follow the list screen: safe (<= 25), caution (26-50), danger (> 50).
"""
from dataclasses import dataclass
from typing import Any, Dict, Optional, Sequence, Tuple
import logging

from nutriguard.models.analysis import AnalysisResult
from nutriguard.taxonomy.registry import KeywordTaxonomy
from nutriguard.evaluation.analyzer import ProfileInput, analyze, as_profile
from nutriguard.evaluation.risk_bands import RISK_BANDS, is_safe

logger = logging.getLogger(__name__)

# Upper bound of the caution bucket; everything above is danger
_CAUTION_UPPER = RISK_BANDS[1].upper

Classified = Tuple[Any, AnalysisResult]


@dataclass(frozen=True)
class RecipeFilterResult:
    recipes: Tuple[Any, ...] = ()
    safe: Tuple[Classified, ...] = ()
    caution: Tuple[Classified, ...] = ()
    danger: Tuple[Classified, ...] = ()

    def stats(self) -> Dict[str, int]:
        return {
            "total": len(self.recipes),
            "safe": len(self.safe),
            "caution": len(self.caution),
            "danger": len(self.danger),
        }


def filter_recipes(
    recipes: Optional[Sequence[Any]],
    profile: ProfileInput,
    taxonomy: Optional[KeywordTaxonomy] = None,
) -> RecipeFilterResult:
    """
    Analyze every recipe (Recipe or dict) and bucket it by overall risk, keeping input order.
    Without a profile there is no analysis: all recipes are returned and the buckets stay empty.
    """
    items = tuple(recipes or ())
    if as_profile(profile) is None or not items:
        return RecipeFilterResult(recipes=items)

    safe, caution, danger = [], [], []
    for recipe in items:
        result = analyze(recipe, profile, taxonomy)
        if is_safe(result.overall_risk):
            safe.append((recipe, result))
        elif result.overall_risk <= _CAUTION_UPPER:
            caution.append((recipe, result))
        else:
            danger.append((recipe, result))

    logger.info(
        "FILTER_RECIPES total=%d safe=%d caution=%d danger=%d",
        len(items), len(safe), len(caution), len(danger),
    )
    return RecipeFilterResult(
        recipes=items,
        safe=tuple(safe),
        caution=tuple(caution),
        danger=tuple(danger),
    )
