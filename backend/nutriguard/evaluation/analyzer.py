"""
Recipe/profile compatibility analysis. Single entry point for the app and the HTTP layer.
Pipeline: guard clauses -> six detectors in fixed order -> max aggregation -> banded summary.
Total over its input shape: incomplete data degrades to a safe result, never an exception.
"""
from dataclasses import dataclass, field
from typing import Any, Iterable, List, Optional, Union
import logging

from nutriguard.models.analysis import AnalysisResult, NutritionWarning
from nutriguard.models.profile import HealthInfo, PersonalInfo, Preferences, UserProfile
from nutriguard.models.recipe import Recipe
from nutriguard.taxonomy.registry import DEFAULT_TAXONOMY, KeywordTaxonomy
from nutriguard.evaluation.detectors import (
    detect_allergies,
    detect_dietary_restrictions,
    detect_health_conditions,
    detect_health_goals,
    detect_calories,
    detect_disliked_ingredients,
)
from nutriguard.evaluation.risk_bands import (
    INCOMPLETE_PROFILE_SUMMARY,
    INSUFFICIENT_DATA_SUMMARY,
    is_safe,
    summarize,
)

logger = logging.getLogger(__name__)

RecipeInput = Union[Recipe, dict, None]
ProfileInput = Union[UserProfile, dict, None]


def as_recipe(recipe: Any) -> Optional[Recipe]:
    if isinstance(recipe, Recipe):
        return recipe
    if isinstance(recipe, dict):
        return Recipe.from_dict(recipe)
    return None


def as_profile(profile: Any) -> Optional[UserProfile]:
    if isinstance(profile, UserProfile):
        return profile
    if isinstance(profile, dict):
        return UserProfile.from_dict(profile)
    return None


def aggregate_risk(warnings: Iterable[NutritionWarning]) -> int:
    """Worst case wins: the most severe warning sets the overall risk."""
    return max((w.risk_percentage for w in warnings), default=0)


def _trivial_result(summary: str) -> AnalysisResult:
    return AnalysisResult(overall_risk=0, is_safe=True, warnings=(), summary=summary)


def _run_detectors(recipe: Recipe, profile: UserProfile, taxonomy: KeywordTaxonomy) -> List[NutritionWarning]:
    info: HealthInfo = profile.health_info or HealthInfo()
    preferences = profile.preferences or Preferences()
    personal = profile.personal_info or PersonalInfo()
    # Order here is the order of AnalysisResult.warnings
    candidates = (
        detect_allergies(recipe, info.allergies, taxonomy),
        detect_dietary_restrictions(recipe, info.dietary_restrictions, taxonomy),
        detect_health_conditions(recipe, info.health_conditions, taxonomy),
        detect_health_goals(recipe, info.health_goals, taxonomy),
        detect_calories(recipe, personal.daily_calorie_goal),
        detect_disliked_ingredients(recipe, preferences.disliked_ingredients),
    )
    return [w for w in candidates if w is not None]


def analyze(
    recipe: RecipeInput,
    profile: ProfileInput,
    taxonomy: Optional[KeywordTaxonomy] = None,
) -> AnalysisResult:
    """
    Analyze one recipe against one user profile.
    - recipe: Recipe or the app's recipe dict; None or no usable ingredients -> insufficient-data result.
    - profile: UserProfile or the app's profile dict; None or no health section -> incomplete-profile result.
    - taxonomy: keyword tables; defaults to the built-in ones.
    """
    parsed_recipe = as_recipe(recipe)
    if parsed_recipe is None or not parsed_recipe.ingredient_names():
        return _trivial_result(INSUFFICIENT_DATA_SUMMARY)

    parsed_profile = as_profile(profile)
    if parsed_profile is None or parsed_profile.health_info is None:
        return _trivial_result(INCOMPLETE_PROFILE_SUMMARY)

    warnings = _run_detectors(parsed_recipe, parsed_profile, taxonomy or DEFAULT_TAXONOMY)
    overall_risk = aggregate_risk(warnings)
    logger.debug(
        "ANALYZE recipe_id=%s ingredients=%d categories=%s overall_risk=%d",
        parsed_recipe.recipe_id, len(parsed_recipe.ingredients),
        [w.category.value for w in warnings], overall_risk,
    )
    return AnalysisResult(
        overall_risk=overall_risk,
        is_safe=is_safe(overall_risk),
        warnings=tuple(warnings),
        summary=summarize(overall_risk),
    )


@dataclass(frozen=True)
class NutritionAnalyzer:
    """Analysis bound to one taxonomy. Immutable; construction has no side effects."""
    taxonomy: KeywordTaxonomy = field(default=DEFAULT_TAXONOMY)

    def analyze(self, recipe: RecipeInput, profile: ProfileInput) -> AnalysisResult:
        return analyze(recipe, profile, self.taxonomy)
