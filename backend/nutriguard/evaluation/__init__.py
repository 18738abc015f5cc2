from .analyzer import NutritionAnalyzer, analyze, aggregate_risk
from .filtering import RecipeFilterResult, filter_recipes
from .risk_bands import RiskBand, band_for, color_for, icon_for, label_for, is_safe, should_warn, summarize

__all__ = [
    "NutritionAnalyzer",
    "analyze",
    "aggregate_risk",
    "RecipeFilterResult",
    "filter_recipes",
    "RiskBand",
    "band_for",
    "color_for",
    "icon_for",
    "label_for",
    "is_safe",
    "should_warn",
    "summarize",
]
