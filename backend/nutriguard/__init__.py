"""
NutriGuard: recipe compatibility analysis against a user's health and dietary profile.
"""
from .evaluation import (
    NutritionAnalyzer,
    analyze,
    filter_recipes,
    color_for,
    icon_for,
    label_for,
    should_warn,
    summarize,
)
from .models import AnalysisResult, NutritionWarning, Recipe, UserProfile

__version__ = "1.0.0"

__all__ = [
    "NutritionAnalyzer",
    "analyze",
    "filter_recipes",
    "color_for",
    "icon_for",
    "label_for",
    "should_warn",
    "summarize",
    "AnalysisResult",
    "NutritionWarning",
    "Recipe",
    "UserProfile",
]
