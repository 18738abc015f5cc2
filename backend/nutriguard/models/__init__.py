from .profile import UserProfile, HealthInfo, Preferences, PersonalInfo
from .recipe import Recipe, Ingredient
from .analysis import AnalysisResult, NutritionWarning, WarningCategory, WarningLevel

__all__ = [
    "UserProfile",
    "HealthInfo",
    "Preferences",
    "PersonalInfo",
    "Recipe",
    "Ingredient",
    "AnalysisResult",
    "NutritionWarning",
    "WarningCategory",
    "WarningLevel",
]
