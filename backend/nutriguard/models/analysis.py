"""
Structured analysis output. Wire format (to_dict) matches the mobile app's camelCase shape.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Any, Tuple


class WarningLevel(str, Enum):
    SAFE = "safe"
    CAUTION = "caution"
    WARNING = "warning"
    DANGER = "danger"


class WarningCategory(str, Enum):
    ALLERGY = "allergy"
    RESTRICTION = "restriction"
    HEALTH = "health"
    GOAL = "goal"
    CALORIES = "calories"
    NUTRITION = "nutrition"  # disliked ingredients


@dataclass(frozen=True)
class NutritionWarning:
    level: WarningLevel
    risk_percentage: int
    category: WarningCategory
    reasons: Tuple[str, ...] = ()
    affected_ingredients: Tuple[str, ...] = ()  # deduplicated, first-seen order
    recommendations: Tuple[str, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        return {
            "level": self.level.value,
            "riskPercentage": self.risk_percentage,
            "category": self.category.value,
            "reasons": list(self.reasons),
            "affectedIngredients": list(self.affected_ingredients),
            "recommendations": list(self.recommendations),
        }


@dataclass(frozen=True)
class AnalysisResult:
    overall_risk: int
    is_safe: bool
    warnings: Tuple[NutritionWarning, ...] = ()
    summary: str = ""

    @property
    def categories(self) -> Tuple[WarningCategory, ...]:
        return tuple(w.category for w in self.warnings)

    def to_dict(self) -> dict[str, Any]:
        return {
            "overallRisk": self.overall_risk,
            "isSafe": self.is_safe,
            "warnings": [w.to_dict() for w in self.warnings],
            "summary": self.summary,
        }
