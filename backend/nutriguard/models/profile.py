"""
User health/dietary profile as consumed by the analysis engine.

Field mapping (mobile app JSON <-> backend):
  - healthInfo.allergies <-> health_info.allergies
  - healthInfo.dietaryRestrictions <-> health_info.dietary_restrictions
  - healthInfo.healthConditions <-> health_info.health_conditions
  - healthInfo.healthGoals <-> health_info.health_goals
  - preferences.dislikedIngredients <-> preferences.disliked_ingredients
  - personalInfo.dailyCalorieGoal <-> personal_info.daily_calorie_goal

Parsing is tolerant: absent or null lists become empty, non-string entries are dropped.
"""
from dataclasses import dataclass, field
from typing import Any, Optional, Tuple
import math


def _pick(data: dict, *keys: str) -> Any:
    """First non-None value among keys (camelCase first, then snake_case)."""
    for key in keys:
        value = data.get(key)
        if value is not None:
            return value
    return None


def string_list(value: Any) -> Tuple[str, ...]:
    """Keep only non-blank strings, preserving order. Anything else -> ()."""
    if value is None or isinstance(value, (str, bytes, dict)):
        return ()
    try:
        items = list(value)
    except TypeError:
        return ()
    return tuple(v for v in items if isinstance(v, str) and v.strip())


def positive_number(value: Any) -> Optional[float]:
    """Finite numbers (or numeric strings) > 0; everything else is treated as absent."""
    if isinstance(value, bool) or value is None:
        return None
    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError):
        return None
    if not math.isfinite(number) or number <= 0:
        return None
    return number


@dataclass(frozen=True)
class HealthInfo:
    allergies: Tuple[str, ...] = ()
    dietary_restrictions: Tuple[str, ...] = ()
    health_conditions: Tuple[str, ...] = ()
    health_goals: Tuple[str, ...] = ()

    @classmethod
    def from_dict(cls, data: dict) -> "HealthInfo":
        return cls(
            allergies=string_list(_pick(data, "allergies", "allergens")),
            dietary_restrictions=string_list(_pick(data, "dietaryRestrictions", "dietary_restrictions")),
            health_conditions=string_list(_pick(data, "healthConditions", "health_conditions")),
            health_goals=string_list(_pick(data, "healthGoals", "health_goals")),
        )


@dataclass(frozen=True)
class Preferences:
    disliked_ingredients: Tuple[str, ...] = ()

    @classmethod
    def from_dict(cls, data: dict) -> "Preferences":
        return cls(
            disliked_ingredients=string_list(_pick(data, "dislikedIngredients", "disliked_ingredients")),
        )


@dataclass(frozen=True)
class PersonalInfo:
    daily_calorie_goal: Optional[float] = None

    @classmethod
    def from_dict(cls, data: dict) -> "PersonalInfo":
        return cls(daily_calorie_goal=positive_number(_pick(data, "dailyCalorieGoal", "daily_calorie_goal")))


@dataclass(frozen=True)
class UserProfile:
    """
    health_info is None when the user never filled the health section;
    the analyzer reports such profiles as incomplete instead of analyzing them.
    """
    health_info: Optional[HealthInfo] = None
    preferences: Preferences = field(default_factory=Preferences)
    personal_info: PersonalInfo = field(default_factory=PersonalInfo)
    user_id: str = ""

    def is_empty(self) -> bool:
        """True when the profile carries no constraint the detectors could use."""
        info = self.health_info or HealthInfo()
        preferences = self.preferences or Preferences()
        personal = self.personal_info or PersonalInfo()
        return (
            not info.allergies
            and not info.dietary_restrictions
            and not info.health_conditions
            and not info.health_goals
            and not preferences.disliked_ingredients
            and personal.daily_calorie_goal is None
        )

    @classmethod
    def from_dict(cls, data: Any) -> "UserProfile":
        """Load from the app's profile JSON; supports camelCase and snake_case keys."""
        if not isinstance(data, dict):
            return cls()
        health = _pick(data, "healthInfo", "health_info")
        prefs = _pick(data, "preferences")
        personal = _pick(data, "personalInfo", "personal_info")
        user_id = _pick(data, "userId", "user_id")
        return cls(
            health_info=HealthInfo.from_dict(health) if isinstance(health, dict) else None,
            preferences=Preferences.from_dict(prefs) if isinstance(prefs, dict) else Preferences(),
            personal_info=PersonalInfo.from_dict(personal) if isinstance(personal, dict) else PersonalInfo(),
            user_id=str(user_id) if user_id is not None else "",
        )
