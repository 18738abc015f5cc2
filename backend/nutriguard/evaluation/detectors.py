"""
Category detectors. Each maps (recipe, one profile list) to at most one NutritionWarning.
Detectors are independent of each other; the analyzer runs them in a fixed order.
"""
from typing import Callable, Iterable, Iterator, List, Optional, Sequence, Tuple

from nutriguard.models.analysis import NutritionWarning, WarningCategory, WarningLevel
from nutriguard.models.profile import positive_number
from nutriguard.models.recipe import Recipe
from nutriguard.taxonomy.keywords import resolve_keywords, resolve_goal_avoid
from nutriguard.taxonomy.registry import DEFAULT_TAXONOMY, KeywordTaxonomy


# ---------------------------------------------------------------------------
# Fixed risk per category
# ---------------------------------------------------------------------------
ALLERGY_RISK = 100
RESTRICTION_RISK = 80
HEALTH_RISK = 70
GOAL_RISK = 50
DISLIKED_RISK = 20
CALORIE_CAUTION_RISK = 30
CALORIE_WARNING_RISK = 50

# Share of the daily calorie goal (percent) that triggers the calorie detector
CALORIE_MIN_PCT = 40.0
CALORIE_WARNING_PCT = 60.0

ALLERGY_RECOMMENDATIONS = (
    "⛔ NO CONSUMIR - Contiene alérgenos declarados",
    "Busca alternativas sin estos ingredientes",
    "Consulta con un profesional de salud antes de consumir",
)
RESTRICTION_RECOMMENDATIONS = (
    "⚠️ No compatible con tu dieta",
    "Considera sustituir los ingredientes problemáticos",
    "Busca recetas específicas para tu tipo de dieta",
)
HEALTH_RECOMMENDATIONS = (
    "⚠️ Puede afectar tu condición de salud",
    "Consulta con tu médico antes de consumir",
    "Considera modificar las cantidades o ingredientes",
    "Monitorea tu respuesta después de consumir",
)
GOAL_RECOMMENDATIONS = (
    "💡 Esta receta puede no alinearse con tus metas",
    "Consume con moderación",
    "Ajusta las porciones según tus objetivos",
    "Complementa con ejercicio adicional si es necesario",
)
CALORIE_RECOMMENDATIONS = (
    "⚖️ Considera las porciones cuidadosamente",
    "Balancea con comidas más ligeras durante el día",
    "Aumenta tu actividad física si la consumes",
)
DISLIKED_RECOMMENDATIONS = (
    "😕 Esta receta contiene ingredientes que no prefieres",
    "Puedes sustituirlos por alternativas de tu agrado",
    "O simplemente omitirlos si no son esenciales",
)


def _ingredient_names(recipe: Optional[Recipe]) -> Tuple[str, ...]:
    if recipe is None:
        return ()
    return recipe.ingredient_names()


def _iter_matches(
    names: Sequence[str],
    items: Iterable[str],
    resolve: Callable[[str], Tuple[str, ...]],
) -> Iterator[Tuple[str, str]]:
    """
    Yield (ingredient name, profile item) for every keyword contained in an ingredient name.
    Profile items keep the user's spelling; ingredient names keep their case as written.
    """
    for item in items:
        keywords = resolve(item)
        if not keywords:
            continue
        for name in names:
            lowered = name.lower()
            for keyword in keywords:
                if keyword in lowered:
                    yield name, item


def _build_warning(
    matches: Iterable[Tuple[str, str]],
    reason: Callable[[str, str], str],
    level: WarningLevel,
    risk: int,
    category: WarningCategory,
    recommendations: Tuple[str, ...],
) -> Optional[NutritionWarning]:
    affected: List[str] = []
    reasons: List[str] = []
    for name, item in matches:
        affected.append(name)
        reasons.append(reason(name, item))
    if not affected:
        return None
    return NutritionWarning(
        level=level,
        risk_percentage=risk,
        category=category,
        reasons=tuple(reasons),
        affected_ingredients=tuple(dict.fromkeys(affected)),
        recommendations=recommendations,
    )


def detect_allergies(
    recipe: Optional[Recipe],
    allergies: Optional[Sequence[str]],
    taxonomy: KeywordTaxonomy = DEFAULT_TAXONOMY,
) -> Optional[NutritionWarning]:
    names = _ingredient_names(recipe)
    if not allergies or not names:
        return None
    return _build_warning(
        _iter_matches(names, allergies, lambda item: resolve_keywords(item, taxonomy.allergens)),
        lambda name, item: f"Contiene {name} (alérgeno: {item})",
        WarningLevel.DANGER,
        ALLERGY_RISK,
        WarningCategory.ALLERGY,
        ALLERGY_RECOMMENDATIONS,
    )


def detect_dietary_restrictions(
    recipe: Optional[Recipe],
    restrictions: Optional[Sequence[str]],
    taxonomy: KeywordTaxonomy = DEFAULT_TAXONOMY,
) -> Optional[NutritionWarning]:
    names = _ingredient_names(recipe)
    if not restrictions or not names:
        return None
    return _build_warning(
        _iter_matches(names, restrictions, lambda item: resolve_keywords(item, taxonomy.restrictions)),
        lambda name, item: f"{name} no cumple con: {item}",
        WarningLevel.WARNING,
        RESTRICTION_RISK,
        WarningCategory.RESTRICTION,
        RESTRICTION_RECOMMENDATIONS,
    )


def detect_health_conditions(
    recipe: Optional[Recipe],
    conditions: Optional[Sequence[str]],
    taxonomy: KeywordTaxonomy = DEFAULT_TAXONOMY,
) -> Optional[NutritionWarning]:
    names = _ingredient_names(recipe)
    if not conditions or not names:
        return None
    return _build_warning(
        _iter_matches(names, conditions, lambda item: resolve_keywords(item, taxonomy.health_conditions)),
        lambda name, item: f"{name} puede afectar: {item}",
        WarningLevel.WARNING,
        HEALTH_RISK,
        WarningCategory.HEALTH,
        HEALTH_RECOMMENDATIONS,
    )


def detect_health_goals(
    recipe: Optional[Recipe],
    goals: Optional[Sequence[str]],
    taxonomy: KeywordTaxonomy = DEFAULT_TAXONOMY,
) -> Optional[NutritionWarning]:
    """
    Only the goal's `avoid` list is checked; unknown goals never match.
    Risk stays at GOAL_RISK however many goals or ingredients match.
    """
    names = _ingredient_names(recipe)
    if not goals or not names:
        return None
    return _build_warning(
        _iter_matches(names, goals, lambda item: resolve_goal_avoid(item, taxonomy.health_goals)),
        lambda name, item: f"{name} no es ideal para: {item}",
        WarningLevel.CAUTION,
        GOAL_RISK,
        WarningCategory.GOAL,
        GOAL_RECOMMENDATIONS,
    )


def _format_calories(value: float) -> str:
    if float(value).is_integer():
        return str(int(value))
    return str(value)


def detect_calories(
    recipe: Optional[Recipe],
    daily_calorie_goal: Optional[float],
) -> Optional[NutritionWarning]:
    """
    Whole-recipe calorie load against the daily goal.
    < 40% -> None; 40-60% -> caution (30); > 60% -> warning (50).
    """
    calories = positive_number(recipe.calories) if recipe is not None else None
    daily_calorie_goal = positive_number(daily_calorie_goal)
    if calories is None or daily_calorie_goal is None:
        return None

    pct = calories / daily_calorie_goal * 100
    if pct < CALORIE_MIN_PCT:
        return None

    if pct > CALORIE_WARNING_PCT:
        level, risk = WarningLevel.WARNING, CALORIE_WARNING_RISK
    else:
        level, risk = WarningLevel.CAUTION, CALORIE_CAUTION_RISK

    return NutritionWarning(
        level=level,
        risk_percentage=risk,
        category=WarningCategory.CALORIES,
        reasons=(
            f"Esta receta contiene {_format_calories(calories)} calorías",
            f"Representa el {pct:.1f}% de tu meta diaria",
        ),
        affected_ingredients=(),
        recommendations=CALORIE_RECOMMENDATIONS,
    )


def detect_disliked_ingredients(
    recipe: Optional[Recipe],
    disliked: Optional[Sequence[str]],
) -> Optional[NutritionWarning]:
    """Disliked items have no taxonomy: each item is its own keyword."""
    names = _ingredient_names(recipe)
    if not disliked or not names:
        return None
    return _build_warning(
        _iter_matches(names, disliked, lambda item: resolve_keywords(item, {})),
        lambda name, item: f"Contiene {name}, ingrediente que no te gusta ({item})",
        WarningLevel.CAUTION,
        DISLIKED_RISK,
        WarningCategory.NUTRITION,
        DISLIKED_RECOMMENDATIONS,
    )
