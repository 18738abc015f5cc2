"""
Risk bands: the only place the 25/50/75 thresholds live.
isSafe, summary text, badge color, icon and label are all read from the same band.
"""
from dataclasses import dataclass
from typing import Optional, Tuple

from nutriguard.models.analysis import AnalysisResult, WarningCategory, WarningLevel


@dataclass(frozen=True)
class RiskBand:
    upper: int  # inclusive upper bound of overall risk
    level: WarningLevel
    label: str
    color: str
    icon: str
    summary: str
    safe: bool


RISK_BANDS: Tuple[RiskBand, ...] = (
    RiskBand(25, WarningLevel.SAFE, "COMPATIBLE", "#10B981", "✅",
             "✅ Esta receta es generalmente segura para ti", True),
    RiskBand(50, WarningLevel.CAUTION, "PRECAUCIÓN", "#F59E0B", "⚠️",
             "⚠️ Precaución: Esta receta tiene algunas incompatibilidades", False),
    RiskBand(75, WarningLevel.WARNING, "CUIDADO", "#F97316", "⚠️",
             "⚠️ Cuidado: Esta receta no es recomendable para ti", False),
    RiskBand(100, WarningLevel.DANGER, "ALTO RIESGO", "#EF4444", "🚫",
             "🚫 PELIGRO: Esta receta contiene elementos que debes evitar", False),
)

# Risk 0 means no detector fired; worded apart from the 1-25 band
NO_RISK_SUMMARY = "✅ Esta receta es segura y compatible con tu perfil"

INSUFFICIENT_DATA_SUMMARY = "✅ No hay suficiente información para analizar"
INCOMPLETE_PROFILE_SUMMARY = "✅ Esta receta es segura (perfil incompleto)"

LEVEL_COLORS = {
    WarningLevel.DANGER: "#EF4444",
    WarningLevel.WARNING: "#F97316",
    WarningLevel.CAUTION: "#F59E0B",
    WarningLevel.SAFE: "#10B981",
}

CATEGORY_ICONS = {
    WarningCategory.ALLERGY: "🚨",
    WarningCategory.RESTRICTION: "🚫",
    WarningCategory.HEALTH: "💊",
    WarningCategory.GOAL: "🎯",
    WarningCategory.CALORIES: "🔥",
    WarningCategory.NUTRITION: "💡",
}


def clamp_risk(risk) -> int:
    try:
        value = int(risk)
    except (TypeError, ValueError):
        return 0
    return max(0, min(100, value))


def band_for(risk: int) -> RiskBand:
    value = clamp_risk(risk)
    for band in RISK_BANDS:
        if value <= band.upper:
            return band
    return RISK_BANDS[-1]


def is_safe(risk: int) -> bool:
    return band_for(risk).safe


def summarize(risk: int) -> str:
    if clamp_risk(risk) == 0:
        return NO_RISK_SUMMARY
    return band_for(risk).summary


def color_for(risk: int) -> str:
    return band_for(risk).color


def icon_for(risk: int) -> str:
    return band_for(risk).icon


def label_for(risk: int) -> str:
    return band_for(risk).label


def level_color(level: WarningLevel) -> str:
    """Per-warning accent color; unknown levels render as safe."""
    return LEVEL_COLORS.get(level, LEVEL_COLORS[WarningLevel.SAFE])


def category_icon(category: WarningCategory) -> str:
    return CATEGORY_ICONS.get(category, CATEGORY_ICONS[WarningCategory.NUTRITION])


def should_warn(result: Optional[AnalysisResult]) -> bool:
    """True when an analysis exists and falls outside the safe band."""
    if result is None:
        return False
    return not is_safe(result.overall_risk)
