"""
Risk band boundaries: summary, color, icon, label and isSafe share one table.
"""
import pytest

from nutriguard.evaluation.risk_bands import (
    NO_RISK_SUMMARY,
    RISK_BANDS,
    band_for,
    category_icon,
    color_for,
    icon_for,
    is_safe,
    label_for,
    level_color,
    should_warn,
    summarize,
)
from nutriguard.models.analysis import AnalysisResult, WarningCategory, WarningLevel


@pytest.mark.parametrize("risk,color,icon,label", [
    (0, "#10B981", "✅", "COMPATIBLE"),
    (25, "#10B981", "✅", "COMPATIBLE"),
    (26, "#F59E0B", "⚠️", "PRECAUCIÓN"),
    (50, "#F59E0B", "⚠️", "PRECAUCIÓN"),
    (51, "#F97316", "⚠️", "CUIDADO"),
    (75, "#F97316", "⚠️", "CUIDADO"),
    (76, "#EF4444", "🚫", "ALTO RIESGO"),
    (100, "#EF4444", "🚫", "ALTO RIESGO"),
])
def test_band_boundaries(risk, color, icon, label):
    assert color_for(risk) == color
    assert icon_for(risk) == icon
    assert label_for(risk) == label


@pytest.mark.parametrize("risk,expected", [
    (0, NO_RISK_SUMMARY),
    (1, "✅ Esta receta es generalmente segura para ti"),
    (25, "✅ Esta receta es generalmente segura para ti"),
    (26, "⚠️ Precaución: Esta receta tiene algunas incompatibilidades"),
    (50, "⚠️ Precaución: Esta receta tiene algunas incompatibilidades"),
    (51, "⚠️ Cuidado: Esta receta no es recomendable para ti"),
    (75, "⚠️ Cuidado: Esta receta no es recomendable para ti"),
    (76, "🚫 PELIGRO: Esta receta contiene elementos que debes evitar"),
    (100, "🚫 PELIGRO: Esta receta contiene elementos que debes evitar"),
])
def test_summary_bands(risk, expected):
    assert summarize(risk) == expected


def test_zero_and_low_risk_summaries_differ():
    """No-conflict wording must be distinguishable from the 1-25 band."""
    assert summarize(0) != summarize(1)


@pytest.mark.parametrize("risk", range(0, 101))
def test_is_safe_agrees_with_band(risk):
    """isSafe, color and summary never disagree about the safe band."""
    assert is_safe(risk) == (risk < 26)
    assert (color_for(risk) == "#10B981") == is_safe(risk)


def test_out_of_range_risk_is_clamped():
    assert band_for(-10) == band_for(0)
    assert band_for(250) == band_for(100)
    assert summarize(-10) == NO_RISK_SUMMARY


def test_bands_are_contiguous_and_cover_range():
    uppers = [b.upper for b in RISK_BANDS]
    assert uppers == sorted(uppers)
    assert uppers[-1] == 100


def test_level_color():
    assert level_color(WarningLevel.DANGER) == "#EF4444"
    assert level_color(WarningLevel.WARNING) == "#F97316"
    assert level_color(WarningLevel.CAUTION) == "#F59E0B"
    assert level_color(WarningLevel.SAFE) == "#10B981"


def test_category_icon():
    assert category_icon(WarningCategory.ALLERGY) == "🚨"
    assert category_icon(WarningCategory.CALORIES) == "🔥"
    assert category_icon(WarningCategory.NUTRITION) == "💡"


def test_should_warn():
    assert should_warn(None) is False
    assert should_warn(AnalysisResult(overall_risk=25, is_safe=True)) is False
    assert should_warn(AnalysisResult(overall_risk=26, is_safe=False)) is True
