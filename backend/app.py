"""
NutriGuard FastAPI application.

Endpoints:
    GET  /                  Health check
    POST /analyze           Analyze one recipe against a user profile
    POST /analyze/batch     Bucket a recipe list into safe / caution / danger
    GET  /risk-band/{risk}  Badge data (label, color, icon, summary) for a risk value
"""
from fastapi import FastAPI, HTTPException, Path as PathParam
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel
from typing import Any, Dict, List, Optional
import logging
from dotenv import load_dotenv
from pathlib import Path

# Load env vars
load_dotenv(Path(__file__).parent / ".env")

from nutriguard import __version__
from nutriguard.config import get_log_level, get_taxonomy_path, log_config
from nutriguard.evaluation.analyzer import NutritionAnalyzer
from nutriguard.evaluation.filtering import filter_recipes
from nutriguard.evaluation.risk_bands import band_for, should_warn, summarize
from nutriguard.models.analysis import AnalysisResult
from nutriguard.taxonomy.registry import DEFAULT_TAXONOMY, load_taxonomy

# Logger
logging.basicConfig(level=get_log_level())
logger = logging.getLogger(__name__)

log_config()

# Initialize App
app = FastAPI(title="NutriGuard Recipe Analysis API", version=__version__)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

_taxonomy_path = get_taxonomy_path()
analyzer = NutritionAnalyzer(load_taxonomy(_taxonomy_path) if _taxonomy_path.exists() else DEFAULT_TAXONOMY)


# --- Request/Response Models ---
class AnalyzeRequest(BaseModel):
    recipe: Optional[Dict[str, Any]] = None
    userProfile: Optional[Dict[str, Any]] = None


class BatchAnalyzeRequest(BaseModel):
    recipes: List[Dict[str, Any]] = []
    userProfile: Optional[Dict[str, Any]] = None


def _badge(risk: int) -> dict:
    band = band_for(risk)
    return {"label": band.label, "color": band.color, "icon": band.icon}


def _analysis_json(result: AnalysisResult) -> dict:
    d = result.to_dict()
    d["badge"] = _badge(result.overall_risk)
    return d


def _recipe_ref(index: int, recipe: dict, result: AnalysisResult) -> dict:
    recipe_id = recipe.get("_id", recipe.get("id"))
    return {
        "index": index,
        "id": str(recipe_id) if recipe_id is not None else None,
        "overallRisk": result.overall_risk,
    }


# --- Endpoints ---
@app.get("/")
def health_check():
    return {"status": "ok", "service": "nutriguard", "version": __version__}


@app.post("/analyze")
async def analyze_recipe(request: AnalyzeRequest):
    """Null userProfile (unauthenticated user) -> analysis: null, not an error."""
    if request.userProfile is None:
        logger.info("ANALYZE skipped: no user profile")
        return {"analysis": None, "shouldWarn": False}
    try:
        result = analyzer.analyze(request.recipe, request.userProfile)
        logger.info(
            "ANALYZE overall_risk=%d warnings=%d is_safe=%s",
            result.overall_risk, len(result.warnings), result.is_safe,
        )
        return {"analysis": _analysis_json(result), "shouldWarn": should_warn(result)}
    except Exception as e:
        logger.error("Analyze failed: %s", e, exc_info=True)
        raise HTTPException(status_code=500, detail=str(e))


@app.post("/analyze/batch")
async def analyze_batch(request: BatchAnalyzeRequest):
    try:
        filtered = filter_recipes(request.recipes, request.userProfile, analyzer.taxonomy)
        positions = {id(r): i for i, r in enumerate(filtered.recipes)}

        def refs(bucket):
            return [_recipe_ref(positions[id(recipe)], recipe, result) for recipe, result in bucket]

        return {
            "analyzed": request.userProfile is not None,
            "safe": refs(filtered.safe),
            "caution": refs(filtered.caution),
            "danger": refs(filtered.danger),
            "stats": filtered.stats(),
        }
    except Exception as e:
        logger.error("Batch analyze failed: %s", e, exc_info=True)
        raise HTTPException(status_code=500, detail=str(e))


@app.get("/risk-band/{risk}")
def risk_band(risk: int = PathParam(..., ge=0, le=100)):
    band = band_for(risk)
    return {
        "risk": risk,
        "label": band.label,
        "color": band.color,
        "icon": band.icon,
        "summary": summarize(risk),
        "isSafe": band.safe,
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("app:app", host="0.0.0.0", port=8000, reload=True)
