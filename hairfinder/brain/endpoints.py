"""
Brain API Endpoints

Routes:
- GET  /api/v1/brain/style-profiles
- POST /api/v1/brain/evaluate
- POST /api/v1/brain/compare
- GET  /api/v1/quiz/schema
"""

import logging

from fastapi import APIRouter, HTTPException

from hairfinder.intake.questionnaire import get_questionnaire_response
from hairfinder.styles.profiles import STYLE_RISK_PROFILES

from .models import EvaluateRequest, CompareRequest
from .strategies import get_classifier, compare

logger = logging.getLogger(__name__)

brain_router = APIRouter(prefix="/api/v1/brain", tags=["Brain"])
quiz_router = APIRouter(prefix="/api/v1/quiz", tags=["Quiz"])


@quiz_router.get("/schema")
async def get_quiz_schema():
    """Questionnaire catalog for front-end form generation."""
    return get_questionnaire_response()


@brain_router.get("/style-profiles")
async def list_style_profiles():
    """Static style risk profile table."""
    return {
        "count": len(STYLE_RISK_PROFILES),
        "profiles": {
            style_id: profile.to_dict()
            for style_id, profile in STYLE_RISK_PROFILES.items()
        },
    }


@brain_router.post("/evaluate")
async def evaluate(request: EvaluateRequest):
    """
    Evaluate an answer snapshot with one classifier strategy.

    `rule_based` returns diagnosis/severity/plan; `style_risk` returns the
    style-risk recommendation.
    """
    try:
        classifier = get_classifier(request.strategy)
        result = classifier.classify(request.answers)
        return {
            "strategy": classifier.name.value,
            "result": result.model_dump(mode="json"),
        }
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Evaluate failed for strategy {request.strategy}: {e}")
        raise HTTPException(status_code=500, detail=f"Evaluate error: {str(e)}")


@brain_router.post("/compare")
async def compare_strategies(request: CompareRequest):
    """Run both strategies on the same answers without merging them."""
    try:
        return compare(request.answers).model_dump(mode="json")
    except Exception as e:
        logger.error(f"Compare failed: {e}")
        raise HTTPException(status_code=500, detail=f"Compare error: {str(e)}")
