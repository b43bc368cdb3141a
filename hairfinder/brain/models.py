"""
Brain Models

Version: brain_v1
"""

from enum import Enum
from typing import Any, Dict, List
from pydantic import BaseModel, Field
import hashlib
import json

from hairfinder.diagnosis.models import Diagnosis
from hairfinder.severity.models import SeverityRecommendation
from hairfinder.plan.models import TreatmentPlanStep
from hairfinder.recommendation.models import StyleRiskRecommendation


class StrategyName(str, Enum):
    RULE_BASED = "rule_based"
    STYLE_RISK = "style_risk"


class DiagnosisReport(BaseModel):
    """
    Presentation payload of the rule-based pipeline.

    `input_hash` identifies the answer snapshot it was computed from.
    """
    diagnosis: Diagnosis
    severity: SeverityRecommendation
    plan: List[TreatmentPlanStep] = Field(default_factory=list)
    recommendation_text: str
    input_hash: str
    version: str

    class Config:
        extra = "forbid"

    @classmethod
    def compute_hash(cls, answers: Dict[str, Any]) -> str:
        """
        Deterministic hash of an answer snapshot.

        Keys are sorted so submission order does not matter.
        """
        hash_str = json.dumps(answers, sort_keys=True, separators=(",", ":"), default=str)
        return f"sha256:{hashlib.sha256(hash_str.encode()).hexdigest()}"


class StrategyComparison(BaseModel):
    """Both pipelines side by side; outputs are never merged."""
    rule_based: DiagnosisReport
    style_risk: StyleRiskRecommendation
    input_hash: str

    class Config:
        extra = "forbid"


# ============================================================================
# REQUEST MODELS
# ============================================================================

class EvaluateRequest(BaseModel):
    answers: Any = Field(
        ...,
        description="Mapping of question id -> answer, or list of {questionId, answer}"
    )
    strategy: StrategyName = Field(default=StrategyName.RULE_BASED)

    class Config:
        json_schema_extra = {
            "example": {
                "answers": {
                    "affected-areas": ["Edges (front hairline)", "Temples (sides of hairline)"],
                    "protective-styles-often": ["Box braids (individual plaits)"],
                    "length-distribution": "Crown is longest, edges are shortest",
                },
                "strategy": "rule_based",
            }
        }


class CompareRequest(BaseModel):
    answers: Any = Field(..., description="Mapping of question id -> answer")

