"""
Diagnosis Classifier Models

Version: diagnosis_classifier_v1
"""

from typing import Dict, List, Optional

from pydantic import BaseModel, Field

FALLBACK_DIAGNOSIS = "General Hair Thinning"


class ConditionEvaluation(BaseModel):
    """Audit of one condition hypothesis, accepted or not."""
    key: str
    name: str
    score: int = Field(ge=0, description="Number of indicators that fired")
    total: int = Field(ge=1, description="Number of indicators evaluated")
    threshold: int = Field(ge=1, description="Minimum score for acceptance")
    accepted: bool
    fired_indicators: List[str] = Field(default_factory=list)

    class Config:
        extra = "forbid"

    @property
    def strength(self) -> float:
        return self.score / self.total


class Diagnosis(BaseModel):
    """
    Ranked diagnosis.

    `confidence` only holds accepted conditions, keyed by condition key.
    """
    primary: str
    secondary: List[str] = Field(default_factory=list)
    confidence: Dict[str, float] = Field(default_factory=dict)
    primary_key: Optional[str] = Field(
        default=None,
        description="Condition key of the primary diagnosis; None for the fallback label"
    )
    secondary_keys: List[str] = Field(default_factory=list)
    evaluations: List[ConditionEvaluation] = Field(default_factory=list)

    class Config:
        extra = "forbid"

    @property
    def is_fallback(self) -> bool:
        return self.primary_key is None

    def primary_confidence(self) -> float:
        if self.primary_key is None:
            return 0.0
        return self.confidence.get(self.primary_key, 0.0)
