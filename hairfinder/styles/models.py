"""
Risk Analyzer Models

Pydantic models for style risk scores, concern aggregation and detected
multi-style patterns.

Version: risk_analyzer_v1
"""

from enum import Enum
from typing import List

from pydantic import BaseModel, Field


class RiskLevel(str, Enum):
    """Ordered aggregate risk classification; UNKNOWN for an empty selection."""
    MINIMAL = "minimal"
    LOW = "low"
    MODERATE = "moderate"
    HIGH = "high"
    CRITICAL = "critical"
    UNKNOWN = "unknown"


class PatternSeverity(str, Enum):
    CRITICAL = "critical"
    POSITIVE = "positive"
    WARNING = "warning"
    INFO = "info"


class RiskScore(BaseModel):
    """
    Aggregate styling risk.

    total_score = 0.7 * max + 0.3 * mean of the selected styles' risk scores.
    """
    total_score: float = Field(ge=0)
    risk_level: RiskLevel
    max_individual_risk: int = Field(ge=0)
    average_risk: float = Field(ge=0)

    class Config:
        extra = "forbid"


class ConcernFrequency(BaseModel):
    concern: str
    frequency: int = Field(ge=1)

    class Config:
        extra = "forbid"


class Concerns(BaseModel):
    """Concern tags ranked by frequency, plus unions of areas/tension/damage types."""
    primary_concerns: List[ConcernFrequency] = Field(default_factory=list)
    affected_areas: List[str] = Field(default_factory=list)
    tension_types: List[str] = Field(default_factory=list)
    damage_types: List[str] = Field(default_factory=list)

    class Config:
        extra = "forbid"


class Pattern(BaseModel):
    """A named multi-style interaction."""
    type: str
    severity: PatternSeverity
    message: str
    recommendation: str

    class Config:
        extra = "forbid"
