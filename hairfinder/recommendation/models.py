"""
Recommendation Engine Models

Input and output contracts of the style-risk recommendation pipeline.

Version: recommendation_engine_v1
"""

from enum import Enum
from typing import List, Optional
from pydantic import BaseModel, Field

from hairfinder.styles.models import RiskScore, Concerns, Pattern


class StyleRiskInput(BaseModel):
    """
    Normalized input to the recommendation engine.

    Accepts the camelCase keys produced by `normalize_answers`.
    """
    protective_styles: List[str] = Field(
        default_factory=list,
        alias="protectiveStyles",
        description="Normalized style ids"
    )
    scalp_areas: List[str] = Field(
        default_factory=list,
        alias="scalpAreas",
        description="Normalized scalp area ids reported by the user"
    )
    age_range: Optional[str] = Field(default=None, alias="ageRange")
    when_noticed: Optional[str] = Field(default=None, alias="whenNoticed")
    primary_concern: Optional[str] = Field(default=None, alias="primaryConcern")
    scalp_issues: List[str] = Field(default_factory=list, alias="scalpIssues")

    class Config:
        populate_by_name = True
        extra = "ignore"


class AreaMatch(BaseModel):
    """Predicted vs self-reported affected areas."""
    matches: List[str] = Field(default_factory=list)
    match_rate: float = Field(ge=0, le=1)
    unexpected: List[str] = Field(default_factory=list)
    insight: str

    class Config:
        extra = "forbid"


class ProductPriority(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"


class ProductRecommendation(BaseModel):
    category: str
    name: str
    reason: str
    priority: ProductPriority

    class Config:
        extra = "forbid"


class ProductTiers(BaseModel):
    essential: List[ProductRecommendation] = Field(default_factory=list)
    recommended: List[ProductRecommendation] = Field(default_factory=list)
    optional: List[ProductRecommendation] = Field(default_factory=list)

    class Config:
        extra = "forbid"


class LessonUrgency(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"


class EducationLesson(BaseModel):
    topic: str
    title: str
    content: str
    urgency: LessonUrgency
    read_time: str

    class Config:
        extra = "forbid"


class ActionItem(BaseModel):
    action: str
    why: str
    duration: str

    class Config:
        extra = "forbid"


class ActionPlan(BaseModel):
    immediate: List[ActionItem] = Field(default_factory=list)
    short_term: List[ActionItem] = Field(default_factory=list)
    long_term: List[ActionItem] = Field(default_factory=list)

    class Config:
        extra = "forbid"


class StyleRiskRecommendation(BaseModel):
    """Full output of the style-risk pipeline."""
    risk_score: RiskScore
    concerns: Concerns
    patterns: List[Pattern] = Field(default_factory=list)
    affected_area_match: AreaMatch
    products: ProductTiers
    education: List[EducationLesson] = Field(default_factory=list)
    action_plan: ActionPlan
    summary: str

    class Config:
        extra = "forbid"
