"""
Severity & Bundle Selector Models

Version: severity_v1
"""

from enum import Enum
from typing import List
from pydantic import BaseModel, Field


class BundleName(str, Enum):
    SELF_LOVE_PLUS = "SELF LOVE PLUS"
    SELF_LOVE_PLUS_B2GOF = "SELF LOVE PLUS B2GOF"


class BundleUsage(BaseModel):
    """Per-product usage instructions shown with the bundle."""
    shampoo: str
    pomade: str
    conditioner: str

    class Config:
        extra = "forbid"


class SeverityRecommendation(BaseModel):
    """
    Bundle recommendation derived from the severity score.
    """
    severity_score: int = Field(ge=0)
    bundle: BundleName
    months: int = Field(description="Protocol length in months")
    quantity: int = Field(description="Units of each product in the bundle")
    price_ngn: int = Field(description="Bundle price in Nigerian naira")
    reasoning: str
    usage: BundleUsage
    factors: List[str] = Field(
        default_factory=list,
        description="What contributed points to the severity score"
    )

    class Config:
        extra = "forbid"
