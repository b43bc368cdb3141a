"""
Treatment Plan Models

Version: treatment_plan_v1
"""

from enum import Enum
from pydantic import BaseModel


class StepPriority(str, Enum):
    URGENT = "URGENT"
    HIGH = "HIGH"
    MEDIUM = "MEDIUM"
    INFO = "INFO"


class TreatmentPlanStep(BaseModel):
    priority: StepPriority
    title: str
    action: str
    product: str

    class Config:
        extra = "forbid"
