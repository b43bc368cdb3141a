"""
Treatment Plan Builder

Version: treatment_plan_v1
"""

from .models import StepPriority, TreatmentPlanStep
from .build import build_treatment_plan, expected_timeline

__all__ = [
    "StepPriority",
    "TreatmentPlanStep",
    "build_treatment_plan",
    "expected_timeline",
]

__version__ = "treatment_plan_v1"
