"""
Diagnosis Classifier

Turns questionnaire answers into a ranked set of hair-loss conditions.
Not a medical diagnostic tool; it reproduces a fixed rule set.

Version: diagnosis_classifier_v1
"""

from .models import Diagnosis, ConditionEvaluation, FALLBACK_DIAGNOSIS
from .classify import (
    ConditionRule,
    CONDITION_RULES,
    TRACTION,
    TELOGEN,
    ANDROGENIC,
    CICATRICIAL,
    NUTRITIONAL,
    AREATA,
    classify,
    condition_key,
    evaluate_condition,
)

__all__ = [
    "Diagnosis",
    "ConditionEvaluation",
    "FALLBACK_DIAGNOSIS",
    "ConditionRule",
    "CONDITION_RULES",
    "TRACTION",
    "TELOGEN",
    "ANDROGENIC",
    "CICATRICIAL",
    "NUTRITIONAL",
    "AREATA",
    "classify",
    "condition_key",
    "evaluate_condition",
]

__version__ = "diagnosis_classifier_v1"
