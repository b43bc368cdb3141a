"""
Hair Finder Brain

Strategy selection and orchestration over the scoring core.

Version: brain_v1
"""

from .models import (
    StrategyName,
    DiagnosisReport,
    StrategyComparison,
    EvaluateRequest,
    CompareRequest,
)
from .orchestrate import (
    BRAIN_VERSION,
    evaluate_answers,
    build_recommendation_text,
    confidence_percent,
)
from .strategies import (
    Classifier,
    RuleBasedDiagnosis,
    StyleRiskBased,
    CLASSIFIERS,
    get_classifier,
    compare,
)

__all__ = [
    "StrategyName",
    "DiagnosisReport",
    "StrategyComparison",
    "EvaluateRequest",
    "CompareRequest",
    "BRAIN_VERSION",
    "evaluate_answers",
    "build_recommendation_text",
    "confidence_percent",
    "Classifier",
    "RuleBasedDiagnosis",
    "StyleRiskBased",
    "CLASSIFIERS",
    "get_classifier",
    "compare",
]

__version__ = "brain_v1"
