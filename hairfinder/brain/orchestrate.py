"""
Brain Orchestrate

Runs the rule-based pipeline end to end:
answers -> diagnosis -> severity/bundle -> treatment plan -> report.

Design Principles:
- PURE: no storage, no network
- DETERMINISTIC: identical answers give an identical report and input_hash

Version: brain_v1
"""

import math

from hairfinder.diagnosis import classify
from hairfinder.diagnosis.models import Diagnosis
from hairfinder.intake.answers import AnswerSet
from hairfinder.plan import build_treatment_plan
from hairfinder.severity import select_bundle

from .models import DiagnosisReport

BRAIN_VERSION = "brain_v1"


def confidence_percent(diagnosis: Diagnosis) -> int:
    """Primary confidence as a whole percentage, halves rounded up."""
    return int(math.floor(diagnosis.primary_confidence() * 100 + 0.5))


def build_recommendation_text(diagnosis: Diagnosis) -> str:
    pct = confidence_percent(diagnosis)
    confidence = f" ({pct}% confidence)" if pct else ""
    return (
        f"Primary finding: {diagnosis.primary}{confidence}. We will focus on restoring "
        "scalp balance, protecting fragile areas, and stimulating follicles with a "
        "consistent routine tailored to your selections."
    )


def evaluate_answers(answers) -> DiagnosisReport:
    """
    Evaluate an answer snapshot with the rule-based pipeline.

    Args:
        answers: AnswerSet, mapping, or list of {questionId, answer} records

    Returns:
        DiagnosisReport
    """
    answers = AnswerSet.from_payload(answers)

    diagnosis = classify(answers)
    severity = select_bundle(diagnosis, answers)
    plan = build_treatment_plan(diagnosis, answers)

    return DiagnosisReport(
        diagnosis=diagnosis,
        severity=severity,
        plan=plan,
        recommendation_text=build_recommendation_text(diagnosis),
        input_hash=DiagnosisReport.compute_hash(answers.to_dict()),
        version=BRAIN_VERSION,
    )
