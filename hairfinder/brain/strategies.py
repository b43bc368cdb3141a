"""
Classifier Strategies

Two independent classification pipelines behind one interface:

- RuleBasedDiagnosis: diagnosis classifier -> severity -> treatment plan
- StyleRiskBased:     normalizer -> style-risk recommendation engine

The pipelines overlap and can disagree. `compare` runs both on the same
snapshot and returns them side by side; nothing merges their outputs.

Version: brain_v1
"""

from abc import ABC, abstractmethod
from typing import Dict, Union

from pydantic import BaseModel

from hairfinder.intake.answers import AnswerSet
from hairfinder.intake.normalize import normalize_answers
from hairfinder.recommendation import generate_recommendations, StyleRiskRecommendation

from .models import DiagnosisReport, StrategyComparison, StrategyName
from .orchestrate import evaluate_answers


class Classifier(ABC):
    """Maps an answer snapshot to a classification result."""

    name: StrategyName

    @abstractmethod
    def classify(self, answers) -> BaseModel:
        raise NotImplementedError


class RuleBasedDiagnosis(Classifier):
    name = StrategyName.RULE_BASED

    def classify(self, answers) -> DiagnosisReport:
        return evaluate_answers(answers)


class StyleRiskBased(Classifier):
    name = StrategyName.STYLE_RISK

    @staticmethod
    def to_engine_input(answers: AnswerSet) -> Dict:
        """Map questionnaire answers onto the engine's normalized input."""
        normalized = normalize_answers({
            "protectiveStyles": answers.items("protective-styles-often"),
            "scalpAreas": answers.items("affected-areas"),
            "ageRange": answers.text("age-range") or None,
            "whenNoticed": answers.text("noticed-when") or None,
            "primaryConcern": answers.text("primary-concern") or None,
        })
        normalized["scalpIssues"] = answers.items("scalp-issues-detailed")
        return normalized

    def classify(self, answers) -> StyleRiskRecommendation:
        answers = AnswerSet.from_payload(answers)
        return generate_recommendations(self.to_engine_input(answers))


CLASSIFIERS: Dict[StrategyName, Classifier] = {
    StrategyName.RULE_BASED: RuleBasedDiagnosis(),
    StrategyName.STYLE_RISK: StyleRiskBased(),
}


def get_classifier(name: Union[str, StrategyName]) -> Classifier:
    """
    Select a classifier strategy by name.

    Raises:
        ValueError: unknown strategy name
    """
    try:
        return CLASSIFIERS[StrategyName(name)]
    except ValueError:
        valid = ", ".join(s.value for s in StrategyName)
        raise ValueError(f"Unknown strategy '{name}'. Valid strategies: {valid}")


def compare(answers) -> StrategyComparison:
    answers = AnswerSet.from_payload(answers)
    rule_based = RuleBasedDiagnosis().classify(answers)
    return StrategyComparison(
        rule_based=rule_based,
        style_risk=StyleRiskBased().classify(answers),
        input_hash=rule_based.input_hash,
    )
