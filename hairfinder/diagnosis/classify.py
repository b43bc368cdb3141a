"""
Diagnosis Classifier

Evaluates six condition hypotheses over the full answer snapshot.

Each condition has an ordered list of boolean indicators and an absolute
acceptance threshold. Confidence is the fraction of indicators that fired,
so an accepted condition's confidence lies in [threshold/total, 1.0].
Accepted conditions are ranked by confidence (stable on ties, in condition
declaration order); the first is primary, the rest secondary.

Conditions are identified by explicit keys, never by parsing their names.

Version: diagnosis_classifier_v1
"""

from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Tuple

from hairfinder.intake.answers import AnswerSet
from hairfinder.intake.patterns import matches_any, any_item_matches, compile_patterns

from .models import Diagnosis, ConditionEvaluation, FALLBACK_DIAGNOSIS

Indicator = Tuple[str, Callable[[AnswerSet], bool]]


@dataclass(frozen=True)
class ConditionRule:
    key: str
    name: str
    threshold: int
    indicators: Tuple[Indicator, ...]


def _items(question_id: str, *patterns: str) -> Callable[[AnswerSet], bool]:
    compiled = compile_patterns(*patterns)
    return lambda answers: any_item_matches(answers.items(question_id), compiled)


def _text(question_id: str, *patterns: str) -> Callable[[AnswerSet], bool]:
    compiled = compile_patterns(*patterns)
    return lambda answers: matches_any(answers.text(question_id), compiled)


# ============================================================================
# CONDITION RULES
# ============================================================================

TRACTION = ConditionRule(
    key="traction",
    name="Traction Alopecia",
    threshold=2,
    indicators=(
        ("edges_or_temples_affected", _items("affected-areas", r"edge", r"temple")),
        ("high_tension_styles", _items(
            "protective-styles-often",
            r"box braids",
            r"cornrows",
            r"tight ponytails",
            r"(frontal|full lace).*uses glue",
            r"ghana weaving|shuku",
        )),
        ("edges_shortest", _text("length-distribution", r"edges.*short")),
        ("breakage_behavior", _text("shedding-vs-breakage", r"breaks|both")),
    ),
)

TELOGEN = ConditionRule(
    key="telogen",
    name="Telogen Effluvium",
    threshold=3,
    indicators=(
        ("postpartum_or_breastfeeding", _items("life-events-2years", r"postpartum", r"breastfeeding")),
        ("stress_or_illness", _items(
            "life-events-2years",
            r"stress|job change|relocation|loss",
            r"surgery|illness",
        )),
        ("shedding_behavior", _text("shedding-vs-breakage", r"falls out|shedding|both")),
        ("recent_onset", _text("noticed-when", r"less than 3", r"^3-6")),
        ("excessive_shedding_concern", _text("primary-concern", r"excessive shedding")),
    ),
)

ANDROGENIC = ConditionRule(
    key="androgenic",
    name="Androgenic Alopecia",
    threshold=3,
    indicators=(
        ("maternal_family_history", _text("family-history-detailed", r"mother|both")),
        ("age_46_plus", _text("age-range", r"46-55|56\+")),
        ("menopause", _items("life-events-2years", r"menopause|perimenopause")),
        ("crown_or_diffuse", _items("affected-areas", r"crown", r"even thinning|overall")),
        ("long_standing", _text("noticed-when", r"1-2 years", r"more than 2")),
        ("overall_thinning_concern", _text("primary-concern", r"overall thinning")),
    ),
)

CICATRICIAL = ConditionRule(
    key="cicatricial",
    name="Cicatricial (Scarring) Alopecia",
    threshold=2,
    indicators=(
        ("scalp_infection", _items("scalp-issues-detailed", r"ringworm|infection|sores|painful")),
        ("bald_patches_concern", _text("primary-concern", r"bald patches")),
        ("patchy_areas", _items("affected-areas", r"patch")),
    ),
)

NUTRITIONAL = ConditionRule(
    key="nutritional",
    name="Nutritional Deficiency-Related Hair Loss",
    threshold=2,
    indicators=(
        ("diagnosed_deficiency", _items("diagnosed-conditions", r"anemia|iron", r"vitamin")),
        ("breaking_hair", _text("shedding-vs-breakage", r"breaks")),
        ("breakage_concern", _text("primary-concern", r"breakage")),
        ("breastfeeding", _items("life-events-2years", r"breastfeeding")),
    ),
)

AREATA = ConditionRule(
    key="areata",
    name="Alopecia Areata",
    threshold=2,
    indicators=(
        ("autoimmune_condition", _items("diagnosed-conditions", r"autoimmune")),
        ("bald_patches_concern", _text("primary-concern", r"bald patches")),
        ("patchy_areas", _items("affected-areas", r"patch")),
        ("stress", _items("life-events-2years", r"stress")),
    ),
)

CONDITION_RULES: Tuple[ConditionRule, ...] = (
    TRACTION,
    TELOGEN,
    ANDROGENIC,
    CICATRICIAL,
    NUTRITIONAL,
    AREATA,
)

_KEYS_BY_NAME: Dict[str, str] = {rule.name: rule.key for rule in CONDITION_RULES}


def condition_key(name: str) -> Optional[str]:
    """Map a condition display name to its key; None for the fallback label."""
    return _KEYS_BY_NAME.get(name)


def evaluate_condition(rule: ConditionRule, answers: AnswerSet) -> ConditionEvaluation:
    """Run one condition's indicators. Missing answers make indicators false."""
    fired = [label for label, check in rule.indicators if check(answers)]
    return ConditionEvaluation(
        key=rule.key,
        name=rule.name,
        score=len(fired),
        total=len(rule.indicators),
        threshold=rule.threshold,
        accepted=len(fired) >= rule.threshold,
        fired_indicators=fired,
    )


def classify(answers) -> Diagnosis:
    """
    Classify a questionnaire answer snapshot.

    Args:
        answers: AnswerSet, mapping of question id -> value, or list of
            {"questionId", "answer"} records

    Returns:
        Diagnosis with primary/secondary ranked by confidence, or the
        fallback label when no condition reaches its threshold
    """
    answers = AnswerSet.from_payload(answers)
    evaluations = [evaluate_condition(rule, answers) for rule in CONDITION_RULES]
    accepted = [e for e in evaluations if e.accepted]

    if not accepted:
        return Diagnosis(
            primary=FALLBACK_DIAGNOSIS,
            secondary=[],
            confidence={},
            primary_key=None,
            secondary_keys=[],
            evaluations=evaluations,
        )

    confidence = {e.key: e.strength for e in accepted}
    ranked = sorted(accepted, key=lambda e: -confidence[e.key])

    return Diagnosis(
        primary=ranked[0].name,
        secondary=[e.name for e in ranked[1:]],
        confidence=confidence,
        primary_key=ranked[0].key,
        secondary_keys=[e.key for e in ranked[1:]],
        evaluations=evaluations,
    )
