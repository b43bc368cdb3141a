"""
Severity & Bundle Selector

Computes an integer severity score from the diagnosis and answers, then
picks a bundle with a pure threshold on that score.

Point contributions (independent, summed):
- timing:      more than 2 years = 3, 1-2 years = 2, 6-12 months = 1
- areas:       diffuse = 3, else crown = 2, else patches = 2; +1 for 3+ areas
- primary:     cicatricial = 3; androgenic, areata, traction = 2
- scalp:       ringworm/sores = 2; +1 for 2+ scalp issues
- secondary:   2+ secondary diagnoses = 2, exactly 1 = 1

Overrides applied after the bundle choice:
- ringworm/sores/dandruff replaces the shampoo instruction
- breakage (behaviour or concern) replaces the conditioner instruction
- postpartum appends a reassurance sentence to the reasoning

Version: severity_v1
"""

from dataclasses import dataclass
from typing import Dict, List, Tuple

from hairfinder.diagnosis.models import Diagnosis
from hairfinder.intake.answers import AnswerSet
from hairfinder.intake.patterns import matches_any, any_item_matches

from .models import BundleName, BundleUsage, SeverityRecommendation

SEVERITY_BUNDLE_THRESHOLD = 5


@dataclass(frozen=True)
class Bundle:
    name: BundleName
    months: int
    quantity: int
    price_ngn: int


BUNDLES: Dict[BundleName, Bundle] = {
    BundleName.SELF_LOVE_PLUS: Bundle(
        name=BundleName.SELF_LOVE_PLUS, months=1, quantity=1, price_ngn=32750,
    ),
    BundleName.SELF_LOVE_PLUS_B2GOF: Bundle(
        name=BundleName.SELF_LOVE_PLUS_B2GOF, months=3, quantity=3, price_ngn=66750,
    ),
}

# Points for the primary diagnosis, by condition key
PRIMARY_DIAGNOSIS_POINTS: Dict[str, int] = {
    "cicatricial": 3,
    "androgenic": 2,
    "areata": 2,
    "traction": 2,
}

URGENT_SHAMPOO = (
    "⚠️ CRITICAL: Wash 2-3x per week to clear scalp issues before pomade can work optimally"
)
URGENT_CONDITIONER = (
    "⚠️ CRITICAL: Use after EVERY wash. Your hair is breaking, not just shedding - "
    "moisture is essential."
)
POSTPARTUM_REASSURANCE = (
    " Postpartum hair loss typically reverses within 6-9 months with proper treatment."
)


def calculate_severity_score(diagnosis: Diagnosis, answers) -> Tuple[int, List[str]]:
    """
    Sum the severity point contributions.

    Returns:
        (score, factors) where factors describes each contribution
    """
    answers = AnswerSet.from_payload(answers)
    score = 0
    factors: List[str] = []

    def add(points: int, reason: str):
        nonlocal score
        score += points
        factors.append(f"+{points} {reason}")

    noticed = answers.text("noticed-when")
    if matches_any(noticed, [r"more than 2"]):
        add(3, "noticed more than 2 years ago")
    elif matches_any(noticed, [r"1-2 years"]):
        add(2, "noticed 1-2 years ago")
    elif matches_any(noticed, [r"6-12 months"]):
        add(1, "noticed 6-12 months ago")

    areas = answers.items("affected-areas")
    if any_item_matches(areas, [r"even thinning|overall"]):
        add(3, "thinning all over")
    elif any_item_matches(areas, [r"crown"]):
        add(2, "crown affected")
    elif any_item_matches(areas, [r"patch"]):
        add(2, "patchy loss")
    if len(areas) >= 3:
        add(1, f"{len(areas)} areas affected")

    points = PRIMARY_DIAGNOSIS_POINTS.get(diagnosis.primary_key or "", 0)
    if points:
        add(points, f"primary diagnosis {diagnosis.primary}")

    scalp_issues = answers.items("scalp-issues-detailed")
    if any_item_matches(scalp_issues, [r"ringworm|sores"]):
        add(2, "scalp infection or sores")
    if len(scalp_issues) >= 2:
        add(1, f"{len(scalp_issues)} scalp issues")

    secondary_count = len(diagnosis.secondary)
    if secondary_count >= 2:
        add(2, f"{secondary_count} secondary diagnoses")
    elif secondary_count == 1:
        add(1, "1 secondary diagnosis")

    return score, factors


def bundle_for_score(severity_score: int) -> Bundle:
    if severity_score >= SEVERITY_BUNDLE_THRESHOLD:
        return BUNDLES[BundleName.SELF_LOVE_PLUS_B2GOF]
    return BUNDLES[BundleName.SELF_LOVE_PLUS]


def select_bundle(diagnosis: Diagnosis, answers) -> SeverityRecommendation:
    """
    Score severity and select the recommended bundle.

    Args:
        diagnosis: Output of the diagnosis classifier
        answers: Answer snapshot (AnswerSet, mapping or record list)

    Returns:
        SeverityRecommendation with usage overrides applied
    """
    answers = AnswerSet.from_payload(answers)
    severity_score, factors = calculate_severity_score(diagnosis, answers)
    bundle = bundle_for_score(severity_score)

    if bundle.name == BundleName.SELF_LOVE_PLUS_B2GOF:
        reasoning = (
            f"Your {diagnosis.primary} needs a complete 3-month protocol. "
            "The shampoo + pomade + conditioner system addresses both scalp health "
            "and breakage for sustained results."
        )
        usage = BundleUsage(
            shampoo="Wash 2x per week to prep scalp",
            pomade="Apply to affected areas 2x daily (morning & night)",
            conditioner="Use after every wash to prevent breakage",
        )
    else:
        noticed = answers.text("noticed-when") or "recently"
        reasoning = (
            "Start with our complete system for 1 month. "
            f"Since you caught this early ({noticed}), you may see results quickly."
        )
        usage = BundleUsage(
            shampoo="Wash 1-2x per week",
            pomade="Apply 1-2x daily to problem areas",
            conditioner="Use after washing to seal moisture",
        )

    if any_item_matches(answers.items("scalp-issues-detailed"), [r"ringworm|sores|dandruff"]):
        usage.shampoo = URGENT_SHAMPOO
    if any_item_matches(answers.items("life-events-2years"), [r"postpartum"]):
        reasoning += POSTPARTUM_REASSURANCE
    if (matches_any(answers.text("shedding-vs-breakage"), [r"breaks"])
            or matches_any(answers.text("primary-concern"), [r"breakage"])):
        usage.conditioner = URGENT_CONDITIONER

    return SeverityRecommendation(
        severity_score=severity_score,
        bundle=bundle.name,
        months=bundle.months,
        quantity=bundle.quantity,
        price_ngn=bundle.price_ngn,
        reasoning=reasoning,
        usage=usage,
        factors=factors,
    )
