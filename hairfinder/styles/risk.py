"""
Risk Analyzer

Scores a selection of normalized protective styles, aggregates their
concerns, and detects named interactions between styles.

Design Principles:
- PURE: no side effects, the profile table is read-only
- TOLERANT: unknown style ids contribute zero risk and nothing else
- DETERMINISTIC: same selection -> same output, patterns in declared order

Version: risk_analyzer_v1
"""

import math
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from .models import (
    RiskLevel,
    RiskScore,
    Concerns,
    ConcernFrequency,
    Pattern,
    PatternSeverity,
)
from .profiles import (
    STYLE_RISK_PROFILES,
    WEIGHT_BEARING_STYLES,
    LOW_RISK_MAX,
    HIGH_TENSION_MIN,
    individual_risk,
)

MAX_WEIGHT = 0.7
MEAN_WEIGHT = 0.3

# (minimum score, level), checked top-down
RISK_LEVEL_THRESHOLDS: List[Tuple[float, RiskLevel]] = [
    (8, RiskLevel.CRITICAL),
    (6, RiskLevel.HIGH),
    (4, RiskLevel.MODERATE),
    (2, RiskLevel.LOW),
]


def round_half_up(value: float, digits: int = 1) -> float:
    """Round to `digits` decimals with halves going up."""
    factor = 10 ** digits
    return math.floor(value * factor + 0.5) / factor


def get_risk_level(score: float) -> RiskLevel:
    for minimum, level in RISK_LEVEL_THRESHOLDS:
        if score >= minimum:
            return level
    return RiskLevel.MINIMAL


def calculate_risk_score(style_ids: Optional[Sequence[str]] = None) -> RiskScore:
    """
    Combine individual style risks into one score.

    Args:
        style_ids: Normalized style identifiers (duplicates count individually)

    Returns:
        RiskScore; all zeros with level UNKNOWN for an empty selection
    """
    style_ids = list(style_ids or [])
    if not style_ids:
        return RiskScore(
            total_score=0,
            risk_level=RiskLevel.UNKNOWN,
            max_individual_risk=0,
            average_risk=0,
        )

    scores = [individual_risk(style_id) for style_id in style_ids]
    max_score = max(scores)
    avg_score = sum(scores) / len(scores)
    total_score = round_half_up(max_score * MAX_WEIGHT + avg_score * MEAN_WEIGHT)

    return RiskScore(
        total_score=total_score,
        risk_level=get_risk_level(total_score),
        max_individual_risk=max_score,
        average_risk=round_half_up(avg_score),
    )


def identify_primary_concerns(style_ids: Optional[Sequence[str]] = None) -> Concerns:
    """
    Aggregate concern tags and affected areas across the selected styles.

    Concerns are ranked by descending frequency; ties keep encounter order.
    """
    concern_counts: Dict[str, int] = {}
    affected_areas: Dict[str, None] = {}
    tension_types: Dict[str, None] = {}
    damage_types: Dict[str, None] = {}

    for style_id in style_ids or []:
        profile = STYLE_RISK_PROFILES.get(style_id)
        if profile is None:
            continue
        for concern in profile.concerns:
            concern_counts[concern] = concern_counts.get(concern, 0) + 1
        for area in profile.affected_areas:
            affected_areas.setdefault(area)
        tension_types.setdefault(profile.tension_type.value)
        damage_types.setdefault(profile.damage_type.value)

    ranked = sorted(concern_counts.items(), key=lambda item: -item[1])

    return Concerns(
        primary_concerns=[
            ConcernFrequency(concern=concern, frequency=frequency)
            for concern, frequency in ranked
        ],
        affected_areas=list(affected_areas),
        tension_types=list(tension_types),
        damage_types=list(damage_types),
    )


# ============================================================================
# PATTERN RULES
# ============================================================================

def _multiple_high_tension(styles: List[str]) -> bool:
    return sum(1 for s in styles if individual_risk(s) >= HIGH_TENSION_MIN) >= 2


def _extreme_edge_stress(styles: List[str]) -> bool:
    return "micro_twists" in styles and "tight_ponytails" in styles


def _chemical_plus_tension(styles: List[str]) -> bool:
    return "wigs_glue" in styles and "tight_ponytails" in styles


def _balanced_approach(styles: List[str]) -> bool:
    has_weight = any(s in WEIGHT_BEARING_STYLES for s in styles)
    has_low = any(individual_risk(s) <= LOW_RISK_MAX for s in styles)
    return has_weight and has_low


def _low_risk_styling(styles: List[str]) -> bool:
    return bool(styles) and all(individual_risk(s) <= LOW_RISK_MAX for s in styles)


def _natural_only(styles: List[str]) -> bool:
    return set(styles) == {"natural_hair"}


PATTERN_RULES: List[Tuple[Callable[[List[str]], bool], Pattern]] = [
    (_multiple_high_tension, Pattern(
        type="multiple_high_tension",
        severity=PatternSeverity.CRITICAL,
        message="You frequently wear multiple high-tension styles",
        recommendation="Rotate with low-tension protective styles",
    )),
    (_extreme_edge_stress, Pattern(
        type="extreme_edge_stress",
        severity=PatternSeverity.CRITICAL,
        message="This combination puts extreme stress on your hairline",
        recommendation="Give your edges a break for at least 3 months",
    )),
    (_chemical_plus_tension, Pattern(
        type="chemical_plus_tension",
        severity=PatternSeverity.CRITICAL,
        message="Chemical damage + physical tension = severe edge damage",
        recommendation="Switch to glueless wigs and loose styles immediately",
    )),
    (_balanced_approach, Pattern(
        type="balanced_approach",
        severity=PatternSeverity.POSITIVE,
        message="Good! You balance protective styles with low-manipulation options",
        recommendation="Continue this approach and focus on scalp massage",
    )),
    (_low_risk_styling, Pattern(
        type="low_risk_styling",
        severity=PatternSeverity.POSITIVE,
        message="Excellent! Your styling habits are hair-healthy",
        recommendation="Maintain scalp health and nutrition",
    )),
    (_natural_only, Pattern(
        type="natural_only",
        severity=PatternSeverity.POSITIVE,
        message="You wear your natural hair - minimal tension risk",
        recommendation="Focus on moisture retention and gentle handling",
    )),
]


def detect_patterns(style_ids: Optional[Sequence[str]] = None) -> List[Pattern]:
    """
    Evaluate every pattern rule independently.

    Returns all patterns that fire, in rule declaration order.
    """
    styles = list(style_ids or [])
    return [pattern.model_copy() for rule, pattern in PATTERN_RULES if rule(styles)]


class RiskAnalyzer:
    """Stateless facade over the risk functions."""

    def calculate_risk_score(self, style_ids: Optional[Sequence[str]] = None) -> RiskScore:
        return calculate_risk_score(style_ids)

    def get_risk_level(self, score: float) -> RiskLevel:
        return get_risk_level(score)

    def identify_primary_concerns(self, style_ids: Optional[Sequence[str]] = None) -> Concerns:
        return identify_primary_concerns(style_ids)

    def detect_patterns(self, style_ids: Optional[Sequence[str]] = None) -> List[Pattern]:
        return detect_patterns(style_ids)


risk_analyzer = RiskAnalyzer()
