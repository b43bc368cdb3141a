"""
Recommendation Engine

Style-risk pipeline: scores the normalized protective styles, cross-checks
the areas those styles stress against the areas the user reported, and
derives products, education, an action plan and a narrative summary.

The diagnosis classifier is not involved here; both pipelines stay
separate and may disagree.

Design Principles:
- PURE: input is never mutated, nothing is persisted
- DETERMINISTIC: list order follows rule order

Version: recommendation_engine_v1
"""

from typing import Dict, List, Sequence

from hairfinder.styles.models import RiskLevel, RiskScore, Concerns, Pattern, PatternSeverity
from hairfinder.styles.profiles import TensionType, DamageType
from hairfinder.styles.risk import calculate_risk_score, identify_primary_concerns, detect_patterns

from .models import (
    StyleRiskInput,
    StyleRiskRecommendation,
    AreaMatch,
    ProductRecommendation,
    ProductPriority,
    ProductTiers,
    EducationLesson,
    LessonUrgency,
    ActionItem,
    ActionPlan,
)

# Match rate above which the loss pattern counts as explained by styling
STYLING_EXPLAINED_MIN_RATE = 0.7

EDGE_AREAS = ("edges", "temples")

EDUCATION_TOPICS: Dict[str, Dict[str, str]] = {
    "extreme_edge_stress": {
        "title": "Why Your Edges Are Disappearing (And How to Save Them)",
        "content": (
            "Very small braids or twists combined with tight ponytails pull on the finest "
            "hairs at your hairline over and over. Those follicles are the first to give up. "
            "Stopping the pulling early is what makes the loss reversible, so give your edges "
            "at least 3 months without tension and massage the hairline daily."
        ),
    },
    "chemical_plus_tension": {
        "title": "The Hidden Danger of Glue + Tight Styles",
        "content": (
            "Lace glue irritates the skin along your hairline while a tight base pulls on the "
            "same follicles. Inflamed skin under constant tension scars faster than either "
            "alone. Switch to glueless units and remove any adhesive residue gently with an "
            "oil-based remover, never by peeling."
        ),
    },
    "edge_damage": {
        "title": "Understanding Traction Alopecia in Nigerian Women",
        "content": (
            "Traction alopecia is hair loss caused by repeated pulling, and it is common where "
            "braids, weaves and slicked edges are worn back to back. It starts as thinning at "
            "the temples and edges. Caught early, the follicles recover once tension stops."
        ),
    },
    "traction_alopecia": {
        "title": "Reversing Traction Alopecia: A Step-by-Step Guide",
        "content": (
            "1. Take down the tightest styles first. 2. Ask your stylist for larger sections "
            "and no tension at the hairline. 3. Massage a growth serum into the edges twice "
            "daily. 4. Rotate styles every 6-8 weeks. 5. Take monthly photos to track regrowth."
        ),
    },
}

GENERIC_LESSON_TITLE = "Understanding Your Hair Loss"

SUMMARY_OPENINGS: Dict[RiskLevel, str] = {
    RiskLevel.CRITICAL: "Your styling habits are putting your hair at critical risk. ",
    RiskLevel.HIGH: "Your hair is experiencing significant tension-related stress. ",
    RiskLevel.MODERATE: "You have some styling habits that could be improved for better hair health. ",
}
DEFAULT_SUMMARY_OPENING = "Great news! Your styling habits are relatively hair-healthy. "

SUMMARY_STYLING_EXPLAINED = (
    "The good news: your hair loss pattern matches your styling habits, "
    "which means it's reversible with the right changes."
)
SUMMARY_LOOK_FURTHER = (
    "Not all affected areas match your styling patterns - "
    "we should also look at hormonal or nutritional factors."
)


def match_affected_areas(predicted: Sequence[str], reported: Sequence[str]) -> AreaMatch:
    """
    Compare the areas the styles are expected to stress with the reported areas.

    Match rate is matches / reported, and 0 when nothing was reported.
    """
    predicted = list(predicted or [])
    reported = list(reported or [])
    matches = [area for area in predicted if area in reported]
    unexpected = [area for area in reported if area not in predicted]

    if matches and not unexpected:
        insight = "Your hair loss pattern matches your styling habits."
    elif unexpected:
        insight = "Some affected areas are not explained by styling alone."
    else:
        insight = "Analysis complete"

    return AreaMatch(
        matches=matches,
        match_rate=len(matches) / len(reported) if reported else 0.0,
        unexpected=unexpected,
        insight=insight,
    )


def recommend_products(risk_score: RiskScore, concerns: Concerns,
                       patterns: Sequence[Pattern] = ()) -> ProductTiers:
    products = ProductTiers()

    if any(area in concerns.affected_areas for area in EDGE_AREAS):
        products.essential.append(ProductRecommendation(
            category="edge_repair",
            name="Fulani Edge Growth Serum",
            reason="Repairs damage from tight styling and restores hairline",
            priority=ProductPriority.HIGH,
        ))
    if risk_score.risk_level in (RiskLevel.CRITICAL, RiskLevel.HIGH):
        products.essential.append(ProductRecommendation(
            category="scalp_treatment",
            name="Fulani Scalp Recovery Oil",
            reason="Reduces inflammation from tension and promotes blood flow",
            priority=ProductPriority.HIGH,
        ))
    if DamageType.ADHESIVE_DAMAGE.value in concerns.damage_types:
        products.essential.append(ProductRecommendation(
            category="chemical_repair",
            name="Fulani Detox & Repair Treatment",
            reason="Removes adhesive residue and repairs chemical damage",
            priority=ProductPriority.HIGH,
        ))
    if TensionType.WEIGHT.value in concerns.tension_types:
        products.recommended.append(ProductRecommendation(
            category="strengthening",
            name="Fulani Root Strengthening Serum",
            reason="Strengthens roots to handle weight of locs/braids",
            priority=ProductPriority.MEDIUM,
        ))
    products.recommended.append(ProductRecommendation(
        category="growth",
        name="Fulani Hair Growth System",
        reason="Promotes new growth and thicker hair density",
        priority=ProductPriority.MEDIUM,
    ))

    return products


def _lesson(topic: str, urgency: LessonUrgency, read_time: str) -> EducationLesson:
    known = EDUCATION_TOPICS.get(topic)
    if known:
        title, content = known["title"], known["content"]
    else:
        title = GENERIC_LESSON_TITLE
        content = (
            f"Your styling choices point to {topic.replace('_', ' ')}. Learn how it develops, "
            "which habits make it worse, and the routine changes that help your hair recover."
        )
    return EducationLesson(
        topic=topic, title=title, content=content, urgency=urgency, read_time=read_time,
    )


def generate_education(patterns: Sequence[Pattern], concerns: Concerns) -> List[EducationLesson]:
    """
    One high-urgency lesson per critical pattern, then one medium-urgency
    lesson for each of the two most frequent concerns.
    """
    lessons = [
        _lesson(p.type, LessonUrgency.HIGH, "3 min")
        for p in patterns if p.severity == PatternSeverity.CRITICAL
    ]
    for item in concerns.primary_concerns[:2]:
        lessons.append(_lesson(item.concern, LessonUrgency.MEDIUM, "4 min"))
    return lessons


def create_action_plan(risk_score: RiskScore, patterns: Sequence[Pattern] = (),
                       concerns: Concerns = None) -> ActionPlan:
    plan = ActionPlan()

    if risk_score.risk_level == RiskLevel.CRITICAL:
        plan.immediate.append(ActionItem(
            action="Stop all high-tension styles immediately",
            why="Prevent further damage to hair follicles",
            duration="Start today",
        ))
        plan.immediate.append(ActionItem(
            action="Begin using edge repair serum 2x daily",
            why="Start repair process immediately",
            duration="Ongoing",
        ))

    plan.short_term.append(ActionItem(
        action="Switch to low-tension protective styles",
        why="Give your hair time to recover",
        duration="30-60 days",
    ))
    plan.short_term.append(ActionItem(
        action="Scalp massage 3x per week",
        why="Increase blood flow to follicles",
        duration="Ongoing",
    ))
    plan.long_term.append(ActionItem(
        action="Rotate protective styles every 6-8 weeks",
        why="Prevent tension buildup",
        duration="Permanent habit",
    ))
    plan.long_term.append(ActionItem(
        action="Take monthly progress photos",
        why="Track regrowth and adjust treatment",
        duration="Next 6 months",
    ))

    return plan


def generate_summary(risk_score: RiskScore, patterns: Sequence[Pattern],
                     area_match: AreaMatch) -> str:
    summary = SUMMARY_OPENINGS.get(risk_score.risk_level, DEFAULT_SUMMARY_OPENING)
    if area_match.match_rate > STYLING_EXPLAINED_MIN_RATE:
        return summary + SUMMARY_STYLING_EXPLAINED
    return summary + SUMMARY_LOOK_FURTHER


def generate_recommendations(quiz_answers) -> StyleRiskRecommendation:
    """
    Run the full style-risk pipeline.

    Args:
        quiz_answers: StyleRiskInput or a dict with protectiveStyles/scalpAreas
            (already normalized ids)

    Returns:
        StyleRiskRecommendation
    """
    if not isinstance(quiz_answers, StyleRiskInput):
        quiz_answers = StyleRiskInput.model_validate(quiz_answers or {})

    styles = quiz_answers.protective_styles
    risk_score = calculate_risk_score(styles)
    concerns = identify_primary_concerns(styles)
    patterns = detect_patterns(styles)

    area_match = match_affected_areas(concerns.affected_areas, quiz_answers.scalp_areas)

    return StyleRiskRecommendation(
        risk_score=risk_score,
        concerns=concerns,
        patterns=patterns,
        affected_area_match=area_match,
        products=recommend_products(risk_score, concerns, patterns),
        education=generate_education(patterns, concerns),
        action_plan=create_action_plan(risk_score, patterns, concerns),
        summary=generate_summary(risk_score, patterns, area_match),
    )
