"""
Recommendation Engine Tests

Covers:
- Predicted vs reported area matching
- Product tiers, education lessons, action plan and summary
- Full pipeline from normalized input

Version: recommendation_engine_v1
"""

import pytest

from hairfinder.recommendation import (
    EDUCATION_TOPICS,
    GENERIC_LESSON_TITLE,
    LessonUrgency,
    StyleRiskInput,
    create_action_plan,
    generate_education,
    generate_recommendations,
    generate_summary,
    match_affected_areas,
    recommend_products,
)
from hairfinder.styles import (
    RiskLevel,
    calculate_risk_score,
    detect_patterns,
    identify_primary_concerns,
)


def categories(items):
    return [p.category for p in items]


# ============================================================================
# AREA MATCH
# ============================================================================

class TestMatchAffectedAreas:

    def test_full_match(self):
        match = match_affected_areas(["edges", "temples", "crown"], ["edges", "temples"])
        assert match.matches == ["edges", "temples"]
        assert match.match_rate == 1.0
        assert match.unexpected == []
        assert match.insight == "Your hair loss pattern matches your styling habits."

    def test_unexpected_areas(self):
        match = match_affected_areas(["edges"], ["edges", "nape"])
        assert match.match_rate == 0.5
        assert match.unexpected == ["nape"]
        assert match.insight == "Some affected areas are not explained by styling alone."

    def test_nothing_reported(self):
        match = match_affected_areas(["edges"], [])
        assert match.match_rate == 0
        assert match.insight == "Analysis complete"


# ============================================================================
# PRODUCTS
# ============================================================================

class TestRecommendProducts:

    def _products(self, styles):
        return recommend_products(
            calculate_risk_score(styles),
            identify_primary_concerns(styles),
            detect_patterns(styles),
        )

    def test_edge_damage_critical(self):
        products = self._products(["micro_twists", "tight_ponytails"])
        assert categories(products.essential) == ["edge_repair", "scalp_treatment"]
        assert categories(products.recommended) == ["growth"]
        assert products.optional == []

    def test_adhesive_damage(self):
        products = self._products(["wigs_glue"])
        assert "chemical_repair" in categories(products.essential)

    def test_weight_tension(self):
        products = self._products(["dreadlocs"])
        assert categories(products.recommended) == ["strengthening", "growth"]

    def test_growth_always_recommended(self):
        products = self._products([])
        assert categories(products.essential) == []
        assert categories(products.recommended) == ["growth"]


# ============================================================================
# EDUCATION
# ============================================================================

class TestGenerateEducation:

    def test_critical_patterns_then_top_concerns(self):
        styles = ["micro_twists", "tight_ponytails"]
        lessons = generate_education(detect_patterns(styles), identify_primary_concerns(styles))

        assert [(l.topic, l.urgency) for l in lessons] == [
            ("multiple_high_tension", LessonUrgency.HIGH),
            ("extreme_edge_stress", LessonUrgency.HIGH),
            ("edge_damage", LessonUrgency.MEDIUM),
            ("traction_alopecia", LessonUrgency.MEDIUM),
        ]
        assert lessons[0].title == GENERIC_LESSON_TITLE
        assert lessons[1].title == EDUCATION_TOPICS["extreme_edge_stress"]["title"]
        assert lessons[0].read_time == "3 min"
        assert lessons[2].read_time == "4 min"

    def test_positive_patterns_skipped(self):
        styles = ["natural_hair"]
        lessons = generate_education(detect_patterns(styles), identify_primary_concerns(styles))
        assert [l.topic for l in lessons] == ["minimal_risk"]

    def test_known_topics_have_content(self):
        for topic in EDUCATION_TOPICS.values():
            assert topic["title"]
            assert topic["content"]


# ============================================================================
# ACTION PLAN & SUMMARY
# ============================================================================

class TestActionPlan:

    def test_critical_has_immediate_actions(self):
        plan = create_action_plan(calculate_risk_score(["micro_twists"]))
        assert len(plan.immediate) == 2
        assert plan.immediate[0].action == "Stop all high-tension styles immediately"

    def test_non_critical_has_no_immediate_actions(self):
        plan = create_action_plan(calculate_risk_score(["natural_hair"]))
        assert plan.immediate == []
        assert len(plan.short_term) == 2
        assert len(plan.long_term) == 2


class TestSummary:

    @pytest.mark.parametrize("styles,opening", [
        (["micro_twists"], "Your styling habits are putting your hair at critical risk. "),
        (["box_braids", "faux_locs"], "Your hair is experiencing significant tension-related stress. "),
        (["crochet"], "You have some styling habits that could be improved for better hair health. "),
        (["natural_hair"], "Great news! Your styling habits are relatively hair-healthy. "),
        ([], "Great news! Your styling habits are relatively hair-healthy. "),
    ])
    def test_opening_by_risk_level(self, styles, opening):
        summary = generate_summary(
            calculate_risk_score(styles), [], match_affected_areas([], []),
        )
        assert summary.startswith(opening)

    def test_closing_by_match_rate(self):
        risk = calculate_risk_score(["natural_hair"])
        matched = generate_summary(risk, [], match_affected_areas(["edges"], ["edges"]))
        partial = generate_summary(risk, [], match_affected_areas(["edges"], ["edges", "nape"]))
        assert matched.endswith("it's reversible with the right changes.")
        assert partial.endswith("look at hormonal or nutritional factors.")


# ============================================================================
# PIPELINE
# ============================================================================

class TestGenerateRecommendations:

    def test_camel_case_input(self):
        result = generate_recommendations({
            "protectiveStyles": ["micro_twists", "tight_ponytails"],
            "scalpAreas": ["edges", "temples"],
        })
        assert result.risk_score.risk_level == RiskLevel.CRITICAL
        assert result.affected_area_match.match_rate == 1.0
        assert len(result.education) == 4
        assert result.summary.startswith("Your styling habits are putting your hair at critical risk.")

    def test_model_input(self):
        quiz = StyleRiskInput(protective_styles=["natural_hair"], scalp_areas=["edges"])
        result = generate_recommendations(quiz)
        assert [p.type for p in result.patterns] == ["low_risk_styling", "natural_only"]
        assert result.affected_area_match.unexpected == ["edges"]
        assert "hormonal or nutritional" in result.summary

    def test_empty_input(self):
        result = generate_recommendations({})
        assert result.risk_score.risk_level == RiskLevel.UNKNOWN
        assert result.patterns == []

    def test_input_not_mutated(self):
        quiz = {"protectiveStyles": ["box_braids"], "scalpAreas": ["crown"]}
        generate_recommendations(quiz)
        assert quiz == {"protectiveStyles": ["box_braids"], "scalpAreas": ["crown"]}
