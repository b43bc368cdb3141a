"""
Severity & Bundle Selector Tests

Covers:
- Bundle threshold (score >= 5 selects the 3-month bundle)
- Point contributions and area-count monotonicity
- Shampoo / conditioner overrides and the postpartum reassurance

Version: severity_v1
"""

import pytest

from hairfinder.diagnosis import classify
from hairfinder.diagnosis.models import Diagnosis
from hairfinder.severity import (
    BundleName,
    POSTPARTUM_REASSURANCE,
    SEVERITY_BUNDLE_THRESHOLD,
    URGENT_CONDITIONER,
    URGENT_SHAMPOO,
    bundle_for_score,
    calculate_severity_score,
    select_bundle,
)


# ============================================================================
# TEST FIXTURES
# ============================================================================

@pytest.fixture
def postpartum_answers():
    return {
        "life-events-2years": ["Postpartum (after giving birth)"],
        "noticed-when": "Less than 3 months ago",
        "shedding-vs-breakage": "Hair falls out from the root (long strands with white bulb at the end)",
        "primary-concern": "Excessive shedding (hair falls out in clumps)",
    }


@pytest.fixture
def early_answers():
    """Recent onset, one area, no scalp issues, one secondary diagnosis."""
    return {
        "affected-areas": ["Edges (front hairline)"],
        "protective-styles-often": ["Cornrows (scalp braids/straight backs)"],
        "shedding-vs-breakage": "Both falling out and breaking",
        "noticed-when": "3-6 months ago",
        "life-events-2years": ["Significant stress or trauma"],
        "primary-concern": "Excessive shedding (hair falls out in clumps)",
        "scalp-issues-detailed": ["No scalp issues"],
    }


@pytest.fixture
def scarring_answers():
    return {
        "scalp-issues-detailed": ["Ringworm or fungal infection"],
        "primary-concern": "Bald patches or areas with no hair growth",
        "affected-areas": ["Patches throughout scalp"],
        "noticed-when": "More than 2 years ago",
    }


def fallback_diagnosis(secondary=None):
    return Diagnosis(primary="General Hair Thinning", secondary=secondary or [])


# ============================================================================
# THRESHOLD
# ============================================================================

class TestBundleThreshold:

    def test_threshold_constant(self):
        assert SEVERITY_BUNDLE_THRESHOLD == 5

    def test_four_and_five_differ(self):
        assert bundle_for_score(4).name != bundle_for_score(5).name

    def test_five_and_nine_same(self):
        assert bundle_for_score(5).name == bundle_for_score(9).name == BundleName.SELF_LOVE_PLUS_B2GOF

    def test_zero_is_starter(self):
        bundle = bundle_for_score(0)
        assert bundle.name == BundleName.SELF_LOVE_PLUS
        assert (bundle.months, bundle.quantity, bundle.price_ngn) == (1, 1, 32750)


# ============================================================================
# SCENARIOS
# ============================================================================

class TestScenarios:

    def test_postpartum_reassurance(self, postpartum_answers):
        diagnosis = classify(postpartum_answers)
        assert diagnosis.primary == "Telogen Effluvium"

        result = select_bundle(diagnosis, postpartum_answers)
        assert result.reasoning.endswith(POSTPARTUM_REASSURANCE)
        assert "Postpartum hair loss typically reverses within 6-9 months" in result.reasoning

    def test_early_single_month(self, early_answers):
        diagnosis = classify(early_answers)
        assert len(diagnosis.secondary) == 1

        result = select_bundle(diagnosis, early_answers)
        assert result.severity_score < 5
        assert result.bundle == BundleName.SELF_LOVE_PLUS
        assert result.months == 1
        assert result.quantity == 1
        assert "3-6 months ago" in result.reasoning
        assert result.usage.shampoo == "Wash 1-2x per week"
        assert result.usage.pomade == "Apply 1-2x daily to problem areas"
        assert result.usage.conditioner == "Use after washing to seal moisture"

    def test_scarring_three_month(self, scarring_answers):
        diagnosis = classify(scarring_answers)
        result = select_bundle(diagnosis, scarring_answers)

        # 3 timing + 2 patches + 3 cicatricial + 2 ringworm + 1 secondary
        assert result.severity_score == 11
        assert result.bundle == BundleName.SELF_LOVE_PLUS_B2GOF
        assert (result.months, result.quantity, result.price_ngn) == (3, 3, 66750)
        assert result.reasoning.startswith(
            "Your Cicatricial (Scarring) Alopecia needs a complete 3-month protocol."
        )
        assert result.usage.pomade == "Apply to affected areas 2x daily (morning & night)"

    def test_ringworm_urgent_shampoo(self):
        answers = {"scalp-issues-detailed": ["Ringworm or fungal infection"]}
        result = select_bundle(classify(answers), answers)
        assert result.usage.shampoo == URGENT_SHAMPOO

    def test_dandruff_urgent_shampoo(self):
        answers = {"scalp-issues-detailed": ["Dandruff (white flakes)"]}
        result = select_bundle(fallback_diagnosis(), answers)
        assert result.usage.shampoo == URGENT_SHAMPOO

    def test_breakage_urgent_conditioner(self):
        answers = {"primary-concern": "Breakage (hair snaps when styling/combing)"}
        result = select_bundle(fallback_diagnosis(), answers)
        assert result.usage.conditioner == URGENT_CONDITIONER

    def test_shedding_keeps_default_conditioner(self, postpartum_answers):
        result = select_bundle(classify(postpartum_answers), postpartum_answers)
        assert result.usage.conditioner == "Use after washing to seal moisture"

    def test_unanswered_timing_reads_recently(self):
        result = select_bundle(fallback_diagnosis(), {})
        assert "(recently)" in result.reasoning


# ============================================================================
# SCORE CONTRIBUTIONS
# ============================================================================

class TestSeverityScore:

    @pytest.mark.parametrize("noticed,points", [
        ("More than 2 years ago", 3),
        ("1-2 years ago", 2),
        ("6-12 months ago", 1),
        ("3-6 months ago", 0),
        ("I'm not sure", 0),
    ])
    def test_timing(self, noticed, points):
        score, _ = calculate_severity_score(fallback_diagnosis(), {"noticed-when": noticed})
        assert score == points

    def test_diffuse_beats_crown(self):
        answers = {"affected-areas": ["Crown (top/center of head)", "Even thinning all over"]}
        score, _ = calculate_severity_score(fallback_diagnosis(), answers)
        assert score == 3

    def test_area_count_monotonic(self):
        diagnosis = fallback_diagnosis()
        two = {"affected-areas": ["Edges (front hairline)", "Temples (sides of hairline)"]}
        three = {"affected-areas": two["affected-areas"] + ["Nape (back of neck)"]}
        low, _ = calculate_severity_score(diagnosis, two)
        high, _ = calculate_severity_score(diagnosis, three)
        assert high >= low
        assert high == low + 1

    def test_secondary_count(self):
        one, _ = calculate_severity_score(fallback_diagnosis(["A"]), {})
        two, _ = calculate_severity_score(fallback_diagnosis(["A", "B"]), {})
        three, _ = calculate_severity_score(fallback_diagnosis(["A", "B", "C"]), {})
        assert (one, two, three) == (1, 2, 2)

    def test_scalp_issue_count(self):
        answers = {"scalp-issues-detailed": ["Itchy scalp", "Very dry, tight scalp"]}
        score, _ = calculate_severity_score(fallback_diagnosis(), answers)
        assert score == 1

    def test_factors_explain_score(self, scarring_answers):
        diagnosis = classify(scarring_answers)
        score, factors = calculate_severity_score(diagnosis, scarring_answers)
        assert sum(int(f.split()[0]) for f in factors) == score
