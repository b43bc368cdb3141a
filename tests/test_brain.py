"""
Brain Tests

Covers:
- evaluate_answers report (recommendation text, input hash)
- Classifier strategy selection and side-by-side comparison
- Brain and quiz schema endpoints

Version: brain_v1
"""

import pytest
from fastapi.testclient import TestClient

from api_server import app
from hairfinder.brain import (
    BRAIN_VERSION,
    DiagnosisReport,
    RuleBasedDiagnosis,
    StrategyComparison,
    StyleRiskBased,
    build_recommendation_text,
    compare,
    evaluate_answers,
    get_classifier,
)
from hairfinder.diagnosis.models import Diagnosis
from hairfinder.intake import AnswerSet
from hairfinder.recommendation import StyleRiskRecommendation


# ============================================================================
# TEST FIXTURES
# ============================================================================

@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def traction_answers():
    return {
        "affected-areas": ["Edges (front hairline)", "Temples (sides of hairline)"],
        "protective-styles-often": ["Box braids (individual plaits)"],
        "length-distribution": "Crown is longest, edges are shortest",
        "shedding-vs-breakage": "Hair breaks off at different lengths (short pieces, no bulb, rough ends)",
    }


# ============================================================================
# ORCHESTRATE
# ============================================================================

class TestEvaluateAnswers:

    def test_report_sections(self, traction_answers):
        report = evaluate_answers(traction_answers)
        assert report.diagnosis.primary == "Traction Alopecia"
        assert report.severity.severity_score >= 0
        assert report.plan[-1].title == "Expected Results Timeline"
        assert report.version == BRAIN_VERSION

    def test_recommendation_text(self, traction_answers):
        report = evaluate_answers(traction_answers)
        assert report.recommendation_text.startswith(
            "Primary finding: Traction Alopecia (100% confidence). We will focus on"
        )

    def test_fallback_text_has_no_confidence(self):
        text = build_recommendation_text(Diagnosis(primary="General Hair Thinning"))
        assert text.startswith("Primary finding: General Hair Thinning. We will focus")

    def test_confidence_rounded_to_whole_percent(self):
        diagnosis = Diagnosis(
            primary="Androgenic Alopecia",
            primary_key="androgenic",
            confidence={"androgenic": 4 / 6},
        )
        assert "(67% confidence)" in build_recommendation_text(diagnosis)

    def test_input_hash_ignores_key_order(self, traction_answers):
        reordered = dict(reversed(list(traction_answers.items())))
        first = evaluate_answers(traction_answers)
        second = evaluate_answers(reordered)
        assert first.input_hash == second.input_hash
        assert first.input_hash.startswith("sha256:")
        assert len(first.input_hash) == len("sha256:") + 64

    def test_input_hash_changes_with_answers(self, traction_answers):
        changed = dict(traction_answers, **{"noticed-when": "1-2 years ago"})
        assert evaluate_answers(changed).input_hash != evaluate_answers(traction_answers).input_hash

    def test_deterministic(self, traction_answers):
        assert evaluate_answers(traction_answers) == evaluate_answers(traction_answers)


# ============================================================================
# STRATEGIES
# ============================================================================

class TestStrategies:

    def test_get_classifier(self):
        assert isinstance(get_classifier("rule_based"), RuleBasedDiagnosis)
        assert isinstance(get_classifier("style_risk"), StyleRiskBased)

    def test_unknown_strategy(self):
        with pytest.raises(ValueError) as exc_info:
            get_classifier("astrology")
        assert "rule_based" in str(exc_info.value)

    def test_rule_based_output(self, traction_answers):
        assert isinstance(RuleBasedDiagnosis().classify(traction_answers), DiagnosisReport)

    def test_style_risk_normalizes_labels(self, traction_answers):
        engine_input = StyleRiskBased.to_engine_input(AnswerSet(traction_answers))
        assert engine_input["protectiveStyles"] == ["box_braids"]
        assert engine_input["scalpAreas"] == ["edges", "temples"]

    def test_style_risk_output(self, traction_answers):
        result = StyleRiskBased().classify(traction_answers)
        assert isinstance(result, StyleRiskRecommendation)
        # box braids stress crown and nape, not the reported edges/temples
        assert result.affected_area_match.matches == []
        assert result.affected_area_match.unexpected == ["edges", "temples"]

    def test_style_risk_closure_wig_counts_as_glued(self):
        result = StyleRiskBased().classify({
            "protective-styles-often": [
                "Closure wigs or frontal (no glue/tape)",
                'Tight ponytails or high buns ("puff" or slicked edges)',
            ],
        })
        assert "chemical_plus_tension" in [p.type for p in result.patterns]
        assert result.risk_score.risk_level == "critical"

    def test_compare_keeps_both(self, traction_answers):
        comparison = compare(traction_answers)
        assert isinstance(comparison, StrategyComparison)
        assert comparison.rule_based.diagnosis.primary == "Traction Alopecia"
        assert comparison.style_risk.risk_score.total_score == 6.0
        assert comparison.input_hash == comparison.rule_based.input_hash


# ============================================================================
# ENDPOINTS
# ============================================================================

class TestBrainEndpoints:

    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "ok", "service": "hair-finder-api"}

    def test_quiz_schema(self, client):
        response = client.get("/api/v1/quiz/schema")
        assert response.status_code == 200
        ids = [q["id"] for q in response.json()["questions"]]
        assert "affected-areas" in ids

    def test_style_profiles(self, client):
        response = client.get("/api/v1/brain/style-profiles")
        data = response.json()
        assert data["count"] == 15
        assert data["profiles"]["micro_twists"]["risk_score"] == 10

    def test_evaluate_default_strategy(self, client, traction_answers):
        response = client.post("/api/v1/brain/evaluate", json={"answers": traction_answers})
        assert response.status_code == 200
        data = response.json()
        assert data["strategy"] == "rule_based"
        assert data["result"]["diagnosis"]["primary"] == "Traction Alopecia"

    def test_evaluate_style_risk(self, client, traction_answers):
        response = client.post(
            "/api/v1/brain/evaluate",
            json={"answers": traction_answers, "strategy": "style_risk"},
        )
        assert response.status_code == 200
        assert response.json()["result"]["risk_score"]["risk_level"] == "high"

    def test_evaluate_record_list(self, client, traction_answers):
        records = [{"questionId": k, "answer": v} for k, v in traction_answers.items()]
        response = client.post("/api/v1/brain/evaluate", json={"answers": records})
        assert response.json()["result"]["diagnosis"]["primary"] == "Traction Alopecia"

    def test_evaluate_invalid_strategy(self, client, traction_answers):
        response = client.post(
            "/api/v1/brain/evaluate",
            json={"answers": traction_answers, "strategy": "astrology"},
        )
        assert response.status_code == 422

    def test_compare(self, client, traction_answers):
        response = client.post("/api/v1/brain/compare", json={"answers": traction_answers})
        assert response.status_code == 200
        data = response.json()
        assert set(data) == {"rule_based", "style_risk", "input_hash"}
