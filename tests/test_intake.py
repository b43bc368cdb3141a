"""
Intake Layer Tests

Covers:
- Questionnaire catalog lookups (option id and legacy label)
- Tagged answer parsing and the AnswerSet accessors
- Style/area label normalization, including the round-trip property

Version: intake_v1
"""

import pytest

from hairfinder.intake import (
    QUESTIONNAIRE_SCHEMA,
    AREA_LABELS,
    STYLE_LABELS,
    AnswerSet,
    DateValue,
    MultiChoice,
    SingleChoice,
    Unanswered,
    any_item_matches,
    get_question,
    matches_any,
    normalize_answers,
    normalize_protective_styles,
    normalize_scalp_areas,
    parse_answer_value,
    resolve_option,
    slugify,
)
from hairfinder.styles import STYLE_RISK_PROFILES


# ============================================================================
# QUESTIONNAIRE CATALOG
# ============================================================================

class TestQuestionnaireCatalog:
    """Question ids and option resolution."""

    REQUIRED_IDS = {
        "age-range", "primary-concern", "noticed-when", "affected-areas",
        "shedding-vs-breakage", "length-distribution", "protective-styles-often",
        "covered-hair-effects", "sleep-bonnet", "scalp-issues-detailed",
        "wash-frequency", "life-events-2years", "family-history-detailed",
        "diagnosed-conditions", "primary-goal",
    }

    def test_all_rule_question_ids_present(self):
        ids = {q["id"] for q in QUESTIONNAIRE_SCHEMA["questions"]}
        assert self.REQUIRED_IDS <= ids

    def test_option_ids_unique_per_question(self):
        for question in QUESTIONNAIRE_SCHEMA["questions"]:
            values = [o["value"] for o in question["options"]]
            assert len(values) == len(set(values)), question["id"]

    def test_unknown_question(self):
        assert get_question("does-not-exist") is None

    def test_resolve_by_option_id(self):
        option = resolve_option("sleep-bonnet", "wig-on")
        assert option["label"] == "I sleep with my wig/weave on"

    def test_resolve_by_label_case_insensitive(self):
        option = resolve_option("sleep-bonnet", "  no, I USE cotton ")
        assert option["value"] == "no-cotton"

    def test_unknown_value_resolves_to_none(self):
        assert resolve_option("sleep-bonnet", "hammock") is None
        assert resolve_option("sleep-bonnet", None) is None


# ============================================================================
# ANSWER PARSING
# ============================================================================

class TestParseAnswerValue:
    """Tagged variants replace runtime type sniffing."""

    @pytest.mark.parametrize("raw", [None, "", "   ", []])
    def test_empty_is_unanswered(self, raw):
        assert isinstance(parse_answer_value("multiple", raw), Unanswered)

    def test_multiple_wraps_single_string(self):
        assert parse_answer_value("multiple", "Crown") == MultiChoice(("Crown",))

    def test_multiple_drops_blank_items(self):
        assert parse_answer_value("multiple", ["a", "", " b "]) == MultiChoice(("a", "b"))

    def test_single_given_list_is_unanswered(self):
        assert isinstance(parse_answer_value("single", ["a"]), Unanswered)

    def test_date(self):
        assert parse_answer_value("date", "2024-01-01") == DateValue("2024-01-01")

    def test_slider_number(self):
        assert parse_answer_value("slider", 7) == SingleChoice("7")

    def test_unknown_type_inferred_from_shape(self):
        assert parse_answer_value(None, ["x"]) == MultiChoice(("x",))
        assert parse_answer_value(None, "x") == SingleChoice("x")


class TestAnswerSet:
    """Read-only accessors over a snapshot."""

    def test_missing_answers_never_raise(self):
        answers = AnswerSet({})
        assert answers.text("noticed-when") == ""
        assert answers.items("affected-areas") == []
        assert answers.option("sleep-bonnet") == ""
        assert not answers.is_answered("age-range")

    def test_option_id_input_reads_as_label(self):
        answers = AnswerSet({"affected-areas": ["edges", "crown"]})
        assert answers.items("affected-areas") == [
            "Edges (front hairline)",
            "Crown (top/center of head)",
        ]
        assert answers.option_ids("affected-areas") == ["edges", "crown"]

    def test_label_input_reads_as_option_id(self):
        answers = AnswerSet({"wash-frequency": "Less than once a month"})
        assert answers.option("wash-frequency") == "less-than-monthly"
        assert answers.text("wash-frequency") == "Less than once a month"

    def test_unknown_value_passes_through(self):
        answers = AnswerSet({"noticed-when": "last summer"})
        assert answers.text("noticed-when") == "last summer"
        assert answers.option("noticed-when") == "last summer"

    def test_text_of_multi_answer_is_empty(self):
        answers = AnswerSet({"affected-areas": ["edges"]})
        assert answers.text("affected-areas") == ""

    def test_from_record_list(self):
        answers = AnswerSet.from_payload([
            {"questionId": "age-range", "answer": "26-35 years"},
            {"questionId": "affected-areas", "answer": ["Nape (back of neck)"]},
            {"answer": "ignored"},
        ])
        assert answers.option("age-range") == "26-35"
        assert answers.items("affected-areas") == ["Nape (back of neck)"]

    def test_input_not_mutated(self):
        raw = {"affected-areas": ["edges"], "age-range": ""}
        AnswerSet(raw).items("affected-areas")
        assert raw == {"affected-areas": ["edges"], "age-range": ""}

    def test_contains(self):
        answers = AnswerSet({"age-range": "18-25", "noticed-when": ""})
        assert "age-range" in answers
        assert "noticed-when" not in answers


# ============================================================================
# PATTERN HELPERS
# ============================================================================

class TestPatterns:

    def test_case_insensitive(self):
        assert matches_any("Hair BREAKS off", [r"breaks"])

    def test_empty_never_matches(self):
        assert not matches_any("", [r".*"])
        assert not any_item_matches([], [r".*"])


# ============================================================================
# NORMALIZER
# ============================================================================

class TestNormalizeProtectiveStyles:
    """Quiz style labels map onto risk table identifiers."""

    @pytest.mark.parametrize("label,expected", [
        ("Box braids (individual plaits)", "box_braids"),
        ("Cornrows (scalp braids/straight backs)", "allback_cornrows"),
        ("Ghana weaving/Shuku (raised cornrow styles)", "allback_cornrows"),
        ("Crochet styles (hair crocheted into cornrows)", "allback_cornrows"),
        ("Frontal/full lace wigs (uses glue)", "wigs_glue"),
        ("Closure wigs or frontal (no glue/tape)", "wigs_glue"),
        ("Faux locs or passion twists", "dreadlocs"),
        ("Knotless braids (less tension than box braids)", "box_braids"),
        ("Dreadlocs", "dreadlocs"),
        ("Twists (two-strand twists, Senegalese twists)", "twists_senegalese"),
        ('Tight ponytails or high buns ("puff" or slicked edges)', "tight_ponytails"),
        ("Natural hair out (afro, wash-and-go, twist-out)", "natural_hair"),
        ("Weaves/sew-ins (hair sewn onto cornrowed base)", "weaves"),
    ])
    def test_known_labels(self, label, expected):
        assert normalize_protective_styles([label]) == [expected]

    def test_unmatched_label_slug_fallback(self):
        assert normalize_protective_styles(["Bantu Knots!"]) == ["bantu_knots_"]

    def test_first_matching_rule_wins(self):
        # the broad cornrow, glued wig and locs rules are declared first
        assert normalize_protective_styles(["crochet over cornrows"]) == ["allback_cornrows"]
        assert normalize_protective_styles(["closure wig with lace"]) == ["wigs_glue"]
        assert normalize_protective_styles(["faux locs"]) == ["dreadlocs"]
        assert normalize_protective_styles(["crochet"]) == ["crochet"]

    def test_identifiers(self):
        assert normalize_protective_styles(["box_braids", "wigs_glue", "micro_twists"]) == [
            "box_braids", "wigs_glue", "micro_twists",
        ]
        assert normalize_protective_styles(["faux_locs", "wigs_no_glue", "ghana_weaving"]) == [
            "dreadlocs", "wigs_glue", "allback_cornrows",
        ]

    def test_empty(self):
        assert normalize_protective_styles(None) == []

    def test_round_trip_display_labels(self):
        """Re-normalizing the display label of a result keeps the result."""
        for label in STYLE_LABELS.values():
            style_id = normalize_protective_styles([label])[0]
            assert normalize_protective_styles([STYLE_LABELS[style_id]]) == [style_id]

    def test_shadowed_labels(self):
        shadowed = {
            style_id for style_id, label in STYLE_LABELS.items()
            if normalize_protective_styles([label]) != [style_id]
        }
        assert shadowed == {"ghana_weaving", "wigs_no_glue", "crochet", "faux_locs"}

    def test_every_table_entry_has_a_label(self):
        assert set(STYLE_LABELS) == set(STYLE_RISK_PROFILES)


class TestNormalizeScalpAreas:

    def test_quiz_labels(self):
        labels = [
            "Edges (front hairline)",
            "Temples (sides of hairline)",
            "Crown (top/center of head)",
            "Nape (back of neck)",
            "Patches throughout scalp",
            "Even thinning all over",
        ]
        assert normalize_scalp_areas(labels) == [
            "edges", "temples", "crown", "nape", "patches", "overall",
        ]

    def test_round_trip_display_labels(self):
        for area_id, label in AREA_LABELS.items():
            assert normalize_scalp_areas([label]) == [area_id]


class TestNormalizeAnswers:

    def test_rewrites_styles_and_areas_only(self):
        result = normalize_answers({
            "protectiveStyles": ["Box braids (individual plaits)"],
            "scalpAreas": ["Edges (front hairline)"],
            "ageRange": "26-35 years",
        })
        assert result["protectiveStyles"] == ["box_braids"]
        assert result["scalpAreas"] == ["edges"]
        assert result["ageRange"] == "26-35 years"
        assert result["whenNoticed"] is None

    def test_slugify(self):
        assert slugify("Hello, World") == "hello_world"
