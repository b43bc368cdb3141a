"""
Intake Layer

Questionnaire catalog, typed answer snapshot and label normalization.

Version: intake_v1
"""

from .questionnaire import (
    QUESTIONNAIRE_SCHEMA,
    get_question,
    resolve_option,
    get_questionnaire_response,
)
from .answers import (
    AnswerSet,
    AnswerValue,
    SingleChoice,
    MultiChoice,
    DateValue,
    Unanswered,
    parse_answer_value,
)
from .normalize import (
    STYLE_LABELS,
    AREA_LABELS,
    normalize_protective_styles,
    normalize_scalp_areas,
    normalize_answers,
    slugify,
)
from .patterns import matches_any, any_item_matches, compile_patterns

__all__ = [
    "QUESTIONNAIRE_SCHEMA",
    "get_question",
    "resolve_option",
    "get_questionnaire_response",
    "AnswerSet",
    "AnswerValue",
    "SingleChoice",
    "MultiChoice",
    "DateValue",
    "Unanswered",
    "parse_answer_value",
    "STYLE_LABELS",
    "AREA_LABELS",
    "normalize_protective_styles",
    "normalize_scalp_areas",
    "normalize_answers",
    "slugify",
    "matches_any",
    "any_item_matches",
    "compile_patterns",
]

__version__ = "intake_v1"
