"""
Questionnaire Answer Snapshot

Typed, read-only view over the answers a user submitted.

Each answer is parsed once into a tagged variant according to the question
type declared in the catalog:
- SingleChoice: single / slider / binary questions
- MultiChoice: multiple-select questions
- DateValue: date questions
- Unanswered: missing, empty, or the wrong shape for the question

Rules read answers through AnswerSet accessors, which always return a
string or a list and never raise for unanswered questions.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Mapping, Tuple, Union

from .questionnaire import get_question, resolve_option


@dataclass(frozen=True)
class SingleChoice:
    value: str


@dataclass(frozen=True)
class MultiChoice:
    values: Tuple[str, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class DateValue:
    value: str


@dataclass(frozen=True)
class Unanswered:
    pass


AnswerValue = Union[SingleChoice, MultiChoice, DateValue, Unanswered]

UNANSWERED = Unanswered()


def _clean_str(raw: Any) -> str:
    if raw is None:
        return ""
    return str(raw).strip()


def parse_answer_value(question_type: str, raw: Any) -> AnswerValue:
    """
    Parse a raw submitted value into a tagged answer variant.

    Args:
        question_type: Catalog type ("single", "multiple", "slider", "date",
            "binary") or None when the question is not in the catalog.
        raw: Whatever the client sent (string, list of strings, number, None).

    Returns:
        The matching variant; Unanswered for empty or mismatched input.
    """
    if raw is None:
        return UNANSWERED

    if question_type is None:
        question_type = "multiple" if isinstance(raw, (list, tuple)) else "single"

    if question_type == "multiple":
        if isinstance(raw, (list, tuple)):
            values = tuple(v for v in (_clean_str(item) for item in raw) if v)
        else:
            value = _clean_str(raw)
            values = (value,) if value else ()
        return MultiChoice(values) if values else UNANSWERED

    if isinstance(raw, (list, tuple, dict)):
        return UNANSWERED

    value = _clean_str(raw)
    if not value:
        return UNANSWERED
    if question_type == "date":
        return DateValue(value)
    return SingleChoice(value)


class AnswerSet:
    """
    Immutable snapshot of questionnaire answers keyed by question id.

    Values may be option ids or option labels; `text`/`items` return display
    labels and `option` returns the stable option id.
    """

    def __init__(self, answers: Mapping[str, Any] = None):
        raw = dict(answers or {})
        self._raw: Dict[str, Any] = raw
        self._values: Dict[str, AnswerValue] = {}
        for question_id, value in raw.items():
            question = get_question(question_id)
            question_type = question["type"] if question else None
            self._values[question_id] = parse_answer_value(question_type, value)

    @classmethod
    def from_payload(cls, payload: Any) -> "AnswerSet":
        """
        Build a snapshot from either a mapping or a list of
        {"questionId": ..., "answer": ...} records.
        """
        if isinstance(payload, AnswerSet):
            return payload
        if isinstance(payload, Mapping):
            return cls(payload)
        mapping: Dict[str, Any] = {}
        if isinstance(payload, Iterable) and not isinstance(payload, (str, bytes)):
            for record in payload:
                if isinstance(record, Mapping) and record.get("questionId"):
                    mapping[str(record["questionId"])] = record.get("answer")
        return cls(mapping)

    def get(self, question_id: str) -> AnswerValue:
        return self._values.get(question_id, UNANSWERED)

    def is_answered(self, question_id: str) -> bool:
        return not isinstance(self.get(question_id), Unanswered)

    def text(self, question_id: str) -> str:
        """Display text of a single or date answer, "" otherwise."""
        value = self.get(question_id)
        if isinstance(value, DateValue):
            return value.value
        if isinstance(value, SingleChoice):
            option = resolve_option(question_id, value.value)
            return option["label"] if option else value.value
        return ""

    def items(self, question_id: str) -> List[str]:
        """Display texts of a multi-select answer, [] otherwise."""
        value = self.get(question_id)
        if not isinstance(value, MultiChoice):
            return []
        labels = []
        for item in value.values:
            option = resolve_option(question_id, item)
            labels.append(option["label"] if option else item)
        return labels

    def option(self, question_id: str) -> str:
        """Stable option id of a single answer; the raw value if not in the catalog."""
        value = self.get(question_id)
        if not isinstance(value, SingleChoice):
            return ""
        option = resolve_option(question_id, value.value)
        return option["value"] if option else value.value

    def option_ids(self, question_id: str) -> List[str]:
        value = self.get(question_id)
        if not isinstance(value, MultiChoice):
            return []
        ids = []
        for item in value.values:
            option = resolve_option(question_id, item)
            ids.append(option["value"] if option else item)
        return ids

    def to_dict(self) -> Dict[str, Any]:
        return dict(self._raw)

    def __contains__(self, question_id: str) -> bool:
        return self.is_answered(question_id)

    def __repr__(self) -> str:
        answered = sorted(q for q in self._values if self.is_answered(q))
        return f"AnswerSet(answered={answered})"
