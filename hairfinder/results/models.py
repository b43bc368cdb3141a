"""
Quiz Results Models

Request/response contracts for persisted quiz submissions.

Version: quiz_results_v1
"""

from datetime import datetime
from typing import Any, Dict, List, Optional
from pydantic import BaseModel, Field, field_validator

ACCEPTED_FALLBACK_NOTE = "Accepted without persistence (DB unavailable)"

MAX_PAGE_SIZE = 200
DEFAULT_PAGE_SIZE = 20

CONTACT_FIELDS = ("name", "email", "phone", "state")


class QuizResultCreate(BaseModel):
    """
    Quiz submission.

    `answers` is the question id -> answer mapping. When `recommendation`
    is omitted the server computes it.
    """
    answers: Dict[str, Any]
    recommendation: Optional[Dict[str, Any]] = None
    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    state: Optional[str] = None

    class Config:
        extra = "forbid"

    @field_validator("answers", mode="before")
    @classmethod
    def answers_from_records(cls, v):
        """Accept the front-end's list of {questionId, answer} records."""
        if isinstance(v, list):
            return {
                str(r["questionId"]): r.get("answer")
                for r in v
                if isinstance(r, dict) and r.get("questionId")
            }
        return v


class QuizResultUpdate(BaseModel):
    """Lead capture after results were shown; only provided fields change."""
    recommendation: Optional[Dict[str, Any]] = None
    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    state: Optional[str] = None

    class Config:
        extra = "forbid"


class QuizResult(BaseModel):
    id: Optional[int] = None
    answers: Optional[Dict[str, Any]] = None
    recommendation: Optional[Dict[str, Any]] = None
    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    state: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    note: Optional[str] = None
    accepted_fallback: bool = False


class PaginatedQuizResults(BaseModel):
    items: List[QuizResult] = Field(default_factory=list)
    limit: int
    offset: int


class HealthResponse(BaseModel):
    status: str
    service: str
