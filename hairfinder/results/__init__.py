"""
Quiz Results

Persistence of quiz submissions and the HTTP client for it.

Version: quiz_results_v1
"""

from .models import (
    ACCEPTED_FALLBACK_NOTE,
    QuizResult,
    QuizResultCreate,
    QuizResultUpdate,
    PaginatedQuizResults,
    HealthResponse,
)
from .store import StorageUnavailableError
from .client import QuizResultsClient, SaveResult, ApiError

__all__ = [
    "ACCEPTED_FALLBACK_NOTE",
    "QuizResult",
    "QuizResultCreate",
    "QuizResultUpdate",
    "PaginatedQuizResults",
    "HealthResponse",
    "StorageUnavailableError",
    "QuizResultsClient",
    "SaveResult",
    "ApiError",
]

__version__ = "quiz_results_v1"
