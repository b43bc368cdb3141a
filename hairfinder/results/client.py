"""
Quiz Results API Client

HTTP client for the quiz results endpoints (httpx).

Two calling conventions:
- save_quiz_result: never raises. Submission must not block the results
  screen, so failures come back as SaveResult(ok=False).
- create/list/get/health: raise ApiError with a user-facing message.

Configuration:
- HAIRFINDER_API_URL      base URL (default http://localhost:8000)
- HAIRFINDER_API_TIMEOUT  seconds (default 30)
"""

import logging
import os
from dataclasses import dataclass
from typing import Any, Dict, Optional

import httpx

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = os.getenv("HAIRFINDER_API_URL", "http://localhost:8000")
DEFAULT_TIMEOUT_SECONDS = float(os.getenv("HAIRFINDER_API_TIMEOUT", "30"))

MSG_NO_RESPONSE = "Unable to connect to server. Please check your connection."
MSG_NOT_FOUND = "Resource not found."
MSG_SERVER_ERROR = "Server error. Please try again later."
MSG_BAD_REQUEST = "Invalid request. Please check your input."


class ApiError(Exception):
    """Failed API call. status is 0 when no response was received."""

    def __init__(self, status: int, message: str, details: Any = None):
        self.status = status
        self.message = message
        self.details = details
        super().__init__(message)

    def to_dict(self) -> Dict[str, Any]:
        return {"status": self.status, "message": self.message, "details": self.details}


@dataclass
class SaveResult:
    ok: bool
    status: int
    body: Any


def error_message(status: int) -> str:
    if status == 404:
        return MSG_NOT_FOUND
    if status >= 500:
        return MSG_SERVER_ERROR
    if status == 400:
        return MSG_BAD_REQUEST
    return f"Request failed with status code {status}"


def _body(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return response.text


class QuizResultsClient:
    """
    Client for the quiz results API.

    Usage:
        with QuizResultsClient() as client:
            page = client.list_quiz_results(limit=20)
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        admin_api_key: Optional[str] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self.base_url = (base_url or DEFAULT_BASE_URL).rstrip("/")
        self.timeout = timeout if timeout is not None else DEFAULT_TIMEOUT_SECONDS
        headers = {"Content-Type": "application/json"}
        admin_api_key = admin_api_key or os.getenv("ADMIN_API_KEY")
        if admin_api_key:
            headers["X-Admin-API-Key"] = admin_api_key
        self._client = httpx.Client(
            base_url=self.base_url,
            timeout=self.timeout,
            headers=headers,
            transport=transport,
        )

    def close(self):
        self._client.close()

    def __enter__(self) -> "QuizResultsClient":
        return self

    def __exit__(self, *exc):
        self.close()

    # ------------------------------------------------------------------
    # Strict calls
    # ------------------------------------------------------------------

    def _request(self, method: str, path: str, **kwargs) -> Any:
        try:
            response = self._client.request(method, path, **kwargs)
        except httpx.TimeoutException as e:
            logger.warning(f"[Quiz Results Client] {method} {path} timed out after {self.timeout}s")
            raise ApiError(0, MSG_NO_RESPONSE, details=str(e))
        except httpx.RequestError as e:
            logger.warning(f"[Quiz Results Client] {method} {path} failed: {e}")
            raise ApiError(0, MSG_NO_RESPONSE, details=str(e))

        if response.status_code >= 400:
            raise ApiError(
                response.status_code,
                error_message(response.status_code),
                details=_body(response),
            )

        body = _body(response)
        if response.status_code == 202 and isinstance(body, dict):
            body["accepted_fallback"] = True
        return body

    def create_quiz_result(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        """Create a submission; a 202 body is flagged accepted_fallback."""
        return self._request("POST", "/quiz-results", json=payload)

    def list_quiz_results(self, limit: int = 20, offset: int = 0) -> Dict[str, Any]:
        return self._request(
            "GET", "/quiz-results", params={"limit": limit, "offset": offset}
        )

    def get_quiz_result(self, result_id: int) -> Dict[str, Any]:
        return self._request("GET", f"/quiz-results/{result_id}")

    def update_quiz_result(self, result_id: int, fields: Dict[str, Any]) -> Dict[str, Any]:
        return self._request("PATCH", f"/quiz-results/{result_id}", json=fields)

    def get_health(self) -> Dict[str, Any]:
        return self._request("GET", "/health")

    # ------------------------------------------------------------------
    # Non-blocking submission
    # ------------------------------------------------------------------

    def save_quiz_result(self, payload: Dict[str, Any]) -> SaveResult:
        """
        Submit quiz answers without ever raising.

        Returns:
            SaveResult(ok, status, body); status 0 when the server could not
            be reached
        """
        try:
            response = self._client.post("/quiz-results", json=payload)
        except httpx.HTTPError as e:
            logger.warning(f"[Quiz Results Client] Save failed, continuing: {e}")
            return SaveResult(ok=False, status=0, body=str(e))

        if not response.is_success:
            return SaveResult(ok=False, status=response.status_code, body=response.text)

        body = _body(response)
        if response.status_code == 202 and isinstance(body, dict):
            body["accepted_fallback"] = True
        return SaveResult(ok=True, status=response.status_code, body=body)
