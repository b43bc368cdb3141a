"""
Quiz Results Endpoints

Routes:
- POST  /quiz-results             store a submission (202 fallback without DB)
- GET   /quiz-results             paginated list, newest first (admin)
- GET   /quiz-results/{id}        one submission (admin)
- PATCH /quiz-results/{id}        lead capture after results were shown

Auth: admin reads require X-Admin-API-Key when ADMIN_API_KEY is set.
"""

import logging
import os

from fastapi import APIRouter, Depends, Header, HTTPException, Query
from fastapi.responses import JSONResponse

from hairfinder.brain.orchestrate import evaluate_answers

from . import store
from .models import (
    ACCEPTED_FALLBACK_NOTE,
    CONTACT_FIELDS,
    DEFAULT_PAGE_SIZE,
    MAX_PAGE_SIZE,
    PaginatedQuizResults,
    QuizResult,
    QuizResultCreate,
    QuizResultUpdate,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/quiz-results", tags=["Quiz Results"])


ADMIN_KEY_HEADER = "X-Admin-API-Key"

_dev_mode_warned = False


def verify_admin_key(x_admin_api_key: str = Header(None, alias=ADMIN_KEY_HEADER)) -> str:
    """
    Guard the admin review reads (list and get of stored submissions).

    With ADMIN_API_KEY unset the reads stay open and a warning is logged
    once per process. Otherwise the header must match or the call gets 401.
    """
    global _dev_mode_warned
    expected_key = os.environ.get("ADMIN_API_KEY")

    if not expected_key:
        if not _dev_mode_warned:
            logger.warning("[Quiz Results] ADMIN_API_KEY not set, admin reads are open (dev mode)")
            _dev_mode_warned = True
        return "dev_mode"

    if not x_admin_api_key:
        raise HTTPException(
            status_code=401,
            detail=f"Missing {ADMIN_KEY_HEADER} header"
        )

    if x_admin_api_key != expected_key:
        logger.warning("[Quiz Results] Rejected admin read with an invalid key")
        raise HTTPException(
            status_code=401,
            detail="Invalid admin API key"
        )

    return x_admin_api_key


@router.post("", status_code=201, response_model=QuizResult)
async def create_quiz_result(payload: QuizResultCreate):
    """
    Store a quiz submission.

    The recommendation is computed first so it never depends on storage.
    When the database is unavailable the submission is acknowledged with
    202 and an explicit fallback marker.
    """
    data = payload.model_dump()
    if data.get("recommendation") is None:
        try:
            data["recommendation"] = evaluate_answers(data["answers"]).model_dump(mode="json")
        except Exception as e:
            logger.error(f"[Quiz Results] Recommendation failed: {e}")
            raise HTTPException(status_code=500, detail=f"Recommendation error: {str(e)}")

    try:
        row = store.create_result(data)
        return QuizResult(**row)
    except store.StorageUnavailableError as e:
        logger.warning(f"[Quiz Results] Accepted without persistence: {e}")
        fallback = QuizResult(
            id=None,
            answers=data["answers"],
            recommendation=data["recommendation"],
            **{field: data.get(field) for field in CONTACT_FIELDS},
            note=ACCEPTED_FALLBACK_NOTE,
            accepted_fallback=True,
        )
        return JSONResponse(status_code=202, content=fallback.model_dump(mode="json"))


@router.get("", response_model=PaginatedQuizResults)
async def list_quiz_results(
    limit: int = Query(DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE),
    offset: int = Query(0, ge=0),
    admin_key: str = Depends(verify_admin_key),
):
    """Paginated submissions, newest first."""
    try:
        rows = store.list_results(limit=limit, offset=offset)
    except store.StorageUnavailableError as e:
        raise HTTPException(status_code=503, detail=f"Storage unavailable: {str(e)}")

    return PaginatedQuizResults(
        items=[QuizResult(**row) for row in rows],
        limit=limit,
        offset=offset,
    )


@router.get("/{result_id}", response_model=QuizResult)
async def get_quiz_result(
    result_id: int,
    admin_key: str = Depends(verify_admin_key),
):
    try:
        row = store.get_result(result_id)
    except store.StorageUnavailableError as e:
        raise HTTPException(status_code=503, detail=f"Storage unavailable: {str(e)}")

    if row is None:
        raise HTTPException(status_code=404, detail=f"Quiz result {result_id} not found")
    return QuizResult(**row)


@router.patch("/{result_id}", response_model=QuizResult)
async def update_quiz_result(result_id: int, payload: QuizResultUpdate):
    """Attach contact details or a recommendation to an existing submission."""
    fields = payload.model_dump(exclude_unset=True)
    try:
        row = store.update_result(result_id, fields)
    except store.StorageUnavailableError as e:
        raise HTTPException(status_code=503, detail=f"Storage unavailable: {str(e)}")

    if row is None:
        raise HTTPException(status_code=404, detail=f"Quiz result {result_id} not found")
    logger.info(f"[Quiz Results] Updated submission {result_id}: {sorted(fields)}")
    return QuizResult(**row)
