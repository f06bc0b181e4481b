"""
routes.py
----------
Feedback API endpoints:
- GET  /api/test       status probe
- GET  /api/feedback   newest feedback, optionally ?rating=1..5
- POST /api/feedback   validate and store one feedback record
"""

import logging

from fastapi import APIRouter, Depends, Query
from sqlmodel import Session

from app.database.connection import get_session
from app.errors import InvalidFilterError
from app.models.feedback import FeedbackCreate, FeedbackRead, RATING_MIN, RATING_MAX
from app.store import FeedbackStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api")

RECEIVED_MESSAGE = "Feedback received"


def get_feedback_store(session: Session = Depends(get_session)) -> FeedbackStore:
    return FeedbackStore(session)


def parse_rating_filter(raw: str | None) -> int | None:
    """An empty or missing value means no filter; anything else must be 1..5."""
    if raw is None or raw.strip() == "":
        return None
    value = raw.strip()
    # Exactly one ASCII digit: int() would also take "+2", "0002" or "٢"
    if value not in {str(r) for r in range(RATING_MIN, RATING_MAX + 1)}:
        raise InvalidFilterError(
            {"rating": [f"The rating filter must be an integer between {RATING_MIN} and {RATING_MAX}."]}
        )
    return int(value)


@router.get("/test")
def test_api():
    """Checks that the API is up."""
    return {"status": "OK", "message": "Feedback API is running."}


@router.get("/feedback", response_model=list[FeedbackRead])
def list_feedback(
    rating: str | None = Query(None, description="Only show feedback with this rating (1-5)"),
    store: FeedbackStore = Depends(get_feedback_store),
):
    """Returns the 10 most recent feedback records, newest first."""
    return store.list(parse_rating_filter(rating))


@router.post("/feedback", status_code=201)
def create_feedback(candidate: FeedbackCreate, store: FeedbackStore = Depends(get_feedback_store)):
    """Stores a feedback record. The record itself is not echoed back."""
    feedback = store.create(candidate)
    logger.info("Stored feedback id=%s rating=%s", feedback.id, feedback.rating)
    return {"message": RECEIVED_MESSAGE}
