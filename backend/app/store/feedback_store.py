"""
feedback_store.py
------------------
Persistence of feedback records.

The store only ever inserts and reads: records are never updated or deleted.
Listing is always newest first and capped at LIST_LIMIT records.
"""

from collections.abc import Sequence

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, select

from app.errors import PersistenceError, SAVE_FAILED_MESSAGE, LOAD_FAILED_MESSAGE
from app.models.feedback import Feedback, FeedbackCreate

LIST_LIMIT = 10


class FeedbackStore:
    def __init__(self, session: Session):
        self.session = session

    def create(self, candidate: FeedbackCreate) -> Feedback:
        """Stores a validated candidate; id and created_at are assigned here."""
        feedback = Feedback(
            customer_name=candidate.customer_name,
            message=candidate.message,
            rating=candidate.rating,
        )
        try:
            self.session.add(feedback)
            self.session.commit()
            self.session.refresh(feedback)
        except SQLAlchemyError as e:
            self.session.rollback()
            raise PersistenceError(SAVE_FAILED_MESSAGE) from e
        return feedback

    def list(self, rating: int | None = None) -> Sequence[Feedback]:
        """Returns the most recent records, optionally only those with the given rating."""
        statement = select(Feedback)
        if rating is not None:
            statement = statement.where(Feedback.rating == rating)
        # id breaks ties between records created within the same clock tick
        statement = statement.order_by(Feedback.created_at.desc(), Feedback.id.desc()).limit(LIST_LIMIT)
        try:
            return self.session.exec(statement).all()
        except SQLAlchemyError as e:
            raise PersistenceError(LOAD_FAILED_MESSAGE) from e
