from app.store.feedback_store import FeedbackStore, LIST_LIMIT

__all__ = ["FeedbackStore", "LIST_LIMIT"]
