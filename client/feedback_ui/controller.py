"""
controller.py
--------------
Behaviour of the feedback page:

1) mount / filter change -> fetch the list for the current filter
2) submit -> client-side check, create, clear the form (rating kept),
   show "thank you" for a while, then fetch the list again
3) failures are shown as a message, never raised to the caller
"""

import logging
import threading
from collections.abc import Callable
from typing import Any

from feedback_ui.api import FeedbackApiClient, FeedbackClientError, ApiError
from feedback_ui.config import THANK_YOU_DELAY
from feedback_ui.render import render_page
from feedback_ui.state import FeedbackUIState, RATINGS

logger = logging.getLogger(__name__)

LOAD_FAILED = "Failed to load feedback. Please try again."
SUBMIT_FAILED = "Submission failed. Please try again."
REQUIRED_FIELDS = "Please fill in all required fields"

Scheduler = Callable[[float, Callable[[], None]], Any]


def timer_scheduler(delay: float, callback: Callable[[], None]) -> threading.Timer:
    timer = threading.Timer(delay, callback)
    timer.daemon = True
    timer.start()
    return timer


def parse_rating(value: int | str) -> int:
    """Accepts an int or a single-digit string in 1..5; bools and floats are refused."""
    if isinstance(value, bool):
        rating = None
    elif isinstance(value, int):
        rating = value
    elif isinstance(value, str) and value in {str(r) for r in RATINGS}:
        rating = int(value)
    else:
        rating = None
    if rating not in RATINGS:
        raise ValueError(f"rating must be one of {RATINGS}, got {value!r}")
    return rating


class FeedbackController:
    def __init__(
        self,
        client: FeedbackApiClient,
        state: FeedbackUIState | None = None,
        scheduler: Scheduler = timer_scheduler,
        thank_you_delay: float = THANK_YOU_DELAY,
        on_change: Callable[[FeedbackUIState], None] | None = None,
    ):
        self.client = client
        self.state = state or FeedbackUIState()
        self.scheduler = scheduler
        self.thank_you_delay = thank_you_delay
        # Called when state changes outside of a caller's action (the auto-dismiss timer)
        self.on_change = on_change
        self._dismiss_handle = None
        # The dismiss timer runs on its own thread; every state change goes through this lock
        self._lock = threading.RLock()

    def render(self) -> str:
        """HTML of the page for the current state."""
        with self._lock:
            return render_page(self.state)

    # --- list ---
    def mount(self):
        self.refresh()

    def refresh(self):
        """Replaces the shown list with the current filter's feedback."""
        with self._lock:
            self.state.loading = True
            try:
                self.state.feedbacks = self.client.list_feedback(self.state.filter)
                self.state.error = None
            except FeedbackClientError as e:
                logger.warning("Fetching feedback failed: %s", e)
                self.state.error = LOAD_FAILED
                self.state.feedbacks = []
            finally:
                self.state.loading = False

    def set_filter(self, rating: int | str | None):
        """Accepts a rating, or None / "" for all ratings."""
        value = None if rating is None or rating == "" else parse_rating(rating)
        with self._lock:
            if value == self.state.filter:
                return
            self.state.filter = value
            self.refresh()

    # --- form ---
    def set_customer_name(self, value: str):
        with self._lock:
            self.state.form.customer_name = value

    def set_message(self, value: str):
        with self._lock:
            self.state.form.message = value

    def set_rating(self, rating: int | str):
        value = parse_rating(rating)
        with self._lock:
            self.state.form.rating = value

    def submit(self) -> bool:
        """Sends the form. Returns True when the feedback was stored."""
        with self._lock:
            if self.state.loading:
                # Submit control is disabled while a request is outstanding
                return False

            form = self.state.form
            if not form.customer_name.strip() or not form.message.strip():
                self.state.error = REQUIRED_FIELDS
                return False

            self.state.loading = True
            self.state.error = None
            try:
                self.client.create_feedback(form.customer_name, form.message, form.rating)
            except ApiError as e:
                logger.warning("Submitting feedback failed (%s): %s", e.status_code, e.message)
                self.state.error = e.message or SUBMIT_FAILED
                return False
            except FeedbackClientError as e:
                logger.warning("Submitting feedback failed: %s", e)
                self.state.error = SUBMIT_FAILED
                return False
            finally:
                self.state.loading = False

            form.customer_name = ""
            form.message = ""
            self._show_thank_you()
            self.refresh()
            return True

    # --- confirmation ---
    def _show_thank_you(self):
        self.state.thank_you = True
        if self._dismiss_handle is not None and hasattr(self._dismiss_handle, "cancel"):
            self._dismiss_handle.cancel()
        self._dismiss_handle = self.scheduler(self.thank_you_delay, self.dismiss_thank_you)

    def dismiss_thank_you(self):
        with self._lock:
            self.state.thank_you = False
            self._dismiss_handle = None
            if self.on_change is None:
                return
            try:
                self.on_change(self.state)
            except Exception:
                # Cosmetic only: a failed re-render after dismissal is not shown to the user
                logger.debug("Re-render after dismissing the confirmation failed", exc_info=True)
