"""
state.py
---------
Local state of the feedback page. Everything the renderer shows lives here;
only the controller changes it.
"""

from dataclasses import dataclass, field

from feedback_ui.api import FeedbackEntry

# Ratings 1..5, sad -> ecstatic
EMOJI_SCALE = ["🥲", "😕", "😐", "😊", "🤩"]
RATINGS = list(range(1, len(EMOJI_SCALE) + 1))
DEFAULT_RATING = 3


def emoji_for(rating: int) -> str:
    return EMOJI_SCALE[rating - 1]


@dataclass
class FormState:
    customer_name: str = ""
    message: str = ""
    rating: int = DEFAULT_RATING


@dataclass
class FeedbackUIState:
    form: FormState = field(default_factory=FormState)
    feedbacks: list[FeedbackEntry] = field(default_factory=list)
    # None shows every rating
    filter: int | None = None
    loading: bool = False
    error: str | None = None
    thank_you: bool = False
