from feedback_ui.api import FeedbackApiClient, FeedbackClientError, NetworkError, ApiError, InvalidResponseError
from feedback_ui.controller import FeedbackController
from feedback_ui.render import render_page
from feedback_ui.state import FeedbackUIState, FormState, EMOJI_SCALE

__all__ = [
    "FeedbackApiClient",
    "FeedbackClientError",
    "NetworkError",
    "ApiError",
    "InvalidResponseError",
    "FeedbackController",
    "render_page",
    "FeedbackUIState",
    "FormState",
    "EMOJI_SCALE",
]
