"""
render.py
----------
Renders the feedback page (form + list) from FeedbackUIState as HTML.
"""

from datetime import datetime, tzinfo
from html import escape

from feedback_ui.state import FeedbackUIState, RATINGS, emoji_for

THANK_YOU_TEXT = "Thank you for your feedback!"
EMPTY_LIST_TEXT = "No feedback yet. Be the first to submit!"
DATE_FORMAT = "%b %d, %Y, %I:%M %p"


def format_date(value: datetime, tz: tzinfo | None = None) -> str:
    """Shown in the viewer's local time unless another zone is given."""
    return value.astimezone(tz).strftime(DATE_FORMAT)


def render_form(state: FeedbackUIState) -> str:
    form = state.form
    buttons = []
    for r in RATINGS:
        pressed = ' aria-pressed="true"' if r == form.rating else ""
        buttons.append(
            f'<button type="button" name="rating" value="{r}" aria-label="Rating {r}"{pressed}>{emoji_for(r)}</button>'
        )
    rating_buttons = "\n".join(buttons)
    disabled = " disabled" if state.loading else ""
    submit_label = "Submitting..." if state.loading else "Submit"
    return f"""<form method="post">
<h2>Submit Feedback</h2>
<label for="customer_name">Name *</label>
<input id="customer_name" name="customer_name" type="text" placeholder="Your name" value="{escape(form.customer_name)}" required>
<label for="message">Message *</label>
<textarea id="message" name="message" rows="3" placeholder="Your feedback message" required>{escape(form.message)}</textarea>
<label>How happy are you? {emoji_for(form.rating)}</label>
<div class="rating">
{rating_buttons}
</div>
<button type="submit"{disabled}>{submit_label}</button>
</form>"""


def render_filter(state: FeedbackUIState) -> str:
    options = ['<option value=""{}>All Ratings</option>'.format(" selected" if state.filter is None else "")]
    for r in RATINGS:
        selected = " selected" if state.filter == r else ""
        options.append(f'<option value="{r}"{selected}>{r} {emoji_for(r)}</option>')
    disabled = " disabled" if state.loading else ""
    return f'<select name="rating"{disabled}>\n' + "\n".join(options) + "\n</select>"


def render_list(state: FeedbackUIState) -> str:
    if state.loading and not state.feedbacks:
        return '<div class="spinner" role="status">Loading...</div>'
    if not state.feedbacks:
        return f"<p>{EMPTY_LIST_TEXT}</p>"

    items = []
    for entry in state.feedbacks:
        items.append(
            f"""<div class="feedback" data-id="{entry.id}">
<span class="name">{escape(entry.customer_name)}</span>
<span class="rating" aria-label="Rating {entry.rating}">{emoji_for(entry.rating)}</span>
<p>{escape(entry.message)}</p>
<div class="date">{format_date(entry.created_at)}</div>
</div>"""
        )
    return "\n".join(items)


def render_page(state: FeedbackUIState) -> str:
    parts = []
    if state.error:
        parts.append(f'<div class="error" role="alert">{escape(state.error)}</div>')
    if state.thank_you:
        parts.append(f'<div class="thank-you" role="status">{THANK_YOU_TEXT}</div>')
    parts.append(render_form(state))
    parts.append(
        "<div>\n<h2>Recent Feedback</h2>\n" + render_filter(state) + "\n" + render_list(state) + "\n</div>"
    )
    return "\n".join(parts)
