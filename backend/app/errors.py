"""
errors.py
----------
Error types of the backend and the JSON payloads they are rendered into.

Payload shapes:
- validation failure: {"message": "...", "errors": {"field": ["reason", ...]}}
- storage failure:    {"message": "Failed to save feedback"}
"""

from fastapi.encoders import jsonable_encoder

INVALID_DATA_MESSAGE = "The given data was invalid."
SAVE_FAILED_MESSAGE = "Failed to save feedback"
LOAD_FAILED_MESSAGE = "Failed to load feedback"


class PersistenceError(Exception):
    """The feedback store could not write or read its records."""

    def __init__(self, message: str = SAVE_FAILED_MESSAGE):
        super().__init__(message)
        self.message = message


def field_errors(errors) -> dict[str, list[str]]:
    """Groups pydantic/FastAPI error entries by the field they concern."""
    grouped: dict[str, list[str]] = {}
    for err in errors:
        # loc is e.g. ("body", "rating") or ("query", "rating")
        loc = [str(part) for part in err.get("loc", ()) if part not in ("body", "query")]
        field = ".".join(loc) or "body"
        grouped.setdefault(field, []).append(err.get("msg", "Invalid value"))
    return grouped


def validation_payload(errors: dict[str, list[str]]) -> dict:
    return jsonable_encoder({"message": INVALID_DATA_MESSAGE, "errors": errors})


class InvalidFilterError(Exception):
    """A list filter that cannot be applied (rendered as HTTP 400)."""

    def __init__(self, errors: dict[str, list[str]]):
        super().__init__(INVALID_DATA_MESSAGE)
        self.errors = errors
