"""
api.py
-------
HTTP client for the feedback API.

Failures are split in two:
- NetworkError: the API could not be reached at all
- ApiError: the API answered with a non-2xx status (validation, storage failure...)
"""

import logging
from datetime import datetime
from typing import Any

import httpx
from pydantic import BaseModel, ValidationError

from feedback_ui.config import API_URL, API_PREFIX

logger = logging.getLogger(__name__)


class FeedbackEntry(BaseModel):
    id: int
    customer_name: str
    message: str
    rating: int
    created_at: datetime


class FeedbackClientError(Exception):
    def __init__(self, message: str | None = None):
        super().__init__(message or self.__class__.__name__)
        self.message = message


class NetworkError(FeedbackClientError):
    pass


class ApiError(FeedbackClientError):
    def __init__(self, status_code: int, message: str | None = None, errors: dict | None = None):
        super().__init__(message)
        self.status_code = status_code
        self.errors = errors or {}


class InvalidResponseError(ApiError):
    """A 2xx reply whose body is not the expected JSON."""


class FeedbackApiClient:
    def __init__(self, http: httpx.Client | None = None, base_url: str | None = None):
        # An injected client (e.g. FastAPI's TestClient) keeps its own base_url
        self.http = http or httpx.Client(base_url=base_url or API_URL)

    def close(self):
        self.http.close()

    def _request(self, method: str, path: str, **kwargs) -> Any:
        try:
            response = self.http.request(method, f"{API_PREFIX}{path}", **kwargs)
        except httpx.TransportError as e:
            raise NetworkError(str(e)) from e

        if response.is_success:
            try:
                return response.json()
            except ValueError as e:
                raise InvalidResponseError(response.status_code) from e

        try:
            body = response.json()
        except ValueError:
            body = {}
        if not isinstance(body, dict):
            body = {}
        raise ApiError(response.status_code, body.get("message"), body.get("errors"))

    def list_feedback(self, rating: int | None = None) -> list[FeedbackEntry]:
        """Newest feedback first; rating=None lists every rating."""
        params = {"rating": rating} if rating is not None else None
        data = self._request("GET", "/feedback", params=params)
        if not isinstance(data, list):
            logger.warning("Unexpected feedback list payload: %r", type(data))
            raise InvalidResponseError(200)
        try:
            return [FeedbackEntry.model_validate(item) for item in data]
        except ValidationError as e:
            raise InvalidResponseError(200) from e

    def create_feedback(self, customer_name: str, message: str, rating: int) -> str:
        """Submits one feedback; returns the server's confirmation text."""
        data = self._request(
            "POST",
            "/feedback",
            json={"customer_name": customer_name, "message": message, "rating": rating},
        )
        return data.get("message", "") if isinstance(data, dict) else ""
