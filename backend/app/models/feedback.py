from datetime import datetime, timezone
from typing import Annotated

from pydantic import BaseModel, ConfigDict, StringConstraints, conint, field_validator
from sqlmodel import SQLModel, Field, Column, Text

NAME_MAX_LENGTH = 255
RATING_MIN = 1
RATING_MAX = 5


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class Feedback(SQLModel, table=True):
    id: int | None = Field(default=None, primary_key=True)
    customer_name: str = Field(max_length=NAME_MAX_LENGTH)
    message: str = Field(sa_column=Column(Text, nullable=False))
    rating: int = Field(ge=RATING_MIN, le=RATING_MAX, index=True)
    created_at: datetime = Field(default_factory=utc_now, index=True)


CustomerName = Annotated[
    str, StringConstraints(strip_whitespace=True, min_length=1, max_length=NAME_MAX_LENGTH)
]
Message = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]


class FeedbackCreate(BaseModel):
    """A submitted candidate: validated, not yet stored."""

    model_config = ConfigDict(strict=True)

    customer_name: CustomerName
    message: Message
    rating: conint(ge=RATING_MIN, le=RATING_MAX)


class FeedbackRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    customer_name: str
    message: str
    rating: int
    created_at: datetime

    @field_validator("created_at")
    @classmethod
    def assume_utc(cls, value: datetime) -> datetime:
        # SQLite hands timestamps back without their timezone
        return value if value.tzinfo else value.replace(tzinfo=timezone.utc)
