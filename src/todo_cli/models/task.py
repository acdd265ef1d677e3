"""Task data model."""

from __future__ import annotations

import re
from datetime import UTC, datetime

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator

# Written in place of an unset completion time; files from earlier versions
# use the same value, so it reads back as "unset".
ZERO_TIME = "0001-01-01T00:00:00Z"

_FRACTION_RE = re.compile(r"(\.\d{6})\d+")
ZERO_DATETIME = datetime(1, 1, 1, tzinfo=UTC)


def utcnow() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(UTC)


def parse_timestamp(value: str | datetime) -> datetime:
    """Parse an RFC 3339 timestamp into an aware datetime.

    Fractions finer than microseconds are truncated and naive values are
    taken to be UTC.
    """
    if isinstance(value, str):
        value = datetime.fromisoformat(_FRACTION_RE.sub(r"\1", value.strip()))
    if value.tzinfo is None:
        value = value.replace(tzinfo=UTC)
    return value


def format_timestamp(value: datetime) -> str:
    """Render an aware datetime as RFC 3339, using ``Z`` for UTC."""
    text = value.isoformat()
    if text.endswith("+00:00"):
        text = text[:-6] + "Z"
    return text


def is_zero_time(value: datetime) -> bool:
    return value.year == 1 and value.month == 1 and value.day == 1


class Task(BaseModel):
    """A single to-do entry.

    Attributes:
        description: What needs doing (stored as ``Task``)
        done: Completion flag (stored as ``Done``)
        created_at: Creation time, never changed afterwards
        completed_at: Time of the last toggle, in either direction; None
            until the task is toggled for the first time
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    description: str = Field(alias="Task")
    done: bool = Field(default=False, alias="Done")
    created_at: datetime = Field(default=ZERO_DATETIME, alias="CreatedAt")
    completed_at: datetime | None = Field(default=None, alias="CompletedAt")

    @field_validator("created_at", mode="before")
    @classmethod
    def _parse_created(cls, value):
        if isinstance(value, (str, datetime)):
            return parse_timestamp(value)
        return value

    @field_validator("completed_at", mode="before")
    @classmethod
    def _parse_completed(cls, value):
        if value is None or value == "":
            return None
        if isinstance(value, (str, datetime)):
            parsed = parse_timestamp(value)
            return None if is_zero_time(parsed) else parsed
        return value

    @field_serializer("created_at")
    def _dump_created(self, value: datetime) -> str:
        return format_timestamp(value)

    @field_serializer("completed_at")
    def _dump_completed(self, value: datetime | None) -> str:
        return ZERO_TIME if value is None else format_timestamp(value)

    def toggled(self, when: datetime | None = None) -> Task:
        """Return a copy with ``done`` flipped and ``completed_at`` set to *when*."""
        return self.model_copy(
            update={"done": not self.done, "completed_at": when or utcnow()}
        )

    def to_record(self) -> dict[str, str | bool]:
        """Serialize using the on-disk field names."""
        return self.model_dump(by_alias=True)
