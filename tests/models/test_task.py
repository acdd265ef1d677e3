"""Tests for the Task model and its on-disk representation."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta, timezone

import pytest
from pydantic import ValidationError

from todo_cli.models import ZERO_TIME, Task
from todo_cli.models.task import ZERO_DATETIME, format_timestamp, parse_timestamp

_NOW = datetime(2024, 6, 1, 10, 0, 0, tzinfo=UTC)


class TestDefaults:
    def test_new_task_is_pending(self):
        task = Task(description="buy milk")
        assert task.done is False
        assert task.completed_at is None

    def test_missing_created_at_is_zero_time(self):
        task = Task(description="buy milk")
        assert task.created_at == ZERO_DATETIME
        assert task.to_record()["CreatedAt"] == ZERO_TIME

    def test_task_is_frozen(self):
        task = Task(description="buy milk")
        with pytest.raises(ValidationError):
            task.done = True


class TestToggled:
    def test_toggled_flips_done_and_stamps(self):
        task = Task(description="a", created_at=_NOW)
        later = _NOW + timedelta(hours=1)

        toggled = task.toggled(later)

        assert toggled.done is True
        assert toggled.completed_at == later
        assert toggled.created_at == _NOW

    def test_toggled_back_still_stamps(self):
        task = Task(description="a", created_at=_NOW).toggled(_NOW)
        later = _NOW + timedelta(minutes=5)

        back = task.toggled(later)

        assert back.done is False
        assert back.completed_at == later

    def test_toggled_leaves_original_untouched(self):
        task = Task(description="a", created_at=_NOW)
        task.toggled(_NOW)
        assert task.done is False
        assert task.completed_at is None


class TestRecord:
    def test_record_uses_stored_field_names(self):
        record = Task(description="a", created_at=_NOW).to_record()
        assert set(record) == {"Task", "Done", "CreatedAt", "CompletedAt"}

    def test_unset_completed_at_writes_zero_time(self):
        record = Task(description="a", created_at=_NOW).to_record()
        assert record["CompletedAt"] == ZERO_TIME

    def test_utc_timestamps_use_z_suffix(self):
        record = Task(description="a", created_at=_NOW).to_record()
        assert record["CreatedAt"] == "2024-06-01T10:00:00Z"

    def test_zero_time_reads_back_as_unset(self):
        task = Task.model_validate(
            {
                "Task": "a",
                "Done": False,
                "CreatedAt": "2024-06-01T10:00:00Z",
                "CompletedAt": ZERO_TIME,
            }
        )
        assert task.completed_at is None

    def test_reads_nanosecond_timestamps_with_offset(self):
        task = Task.model_validate(
            {
                "Task": "a",
                "Done": True,
                "CreatedAt": "2022-03-04T05:06:07.123456789+05:30",
                "CompletedAt": "2022-03-04T06:00:00.5+05:30",
            }
        )
        tz = timezone(timedelta(hours=5, minutes=30))
        assert task.created_at == datetime(2022, 3, 4, 5, 6, 7, 123456, tzinfo=tz)
        assert task.completed_at == datetime(2022, 3, 4, 6, 0, 0, 500000, tzinfo=tz)

    def test_record_round_trip(self):
        task = Task(description="a", created_at=_NOW).toggled(_NOW + timedelta(seconds=1))
        assert Task.model_validate(task.to_record()) == task

    def test_missing_description_is_invalid(self):
        with pytest.raises(ValidationError):
            Task.model_validate({"Done": False, "CreatedAt": ZERO_TIME})

    def test_bad_timestamp_is_invalid(self):
        with pytest.raises(ValidationError):
            Task.model_validate({"Task": "a", "CreatedAt": "yesterday"})


class TestTimestampHelpers:
    def test_naive_values_are_utc(self):
        assert parse_timestamp("2024-06-01T10:00:00") == _NOW

    def test_format_keeps_non_utc_offset(self):
        tz = timezone(timedelta(hours=-4))
        value = datetime(2024, 6, 1, 6, 0, 0, tzinfo=tz)
        assert format_timestamp(value) == "2024-06-01T06:00:00-04:00"
