"""Tests for task/error models deserialization."""

from datetime import datetime, timezone

import pytest

from ocrsdk_client import ErrorData, TaskInfo, TaskStatus
from ocrsdk_client.models import ApplicationInfo, parse_task_list, parse_timestamp

from conftest import task_json


class TestParseTimestamp:
    def test_seven_digit_fraction(self):
        value = parse_timestamp("2019-07-11T09:46:03.0471538Z")
        assert value == datetime(2019, 7, 11, 9, 46, 3, 47153, tzinfo=timezone.utc)

    def test_naive_is_utc(self):
        value = parse_timestamp("2019-07-11T09:46:03")
        assert value.tzinfo == timezone.utc

    def test_empty(self):
        assert parse_timestamp("") is None
        assert parse_timestamp(None) is None


class TestTaskInfoInvariants:
    @pytest.mark.parametrize("status", [s for s in TaskStatus if s is not TaskStatus.COMPLETED])
    def test_result_urls_empty_unless_completed(self, status):
        task = TaskInfo.from_api_response(
            task_json(status=status.value, result_urls=["https://x/1"])
        )
        assert task.result_urls == []

    def test_completed_keeps_result_urls(self):
        task = TaskInfo.from_api_response(
            task_json(status="Completed", result_urls=["https://x/1", "https://x/2"])
        )
        assert task.result_urls == ["https://x/1", "https://x/2"]
        assert task.is_completed

    @pytest.mark.parametrize("status", ["ProcessingFailed", "NotEnoughCredits"])
    def test_error_present_for_failures(self, status):
        task = TaskInfo.from_api_response(
            task_json(status=status, error={"code": "E1", "message": "boom"})
        )
        assert task.error == ErrorData(code="E1", message="boom")

    def test_failure_without_error_body_gets_synthetic_error(self):
        task = TaskInfo.from_api_response(task_json(status="NotEnoughCredits"))
        assert task.error is not None
        assert task.error.code == "NotEnoughCredits"

    def test_wrapped_error_body(self):
        task = TaskInfo.from_api_response(
            task_json(status="ProcessingFailed", error={"error": {"code": "E2", "message": "m"}})
        )
        assert task.error.code == "E2"

    @pytest.mark.parametrize("status", ["Submitted", "Queued", "InProgress", "Completed", "Deleted"])
    def test_error_dropped_for_other_statuses(self, status):
        task = TaskInfo.from_api_response(task_json(status=status, error={"code": "E1"}))
        assert task.error is None


class TestTaskInfoParsing:
    def test_fields(self):
        task = TaskInfo.from_api_response(
            task_json(task_id="abc", status="Queued", files_count=2, delay=2000, description="d")
        )
        assert task.task_id == "abc"
        assert task.status is TaskStatus.QUEUED
        assert task.files_count == 2
        assert task.request_status_delay == 2000
        assert task.description == "d"
        assert task.registration_time.year == 2019
        assert task.is_in_process
        assert not task.is_terminal

    def test_keys_case_insensitive(self):
        task = TaskInfo.from_api_response({"TaskId": "abc", "Status": "Submitted"})
        assert task.task_id == "abc"
        assert task.status is TaskStatus.SUBMITTED

    def test_unknown_status(self):
        with pytest.raises(ValueError):
            TaskInfo.from_api_response(task_json(status="Exploded"))

    def test_missing_task_id(self):
        with pytest.raises(KeyError):
            TaskInfo.from_api_response({"status": "Submitted"})


class TestErrorData:
    def test_nested_details(self):
        error = ErrorData.from_api_response(
            {
                "code": "InvalidArgument",
                "message": "Bad",
                "target": "language",
                "details": [{"code": "X", "message": "inner"}],
            }
        )
        assert error.target == "language"
        assert error.details[0].message == "inner"
        assert str(error) == "(InvalidArgument) Bad [language]"

    def test_from_text(self):
        assert ErrorData.from_text("oops").message == "oops"


class TestListsAndApplicationInfo:
    def test_plain_list(self):
        tasks = parse_task_list([task_json(task_id="a"), task_json(task_id="b")])
        assert [t.task_id for t in tasks] == ["a", "b"]

    def test_wrapped_list(self):
        assert parse_task_list({"tasks": []}) == []

    def test_not_a_list(self):
        with pytest.raises(TypeError):
            parse_task_list("nope")

    def test_application_info(self):
        info = ApplicationInfo.from_api_response(
            {"id": "app", "name": "My app", "pages": 10, "fields": 5,
             "expires": "2030-01-01T00:00:00Z", "type": "Normal"}
        )
        assert info.pages == 10
        assert info.expires.year == 2030
