"""Tests for the wait_for_task polling loop."""

from unittest.mock import call, patch

import httpx
import pytest

from ocrsdk_client import (
    ApiError,
    NotEnoughCreditsError,
    TaskDeletedError,
    TaskInfo,
    TaskProcessingFailedError,
    TaskStatus,
    TransportError,
)

from conftest import task_json


@pytest.fixture
def sleep():
    with patch("ocrsdk_client.task_lifecycle.time.sleep") as mock_sleep:
        yield mock_sleep


def submitted(delay=2000):
    return TaskInfo.from_api_response(task_json(task_id="A", status="Queued", delay=delay))


class TestWaitForTask:
    def test_returns_last_polled_completed_task(self, client, server, sleep):
        completed = task_json(
            task_id="A", status="Completed", files_count=1, result_urls=["https://x/r.docx"]
        )
        server.add(
            httpx.Response(200, json=task_json(task_id="A", status="InProgress", delay=1500)),
            httpx.Response(200, json=completed),
        )

        task = client.wait_for_task(submitted())

        assert task == TaskInfo.from_api_response(completed)
        assert server.paths == ["/v2/getTaskStatus", "/v2/getTaskStatus"]

    def test_uses_delay_from_most_recent_poll(self, client, server, sleep):
        server.add(
            httpx.Response(200, json=task_json(task_id="A", status="Queued", delay=3000)),
            httpx.Response(200, json=task_json(task_id="A", status="InProgress", delay=500)),
            httpx.Response(200, json=task_json(task_id="A", status="Completed", result_urls=[])),
        )

        client.wait_for_task(submitted(delay=2000))

        assert sleep.call_args_list == [call(2.0), call(3.0), call(0.5)]

    def test_submitted_keeps_polling(self, client, server, sleep):
        server.add(
            httpx.Response(200, json=task_json(task_id="A", status="Submitted")),
            httpx.Response(200, json=task_json(task_id="A", status="Completed")),
        )

        task = client.wait_for_task(submitted())

        assert task.status is TaskStatus.COMPLETED
        assert len(server.requests) == 2

    def test_processing_failed(self, client, server, sleep):
        server.add(
            httpx.Response(
                200,
                json=task_json(
                    task_id="A",
                    status="ProcessingFailed",
                    error={"code": "ImageError", "message": "Bad image"},
                ),
            )
        )

        with pytest.raises(TaskProcessingFailedError) as exc_info:
            client.wait_for_task(submitted())

        assert exc_info.value.task.status is TaskStatus.PROCESSING_FAILED
        assert exc_info.value.error.code == "ImageError"

    def test_not_enough_credits(self, client, server, sleep):
        server.add(httpx.Response(200, json=task_json(task_id="A", status="NotEnoughCredits")))

        with pytest.raises(NotEnoughCreditsError) as exc_info:
            client.wait_for_task(submitted())

        assert exc_info.value.error is not None

    def test_deleted(self, client, server, sleep):
        server.add(httpx.Response(200, json=task_json(task_id="A", status="Deleted")))

        with pytest.raises(TaskDeletedError):
            client.wait_for_task(submitted())

    def test_transport_error_stops_polling(self, client, server, sleep):
        server.add(
            httpx.Response(200, json=task_json(task_id="A", status="InProgress")),
            httpx.ReadTimeout("timed out"),
            httpx.Response(200, json=task_json(task_id="A", status="Completed")),
        )

        with pytest.raises(TransportError):
            client.wait_for_task(submitted())

        assert len(server.requests) == 2
        assert len(server.responses) == 1

    def test_api_error_stops_polling(self, client, server, sleep):
        server.add(
            httpx.Response(404, json={"error": {"code": "NotFound", "message": "Task not found"}}),
        )

        with pytest.raises(ApiError) as exc_info:
            client.wait_for_task(submitted())

        assert exc_info.value.status_code == 404
        assert len(server.requests) == 1
