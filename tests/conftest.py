"""Общие фикстуры: настройки клиента и фейковый сервер на httpx.MockTransport."""

from collections import deque

import httpx
import pytest

from ocrsdk_client import AsyncOcrClient, OcrClient, OcrClientSettings

HOST = "https://cloud-test.ocrsdk.com"


def task_json(
    task_id="task-1",
    status="Submitted",
    files_count=1,
    delay=0,
    result_urls=None,
    error=None,
    description="",
):
    """Тело задачи в том виде, в каком его отдаёт сервер."""
    data = {
        "taskId": task_id,
        "status": status,
        "registrationTime": "2019-07-11T09:46:03.0471538Z",
        "statusChangeTime": "2019-07-11T09:46:04.123Z",
        "filesCount": files_count,
        "requestStatusDelay": delay,
        "description": description,
    }
    if result_urls is not None:
        data["resultUrls"] = result_urls
    if error is not None:
        data["error"] = error
    return data


class FakeServer:
    """Отдаёт заранее заданные ответы по очереди и запоминает запросы.

    Элемент очереди: httpx.Response, исключение (будет выброшено)
    или функция request -> httpx.Response.
    """

    def __init__(self, *responses):
        self.responses = deque(responses)
        self.requests = []

    def add(self, *responses):
        self.responses.extend(responses)

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if not self.responses:
            raise AssertionError(f"Неожиданный запрос: {request.method} {request.url}")
        item = self.responses.popleft()
        if isinstance(item, Exception):
            raise item
        if callable(item):
            return item(request)
        return item

    @property
    def paths(self):
        return [r.url.path for r in self.requests]


@pytest.fixture
def settings():
    return OcrClientSettings(application_id="app-id", password="secret", host=HOST)


@pytest.fixture
def server():
    return FakeServer()


@pytest.fixture
def client(settings, server):
    http_client = httpx.Client(base_url=HOST, transport=httpx.MockTransport(server))
    ocr_client = OcrClient(settings, http_client=http_client)
    yield ocr_client
    http_client.close()


@pytest.fixture
async def async_client(settings, server):
    http_client = httpx.AsyncClient(base_url=HOST, transport=httpx.MockTransport(server))
    ocr_client = AsyncOcrClient(settings, http_client=http_client)
    yield ocr_client
    await http_client.aclose()
