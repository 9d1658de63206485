"""Миксин чтения задач и информации о приложении."""
from __future__ import annotations

import logging
from typing import List, Optional

from ocrsdk_client.models import ApplicationInfo, TaskInfo, parse_task_list
from ocrsdk_client.params import TaskIdParams, TasksListingParams
from ocrsdk_client.urls import (
    GET_APPLICATION_INFO_URL,
    GET_TASK_STATUS_URL,
    LIST_FINISHED_TASKS_URL,
    LIST_TASKS_URL,
)

logger = logging.getLogger(__name__)


class TaskReadMixin:
    """Статус задачи, списки задач, информация о приложении."""

    def get_task_status(self, task_id: str) -> TaskInfo:
        """Текущее состояние задачи. Для Completed содержит result_urls."""
        task = self._call("get", GET_TASK_STATUS_URL, TaskIdParams(task_id), TaskInfo.from_api_response)
        logger.debug(
            f"Статус задачи {task.task_id}: {task.status.value}",
            extra={"task_id": task.task_id, "status": task.status.value},
        )
        return task

    def list_tasks(self, params: Optional[TasksListingParams] = None) -> List[TaskInfo]:
        """Задачи приложения за период (по умолчанию сервер берёт 7 дней)."""
        return self._call("get", LIST_TASKS_URL, params or TasksListingParams(), parse_task_list)

    def list_finished_tasks(self) -> List[TaskInfo]:
        """Завершённые и ещё не удалённые задачи. Пустой список - не ошибка."""
        return self._call("get", LIST_FINISHED_TASKS_URL, None, parse_task_list)

    def get_application_info(self) -> ApplicationInfo:
        """
        Информация о приложении. Доступна, только если в настройках
        приложения на сервере разрешена выдача этой информации.
        """
        return self._call(
            "get", GET_APPLICATION_INFO_URL, None, ApplicationInfo.from_api_response
        )
