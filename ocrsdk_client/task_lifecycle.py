"""Миксин жизненного цикла задач: удаление и ожидание завершения."""
from __future__ import annotations

import logging
import time

from ocrsdk_client.exceptions import (
    NotEnoughCreditsError,
    TaskDeletedError,
    TaskProcessingFailedError,
)
from ocrsdk_client.models import TaskInfo, TaskStatus
from ocrsdk_client.params import TaskIdParams
from ocrsdk_client.urls import DELETE_TASK_URL

logger = logging.getLogger(__name__)


def check_polled_task(task: TaskInfo) -> bool:
    """
    Классифицировать результат очередного опроса.

    Returns:
        True - задача Completed, False - ещё в работе, опрос продолжается

    Raises:
        TaskDeletedError, TaskProcessingFailedError, NotEnoughCreditsError
    """
    status = task.status
    if status is TaskStatus.COMPLETED:
        logger.info(
            f"Задача {task.task_id} завершена, результатов: {len(task.result_urls)}",
            extra={"task_id": task.task_id, "status": status.value},
        )
        return True
    if status is TaskStatus.DELETED:
        raise TaskDeletedError(f"Задача {task.task_id} удалена", task)
    if status is TaskStatus.PROCESSING_FAILED:
        raise TaskProcessingFailedError(f"Ошибка обработки задачи {task.task_id}", task)
    if status is TaskStatus.NOT_ENOUGH_CREDITS:
        raise NotEnoughCreditsError(
            f"Недостаточно кредитов для задачи {task.task_id}", task
        )
    return False


def poll_delay_seconds(task: TaskInfo) -> float:
    """Пауза перед опросом по requestStatusDelay последнего ответа"""
    return max(task.request_status_delay, 0) / 1000


class TaskLifecycleMixin:
    """Удаление задач и ожидание завершения обработки."""

    def delete_task(self, task_id: str) -> TaskInfo:
        """
        Удалить задачу и её результаты. Повторное удаление не ошибка:
        сервер снова вернёт задачу в статусе Deleted.
        """
        task = self._call("post", DELETE_TASK_URL, TaskIdParams(task_id), TaskInfo.from_api_response)
        logger.info(
            f"Задача {task.task_id} удалена",
            extra={"task_id": task.task_id, "status": task.status.value},
        )
        return task

    def wait_for_task(self, task: TaskInfo) -> TaskInfo:
        """
        Опрашивать статус, пока задача не станет Completed.

        Перед каждым опросом выдерживается requestStatusDelay из последнего
        известного состояния (для первого опроса - из переданной задачи).
        Ошибки сети и API пробрасываются сразу, без повторов.

        Returns:
            Последний опрошенный TaskInfo со статусом Completed

        Raises:
            TaskDeletedError, TaskProcessingFailedError, NotEnoughCreditsError,
            TransportError, ApiError
        """
        current = task
        while True:
            time.sleep(poll_delay_seconds(current))
            current = self.get_task_status(current.task_id)
            if check_polled_task(current):
                return current
