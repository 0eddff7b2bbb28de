"""Tasks tracking asynchronous controller operations."""

from __future__ import annotations

from typing import Any

from apicem.core.response import Response
from apicem.services.base import ApiModel, Service


class Task(ApiModel):
    id: str = ""
    service_type: str | None = None
    progress: str | None = None
    data: str | None = None
    is_error: bool = False
    failure_reason: str | None = None
    error_code: str | None = None
    start_time: int | None = None
    end_time: int | None = None
    last_update: int | None = None
    root_id: str | None = None
    parent_id: str | None = None
    version: int | None = None

    @property
    def done(self) -> bool:
        return self.end_time is not None


class TaskService(Service):
    """Wraps the ``v1/task`` resource."""

    def get_task(self, task_id: str) -> tuple[Task, Response]:
        return self._call("GET", f"v1/task/{task_id}", Task)

    def get_tasks(self, options: Any = None) -> tuple[list[Task], Response]:
        return self._call("GET", "v1/task", list[Task], options=options)

    def get_task_tree(self, task_id: str) -> tuple[list[Task], Response]:
        return self._call("GET", f"v1/task/{task_id}/tree", list[Task])
