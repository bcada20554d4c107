from dataclasses import dataclass
from datetime import date, datetime

from core.domain.models.task import Task
from core.domain.ports.task_store import TaskStore


@dataclass(slots=True)
class ListTasksAfterDeadlineCommand:
    cutoff: datetime | date | str


class ListTasksAfterDeadlineUseCase:
    def __init__(self, store: TaskStore) -> None:
        self._store = store

    async def execute(self, cmd: ListTasksAfterDeadlineCommand) -> list[Task]:
        return await self._store.get_after_deadline(cmd.cutoff)
