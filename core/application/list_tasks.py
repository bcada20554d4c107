from core.domain.models.task import Task
from core.domain.ports.task_store import TaskStore


class ListTasksUseCase:
    def __init__(self, store: TaskStore) -> None:
        self._store = store

    async def execute(self) -> list[Task]:
        return await self._store.get_all()
