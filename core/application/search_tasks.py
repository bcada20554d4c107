from dataclasses import dataclass

from core.domain.models.task import Task
from core.domain.ports.task_store import TaskStore


@dataclass(slots=True)
class SearchTasksCommand:
    word: str = ""


class SearchTasksUseCase:
    def __init__(self, store: TaskStore) -> None:
        self._store = store

    async def execute(self, cmd: SearchTasksCommand) -> list[Task]:
        """Tareas cuya descripción contiene `cmd.word` (sensible a mayúsculas)."""
        return await self._store.get_with_word(cmd.word)
