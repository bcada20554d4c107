import os
from functools import lru_cache

from core.application.list_tasks import ListTasksUseCase
from core.application.list_tasks_after_deadline import ListTasksAfterDeadlineUseCase
from core.application.search_tasks import SearchTasksUseCase
from core.domain.ports.task_store import TaskStore
from infrastructure.peewee.repository.task_store import PeeweeTaskStore
from infrastructure.sqlalchemy.repository.task_store import SqlAlchemyTaskStore


@lru_cache(maxsize=1)
def get_task_store() -> TaskStore:
    """Store compartido por toda la aplicación (una sola conexión)."""
    orm = os.getenv("ORM", "peewee").lower()

    if orm == "sqlalchemy":
        return SqlAlchemyTaskStore()
    # Default to Peewee
    return PeeweeTaskStore()


def get_list_tasks_use_case() -> ListTasksUseCase:
    return ListTasksUseCase(store=get_task_store())


def get_list_tasks_after_deadline_use_case() -> ListTasksAfterDeadlineUseCase:
    return ListTasksAfterDeadlineUseCase(store=get_task_store())


def get_search_tasks_use_case() -> SearchTasksUseCase:
    return SearchTasksUseCase(store=get_task_store())
