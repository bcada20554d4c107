from core.application.list_tasks import ListTasksUseCase
from infrastructure.container import get_list_tasks_use_case

from core.application.list_tasks_after_deadline import ListTasksAfterDeadlineUseCase
from infrastructure.container import get_list_tasks_after_deadline_use_case

from core.application.search_tasks import SearchTasksUseCase
from infrastructure.container import get_search_tasks_use_case


def list_tasks_use_case() -> ListTasksUseCase:
    return get_list_tasks_use_case()


def list_tasks_after_deadline_use_case() -> ListTasksAfterDeadlineUseCase:
    return get_list_tasks_after_deadline_use_case()


def search_tasks_use_case() -> SearchTasksUseCase:
    return get_search_tasks_use_case()
