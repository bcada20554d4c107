from datetime import datetime

from fastapi import APIRouter, Depends, HTTPException, Query, status

from backend_fastapi.api.deps import (
    list_tasks_after_deadline_use_case,
    list_tasks_use_case,
    search_tasks_use_case,
)
from core.application.list_tasks import ListTasksUseCase
from core.application.list_tasks_after_deadline import (
    ListTasksAfterDeadlineCommand,
    ListTasksAfterDeadlineUseCase,
)
from core.application.search_tasks import SearchTasksCommand, SearchTasksUseCase
from core.domain.errors import StoreError
from core.domain.models.task import Task

router = APIRouter(prefix="/tasks", tags=["tasks"])


@router.get(
    "",
    response_model=list[Task],
    summary="Listar todas las tareas",
)
async def list_tasks(
    use_case: ListTasksUseCase = Depends(list_tasks_use_case),
) -> list[Task]:
    """
    Obtiene todas las tareas en orden de almacenamiento.
    """
    try:
        return await use_case.execute()
    except StoreError as e:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(e))


@router.get(
    "/after",
    response_model=list[Task],
    summary="Tareas con fecha límite posterior a una fecha",
)
async def list_tasks_after_deadline(
    deadline: datetime = Query(..., description="Timestamp ISO-8601, p. ej. 2021-03-13T09:00:00.000Z"),
    use_case: ListTasksAfterDeadlineUseCase = Depends(list_tasks_after_deadline_use_case),
) -> list[Task]:
    """
    Obtiene las tareas cuya fecha límite es estrictamente posterior a `deadline`.
    Las tareas sin fecha límite nunca se devuelven.
    """
    try:
        return await use_case.execute(ListTasksAfterDeadlineCommand(cutoff=deadline))
    except StoreError as e:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(e))


@router.get(
    "/search",
    response_model=list[Task],
    summary="Buscar tareas por palabra",
)
async def search_tasks(
    word: str = "",
    use_case: SearchTasksUseCase = Depends(search_tasks_use_case),
) -> list[Task]:
    """
    Obtiene las tareas cuya descripción contiene `word`.

    - **word**: texto a buscar, distingue mayúsculas. Vacío devuelve todas.
    """
    try:
        return await use_case.execute(SearchTasksCommand(word=word))
    except StoreError as e:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(e))
