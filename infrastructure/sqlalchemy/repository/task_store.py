import logging
from datetime import date, datetime
from typing import Callable

from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from core.domain.errors import StoreError
from core.domain.models.task import Task
from core.domain.ports.task_store import TaskStore
from infrastructure.executor import run_blocking
from infrastructure.mapping import format_deadline, row_to_task
from infrastructure.sqlalchemy.model.models import TaskModel
from infrastructure.sqlalchemy.session.db import get_engine

logger = logging.getLogger(__name__)


class SqlAlchemyTaskStore(TaskStore):
    """
    Store de solo lectura sobre la tabla `tasks` usando SQLAlchemy.

    Cada instancia mantiene su propia `Connection` hasta `close()`; después
    toda consulta falla con `StoreError`. Si la BDD no se puede abrir, el
    constructor lanza `StoreError` directamente.
    """

    def __init__(self) -> None:
        engine = get_engine()
        try:
            self._connection = engine.connect()
        except SQLAlchemyError as e:
            logger.error(f"🔴 No se pudo abrir la BDD {engine.url}: {e}")
            raise StoreError("No se pudo abrir la base de datos", cause=e) from e
        logger.info(f"SqlAlchemyTaskStore listo (db={engine.url})")

    @property
    def is_open(self) -> bool:
        return not self._connection.closed

    def close(self) -> None:
        if not self._connection.closed:
            self._connection.close()
            logger.info("SqlAlchemyTaskStore cerrado")

    def _select(self, *criteria) -> list[Task]:
        with Session(bind=self._connection) as session:
            task_models = (
                session.query(TaskModel)
                .filter(*criteria)
                .order_by(TaskModel.id)
                .all()
            )
            return [
                row_to_task(t.id, t.description, t.urgent, t.private, t.deadline)
                for t in task_models
            ]

    async def _run(self, operation: str, query: Callable[[], list[Task]]) -> list[Task]:
        try:
            tasks = await run_blocking(query)
        except (SQLAlchemyError, ValueError, TypeError) as e:
            logger.error(f"✗ {operation} falló: {e}")
            raise StoreError(f"{operation} falló", cause=e) from e
        logger.debug(f"✓ {operation}: {len(tasks)} tareas")
        return tasks

    async def get_all(self) -> list[Task]:
        return await self._run("get_all", self._select)

    async def get_after_deadline(self, cutoff: datetime | date | str) -> list[Task]:
        cutoff_text = format_deadline(cutoff)
        return await self._run(
            "get_after_deadline",
            lambda: self._select(
                func.julianday(TaskModel.deadline) > func.julianday(cutoff_text)
            ),
        )

    async def get_with_word(self, word: str) -> list[Task]:
        if not word:
            return await self._run("get_with_word", self._select)
        return await self._run(
            "get_with_word",
            lambda: self._select(func.instr(TaskModel.description, word) > 0),
        )
