import logging
from datetime import date, datetime
from typing import Callable

from peewee import PeeweeException, fn

from core.domain.errors import StoreError
from core.domain.models.task import Task
from core.domain.ports.task_store import TaskStore
from infrastructure.executor import run_blocking
from infrastructure.mapping import format_deadline, row_to_task
from infrastructure.peewee.model.models import TaskModel
from infrastructure.peewee.session.db import db

logger = logging.getLogger(__name__)


class PeeweeTaskStore(TaskStore):
    """
    Store de solo lectura sobre la tabla `tasks` usando Peewee.

    La tabla se asume creada externamente. La conexión se abre aquí una vez
    y se reutiliza en todas las consultas hasta `close()`.

    Todas las instancias comparten el `db` del módulo: `close()` en una cierra
    la conexión de todas, y `is_open` refleja ese estado compartido. La
    aplicación usa una única instancia (ver `infrastructure/container.py`).

    Si la BDD no se puede abrir, el constructor lanza `StoreError` en vez de
    devolver un store en estado "sin abrir". Un store cerrado con `close()`
    sí existe: sus operaciones fallan con `StoreError`.
    """

    def __init__(self) -> None:
        try:
            db.connect(reuse_if_open=True)
        except PeeweeException as e:
            logger.error(f"🔴 No se pudo abrir la BDD {db.database}: {e}")
            raise StoreError("No se pudo abrir la base de datos", cause=e) from e
        logger.info(f"PeeweeTaskStore listo (db={db.database})")

    @property
    def is_open(self) -> bool:
        return not db.is_closed()

    def close(self) -> None:
        if not db.is_closed():
            db.close()
            logger.info("PeeweeTaskStore cerrado")

    def _select(self, *conditions) -> list[Task]:
        query = TaskModel.select()
        if conditions:
            query = query.where(*conditions)
        return [
            row_to_task(t.id, t.description, t.urgent, t.private, t.deadline)
            for t in query.order_by(TaskModel.id)
        ]

    async def _run(self, operation: str, query: Callable[[], list[Task]]) -> list[Task]:
        try:
            tasks = await run_blocking(query)
        except (PeeweeException, ValueError, TypeError) as e:
            logger.error(f"✗ {operation} falló: {e}")
            raise StoreError(f"{operation} falló", cause=e) from e
        logger.debug(f"✓ {operation}: {len(tasks)} tareas")
        return tasks

    async def get_all(self) -> list[Task]:
        return await self._run("get_all", self._select)

    async def get_after_deadline(self, cutoff: datetime | date | str) -> list[Task]:
        # Validar antes de tocar la BDD. julianday() compara instantes, no texto:
        # acepta filas sin milisegundos, con offset o con espacio como separador.
        cutoff_text = format_deadline(cutoff)
        return await self._run(
            "get_after_deadline",
            lambda: self._select(
                fn.julianday(TaskModel.deadline) > fn.julianday(cutoff_text)
            ),
        )

    async def get_with_word(self, word: str) -> list[Task]:
        if not word:
            return await self._run("get_with_word", self._select)
        # instr() distingue mayúsculas; LIKE en SQLite no.
        return await self._run(
            "get_with_word",
            lambda: self._select(fn.instr(TaskModel.description, word) > 0),
        )
