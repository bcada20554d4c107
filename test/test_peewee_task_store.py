import asyncio
import unittest
from datetime import date, datetime, timezone
from unittest.mock import patch

from peewee import SqliteDatabase

from core.domain.errors import StoreError
from infrastructure.peewee.session.db import db
from infrastructure.peewee.model.models import TaskModel
from infrastructure.peewee.repository.task_store import PeeweeTaskStore

ROWS = [
    {"id": 1, "description": "laundry", "urgent": 0, "private": 1, "deadline": None},
    {
        "id": 2,
        "description": "monday lab",
        "urgent": 0,
        "private": 0,
        "deadline": "2021-03-16T09:00:00.000Z",
    },
    {
        "id": 3,
        "description": "phone call",
        "urgent": 1,
        "private": 0,
        "deadline": "2021-03-08T15:20:00.000Z",
    },
]

# Escenario con fechas sin hora, tal y como suelen guardarse a mano.
DATE_ONLY_ROWS = [
    {"id": 1, "description": "laundry", "urgent": 0, "private": 1, "deadline": None},
    {"id": 2, "description": "monday lab", "urgent": 0, "private": 1, "deadline": "2021-03-16"},
    {"id": 3, "description": "phone call", "urgent": 1, "private": 1, "deadline": "2021-03-08"},
]

# Mismo instante que el corte, anterior con offset, y posterior con espacio.
MIXED_FORM_ROWS = [
    {"id": 1, "description": "same", "urgent": 0, "private": 1, "deadline": "2021-03-13T09:00:00Z"},
    {
        "id": 2,
        "description": "earlier",
        "urgent": 0,
        "private": 1,
        "deadline": "2021-03-13T10:00:00+02:00",
    },
    {"id": 3, "description": "later", "urgent": 0, "private": 1, "deadline": "2021-03-13 10:00:00"},
]

CUTOFF = "2021-03-13T09:00:00.000Z"


def _replace_rows(rows: list[dict]) -> None:
    TaskModel.delete().execute()
    TaskModel.insert_many(rows).execute()


class PeeweeTaskStoreTests(unittest.IsolatedAsyncioTestCase):
    def setUp(self) -> None:
        if db.is_closed():
            db.connect()
        db.create_tables([TaskModel], safe=True)
        TaskModel.delete().execute()
        TaskModel.insert_many(ROWS).execute()
        self.store = PeeweeTaskStore()

    def tearDown(self) -> None:
        # La BDD en memoria desaparece al cerrar; basta con reabrir para el siguiente test.
        if db.is_closed():
            db.connect()
        db.drop_tables([TaskModel])
        db.close()

    async def test_get_all_devuelve_todas_en_orden(self) -> None:
        tasks = await self.store.get_all()

        self.assertEqual([t.id for t in tasks], [1, 2, 3])
        self.assertEqual(len({t.id for t in tasks}), len(tasks))

    async def test_get_all_convierte_flags_y_deadline(self) -> None:
        tasks = {t.id: t for t in await self.store.get_all()}

        self.assertIs(tasks[1].is_urgent, False)
        self.assertIs(tasks[1].is_private, True)
        self.assertIsNone(tasks[1].deadline)
        self.assertIs(tasks[3].is_urgent, True)
        self.assertIs(tasks[3].is_private, False)
        self.assertEqual(
            tasks[3].deadline, datetime(2021, 3, 8, 15, 20, tzinfo=timezone.utc)
        )

    async def test_round_trip_de_una_fila(self) -> None:
        TaskModel.insert(
            id=4,
            description="exam",
            urgent=1,
            private=0,
            deadline="2021-03-16T09:00:00.000Z",
        ).execute()

        task = (await self.store.get_all())[-1]

        self.assertEqual(task.id, 4)
        self.assertIs(task.is_urgent, True)
        self.assertIs(task.is_private, False)
        self.assertEqual(task.deadline, datetime(2021, 3, 16, 9, tzinfo=timezone.utc))

    async def test_get_after_deadline(self) -> None:
        tasks = await self.store.get_after_deadline("2021-03-13T09:00:00.000Z")

        self.assertEqual([t.id for t in tasks], [2])

    async def test_get_after_deadline_acepta_datetime_y_date(self) -> None:
        aware = await self.store.get_after_deadline(
            datetime(2021, 3, 13, 9, tzinfo=timezone.utc)
        )
        naive = await self.store.get_after_deadline(datetime(2021, 3, 13, 9))
        day = await self.store.get_after_deadline(date(2021, 3, 13))

        for tasks in (aware, naive, day):
            self.assertEqual([t.id for t in tasks], [2])

    async def test_get_after_deadline_es_estricto_y_excluye_nulos(self) -> None:
        equal = await self.store.get_after_deadline("2021-03-16T09:00:00.000Z")
        early = await self.store.get_after_deadline("2000-01-01T00:00:00.000Z")

        self.assertEqual(equal, [])
        self.assertEqual([t.id for t in early], [2, 3])
        self.assertTrue(all(t.deadline is not None for t in early))

    async def test_get_after_deadline_con_fechas_sin_hora(self) -> None:
        _replace_rows(DATE_ONLY_ROWS)

        tasks = await self.store.get_after_deadline(CUTOFF)

        self.assertEqual([t.id for t in tasks], [2])
        self.assertEqual(tasks[0].deadline, datetime(2021, 3, 16, tzinfo=timezone.utc))
        self.assertEqual([t.id for t in await self.store.get_with_word("phone")], [3])

    async def test_get_after_deadline_compara_instantes_no_texto(self) -> None:
        _replace_rows(MIXED_FORM_ROWS)
        cutoff = datetime(2021, 3, 13, 9, tzinfo=timezone.utc)

        tasks = await self.store.get_after_deadline(CUTOFF)

        self.assertEqual([t.id for t in tasks], [3])
        for task in tasks:
            self.assertGreater(task.deadline, cutoff)

    async def test_get_after_deadline_invalido(self) -> None:
        with self.assertRaises(ValueError):
            await self.store.get_after_deadline("not a date")

    async def test_get_with_word(self) -> None:
        tasks = await self.store.get_with_word("phone")

        self.assertEqual([t.id for t in tasks], [3])

    async def test_get_with_word_vacio_devuelve_todas(self) -> None:
        tasks = await self.store.get_with_word("")

        self.assertEqual([t.id for t in tasks], [1, 2, 3])

    async def test_get_with_word_distingue_mayusculas(self) -> None:
        self.assertEqual(await self.store.get_with_word("Phone"), [])
        self.assertEqual([t.id for t in await self.store.get_with_word("lab")], [2])

    async def test_get_with_word_no_interpreta_comodines_ni_sql(self) -> None:
        self.assertEqual(await self.store.get_with_word("%"), [])
        self.assertEqual(await self.store.get_with_word("_"), [])
        self.assertEqual(await self.store.get_with_word("'; DROP TABLE tasks; --"), [])
        self.assertEqual(len(await self.store.get_all()), 3)

    async def test_consultas_en_paralelo(self) -> None:
        all_tasks, after, with_word = await asyncio.gather(
            self.store.get_all(),
            self.store.get_after_deadline("2021-03-13T09:00:00.000Z"),
            self.store.get_with_word("phone"),
        )

        self.assertEqual([t.id for t in all_tasks], [1, 2, 3])
        self.assertEqual([t.id for t in after], [2])
        self.assertEqual([t.id for t in with_word], [3])

    async def test_conexion_cerrada_lanza_store_error(self) -> None:
        self.store.close()
        self.assertFalse(self.store.is_open)

        for call in (
            self.store.get_all(),
            self.store.get_after_deadline("2021-03-13T09:00:00.000Z"),
            self.store.get_with_word("phone"),
        ):
            with self.assertRaises(StoreError) as ctx:
                await call
            self.assertIsNotNone(ctx.exception.cause)

    async def test_fila_corrupta_lanza_store_error(self) -> None:
        TaskModel.insert(id=5, description="broken", urgent=7, private=1).execute()

        with self.assertRaises(StoreError):
            await self.store.get_all()

    async def test_close_afecta_a_todas_las_instancias(self) -> None:
        other = PeeweeTaskStore()

        self.store.close()

        self.assertFalse(other.is_open)
        with self.assertRaises(StoreError):
            await other.get_all()

    def test_bdd_inaccesible_falla_al_construir(self) -> None:
        unreachable = SqliteDatabase("/nonexistent/dir/tasks.db", autoconnect=False)

        with patch("infrastructure.peewee.repository.task_store.db", unreachable):
            with self.assertRaises(StoreError) as ctx:
                PeeweeTaskStore()
        self.assertIsNotNone(ctx.exception.cause)

if __name__ == "__main__":
    unittest.main()
