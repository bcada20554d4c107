"""
Conversión fila → Task en la frontera con la base de datos.

Las columnas booleanas se guardan como enteros 0/1 y `deadline` como texto
ISO-8601 (p. ej. `2021-03-16T09:00:00.000Z`) o NULL. Aquí se hacen
explícitas esas conversiones para que ningún adaptador dependa de la
"veracidad" implícita de los valores crudos.
"""

from datetime import date, datetime
from typing import Any

from core.domain.models.task import Task, to_utc_datetime

_TRUE_VALUES = {1, "1"}
_FALSE_VALUES = {0, "0"}


def int_to_bool(value: Any) -> bool:
    """
    Convierte una columna booleana almacenada como 0/1 en `bool`.

    Raises:
        ValueError: si el valor no es 0/1.
    """
    if isinstance(value, bool):
        return value
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ValueError(f"Valor booleano inválido en la BDD: {value!r}")


def parse_deadline(value: str | None) -> datetime | None:
    if value is None:
        return None
    return to_utc_datetime(value)


def format_deadline(value: datetime | date | str) -> str:
    """Texto canónico de un timestamp: `YYYY-MM-DDTHH:MM:SS.mmmZ` en UTC."""
    moment = to_utc_datetime(value)
    return (
        f"{moment.year:04d}-{moment.month:02d}-{moment.day:02d}"
        f"T{moment.hour:02d}:{moment.minute:02d}:{moment.second:02d}"
        f".{moment.microsecond // 1000:03d}Z"
    )


def row_to_task(
    id: int,
    description: str,
    urgent: Any,
    private: Any,
    deadline: str | None,
) -> Task:
    return Task(
        id=id,
        description=description,
        is_urgent=int_to_bool(urgent),
        is_private=int_to_bool(private),
        deadline=parse_deadline(deadline),
    )
