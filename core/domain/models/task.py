from dataclasses import dataclass
from datetime import date, datetime, time, timezone


def to_utc_datetime(value: datetime | date | str) -> datetime:
    """
    Normaliza un timestamp a `datetime` con zona horaria UTC.

    Acepta `datetime`, `date` (medianoche UTC) o texto ISO-8601,
    con o sin sufijo `Z`. Los valores sin zona se interpretan como UTC.

    Raises:
        ValueError: si el texto no es un timestamp válido.
        TypeError: si el tipo no es ninguno de los anteriores.
    """
    if isinstance(value, str):
        text = value.strip()
        if not text:
            raise ValueError("Timestamp vacío")
        if text.endswith(("Z", "z")):
            text = text[:-1] + "+00:00"
        try:
            value = datetime.fromisoformat(text)
        except ValueError as e:
            raise ValueError(f"Timestamp inválido: {value!r}") from e
    elif isinstance(value, date) and not isinstance(value, datetime):
        value = datetime.combine(value, time.min)
    elif not isinstance(value, datetime):
        raise TypeError(f"Se esperaba datetime, date o str, no {type(value).__name__}")

    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


@dataclass(slots=True)
class Task:
    """
    Una tarea pendiente.

    Valores por defecto:
        is_urgent:  False
        is_private: True
        deadline:   None (sin fecha límite)
    """

    id: int
    description: str
    is_urgent: bool = False
    is_private: bool = True
    deadline: datetime | None = None

    def __post_init__(self) -> None:
        if isinstance(self.id, bool) or not isinstance(self.id, int):
            raise TypeError(f"id debe ser int, no {type(self.id).__name__}")
        if not isinstance(self.description, str) or not self.description.strip():
            raise ValueError("description es obligatoria")

        if self.is_urgent is None:
            self.is_urgent = False
        if self.is_private is None:
            self.is_private = True
        for name in ("is_urgent", "is_private"):
            if not isinstance(getattr(self, name), bool):
                raise TypeError(f"{name} debe ser bool")

        if self.deadline is not None:
            self.deadline = to_utc_datetime(self.deadline)
