from abc import ABC, abstractmethod
from datetime import date, datetime

from core.domain.models.task import Task


class TaskStore(ABC):
    @abstractmethod
    async def get_all(self) -> list[Task]:
        raise NotImplementedError

    @abstractmethod
    async def get_after_deadline(self, cutoff: datetime | date | str) -> list[Task]:
        raise NotImplementedError

    @abstractmethod
    async def get_with_word(self, word: str) -> list[Task]:
        raise NotImplementedError

    @abstractmethod
    def close(self) -> None:
        raise NotImplementedError
