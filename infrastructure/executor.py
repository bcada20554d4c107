import asyncio
from concurrent.futures import ThreadPoolExecutor
from typing import Callable, TypeVar

T = TypeVar("T")

# Un único worker: la conexión compartida nunca se usa desde dos hilos a la vez.
executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="TaskStore")


async def run_blocking(func: Callable[[], T]) -> T:
    """Ejecuta `func()` en el worker compartido sin bloquear el event loop."""
    loop = asyncio.get_running_loop()
    return await loop.run_in_executor(executor, func)
