import logging
import os

import uvicorn
from dotenv import load_dotenv

load_dotenv()


def _as_bool(value: str) -> bool:
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _configure_logging(log_level: str) -> None:
    # uvicorn solo configura sus propios loggers; los del store van al root.
    logging.basicConfig(
        level=log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def run() -> None:
    host = os.getenv("HOST", "127.0.0.1")
    port = int(os.getenv("PORT", "8000"))
    reload = _as_bool(os.getenv("RELOAD", "false"))
    log_level = os.getenv("LOG_LEVEL", "info")

    _configure_logging(log_level)
    print(
        f"Starting task store API at http://{host}:{port} "
        f"(ORM: {os.getenv('ORM', 'peewee')}, DB: {os.getenv('DATABASE_URL', 'sqlite:///tasks.db')}, "
        f"Reload: {reload})"
    )

    uvicorn.run(
        "backend_fastapi.main:app",
        host=host,
        port=port,
        reload=reload,
        log_level=log_level,
    )


if __name__ == "__main__":
    run()
