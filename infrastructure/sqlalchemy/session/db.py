import os

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base
from sqlalchemy.pool import StaticPool

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///tasks.db")

_connect_args = {"check_same_thread": False} if DATABASE_URL.startswith("sqlite") else {}

# StaticPool: una única conexión DBAPI compartida, sin pool real.
engine = create_engine(DATABASE_URL, connect_args=_connect_args, poolclass=StaticPool)

Base = declarative_base()


def get_engine() -> Engine:
    return engine


def init_db() -> None:
    """Crea la tabla si no existe. Solo para desarrollo y tests."""
    from infrastructure.sqlalchemy.model import models  # noqa: F401

    Base.metadata.create_all(bind=engine)
