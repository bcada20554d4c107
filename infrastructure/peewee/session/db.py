import os
from playhouse.db_url import connect

# Default to SQLite
DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///tasks.db")

# Una sola conexión compartida, abierta explícitamente por el store.
# autoconnect=False: con la conexión cerrada toda consulta falla.
_connect_params: dict[str, object] = {"autoconnect": False, "thread_safe": False}
if DATABASE_URL.startswith("sqlite"):
    _connect_params["check_same_thread"] = False

db = connect(DATABASE_URL, **_connect_params)
