class StoreError(Exception):
    """
    Fallo de conexión o de consulta contra el almacén de tareas.

    Envuelve la excepción original del driver en `cause`. No distingue
    entre fallos transitorios y permanentes.
    """

    def __init__(self, message: str, cause: BaseException | None = None) -> None:
        super().__init__(message)
        self.cause = cause

    def __str__(self) -> str:
        base = super().__str__()
        if self.cause is None:
            return base
        return f"{base}: {self.cause}"
