# bloglist/auth/identity.py
from dataclasses import dataclass


@dataclass(frozen=True)
class Identity:
    """Prueba de que una petición actúa en nombre de un usuario registrado.

    Se pasa explícitamente a cada operación protegida; no hay "usuario
    actual" global en la capa de dominio.
    """

    user_id: int
    username: str
