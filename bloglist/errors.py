# bloglist/errors.py
"""Errores de dominio del backend.

Cada error lleva un `code` estable y el `status_code` HTTP con el que lo
devuelve la API. El texto del mensaje es sólo para humanos.
"""


class BlogListError(Exception):
    """Clase base para los errores del backend."""

    status_code = 500
    code = "internal_error"
    default_message = "Internal error"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)
        self.message = message or self.default_message

    def to_dict(self) -> dict:
        return {"error": self.message, "code": self.code}


class ValidationError(BlogListError):
    """Entrada ausente o mal formada."""

    status_code = 400
    code = "validation_error"
    default_message = "Invalid input"


class InvalidCredentials(BlogListError):
    """Usuario desconocido o contraseña incorrecta (no se distingue cuál)."""

    status_code = 401
    code = "invalid_credentials"
    default_message = "Invalid username or password"


class Unauthenticated(BlogListError):
    """Operación protegida sin identidad válida."""

    status_code = 401
    code = "unauthenticated"
    default_message = "Token missing or invalid"


class Forbidden(BlogListError):
    """Identidad válida pero sin permiso sobre el recurso."""

    status_code = 403
    code = "forbidden"
    default_message = "Not allowed"


class NotFound(BlogListError):
    """El recurso objetivo no existe."""

    status_code = 404
    code = "not_found"

    resource: str
    resource_id: object

    def __init__(self, resource: str, resource_id: object) -> None:
        super().__init__(f"{resource} with id {resource_id} not found")
        self.resource = resource
        self.resource_id = resource_id
