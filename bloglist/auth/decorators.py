# bloglist/auth/decorators.py
from functools import wraps

from flask import g, request

from bloglist.auth.tokens import bearer_token
from bloglist.errors import Unauthenticated
from bloglist.services.authenticator import resolve_identity


def load_identity():
    """Resuelve la cabecera Authorization en `g.identity` (o None).

    Un token inválido no corta la petición aquí: las rutas públicas lo
    ignoran y `token_required` decide en las protegidas.
    """
    g.identity = None
    g.auth_error = None

    token = bearer_token(request.headers.get("Authorization", ""))
    if token is None:
        return

    try:
        g.identity = resolve_identity(token)
    except Unauthenticated as e:
        g.auth_error = e


def token_required(f):
    @wraps(f)
    def decorated(*args, **kwargs):
        if getattr(g, "identity", None) is None:
            raise getattr(g, "auth_error", None) or Unauthenticated("Token missing")
        return f(*args, **kwargs)
    return decorated
