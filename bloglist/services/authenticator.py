# bloglist/services/authenticator.py
import logging
from functools import lru_cache

from flask import current_app
from werkzeug.security import check_password_hash, generate_password_hash

from bloglist.auth.tokens import decode_token, issue_token
from bloglist.errors import InvalidCredentials, Unauthenticated, ValidationError
from bloglist.services import credential_store

logger = logging.getLogger(__name__)

MIN_USERNAME_LENGTH = 3
MIN_PASSWORD_LENGTH = 3


def _hash_kwargs():
    method = current_app.config.get("PASSWORD_HASH_METHOD")
    return {"method": method} if method else {}


def _hash_password(password):
    return generate_password_hash(password, **_hash_kwargs())


@lru_cache(maxsize=None)
def _dummy_hash(method=None):
    kwargs = {"method": method} if method else {}
    return generate_password_hash("not-a-real-password", **kwargs)


def _clean(value):
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValidationError("Fields must be strings")
    return value.strip()


def register(name, username, password):
    """Registra un usuario y lo devuelve (sin la credencial en su to_dict)."""
    name = _clean(name)
    username = _clean(username)
    if password is not None and not isinstance(password, str):
        raise ValidationError("Fields must be strings")
    password = password or ""

    missing = [
        field
        for field, value in (("name", name), ("username", username), ("password", password))
        if not value
    ]
    if missing:
        raise ValidationError(f"Missing required fields: {', '.join(missing)}")

    if len(username) < MIN_USERNAME_LENGTH:
        raise ValidationError(f"Username must be at least {MIN_USERNAME_LENGTH} characters long")
    if len(password) < MIN_PASSWORD_LENGTH:
        raise ValidationError(f"Password must be at least {MIN_PASSWORD_LENGTH} characters long")

    if credential_store.get_user_by_username(username) is not None:
        raise ValidationError(credential_store.USERNAME_TAKEN)

    user = credential_store.add_user(name, username, _hash_password(password))
    logger.info("👤 Usuario registrado: %s (id=%s)", user.username, user.id)
    return user


def login(username, password):
    """Verifica las credenciales y devuelve `(token, user)`.

    Usuario desconocido y contraseña incorrecta producen exactamente el mismo
    error, y en ambos casos se comprueba un hash.
    """
    if not isinstance(username, str) or not isinstance(password, str) \
            or not username.strip() or not password:
        raise ValidationError("Username and password required")

    user = credential_store.get_user_by_username(username.strip())
    if user is None:
        check_password_hash(_dummy_hash(current_app.config.get("PASSWORD_HASH_METHOD")), password)
        ok = False
    else:
        ok = check_password_hash(user.password_hash, password)

    if not ok:
        logger.warning("⚠️ Login fallido para '%s'", username)
        raise InvalidCredentials()

    token = issue_token(user)
    logger.info("✅ Login exitoso: %s", user.username)
    return token, user


def resolve_identity(token):
    """Token -> Identity, comprobando que el usuario sigue existiendo."""
    identity = decode_token(token)
    if credential_store.get_user(identity.user_id) is None:
        logger.debug("Token de un usuario inexistente (id=%s)", identity.user_id)
        raise Unauthenticated("Token invalid")
    return identity
