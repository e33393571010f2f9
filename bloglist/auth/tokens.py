# bloglist/auth/tokens.py
"""Emisión y verificación de tokens JWT (HS256, sin estado en el servidor)."""
import logging
from datetime import datetime, timedelta, timezone

import jwt
from flask import current_app

from bloglist.auth.identity import Identity
from bloglist.errors import Unauthenticated

logger = logging.getLogger(__name__)


def issue_token(user, now=None):
    """Genera el token de acceso para `user`."""
    now = now or datetime.now(timezone.utc)
    config = current_app.config
    payload = {
        "sub": str(user.id),
        "username": user.username,
        "iat": now,
        "exp": now + timedelta(hours=config["JWT_EXPIRES_HOURS"]),
    }
    return jwt.encode(payload, config["JWT_SECRET_KEY"], algorithm=config["JWT_ALGORITHM"])


def decode_token(token):
    """Decodifica el token y devuelve la Identity que contiene.

    Raises:
        Unauthenticated: token ausente, expirado, con firma inválida o con
            claims incompletos.
    """
    if not token:
        raise Unauthenticated("Token missing")

    config = current_app.config
    try:
        payload = jwt.decode(
            token,
            config["JWT_SECRET_KEY"],
            algorithms=[config["JWT_ALGORITHM"]],
            options={"require": ["sub", "exp"]},
        )
    except jwt.ExpiredSignatureError:
        logger.debug("Token expirado")
        raise Unauthenticated("Token expired") from None
    except jwt.InvalidTokenError as e:
        logger.debug("Token inválido: %s", e)
        raise Unauthenticated("Token invalid") from None

    try:
        user_id = int(payload["sub"])
    except (TypeError, ValueError):
        raise Unauthenticated("Token invalid") from None

    return Identity(user_id=user_id, username=payload.get("username", ""))


def bearer_token(auth_header):
    """Extrae el token de una cabecera `Authorization: Bearer <token>`."""
    if not auth_header:
        return None
    scheme, _, token = auth_header.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        return None
    return token.strip()
