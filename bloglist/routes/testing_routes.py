# bloglist/routes/testing_routes.py
"""Utilidades sólo para desarrollo / tests e2e. No forman parte del contrato."""
import logging

from flask import Blueprint

from bloglist.services import blog_repository, credential_store

logger = logging.getLogger(__name__)

testing_bp = Blueprint("testing", __name__)


@testing_bp.route("/reset", methods=["POST"])
def reset():
    blogs = blog_repository.clear_blogs()
    users = credential_store.clear_users()
    logger.warning("🧹 Reset de datos de prueba: %s blogs, %s usuarios", blogs, users)
    return "", 204
