# bloglist/__init__.py
import logging

import click
from flask import Flask, jsonify
from werkzeug.exceptions import HTTPException

from bloglist.auth.decorators import load_identity
from bloglist.config import Config
from bloglist.errors import BlogListError
from bloglist.extensions import cors, db, migrate
from bloglist.log import configure_logging
from bloglist.routes import register_routes  # <- usar el init de routes

logger = logging.getLogger(__name__)


def register_error_handlers(app):
    """Traduce errores de dominio y HTTP a `{"error", "code"}` en JSON."""

    @app.errorhandler(BlogListError)
    def handle_domain_error(e):
        # Nada quedó a medias: los servicios validan antes de escribir
        db.session.rollback()
        return jsonify(e.to_dict()), e.status_code

    @app.errorhandler(HTTPException)
    def handle_http_error(e):
        code = (e.name or "error").lower().replace(" ", "_")
        return jsonify({"error": e.description, "code": code}), e.code

    @app.errorhandler(Exception)
    def handle_unexpected_error(e):
        db.session.rollback()
        logger.exception("❌ Error inesperado: %s", e)
        return jsonify({"error": "Internal server error", "code": "internal_error"}), 500


def register_commands(app):
    @app.cli.command("init-db")
    def init_db():
        """Crea todas las tablas."""
        db.create_all()
        click.echo("Tablas creadas.")


def create_app(config_object=None, **overrides):
    app = Flask(__name__)
    app.config.from_object(config_object or Config)
    app.config.update(overrides)

    configure_logging(app.config["LOG_LEVEL"], color=app.config["LOG_COLOR"])

    # Inicializar extensiones
    db.init_app(app)
    migrate.init_app(app, db, render_as_batch=True)
    cors.init_app(
        app,
        resources={r"/api/*": {"origins": app.config["CORS_ORIGINS"]}},
        allow_headers=["Content-Type", "Authorization"],
    )

    # Registrar blueprints centralizado
    register_routes(app)
    register_error_handlers(app)
    register_commands(app)

    @app.before_request
    def before_request():
        load_identity()

    logger.debug(
        "App creada: db=%s, testing_routes=%s",
        app.config["SQLALCHEMY_DATABASE_URI"],
        app.config["ENABLE_TESTING_ROUTES"],
    )
    return app
