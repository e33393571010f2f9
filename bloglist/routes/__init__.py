# bloglist/routes/__init__.py
from flask import Flask, request


def json_payload():
    """Cuerpo JSON de la petición como dict; cualquier otra cosa cuenta como vacío."""
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def register_routes(app: Flask):
    """
    Registrar todos los blueprints de la carpeta routes.
    Llamá a register_routes(app) desde bloglist.create_app().
    """
    # Import local para evitar problemas de import circular al inicializar la app
    from .auth import auth_bp
    from .blog_routes import blog_bp
    from .user_routes import user_bp
    app.register_blueprint(auth_bp, url_prefix="/api/login")
    app.register_blueprint(user_bp, url_prefix="/api/users")
    app.register_blueprint(blog_bp, url_prefix="/api/blogs")

    if app.config.get("ENABLE_TESTING_ROUTES"):
        from .testing_routes import testing_bp
        app.register_blueprint(testing_bp, url_prefix="/api/testing")
