# bloglist/models/__init__.py
"""
Paquete de modelos de la aplicación.
Importa aquí los modelos para que puedan ser referenciados como:
from bloglist.models import Blog, User
"""
from .blog import Blog
from .user import User

__all__ = ["Blog", "User"]
