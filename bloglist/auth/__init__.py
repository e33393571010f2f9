# bloglist/auth/__init__.py
from .identity import Identity

__all__ = ["Identity"]
