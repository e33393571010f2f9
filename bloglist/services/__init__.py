# bloglist/services/__init__.py
"""Lógica de dominio: credenciales, autenticación, blogs, permisos y listados.

Las funciones reciben la `Identity` ya resuelta (o None); nunca leen la
petición HTTP ni `flask.g`.
"""
