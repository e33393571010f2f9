# bloglist/services/listing.py
from bloglist.models import Blog


def _ordered(query):
    # likes desc; empate -> orden de creación (id asc)
    return query.order_by(Blog.likes.desc(), Blog.id.asc()).populate_existing()


def list_blogs():
    """Todos los blogs, siempre leídos de la base de datos (sin caché)."""
    return _ordered(Blog.query).all()


def list_blogs_by_owner(user_id):
    return _ordered(Blog.query.filter_by(user_id=user_id)).all()
