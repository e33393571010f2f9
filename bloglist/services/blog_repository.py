# bloglist/services/blog_repository.py
import logging

from sqlalchemy import delete, update

from bloglist.errors import Forbidden, NotFound, Unauthenticated, ValidationError
from bloglist.extensions import db
from bloglist.models import Blog
from bloglist.services.ownership import assert_owner

logger = logging.getLogger(__name__)

# Rango de INTEGER en SQLite / BIGINT en PostgreSQL
MIN_ID = -(2**63)
MAX_ID = 2**63 - 1


def _clean(value, field):
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValidationError(f"Field '{field}' must be a string")
    return value.strip()


def _check_blog_id(blog_id):
    """Un id fuera de rango no puede existir: NotFound sin tocar la base de datos."""
    if not MIN_ID <= blog_id <= MAX_ID:
        raise NotFound("Blog", blog_id)


def create_blog(identity, title, author, url):
    """Crea un blog cuyo dueño es `identity`; likes empieza en 0."""
    if identity is None:
        raise Unauthenticated("Token missing")

    title = _clean(title, "title")
    author = _clean(author, "author")
    url = _clean(url, "url")

    missing = [field for field, value in (("title", title), ("url", url)) if not value]
    if missing:
        raise ValidationError(f"Missing required fields: {', '.join(missing)}")

    blog = Blog(title=title, author=author, url=url, likes=0, user_id=identity.user_id)
    db.session.add(blog)
    db.session.commit()
    logger.info("📝 Blog creado: id=%s por %s", blog.id, identity.username)
    return blog


def get_blog(blog_id):
    _check_blog_id(blog_id)
    blog = Blog.query.filter_by(id=blog_id).populate_existing().first()
    if blog is None:
        raise NotFound("Blog", blog_id)
    return blog


def increment_like(blog_id):
    """Suma exactamente 1 a likes con un único UPDATE atómico.

    No comprueba dueño ni identidad. Si el blog fue borrado antes, el UPDATE
    no toca filas y se lanza NotFound.
    """
    _check_blog_id(blog_id)
    result = db.session.execute(
        update(Blog)
        .where(Blog.id == blog_id)
        .values(likes=Blog.likes + 1)
        .execution_options(synchronize_session=False)
    )
    if result.rowcount == 0:
        db.session.rollback()
        raise NotFound("Blog", blog_id)

    # Leído dentro de la misma transacción: es el valor que escribió este UPDATE
    blog = Blog.query.filter_by(id=blog_id).populate_existing().one()
    db.session.commit()
    logger.info("👍 Like en blog id=%s (likes=%s)", blog_id, blog.likes)
    return blog


def delete_blog(identity, blog_id):
    """Borra el blog si `identity` es su dueña. Irreversible."""
    if identity is None:
        raise Unauthenticated("Token missing")

    blog = get_blog(blog_id)
    try:
        assert_owner(identity, blog)
    except Forbidden:
        logger.warning(
            "🔒 %s intentó borrar el blog id=%s de user_id=%s",
            identity.username, blog_id, blog.user_id,
        )
        raise

    result = db.session.execute(
        delete(Blog).where(Blog.id == blog_id).execution_options(synchronize_session=False)
    )
    if result.rowcount == 0:
        # Otro DELETE concurrente ganó
        db.session.rollback()
        raise NotFound("Blog", blog_id)

    db.session.expunge(blog)
    db.session.commit()
    logger.info("🗑️ Blog id=%s eliminado por %s", blog_id, identity.username)


def clear_blogs():
    deleted = db.session.execute(delete(Blog).execution_options(synchronize_session=False)).rowcount
    db.session.expunge_all()
    db.session.commit()
    logger.debug("Blogs eliminados: %s", deleted)
    return deleted
