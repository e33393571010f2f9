# bloglist/services/credential_store.py
import logging

from sqlalchemy.exc import IntegrityError

from bloglist.errors import ValidationError
from bloglist.extensions import db
from bloglist.models import User

logger = logging.getLogger(__name__)

USERNAME_TAKEN = "Username must be unique"


def add_user(name, username, password_hash):
    """Guarda un usuario nuevo.

    La restricción UNIQUE de la base de datos es la que manda: si otro
    registro concurrente gana la carrera, el IntegrityError se traduce en
    ValidationError.
    """
    user = User(name=name, username=username, password_hash=password_hash)
    db.session.add(user)
    try:
        db.session.commit()
    except IntegrityError:
        db.session.rollback()
        raise ValidationError(USERNAME_TAKEN) from None
    return user


def get_user(user_id):
    return db.session.get(User, user_id)


def get_user_by_username(username):
    return User.query.filter_by(username=username).first()


def list_users():
    return User.query.order_by(User.id).populate_existing().all()


def clear_users():
    deleted = User.query.delete()
    db.session.expunge_all()
    db.session.commit()
    logger.debug("Usuarios eliminados: %s", deleted)
    return deleted
