# bloglist/services/ownership.py
from bloglist.errors import Forbidden


def is_owner(identity, blog):
    return identity is not None and blog.user_id == identity.user_id


def assert_owner(identity, blog):
    """Lanza Forbidden si `identity` no es la dueña de `blog`. No modifica nada."""
    if not is_owner(identity, blog):
        raise Forbidden("Only the creator can delete this blog")
