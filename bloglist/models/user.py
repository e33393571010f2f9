# bloglist/models/user.py
from bloglist.extensions import db


class User(db.Model):
    __tablename__ = "users"

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(150), nullable=False)
    username = db.Column(db.String(50), nullable=False, unique=True)
    password_hash = db.Column(db.String(255), nullable=False)

    blogs = db.relationship(
        "Blog",
        back_populates="user",
        order_by="Blog.id",
        passive_deletes=True,
    )

    def to_ref(self):
        """Referencia corta que acompaña a cada blog."""
        return {"id": self.id, "username": self.username, "name": self.name}

    # Nunca incluye password_hash
    def to_dict(self, blogs=None):
        blogs = self.blogs if blogs is None else blogs
        return {
            **self.to_ref(),
            "blogs": [
                {
                    "id": b.id,
                    "title": b.title,
                    "author": b.author,
                    "url": b.url,
                    "likes": b.likes,
                }
                for b in blogs
            ],
        }

    def __repr__(self):
        return f"<User {self.username}>"
