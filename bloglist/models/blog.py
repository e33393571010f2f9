# bloglist/models/blog.py
from datetime import datetime, timezone

from sqlalchemy import CheckConstraint

from bloglist.extensions import db


def _utcnow():
    return datetime.now(timezone.utc)


class Blog(db.Model):
    __tablename__ = "blogs"
    __table_args__ = (CheckConstraint("likes >= 0", name="ck_blogs_likes_non_negative"),)

    id = db.Column(db.Integer, primary_key=True)

    title = db.Column(db.String(255), nullable=False)
    author = db.Column(db.String(150), nullable=False, default="")
    url = db.Column(db.String(2048), nullable=False)
    likes = db.Column(db.Integer, nullable=False, default=0)

    # 👤 Dueño: se fija al crear y nunca se reasigna
    user_id = db.Column(
        db.Integer, db.ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    user = db.relationship("User", back_populates="blogs", lazy="joined")

    created_at = db.Column(db.DateTime, default=_utcnow)

    def to_dict(self):
        return {
            "id": self.id,
            "title": self.title,
            "author": self.author,
            "url": self.url,
            "likes": self.likes,
            "user_id": self.user_id,
            "user": self.user.to_ref() if self.user else None,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }

    def __repr__(self):
        return f"<Blog {self.title}>"
