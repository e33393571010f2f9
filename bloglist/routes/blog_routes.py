# bloglist/routes/blog_routes.py
from flask import Blueprint, g, jsonify

from bloglist.auth.decorators import token_required
from bloglist.routes import json_payload
from bloglist.services import blog_repository, listing

blog_bp = Blueprint("blogs", __name__)


# 🟣 Listar blogs (más likes primero)
@blog_bp.route("", methods=["GET"])
def get_blogs():
    return jsonify([b.to_dict() for b in listing.list_blogs()]), 200


# 🔵 Ver un solo blog
@blog_bp.route("/<int:blog_id>", methods=["GET"])
def get_blog(blog_id):
    return jsonify(blog_repository.get_blog(blog_id).to_dict()), 200


# 🟢 Crear un nuevo blog
@blog_bp.route("", methods=["POST"])
@token_required
def create_blog():
    data = json_payload()
    blog = blog_repository.create_blog(
        g.identity,
        title=data.get("title"),
        author=data.get("author"),
        url=data.get("url"),
    )
    return jsonify(blog.to_dict()), 201


# 👍 Like (sin autenticación, cualquiera puede)
@blog_bp.route("/<int:blog_id>/like", methods=["POST"])
def like_blog(blog_id):
    blog = blog_repository.increment_like(blog_id)
    return jsonify(blog.to_dict()), 200


# 🔴 Borrar blog (sólo el dueño)
@blog_bp.route("/<int:blog_id>", methods=["DELETE"])
@token_required
def delete_blog(blog_id):
    blog_repository.delete_blog(g.identity, blog_id)
    return "", 204
