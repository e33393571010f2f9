# bloglist/routes/user_routes.py
from flask import Blueprint, jsonify

from bloglist.routes import json_payload
from bloglist.services import authenticator, credential_store, listing

user_bp = Blueprint("users", __name__)


# 🟢 Registro
@user_bp.route("", methods=["POST"])
def register_user():
    data = json_payload()
    user = authenticator.register(data.get("name"), data.get("username"), data.get("password"))
    return jsonify(user.to_dict(blogs=[])), 201


# 🟣 Listar usuarios con sus blogs
@user_bp.route("", methods=["GET"])
def get_users():
    users = credential_store.list_users()
    return jsonify([
        u.to_dict(blogs=listing.list_blogs_by_owner(u.id)) for u in users
    ]), 200
