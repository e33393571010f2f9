# bloglist/routes/auth.py
from flask import Blueprint, jsonify

from bloglist.routes import json_payload
from bloglist.services import authenticator

auth_bp = Blueprint("auth", __name__)


@auth_bp.route("", methods=["POST"])
def login():
    data = json_payload()
    token, user = authenticator.login(data.get("username"), data.get("password"))

    return jsonify({
        "token": token,
        "id": user.id,
        "username": user.username,
        "name": user.name,
    }), 200
