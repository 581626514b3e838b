from flask import jsonify
from flask_jwt_extended import (
    create_access_token,
    get_jwt,
    get_jwt_identity,
    jwt_required,
    set_access_cookies,
    unset_jwt_cookies,
    verify_jwt_in_request,
)
from citydir.application import users as user_store
from citydir.errors import error_response
from .helpers import json_body
from . import api_bp


@api_bp.route("/auth/register", methods=["POST"])
def register():
    """
    The very first account bootstraps the CMS as an admin. After that only
    admins can create accounts.
    """
    data = json_body()
    role = data.get("role")

    if user_store.count_users() == 0:
        role = "admin"
    else:
        verify_jwt_in_request()
        if get_jwt().get("role") != "admin":
            return error_response("Forbidden", "Only admins can register users", 403)

    user = user_store.register_user(
        data.get("username"),
        data.get("email"),
        data.get("password"),
        role=role,
    )
    return jsonify(user), 201


@api_bp.route("/auth/login", methods=["POST"])
def login():
    data = json_body()

    identifier = data.get("username") or data.get("email") or data.get("usernameOrEmail")
    user = user_store.login_user(identifier, data.get("password"))

    access_token = create_access_token(
        identity=user["id"],
        additional_claims={
            "username": user["username"],
            "email": user["email"],
            "role": user["role"],
        },
    )

    response = jsonify({
        "user": user,
        "access_token": access_token
    })
    set_access_cookies(response, access_token)
    return response, 200


@api_bp.route("/auth/logout", methods=["POST"])
def logout():
    response = jsonify({"message": "Logged out"})
    unset_jwt_cookies(response)
    return response, 200


@api_bp.route("/auth/me", methods=["GET"])
@jwt_required()
def me():
    return jsonify(user_store.get_user(get_jwt_identity())), 200
