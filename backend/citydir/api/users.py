from flask import jsonify
from flask_jwt_extended import jwt_required
from citydir.application import users as user_store
from citydir.utils.decorators import roles_required
from . import api_bp


@api_bp.route("/users", methods=["GET"])
@jwt_required()
@roles_required("admin")
def list_users():
    return jsonify(user_store.list_users()), 200
