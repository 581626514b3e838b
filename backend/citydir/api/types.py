from flask import jsonify
from flask_jwt_extended import jwt_required
from citydir.application import types as type_store
from citydir.utils.optimistic_lock import unmodified_since
from .helpers import filters_from_args, is_authenticated, json_body, ordered_ids_from_body
from . import api_bp


@api_bp.route("/types", methods=["GET"])
def list_types():
    filters = filters_from_args("search", "category_id")
    return jsonify(type_store.list_types(filters, admin=is_authenticated())), 200


@api_bp.route("/types/<type_id>", methods=["GET"])
def get_type(type_id):
    return jsonify(type_store.get_type(type_id, admin=is_authenticated())), 200


@api_bp.route("/types/slug/<slug>", methods=["GET"])
def get_type_by_slug(slug):
    return jsonify(type_store.get_type_by_slug(slug, admin=is_authenticated())), 200


@api_bp.route("/types/<type_id>/usage", methods=["GET"])
def get_type_usage(type_id):
    type_store.get_type(type_id)
    return jsonify({
        "id": type_id,
        "usage_count": type_store.get_type_usage_count(type_id)
    }), 200


@api_bp.route("/types", methods=["POST"])
@jwt_required()
def create_type():
    return jsonify(type_store.create_type(json_body())), 201


@api_bp.route("/types/reorder", methods=["PUT", "POST"])
@jwt_required()
def reorder_types():
    type_store.reorder_types(ordered_ids_from_body(), since=unmodified_since())
    return jsonify({"message": "Types reordered"}), 200


@api_bp.route("/types/<type_id>", methods=["PUT", "PATCH"])
@jwt_required()
def update_type(type_id):
    return jsonify(type_store.update_type(type_id, json_body(), since=unmodified_since())), 200


@api_bp.route("/types/<type_id>", methods=["DELETE"])
@jwt_required()
def delete_type(type_id):
    type_store.delete_type(type_id)
    return jsonify({"message": "Type deleted"}), 200
