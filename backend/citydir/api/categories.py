from flask import jsonify
from flask_jwt_extended import jwt_required
from citydir.application import categories as category_store
from citydir.utils.optimistic_lock import unmodified_since
from .helpers import filters_from_args, is_authenticated, json_body, ordered_ids_from_body
from . import api_bp


@api_bp.route("/categories", methods=["GET"])
def list_categories():
    filters = filters_from_args("search", bool_args=("featured",))
    return jsonify(category_store.list_categories(filters, admin=is_authenticated())), 200


@api_bp.route("/categories/<category_id>", methods=["GET"])
def get_category(category_id):
    return jsonify(category_store.get_category(category_id, admin=is_authenticated())), 200


@api_bp.route("/categories/slug/<slug>", methods=["GET"])
def get_category_by_slug(slug):
    return jsonify(category_store.get_category_by_slug(slug, admin=is_authenticated())), 200


@api_bp.route("/categories/<category_id>/usage", methods=["GET"])
def get_category_usage(category_id):
    category_store.get_category(category_id)
    return jsonify({
        "id": category_id,
        "usage_count": category_store.get_category_usage_count(category_id)
    }), 200


@api_bp.route("/categories", methods=["POST"])
@jwt_required()
def create_category():
    return jsonify(category_store.create_category(json_body())), 201


@api_bp.route("/categories/reorder", methods=["PUT", "POST"])
@jwt_required()
def reorder_categories():
    category_store.reorder_categories(ordered_ids_from_body(), since=unmodified_since())
    return jsonify({"message": "Categories reordered"}), 200


@api_bp.route("/categories/<category_id>", methods=["PUT", "PATCH"])
@jwt_required()
def update_category(category_id):
    category = category_store.update_category(category_id, json_body(), since=unmodified_since())
    return jsonify(category), 200


@api_bp.route("/categories/<category_id>", methods=["DELETE"])
@jwt_required()
def delete_category(category_id):
    category_store.delete_category(category_id)
    return jsonify({"message": "Category deleted"}), 200
