from flask import jsonify
from flask_jwt_extended import jwt_required
from citydir.application import brands as brand_store
from citydir.utils.optimistic_lock import unmodified_since
from .helpers import filters_from_args, json_body
from . import api_bp


@api_bp.route("/brands", methods=["GET"])
def list_brands():
    filters = filters_from_args("search", "parent_brand_id")
    return jsonify(brand_store.list_brands(filters)), 200


@api_bp.route("/brands/<brand_id>", methods=["GET"])
def get_brand(brand_id):
    return jsonify(brand_store.get_brand(brand_id)), 200


@api_bp.route("/brands/<brand_id>/children", methods=["GET"])
def list_child_brands(brand_id):
    return jsonify(brand_store.list_child_brands(brand_id)), 200


@api_bp.route("/brands", methods=["POST"])
@jwt_required()
def create_brand():
    return jsonify(brand_store.create_brand(json_body())), 201


@api_bp.route("/brands/<brand_id>", methods=["PUT", "PATCH"])
@jwt_required()
def update_brand(brand_id):
    return jsonify(brand_store.update_brand(brand_id, json_body(), since=unmodified_since())), 200


@api_bp.route("/brands/<brand_id>", methods=["DELETE"])
@jwt_required()
def delete_brand(brand_id):
    brand_store.delete_brand(brand_id)
    return jsonify({"message": "Brand deleted"}), 200
