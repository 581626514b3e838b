from flask import jsonify
from flask_jwt_extended import jwt_required
from citydir.application import attractions as attraction_store
from citydir.utils.optimistic_lock import unmodified_since
from .helpers import filters_from_args, json_body
from . import api_bp


@api_bp.route("/attractions", methods=["GET"])
def list_attractions():
    filters = filters_from_args(
        "search", "category_id", "type_id", "section_id", bool_args=("featured",)
    )
    return jsonify(attraction_store.list_attractions(filters)), 200


@api_bp.route("/attractions/<attraction_id>", methods=["GET"])
def get_attraction(attraction_id):
    return jsonify(attraction_store.get_attraction(attraction_id)), 200


@api_bp.route("/attractions/slug/<slug>", methods=["GET"])
def get_attraction_by_slug(slug):
    return jsonify(attraction_store.get_attraction_by_slug(slug)), 200


@api_bp.route("/attractions", methods=["POST"])
@jwt_required()
def create_attraction():
    return jsonify(attraction_store.create_attraction(json_body())), 201


@api_bp.route("/attractions/<attraction_id>", methods=["PUT", "PATCH"])
@jwt_required()
def update_attraction(attraction_id):
    attraction = attraction_store.update_attraction(
        attraction_id, json_body(), since=unmodified_since()
    )
    return jsonify(attraction), 200


@api_bp.route("/attractions/<attraction_id>", methods=["DELETE"])
@jwt_required()
def delete_attraction(attraction_id):
    attraction_store.delete_attraction(attraction_id)
    return jsonify({"message": "Attraction deleted"}), 200
