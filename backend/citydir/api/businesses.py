from flask import jsonify
from flask_jwt_extended import jwt_required
from citydir.application import businesses as business_store
from citydir.utils.optimistic_lock import unmodified_since
from .helpers import filters_from_args, json_body, local_now, ordered_ids_from_body
from . import api_bp


@api_bp.route("/businesses", methods=["GET"])
def list_businesses():
    filters = filters_from_args(
        "search",
        "category_id",
        "type_id",
        "section_id",
        "brand_id",
        bool_args=("featured", "highlight", "premium"),
    )
    return jsonify(business_store.list_businesses(filters, now=local_now())), 200


@api_bp.route("/businesses/<business_id>", methods=["GET"])
def get_business(business_id):
    return jsonify(business_store.get_business(business_id, now=local_now())), 200


@api_bp.route("/businesses/slug/<slug>", methods=["GET"])
def get_business_by_slug(slug):
    return jsonify(business_store.get_business_by_slug(slug, now=local_now())), 200


@api_bp.route("/businesses", methods=["POST"])
@jwt_required()
def create_business():
    return jsonify(business_store.create_business(json_body())), 201


@api_bp.route("/businesses/reorder", methods=["PUT", "POST"])
@jwt_required()
def reorder_businesses():
    business_store.reorder_businesses(ordered_ids_from_body(), since=unmodified_since())
    return jsonify({"message": "Businesses reordered"}), 200


@api_bp.route("/businesses/<business_id>", methods=["PUT", "PATCH"])
@jwt_required()
def update_business(business_id):
    business = business_store.update_business(business_id, json_body(), since=unmodified_since())
    return jsonify(business), 200


@api_bp.route("/businesses/<business_id>", methods=["DELETE"])
@jwt_required()
def delete_business(business_id):
    business_store.delete_business(business_id)
    return jsonify({"message": "Business deleted"}), 200
