from flask import jsonify
from flask_jwt_extended import jwt_required
from citydir.application import sections as section_store
from citydir.utils.optimistic_lock import unmodified_since
from .helpers import filters_from_args, json_body, ordered_ids_from_body
from . import api_bp


@api_bp.route("/sections", methods=["GET"])
def list_sections():
    filters = filters_from_args("search", "domain", bool_args=("is_active", "featured"))
    return jsonify(section_store.list_sections(filters)), 200


@api_bp.route("/sections/<section_id>", methods=["GET"])
def get_section(section_id):
    return jsonify(section_store.get_section(section_id)), 200


@api_bp.route("/sections/slug/<slug>", methods=["GET"])
def get_section_by_slug(slug):
    return jsonify(section_store.get_section_by_slug(slug)), 200


@api_bp.route("/sections/<section_id>/usage", methods=["GET"])
def get_section_usage(section_id):
    section = section_store.get_section(section_id)
    return jsonify({"id": section["id"], "usage_count": section["usage_count"]}), 200


@api_bp.route("/sections", methods=["POST"])
@jwt_required()
def create_section():
    return jsonify(section_store.create_section(json_body())), 201


@api_bp.route("/sections/reorder", methods=["PUT", "POST"])
@jwt_required()
def reorder_sections():
    section_store.reorder_sections(ordered_ids_from_body(), since=unmodified_since())
    return jsonify({"message": "Sections reordered"}), 200


@api_bp.route("/sections/<section_id>", methods=["PUT", "PATCH"])
@jwt_required()
def update_section(section_id):
    section = section_store.update_section(section_id, json_body(), since=unmodified_since())
    return jsonify(section), 200


@api_bp.route("/sections/<section_id>", methods=["DELETE"])
@jwt_required()
def delete_section(section_id):
    section_store.delete_section(section_id)
    return jsonify({"message": "Section deleted"}), 200
