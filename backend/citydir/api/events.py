from flask import jsonify
from flask_jwt_extended import jwt_required
from citydir.application import events as event_store
from citydir.application import subevents as sub_event_store
from citydir.utils.optimistic_lock import unmodified_since
from .helpers import filters_from_args, json_body
from . import api_bp


@api_bp.route("/events", methods=["GET"])
def list_events():
    filters = filters_from_args("search", "status", "category_id", "type_id", "section_id")
    return jsonify(event_store.list_events(filters)), 200


@api_bp.route("/events/<event_id>", methods=["GET"])
def get_event(event_id):
    return jsonify(event_store.get_event(event_id)), 200


@api_bp.route("/events/slug/<slug>", methods=["GET"])
def get_event_by_slug(slug):
    return jsonify(event_store.get_event_by_slug(slug)), 200


@api_bp.route("/events/<event_id>/subevents", methods=["GET"])
def list_event_sub_events(event_id):
    return jsonify(sub_event_store.list_event_sub_events(event_id)), 200


@api_bp.route("/events", methods=["POST"])
@jwt_required()
def create_event():
    return jsonify(event_store.create_event(json_body())), 201


@api_bp.route("/events/<event_id>", methods=["PUT", "PATCH"])
@jwt_required()
def update_event(event_id):
    return jsonify(event_store.update_event(event_id, json_body(), since=unmodified_since())), 200


@api_bp.route("/events/<event_id>", methods=["DELETE"])
@jwt_required()
def delete_event(event_id):
    event_store.delete_event(event_id)
    return jsonify({"message": "Event deleted"}), 200
