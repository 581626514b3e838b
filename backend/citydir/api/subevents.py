from flask import jsonify
from flask_jwt_extended import jwt_required
from citydir.application import subevents as sub_event_store
from citydir.utils.optimistic_lock import unmodified_since
from .helpers import filters_from_args, json_body
from . import api_bp


@api_bp.route("/subevents", methods=["GET"])
def list_sub_events():
    filters = filters_from_args("search", "status", "event_id")
    return jsonify(sub_event_store.list_sub_events(filters)), 200


@api_bp.route("/subevents/<sub_event_id>", methods=["GET"])
def get_sub_event(sub_event_id):
    return jsonify(sub_event_store.get_sub_event(sub_event_id)), 200


@api_bp.route("/subevents", methods=["POST"])
@jwt_required()
def create_sub_event():
    return jsonify(sub_event_store.create_sub_event(json_body())), 201


@api_bp.route("/subevents/<sub_event_id>", methods=["PUT", "PATCH"])
@jwt_required()
def update_sub_event(sub_event_id):
    sub_event = sub_event_store.update_sub_event(
        sub_event_id, json_body(), since=unmodified_since()
    )
    return jsonify(sub_event), 200


@api_bp.route("/subevents/<sub_event_id>", methods=["DELETE"])
@jwt_required()
def delete_sub_event(sub_event_id):
    sub_event_store.delete_sub_event(sub_event_id)
    return jsonify({"message": "Sub-event deleted"}), 200
