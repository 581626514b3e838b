from flask import jsonify
from flask_jwt_extended import jwt_required
from citydir.application import hotspot as hotspot_store
from .helpers import json_body
from . import api_bp


@api_bp.route("/hotspot/blocks", methods=["GET"])
def get_hotspot_blocks():
    return jsonify({"blockSets": hotspot_store.get_block_sets()}), 200


@api_bp.route("/hotspot/blocks", methods=["PUT"])
@jwt_required()
def save_hotspot_blocks():
    block_sets = hotspot_store.save_block_sets(json_body().get("blockSets"))
    return jsonify({"blockSets": block_sets}), 200


@api_bp.route("/hotspot/footer", methods=["GET"])
def get_hotspot_footer():
    return jsonify(hotspot_store.get_footer()), 200


@api_bp.route("/hotspot/footer", methods=["PUT"])
@jwt_required()
def save_hotspot_footer():
    return jsonify(hotspot_store.save_footer(json_body())), 200


@api_bp.route("/hotspot/editors-picks", methods=["GET"])
def get_hotspot_editors_picks():
    return jsonify({"picks": hotspot_store.get_editors_picks()}), 200


@api_bp.route("/hotspot/editors-picks", methods=["PUT"])
@jwt_required()
def save_hotspot_editors_picks():
    picks = hotspot_store.save_editors_picks(json_body().get("picks", []))
    return jsonify({"picks": picks}), 200


@api_bp.route("/hotspot/discovery", methods=["GET"])
def get_hotspot_discovery():
    return jsonify({"places": hotspot_store.get_discovery()}), 200


@api_bp.route("/hotspot/discovery", methods=["PUT"])
@jwt_required()
def save_hotspot_discovery():
    places = hotspot_store.save_discovery(json_body().get("places", []))
    return jsonify({"places": places}), 200


@api_bp.route("/hotspot/quick-fun", methods=["GET"])
def get_hotspot_quick_fun():
    return jsonify(hotspot_store.get_quick_fun()), 200


@api_bp.route("/hotspot/quick-fun", methods=["PUT"])
@jwt_required()
def save_hotspot_quick_fun():
    return jsonify(hotspot_store.save_quick_fun(json_body())), 200


@api_bp.route("/hotspot/utilities", methods=["GET"])
def get_hotspot_utilities():
    return jsonify(hotspot_store.get_utilities()), 200


@api_bp.route("/hotspot/utilities", methods=["PUT"])
@jwt_required()
def save_hotspot_utilities():
    return jsonify(hotspot_store.save_utilities(json_body())), 200
