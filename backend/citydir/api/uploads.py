from flask import jsonify, request
from flask_jwt_extended import jwt_required
from citydir.utils.media import delete_file, list_files, save_file
from . import api_bp


@api_bp.route("/upload", methods=["POST"])
@jwt_required()
def upload_file():
    # Only the stored file's URL goes back to the caller
    return jsonify(save_file(request.files.get("file"))), 201


@api_bp.route("/uploads", methods=["GET"])
@jwt_required()
def list_uploads():
    return jsonify(list_files()), 200


@api_bp.route("/uploads/<path:filename>", methods=["DELETE"])
@jwt_required()
def delete_upload(filename):
    delete_file(filename)
    return jsonify({"message": "File deleted"}), 200
