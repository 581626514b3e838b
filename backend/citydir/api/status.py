from datetime import datetime, timezone
from flask import jsonify
from . import api_bp


@api_bp.route('/status', methods=['GET'])
def status():
    return jsonify({
        "status": "ok",
        "service": "city-directory",
        "time": datetime.now(timezone.utc).isoformat()
    })
