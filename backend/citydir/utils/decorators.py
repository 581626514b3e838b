from functools import wraps
from flask_jwt_extended import get_jwt, verify_jwt_in_request
from citydir.errors import error_response


def roles_required(*allowed_roles):
    def decorator(fn):
        @wraps(fn)
        def wrapper(*args, **kwargs):
            verify_jwt_in_request()
            claims = get_jwt()

            if claims.get("role") not in allowed_roles:
                return error_response("Forbidden", "Insufficient permissions", 403)

            return fn(*args, **kwargs)
        return wrapper
    return decorator
