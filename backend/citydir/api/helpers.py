from datetime import datetime

from dateutil import tz
from flask import current_app, request
from flask_jwt_extended import verify_jwt_in_request
from flask_jwt_extended.exceptions import JWTExtendedException
from jwt.exceptions import PyJWTError

from citydir.errors import ValidationError

TRUE_VALUES = {"true", "1", "yes"}
FALSE_VALUES = {"false", "0", "no"}


def json_body(expect=dict):
    data = request.get_json(silent=True)
    if data is None:
        data = expect()
    if not isinstance(data, expect):
        raise ValidationError("Invalid request body")
    return data


def bool_arg(name):
    """Parse an optional boolean query argument; absent means "don't filter"."""
    raw = request.args.get(name)
    if raw is None or raw == "":
        return None
    raw = raw.lower()
    if raw in TRUE_VALUES:
        return True
    if raw in FALSE_VALUES:
        return False
    raise ValidationError(f"Query argument '{name}' must be true or false")


def filters_from_args(*text_args, bool_args=()):
    filters = {}
    for name in text_args:
        value = request.args.get(name)
        if value:
            filters[name] = value
    for name in bool_args:
        value = bool_arg(name)
        if value is not None:
            filters[name] = value
    return filters


def ordered_ids_from_body():
    """
    Reorder payloads arrive as {"orderedIds": [...]}, {"ordered_ids": [...]}
    or a bare JSON list.
    """
    data = request.get_json(silent=True)
    if isinstance(data, dict):
        data = data.get("orderedIds", data.get("ordered_ids"))

    if not isinstance(data, list) or not all(isinstance(i, (str, int)) for i in data):
        raise ValidationError("Expected a list of ids to reorder")
    return data


def is_authenticated():
    """True when the request carries a valid session token."""
    try:
        return verify_jwt_in_request(optional=True) is not None
    except (JWTExtendedException, PyJWTError):
        return False


def local_now():
    zone = tz.gettz(current_app.config.get("TIMEZONE")) or tz.tzlocal()
    return datetime.now(zone)
