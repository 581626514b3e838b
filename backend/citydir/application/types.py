from typing import Any, Dict, List, Optional

from flask import current_app

from citydir.extensions import db
from citydir.errors import InUseError
from citydir.models import (
    Category,
    Type,
    BusinessType,
    AttractionType,
    EventType,
    SubEventType,
)
from citydir.normalizers.type import normalize_type
from citydir.utils.optimistic_lock import enforce_unmodified_since
from citydir.utils.order import next_display_order, reorder
from citydir.utils.transaction import transactional
from citydir.application.common import (
    apply_fields,
    apply_search,
    as_int,
    as_optional_text,
    as_text,
    count_links,
    get_by_slug_or_404,
    get_or_404,
    require_exists,
    require_name,
    resolve_slug,
)

FIELDS = {
    "name": as_text,
    "slug": as_text,
    "description": as_text,
    "image": as_optional_text,
    "category_id": as_optional_text,
    "display_order": as_int,
}

USAGE_LINKS = (BusinessType, AttractionType, EventType, SubEventType)


def list_types(filters: Optional[Dict[str, Any]] = None, admin=False) -> List[Dict[str, Any]]:
    filters = filters or {}
    query = apply_search(Type.query, Type, filters.get("search"))

    if filters.get("category_id"):
        query = query.filter(Type.category_id == filters["category_id"])

    types = query.order_by(Type.display_order.asc(), Type.name.asc()).all()
    return [normalize_type(t, admin=admin) for t in types]


def get_type(type_id, admin=False) -> Dict[str, Any]:
    return normalize_type(get_or_404(Type, type_id, "Type"), admin=admin)


def get_type_by_slug(slug, admin=False) -> Dict[str, Any]:
    return normalize_type(get_by_slug_or_404(Type, slug, "Type"), admin=admin)


def create_type(data: Dict[str, Any]) -> Dict[str, Any]:
    name = require_name(data)

    type_ = Type()
    type_.name = name
    type_.slug = resolve_slug(data.get("slug"), name)
    type_.description = as_text(data.get("description"))
    type_.image = as_optional_text(data.get("image"))
    type_.category_id = require_exists(Category, as_optional_text(data.get("category_id")), "category")

    with transactional():
        if data.get("display_order") is not None:
            type_.display_order = as_int(data["display_order"])
        else:
            type_.display_order = next_display_order(Type)
        db.session.add(type_)
        db.session.flush()

    current_app.logger.info("type.create id=%s slug=%s", type_.id, type_.slug)
    return normalize_type(type_, admin=True)


def update_type(type_id, data: Dict[str, Any], since=None) -> Dict[str, Any]:
    type_ = get_or_404(Type, type_id, "Type")
    enforce_unmodified_since(since, type_.updated_at)

    if "name" in data:
        data = {**data, "name": require_name(data)}
    if "slug" in data:
        data = {**data, "slug": resolve_slug(data["slug"], data.get("name") or type_.name)}
    if data.get("category_id"):
        require_exists(Category, data["category_id"], "category")

    with transactional():
        changed = apply_fields(type_, data, FIELDS)

    if changed:
        current_app.logger.info("type.update id=%s fields=%s", type_.id, changed)
    return normalize_type(type_, admin=True)


def get_type_usage_count(type_id) -> int:
    return sum(count_links(link, "type_id", str(type_id)) for link in USAGE_LINKS)


def delete_type(type_id) -> None:
    """
    Delete a type nobody references. Missing ids are a no-op.
    """
    type_id = str(type_id)
    usage = get_type_usage_count(type_id)
    if usage:
        raise InUseError(f"Type is used by {usage} item(s) and cannot be deleted")

    with transactional():
        deleted = Type.query.filter_by(id=type_id).delete(synchronize_session="fetch")

    current_app.logger.info("type.delete id=%s rows=%s", type_id, deleted)


def reorder_types(ordered_ids, since=None) -> None:
    reorder(Type, ordered_ids, since=since)
    current_app.logger.info("type.reorder count=%s", len(ordered_ids))
