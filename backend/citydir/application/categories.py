from typing import Any, Dict, List, Optional

from flask import current_app

from citydir.extensions import db
from citydir.errors import InUseError
from citydir.models import (
    Category,
    Type,
    BusinessCategory,
    AttractionCategory,
    EventCategory,
    SubEventCategory,
)
from citydir.normalizers.category import normalize_category
from citydir.utils.optimistic_lock import enforce_unmodified_since
from citydir.utils.order import next_display_order, reorder
from citydir.utils.transaction import transactional
from citydir.application.common import (
    apply_fields,
    apply_search,
    as_bool,
    as_int,
    as_optional_text,
    as_text,
    count_links,
    get_by_slug_or_404,
    get_or_404,
    require_name,
    resolve_slug,
)

FIELDS = {
    "name": as_text,
    "slug": as_text,
    "description": as_text,
    "image": as_optional_text,
    "display_order": as_int,
    "featured": as_bool,
}

# Junction tables that can reference a category
USAGE_LINKS = (BusinessCategory, AttractionCategory, EventCategory, SubEventCategory)


def list_categories(filters: Optional[Dict[str, Any]] = None, admin=False) -> List[Dict[str, Any]]:
    filters = filters or {}
    query = apply_search(Category.query, Category, filters.get("search"))

    if filters.get("featured") is not None:
        query = query.filter(Category.featured == filters["featured"])

    categories = query.order_by(Category.display_order.asc(), Category.name.asc()).all()
    return [normalize_category(c, admin=admin) for c in categories]


def get_category(category_id, admin=False) -> Dict[str, Any]:
    return normalize_category(get_or_404(Category, category_id, "Category"), admin=admin)


def get_category_by_slug(slug, admin=False) -> Dict[str, Any]:
    return normalize_category(get_by_slug_or_404(Category, slug, "Category"), admin=admin)


def create_category(data: Dict[str, Any]) -> Dict[str, Any]:
    name = require_name(data)

    category = Category()
    category.name = name
    category.slug = resolve_slug(data.get("slug"), name)
    category.description = as_text(data.get("description"))
    category.image = as_optional_text(data.get("image"))
    category.featured = as_bool(data.get("featured"))

    with transactional():
        if data.get("display_order") is not None:
            category.display_order = as_int(data["display_order"])
        else:
            category.display_order = next_display_order(Category)
        db.session.add(category)
        db.session.flush()

    current_app.logger.info("category.create id=%s slug=%s", category.id, category.slug)
    return normalize_category(category, admin=True)


def update_category(category_id, data: Dict[str, Any], since=None) -> Dict[str, Any]:
    category = get_or_404(Category, category_id, "Category")
    enforce_unmodified_since(since, category.updated_at)

    if "name" in data:
        data = {**data, "name": require_name(data)}
    if "slug" in data:
        data = {**data, "slug": resolve_slug(data["slug"], data.get("name") or category.name)}

    with transactional():
        changed = apply_fields(category, data, FIELDS)

    if changed:
        current_app.logger.info("category.update id=%s fields=%s", category.id, changed)
    return normalize_category(category, admin=True)


def get_category_usage_count(category_id) -> int:
    """How many businesses, attractions, events and sub-events use the category."""
    return sum(count_links(link, "category_id", str(category_id)) for link in USAGE_LINKS)


def delete_category(category_id) -> None:
    """
    Delete a category nobody references. Missing ids are a no-op.
    """
    category_id = str(category_id)
    usage = get_category_usage_count(category_id)
    if usage:
        raise InUseError(f"Category is used by {usage} item(s) and cannot be deleted")

    with transactional():
        # Types keep existing without a parent
        Type.query.filter_by(category_id=category_id).update(
            {"category_id": None}, synchronize_session="fetch"
        )
        deleted = Category.query.filter_by(id=category_id).delete(synchronize_session="fetch")

    current_app.logger.info("category.delete id=%s rows=%s", category_id, deleted)


def reorder_categories(ordered_ids, since=None) -> None:
    reorder(Category, ordered_ids, since=since)
    current_app.logger.info("category.reorder count=%s", len(ordered_ids))
