from typing import Any, Dict, List, Optional

from flask import current_app
from sqlalchemy import func

from citydir.extensions import db
from citydir.errors import InUseError, ValidationError
from citydir.models import Brand, Business
from citydir.normalizers.brand import normalize_brand
from citydir.utils.optimistic_lock import enforce_unmodified_since
from citydir.utils.transaction import transactional
from citydir.application.common import (
    apply_fields,
    apply_search,
    as_media,
    as_optional_text,
    as_text,
    get_or_404,
    require_exists,
    require_name,
    resolve_slug,
)

FIELDS = {
    "name": as_text,
    "slug": as_text,
    "description": as_text,
    "media": as_media,
    "business_id": as_optional_text,
    "parent_brand_id": as_optional_text,
    "brand_pdv": as_optional_text,
}


def _business_counts(brand_ids=None) -> Dict[str, int]:
    query = db.session.query(Business.brand_id, func.count(Business.id)).filter(
        Business.brand_id.isnot(None)
    )
    if brand_ids is not None:
        query = query.filter(Business.brand_id.in_(list(brand_ids)))
    return dict(query.group_by(Business.brand_id).all())


def _assert_no_cycle(brand_id: str, parent_id: Optional[str]) -> None:
    """A brand cannot become its own ancestor."""
    seen = set()
    current = parent_id
    while current is not None:
        if current == brand_id:
            raise ValidationError("A brand cannot be its own ancestor")
        if current in seen:
            break
        seen.add(current)
        parent = db.session.get(Brand, current)
        current = parent.parent_brand_id if parent else None


def list_brands(filters: Optional[Dict[str, Any]] = None) -> List[Dict[str, Any]]:
    filters = filters or {}
    query = apply_search(Brand.query, Brand, filters.get("search"))

    if filters.get("parent_brand_id"):
        query = query.filter(Brand.parent_brand_id == filters["parent_brand_id"])

    brands = query.order_by(Brand.name.asc()).all()
    counts = _business_counts()
    return [normalize_brand(b, business_count=counts.get(b.id, 0)) for b in brands]


def get_brand(brand_id) -> Dict[str, Any]:
    brand = get_or_404(Brand, brand_id, "Brand")
    return normalize_brand(brand, business_count=_business_counts([brand.id]).get(brand.id, 0))


def list_child_brands(parent_id) -> List[Dict[str, Any]]:
    get_or_404(Brand, parent_id, "Brand")
    return list_brands({"parent_brand_id": str(parent_id)})


def create_brand(data: Dict[str, Any]) -> Dict[str, Any]:
    name = require_name(data)

    brand = Brand()
    brand.name = name
    brand.slug = resolve_slug(data.get("slug"), name)
    brand.description = as_text(data.get("description"))
    brand.media = as_media(data.get("media"))
    brand.business_id = as_optional_text(data.get("business_id"))
    brand.brand_pdv = as_optional_text(data.get("brand_pdv"))
    brand.parent_brand_id = require_exists(
        Brand, as_optional_text(data.get("parent_brand_id")), "parent brand"
    )

    with transactional():
        db.session.add(brand)
        db.session.flush()

    current_app.logger.info("brand.create id=%s slug=%s", brand.id, brand.slug)
    return get_brand(brand.id)


def update_brand(brand_id, data: Dict[str, Any], since=None) -> Dict[str, Any]:
    brand = get_or_404(Brand, brand_id, "Brand")
    enforce_unmodified_since(since, brand.updated_at)

    if "name" in data:
        data = {**data, "name": require_name(data)}
    if "slug" in data:
        data = {**data, "slug": resolve_slug(data["slug"], data.get("name") or brand.name)}
    if data.get("parent_brand_id"):
        require_exists(Brand, data["parent_brand_id"], "parent brand")
        _assert_no_cycle(brand.id, str(data["parent_brand_id"]))

    with transactional():
        changed = apply_fields(brand, data, FIELDS)

    if changed:
        current_app.logger.info("brand.update id=%s fields=%s", brand.id, changed)
    return get_brand(brand.id)


def delete_brand(brand_id) -> None:
    """
    Delete a brand no business points at. Child brands are detached.
    """
    brand_id = str(brand_id)
    count = _business_counts([brand_id]).get(brand_id, 0)
    if count:
        raise InUseError(f"Brand is used by {count} business(es) and cannot be deleted")

    with transactional():
        Brand.query.filter_by(parent_brand_id=brand_id).update(
            {"parent_brand_id": None}, synchronize_session="fetch"
        )
        deleted = Brand.query.filter_by(id=brand_id).delete(synchronize_session="fetch")

    current_app.logger.info("brand.delete id=%s rows=%s", brand_id, deleted)
