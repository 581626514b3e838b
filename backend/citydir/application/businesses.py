"""
Businesses and their category/type/section memberships.

Every membership row carries relationship-scoped ``is_highlight`` and
``is_premium`` flags.
"""
from typing import Any, Dict, List, Optional

from flask import current_app

from citydir.extensions import db
from citydir.models import (
    Brand,
    Business,
    BusinessCategory,
    BusinessType,
    Category,
    Section,
    SectionBusiness,
    Type,
)
from citydir.domain.relations import extract_relations
from citydir.normalizers.business import normalize_business
from citydir.utils.optimistic_lock import enforce_unmodified_since
from citydir.utils.order import next_display_order, reorder
from citydir.utils.transaction import transactional
from citydir.application.common import (
    RelationSpec,
    apply_fields,
    apply_search,
    as_bool,
    as_int,
    as_mapping,
    as_media,
    as_optional_float,
    as_optional_text,
    as_text,
    delete_links,
    get_by_slug_or_404,
    get_or_404,
    require_exists,
    require_name,
    resolve_slug,
    sync_relations,
    touch,
)

FIELDS = {
    "name": as_text,
    "slug": as_text,
    "brand_id": as_optional_text,
    "description": as_text,
    "address": as_text,
    "location": as_text,
    "rating": as_optional_float,
    "working_hours": as_optional_text,
    "telephone": as_optional_text,
    "website": as_optional_text,
    "email": as_optional_text,
    "price_range": as_optional_text,
    "social_media": as_mapping,
    "featured_business": as_bool,
    "display_order": as_int,
    "media": as_media,
}

RELATIONS = {
    "category_ids": RelationSpec(BusinessCategory, "business_id", Category, "category_id", flagged=True),
    "type_ids": RelationSpec(BusinessType, "business_id", Type, "type_id", flagged=True),
    "section_ids": RelationSpec(SectionBusiness, "business_id", Section, "section_id", flagged=True),
}

# filter key -> (junction model, junction column)
MEMBERSHIP_FILTERS = {
    "category_id": (BusinessCategory, "category_id"),
    "type_id": (BusinessType, "type_id"),
    "section_id": (SectionBusiness, "section_id"),
}


def list_businesses(filters: Optional[Dict[str, Any]] = None, now=None) -> List[Dict[str, Any]]:
    """
    List businesses ordered by display_order, then name.

    Supported filters: search, brand_id, featured, category_id, type_id,
    section_id. ``highlight`` and ``premium`` narrow every membership
    filter in use to rows carrying that flag.
    """
    filters = filters or {}
    query = apply_search(Business.query, Business, filters.get("search"))

    if filters.get("brand_id"):
        query = query.filter(Business.brand_id == filters["brand_id"])
    if filters.get("featured") is not None:
        query = query.filter(Business.featured_business == filters["featured"])

    for key, (link_model, column) in MEMBERSHIP_FILTERS.items():
        if not filters.get(key):
            continue
        query = query.join(link_model, link_model.business_id == Business.id).filter(
            getattr(link_model, column) == filters[key]
        )
        if filters.get("highlight") is not None:
            query = query.filter(link_model.is_highlight == filters["highlight"])
        if filters.get("premium") is not None:
            query = query.filter(link_model.is_premium == filters["premium"])

    businesses = query.order_by(Business.display_order.asc(), Business.name.asc()).all()
    return [normalize_business(b, now=now) for b in businesses]


def get_business(business_id, now=None) -> Dict[str, Any]:
    return normalize_business(get_or_404(Business, business_id, "Business"), now=now)


def get_business_by_slug(slug, now=None) -> Dict[str, Any]:
    return normalize_business(get_by_slug_or_404(Business, slug, "Business"), now=now)


def create_business(data: Dict[str, Any]) -> Dict[str, Any]:
    """
    Insert a business and its memberships in one transaction.
    """
    name = require_name(data)
    relations = extract_relations(data, RELATIONS)

    business = Business()
    business.name = name
    business.slug = resolve_slug(data.get("slug"), name)
    business.brand_id = require_exists(Brand, as_optional_text(data.get("brand_id")), "brand")
    business.description = as_text(data.get("description"))
    business.address = as_text(data.get("address"))
    business.location = as_text(data.get("location"))
    business.rating = as_optional_float(data.get("rating"))
    business.working_hours = as_optional_text(data.get("working_hours"))
    business.telephone = as_optional_text(data.get("telephone"))
    business.website = as_optional_text(data.get("website"))
    business.email = as_optional_text(data.get("email"))
    business.price_range = as_optional_text(data.get("price_range"))
    business.social_media = as_mapping(data.get("social_media"))
    business.featured_business = as_bool(data.get("featured_business"))
    business.media = as_media(data.get("media"))

    with transactional():
        if data.get("display_order") is not None:
            business.display_order = as_int(data["display_order"])
        else:
            business.display_order = next_display_order(Business)
        db.session.add(business)
        db.session.flush()  # ensures business.id exists

        sync_relations(RELATIONS, business.id, relations)

    current_app.logger.info("business.create id=%s slug=%s", business.id, business.slug)
    return get_business(business.id)


def update_business(business_id, data: Dict[str, Any], since=None) -> Dict[str, Any]:
    """
    Sparse update. Relationship arrays, when present, replace the
    existing memberships wholesale.
    """
    business = get_or_404(Business, business_id, "Business")
    enforce_unmodified_since(since, business.updated_at)
    relations = extract_relations(data, RELATIONS)

    if "name" in data:
        data = {**data, "name": require_name(data)}
    if "slug" in data:
        data = {**data, "slug": resolve_slug(data["slug"], data.get("name") or business.name)}
    if data.get("brand_id"):
        require_exists(Brand, data["brand_id"], "brand")

    with transactional():
        changed = apply_fields(business, data, FIELDS)
        replaced = sync_relations(RELATIONS, business.id, relations)
        if replaced:
            touch(business)
        changed += replaced

    if changed:
        current_app.logger.info("business.update id=%s fields=%s", business.id, changed)
    return get_business(business.id)


def delete_business(business_id) -> None:
    """
    Delete memberships first, then the business. Missing ids are a no-op.
    """
    business_id = str(business_id)

    with transactional():
        for spec in RELATIONS.values():
            delete_links(spec, business_id)
        Brand.query.filter_by(business_id=business_id).update(
            {"business_id": None}, synchronize_session="fetch"
        )
        deleted = Business.query.filter_by(id=business_id).delete(synchronize_session="fetch")

    current_app.logger.info("business.delete id=%s rows=%s", business_id, deleted)


def reorder_businesses(ordered_ids, since=None) -> None:
    reorder(Business, ordered_ids, since=since)
    current_app.logger.info("business.reorder count=%s", len(ordered_ids))
