from typing import Any, Dict, List, Optional

from flask import current_app

from citydir.extensions import db
from citydir.models import (
    Attraction,
    AttractionCategory,
    AttractionType,
    Category,
    Section,
    SectionAttraction,
    Type,
)
from citydir.domain.relations import extract_relations
from citydir.normalizers.attraction import normalize_attraction
from citydir.utils.optimistic_lock import enforce_unmodified_since
from citydir.utils.transaction import transactional
from citydir.application.common import (
    RelationSpec,
    apply_fields,
    apply_search,
    as_bool,
    as_media,
    as_text,
    delete_links,
    get_by_slug_or_404,
    get_or_404,
    require_name,
    resolve_slug,
    sync_relations,
    touch,
)

FIELDS = {
    "name": as_text,
    "slug": as_text,
    "description": as_text,
    "address": as_text,
    "location": as_text,
    "featured_location": as_bool,
    "media": as_media,
}

RELATIONS = {
    "category_ids": RelationSpec(AttractionCategory, "attraction_id", Category, "category_id"),
    "type_ids": RelationSpec(AttractionType, "attraction_id", Type, "type_id"),
    "section_ids": RelationSpec(SectionAttraction, "attraction_id", Section, "section_id"),
}

MEMBERSHIP_FILTERS = {
    "category_id": (AttractionCategory, "category_id"),
    "type_id": (AttractionType, "type_id"),
    "section_id": (SectionAttraction, "section_id"),
}


def list_attractions(filters: Optional[Dict[str, Any]] = None) -> List[Dict[str, Any]]:
    filters = filters or {}
    query = apply_search(Attraction.query, Attraction, filters.get("search"))

    if filters.get("featured") is not None:
        query = query.filter(Attraction.featured_location == filters["featured"])

    for key, (link_model, column) in MEMBERSHIP_FILTERS.items():
        if filters.get(key):
            query = query.join(link_model, link_model.attraction_id == Attraction.id).filter(
                getattr(link_model, column) == filters[key]
            )

    return [normalize_attraction(a) for a in query.order_by(Attraction.name.asc()).all()]


def get_attraction(attraction_id) -> Dict[str, Any]:
    return normalize_attraction(get_or_404(Attraction, attraction_id, "Attraction"))


def get_attraction_by_slug(slug) -> Dict[str, Any]:
    return normalize_attraction(get_by_slug_or_404(Attraction, slug, "Attraction"))


def create_attraction(data: Dict[str, Any]) -> Dict[str, Any]:
    name = require_name(data)
    relations = extract_relations(data, RELATIONS)

    attraction = Attraction()
    attraction.name = name
    attraction.slug = resolve_slug(data.get("slug"), name)
    attraction.description = as_text(data.get("description"))
    attraction.address = as_text(data.get("address"))
    attraction.location = as_text(data.get("location"))
    attraction.featured_location = as_bool(data.get("featured_location"))
    attraction.media = as_media(data.get("media"))

    with transactional():
        db.session.add(attraction)
        db.session.flush()
        sync_relations(RELATIONS, attraction.id, relations)

    current_app.logger.info("attraction.create id=%s slug=%s", attraction.id, attraction.slug)
    return get_attraction(attraction.id)


def update_attraction(attraction_id, data: Dict[str, Any], since=None) -> Dict[str, Any]:
    attraction = get_or_404(Attraction, attraction_id, "Attraction")
    enforce_unmodified_since(since, attraction.updated_at)
    relations = extract_relations(data, RELATIONS)

    if "name" in data:
        data = {**data, "name": require_name(data)}
    if "slug" in data:
        data = {**data, "slug": resolve_slug(data["slug"], data.get("name") or attraction.name)}

    with transactional():
        changed = apply_fields(attraction, data, FIELDS)
        replaced = sync_relations(RELATIONS, attraction.id, relations)
        if replaced:
            touch(attraction)
        changed += replaced

    if changed:
        current_app.logger.info("attraction.update id=%s fields=%s", attraction.id, changed)
    return get_attraction(attraction.id)


def delete_attraction(attraction_id) -> None:
    attraction_id = str(attraction_id)

    with transactional():
        for spec in RELATIONS.values():
            delete_links(spec, attraction_id)
        deleted = Attraction.query.filter_by(id=attraction_id).delete(synchronize_session="fetch")

    current_app.logger.info("attraction.delete id=%s rows=%s", attraction_id, deleted)
