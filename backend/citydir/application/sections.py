from typing import Any, Dict, List, Optional

from flask import current_app

from citydir.extensions import db
from citydir.errors import InUseError
from citydir.models import Section, SectionBusiness, SectionAttraction, SectionEvent
from citydir.normalizers.section import normalize_section
from citydir.utils.optimistic_lock import enforce_unmodified_since
from citydir.utils.order import next_display_order, reorder
from citydir.utils.transaction import transactional
from citydir.application.common import (
    apply_fields,
    apply_search,
    as_bool,
    as_bool_default_true,
    as_int,
    as_mapping,
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
    "domain": as_optional_text,
    "image": as_optional_text,
    "display_order": as_int,
    "is_active": as_bool_default_true,
    "featured": as_bool,
    "meta": as_mapping,
}

USAGE_LINKS = (SectionBusiness, SectionAttraction, SectionEvent)


def list_sections(filters: Optional[Dict[str, Any]] = None) -> List[Dict[str, Any]]:
    filters = filters or {}
    query = apply_search(Section.query, Section, filters.get("search"))

    if filters.get("is_active") is not None:
        query = query.filter(Section.is_active == filters["is_active"])
    if filters.get("featured") is not None:
        query = query.filter(Section.featured == filters["featured"])
    if filters.get("domain"):
        query = query.filter(Section.domain == filters["domain"])

    sections = query.order_by(Section.display_order.asc(), Section.name.asc()).all()
    return [normalize_section(s) for s in sections]


def get_section(section_id) -> Dict[str, Any]:
    section = get_or_404(Section, section_id, "Section")
    return normalize_section(
        section,
        include_members=True,
        usage_count=get_section_usage_count(section.id),
    )


def get_section_by_slug(slug) -> Dict[str, Any]:
    section = get_by_slug_or_404(Section, slug, "Section")
    return normalize_section(
        section,
        include_members=True,
        usage_count=get_section_usage_count(section.id),
    )


def create_section(data: Dict[str, Any]) -> Dict[str, Any]:
    name = require_name(data)

    section = Section()
    section.name = name
    section.slug = resolve_slug(data.get("slug"), name)
    section.description = as_text(data.get("description"))
    section.domain = as_optional_text(data.get("domain"))
    section.image = as_optional_text(data.get("image"))
    section.is_active = as_bool(data.get("is_active"), default=True)
    section.featured = as_bool(data.get("featured"))
    section.meta = as_mapping(data.get("meta"))

    with transactional():
        if data.get("display_order") is not None:
            section.display_order = as_int(data["display_order"])
        else:
            section.display_order = next_display_order(Section)
        db.session.add(section)
        db.session.flush()

    current_app.logger.info("section.create id=%s slug=%s", section.id, section.slug)
    return get_section(section.id)


def update_section(section_id, data: Dict[str, Any], since=None) -> Dict[str, Any]:
    section = get_or_404(Section, section_id, "Section")
    enforce_unmodified_since(since, section.updated_at)

    if "name" in data:
        data = {**data, "name": require_name(data)}
    if "slug" in data:
        data = {**data, "slug": resolve_slug(data["slug"], data.get("name") or section.name)}

    with transactional():
        changed = apply_fields(section, data, FIELDS)

    if changed:
        current_app.logger.info("section.update id=%s fields=%s", section.id, changed)
    return get_section(section.id)


def get_section_usage_count(section_id) -> int:
    return sum(count_links(link, "section_id", str(section_id)) for link in USAGE_LINKS)


def delete_section(section_id) -> None:
    """
    Delete a section with no members. Missing ids are a no-op.
    """
    section_id = str(section_id)
    usage = get_section_usage_count(section_id)
    if usage:
        raise InUseError(f"Section groups {usage} item(s) and cannot be deleted")

    with transactional():
        deleted = Section.query.filter_by(id=section_id).delete(synchronize_session="fetch")

    current_app.logger.info("section.delete id=%s rows=%s", section_id, deleted)


def reorder_sections(ordered_ids, since=None) -> None:
    reorder(Section, ordered_ids, since=since)
    current_app.logger.info("section.reorder count=%s", len(ordered_ids))
