from typing import Any, Dict, List, Optional

from flask import current_app

from citydir.extensions import db
from citydir.models import (
    Category,
    Event,
    EventCategory,
    EventType,
    Section,
    SectionEvent,
    SubEvent,
    Type,
)
from citydir.domain.invariants.dates import parse_timestamp, resolve_date_range
from citydir.domain.lifecycle.event import assert_event_status
from citydir.domain.relations import extract_relations
from citydir.normalizers.event import normalize_event
from citydir.utils.optimistic_lock import enforce_unmodified_since
from citydir.utils.transaction import transactional
from citydir.application.subevents import RELATIONS as SUB_EVENT_RELATIONS
from citydir.application.common import (
    RelationSpec,
    apply_date_range,
    apply_fields,
    apply_search,
    as_bool,
    as_bool_default_true,
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
    "status": as_text,
    "media": as_media,
    "show_date_range": as_bool_default_true,
}

RELATIONS = {
    "category_ids": RelationSpec(EventCategory, "event_id", Category, "category_id"),
    "type_ids": RelationSpec(EventType, "event_id", Type, "type_id"),
    "section_ids": RelationSpec(SectionEvent, "event_id", Section, "section_id"),
}

MEMBERSHIP_FILTERS = {
    "category_id": (EventCategory, "category_id"),
    "type_id": (EventType, "type_id"),
    "section_id": (SectionEvent, "section_id"),
}


def list_events(filters: Optional[Dict[str, Any]] = None) -> List[Dict[str, Any]]:
    """Newest first; events without dates come last."""
    filters = filters or {}
    query = apply_search(Event.query, Event, filters.get("search"))

    if filters.get("status"):
        query = query.filter(Event.status == filters["status"])

    for key, (link_model, column) in MEMBERSHIP_FILTERS.items():
        if filters.get(key):
            query = query.join(link_model, link_model.event_id == Event.id).filter(
                getattr(link_model, column) == filters[key]
            )

    events = query.order_by(Event.start_date.desc().nullslast(), Event.name.asc()).all()
    return [normalize_event(e) for e in events]


def get_event(event_id) -> Dict[str, Any]:
    return normalize_event(get_or_404(Event, event_id, "Event"))


def get_event_by_slug(slug) -> Dict[str, Any]:
    return normalize_event(get_by_slug_or_404(Event, slug, "Event"))


def create_event(data: Dict[str, Any]) -> Dict[str, Any]:
    name = require_name(data)
    relations = extract_relations(data, RELATIONS)

    status = as_text(data.get("status") or "draft")
    assert_event_status(status)

    event = Event()
    event.name = name
    event.slug = resolve_slug(data.get("slug"), name)
    event.description = as_text(data.get("description"))
    event.status = status
    event.media = as_media(data.get("media"))
    event.show_date_range = as_bool(data.get("show_date_range"), default=True)
    event.start_date, event.end_date = resolve_date_range(
        parse_timestamp(data.get("start_date"), "start_date"),
        parse_timestamp(data.get("end_date"), "end_date"),
    )

    with transactional():
        db.session.add(event)
        db.session.flush()
        sync_relations(RELATIONS, event.id, relations)

    current_app.logger.info("event.create id=%s slug=%s", event.id, event.slug)
    return get_event(event.id)


def update_event(event_id, data: Dict[str, Any], since=None) -> Dict[str, Any]:
    event = get_or_404(Event, event_id, "Event")
    enforce_unmodified_since(since, event.updated_at)
    relations = extract_relations(data, RELATIONS)

    if "name" in data:
        data = {**data, "name": require_name(data)}
    if "slug" in data:
        data = {**data, "slug": resolve_slug(data["slug"], data.get("name") or event.name)}
    if "status" in data:
        assert_event_status(data["status"])

    with transactional():
        changed = apply_fields(event, data, FIELDS)
        changed += apply_date_range(event, data)
        replaced = sync_relations(RELATIONS, event.id, relations)
        if replaced:
            touch(event)
        changed += replaced

    if changed:
        current_app.logger.info("event.update id=%s fields=%s", event.id, changed)
    return get_event(event.id)


def delete_event(event_id) -> None:
    """
    Delete an event together with its sub-events and every junction row
    of both. Missing ids are a no-op.
    """
    event_id = str(event_id)

    with transactional():
        sub_event_ids = [
            row_id for (row_id,) in db.session.query(SubEvent.id).filter_by(event_id=event_id)
        ]
        for sub_event_id in sub_event_ids:
            for spec in SUB_EVENT_RELATIONS.values():
                delete_links(spec, sub_event_id)
        SubEvent.query.filter_by(event_id=event_id).delete(synchronize_session="fetch")

        for spec in RELATIONS.values():
            delete_links(spec, event_id)
        deleted = Event.query.filter_by(id=event_id).delete(synchronize_session="fetch")

    current_app.logger.info(
        "event.delete id=%s rows=%s sub_events=%s", event_id, deleted, len(sub_event_ids)
    )
