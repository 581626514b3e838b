from typing import Any, Dict, List, Optional

from flask import current_app

from citydir.extensions import db
from citydir.errors import ValidationError
from citydir.models import Category, Event, SubEvent, SubEventCategory, SubEventType, Type
from citydir.domain.invariants.dates import parse_timestamp, resolve_date_range
from citydir.domain.lifecycle.event import assert_event_status
from citydir.domain.relations import extract_relations
from citydir.normalizers.event import normalize_sub_event
from citydir.utils.optimistic_lock import enforce_unmodified_since
from citydir.utils.transaction import transactional
from citydir.application.common import (
    RelationSpec,
    apply_date_range,
    apply_fields,
    as_bool,
    as_bool_default_true,
    as_media,
    as_text,
    delete_links,
    get_or_404,
    sync_relations,
    touch,
)

FIELDS = {
    "description": as_text,
    "status": as_text,
    "media": as_media,
    "show_event": as_bool_default_true,
}

RELATIONS = {
    "category_ids": RelationSpec(SubEventCategory, "sub_event_id", Category, "category_id"),
    "type_ids": RelationSpec(SubEventType, "sub_event_id", Type, "type_id"),
}


def list_sub_events(filters: Optional[Dict[str, Any]] = None) -> List[Dict[str, Any]]:
    filters = filters or {}
    query = SubEvent.query

    if filters.get("event_id"):
        query = query.filter(SubEvent.event_id == filters["event_id"])
    if filters.get("status"):
        query = query.filter(SubEvent.status == filters["status"])
    if filters.get("search"):
        query = query.filter(SubEvent.description.ilike(f"%{filters['search']}%"))

    sub_events = query.order_by(
        SubEvent.start_date.desc().nullslast(), SubEvent.created_at.asc()
    ).all()
    return [normalize_sub_event(s) for s in sub_events]


def list_event_sub_events(event_id) -> List[Dict[str, Any]]:
    get_or_404(Event, event_id, "Event")
    return list_sub_events({"event_id": str(event_id)})


def get_sub_event(sub_event_id) -> Dict[str, Any]:
    return normalize_sub_event(get_or_404(SubEvent, sub_event_id, "Sub-event"))


def create_sub_event(data: Dict[str, Any]) -> Dict[str, Any]:
    """
    A sub-event always belongs to an event; event_id is checked before
    anything touches the store.
    """
    event_id = data.get("event_id")
    if not event_id:
        raise ValidationError("event_id is required")

    status = as_text(data.get("status") or "draft")
    assert_event_status(status)
    relations = extract_relations(data, RELATIONS)
    start, end = resolve_date_range(
        parse_timestamp(data.get("start_date"), "start_date"),
        parse_timestamp(data.get("end_date"), "end_date"),
    )

    event = get_or_404(Event, event_id, "Event")

    sub_event = SubEvent()
    sub_event.event_id = event.id
    sub_event.description = as_text(data.get("description"))
    sub_event.status = status
    sub_event.media = as_media(data.get("media"))
    sub_event.show_event = as_bool(data.get("show_event"), default=True)
    sub_event.start_date, sub_event.end_date = start, end

    with transactional():
        db.session.add(sub_event)
        db.session.flush()
        sync_relations(RELATIONS, sub_event.id, relations)

    current_app.logger.info("sub_event.create id=%s event_id=%s", sub_event.id, event.id)
    return get_sub_event(sub_event.id)


def update_sub_event(sub_event_id, data: Dict[str, Any], since=None) -> Dict[str, Any]:
    sub_event = get_or_404(SubEvent, sub_event_id, "Sub-event")
    enforce_unmodified_since(since, sub_event.updated_at)
    relations = extract_relations(data, RELATIONS)

    if "status" in data:
        assert_event_status(data["status"])
    if "event_id" in data:
        if not data["event_id"]:
            raise ValidationError("event_id is required")
        get_or_404(Event, data["event_id"], "Event")

    with transactional():
        changed = apply_fields(sub_event, data, FIELDS)
        if "event_id" in data and sub_event.event_id != str(data["event_id"]):
            sub_event.event_id = str(data["event_id"])
            changed.append("event_id")
        changed += apply_date_range(sub_event, data)
        replaced = sync_relations(RELATIONS, sub_event.id, relations)
        if replaced:
            touch(sub_event)
        changed += replaced

    if changed:
        current_app.logger.info("sub_event.update id=%s fields=%s", sub_event.id, changed)
    return get_sub_event(sub_event.id)


def delete_sub_event(sub_event_id) -> None:
    sub_event_id = str(sub_event_id)

    with transactional():
        for spec in RELATIONS.values():
            delete_links(spec, sub_event_id)
        deleted = SubEvent.query.filter_by(id=sub_event_id).delete(synchronize_session="fetch")

    current_app.logger.info("sub_event.delete id=%s rows=%s", sub_event_id, deleted)
