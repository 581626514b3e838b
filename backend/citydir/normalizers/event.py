from .relations import attach_relations, iso


def normalize_date_range(start, end):
    """
    Interval shape shared by events and sub-events.

    "[]" is a closed interval, "[)" an open-ended one. No start means no
    date constraint at all.
    """
    if start is None:
        return None

    return {
        "start": iso(start),
        "end": iso(end),
        "bounds": "[]" if end is not None else "[)",
    }


def normalize_event(event):
    data = {
        "id": event.id,
        "name": event.name,
        "slug": event.slug,
        "description": event.description or "",
        "status": event.status,
        "media": event.media or [],
        "start_date": iso(event.start_date),
        "end_date": iso(event.end_date),
        "date_range": normalize_date_range(event.start_date, event.end_date),
        "show_date_range": bool(event.show_date_range),
        "created_at": iso(event.created_at),
        "updated_at": iso(event.updated_at),
    }

    return attach_relations(
        data,
        {
            "categories": event.category_links,
            "types": event.type_links,
            "sections": event.section_links,
        },
    )


def normalize_sub_event(sub_event):
    data = {
        "id": sub_event.id,
        "event_id": sub_event.event_id,
        "event_name": sub_event.event.name if sub_event.event else None,
        "description": sub_event.description or "",
        "status": sub_event.status,
        "media": sub_event.media or [],
        "start_date": iso(sub_event.start_date),
        "end_date": iso(sub_event.end_date),
        "date_range": normalize_date_range(sub_event.start_date, sub_event.end_date),
        "show_event": bool(sub_event.show_event),
        "created_at": iso(sub_event.created_at),
        "updated_at": iso(sub_event.updated_at),
    }

    return attach_relations(
        data,
        {
            "categories": sub_event.category_links,
            "types": sub_event.type_links,
        },
    )
