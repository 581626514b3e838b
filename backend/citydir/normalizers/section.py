from .relations import iso


def _member(entity, link=None):
    item = {"id": entity.id, "name": entity.name, "slug": entity.slug}
    if link is not None:
        item["is_highlight"] = bool(link.is_highlight)
        item["is_premium"] = bool(link.is_premium)
    return item


def normalize_section(section, include_members=False, usage_count=None):
    data = {
        "id": section.id,
        "name": section.name,
        "slug": section.slug,
        "description": section.description or "",
        "domain": section.domain,
        "image": section.image,
        "display_order": section.display_order,
        "is_active": bool(section.is_active),
        "featured": bool(section.featured),
        "meta": section.meta or {},
        "created_at": iso(section.created_at),
        "updated_at": iso(section.updated_at),
    }

    if usage_count is not None:
        data["usage_count"] = usage_count

    if include_members:
        data["businesses"] = sorted(
            (_member(link.business, link) for link in section.business_links if link.business),
            key=lambda item: item["name"].lower(),
        )
        data["attractions"] = sorted(
            (_member(link.attraction) for link in section.attraction_links if link.attraction),
            key=lambda item: item["name"].lower(),
        )
        data["events"] = sorted(
            (_member(link.event) for link in section.event_links if link.event),
            key=lambda item: item["name"].lower(),
        )

    return data
