from .relations import attach_relations, iso


def normalize_attraction(attraction):
    data = {
        "id": attraction.id,
        "name": attraction.name,
        "slug": attraction.slug,
        "description": attraction.description or "",
        "address": attraction.address or "",
        "location": attraction.location or "",
        "featured_location": bool(attraction.featured_location),
        "media": attraction.media or [],
        "created_at": iso(attraction.created_at),
        "updated_at": iso(attraction.updated_at),
    }

    return attach_relations(
        data,
        {
            "categories": attraction.category_links,
            "types": attraction.type_links,
            "sections": attraction.section_links,
        },
    )
