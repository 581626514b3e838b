from citydir.domain.hours import is_open_now
from .relations import attach_relations, iso


def normalize_business(business, now=None):
    """
    Flatten a business and its junction rows into the API shape.

    When ``now`` is given the result also says whether the business is
    open at that moment, based on its working hours.
    """
    data = {
        "id": business.id,
        "name": business.name,
        "slug": business.slug,
        "brand_id": business.brand_id,
        "brand_name": business.brand.name if business.brand else None,
        "description": business.description or "",
        "address": business.address or "",
        "location": business.location or "",
        "rating": business.rating,
        "working_hours": business.working_hours,
        "telephone": business.telephone,
        "website": business.website,
        "email": business.email,
        "price_range": business.price_range,
        "social_media": business.social_media or {},
        "featured_business": bool(business.featured_business),
        "display_order": business.display_order,
        "media": business.media or [],
        "created_at": iso(business.created_at),
        "updated_at": iso(business.updated_at),
    }

    attach_relations(
        data,
        {
            "categories": business.category_links,
            "types": business.type_links,
            "sections": business.section_links,
        },
        flagged=True,
    )

    if now is not None:
        data["is_open_now"] = is_open_now(business.working_hours, now)

    return data
