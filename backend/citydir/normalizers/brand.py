from .relations import iso


def normalize_brand(brand, business_count=0):
    """business_count is aggregated by the caller, it is not a column."""
    return {
        "id": brand.id,
        "name": brand.name,
        "slug": brand.slug,
        "description": brand.description or "",
        "media": brand.media or [],
        "business_id": brand.business_id,
        "brand_pdv": brand.brand_pdv,
        "parent_brand_id": brand.parent_brand_id,
        "parent_brand_name": brand.parent.name if brand.parent else None,
        "business_count": business_count,
        "created_at": iso(brand.created_at),
        "updated_at": iso(brand.updated_at),
    }
