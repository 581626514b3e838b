from .relations import iso


def normalize_type(type_, admin=False):
    data = {
        "id": type_.id,
        "name": type_.name,
        "slug": type_.slug,
        "description": type_.description or "",
        "image": type_.image,
        "category_id": type_.category_id,
        "category_name": type_.category.name if type_.category else None,
        "display_order": type_.display_order,
    }

    if admin:
        data["created_at"] = iso(type_.created_at)
        data["updated_at"] = iso(type_.updated_at)

    return data
