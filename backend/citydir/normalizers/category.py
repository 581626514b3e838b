from .relations import iso


def normalize_category(category, admin=False):
    data = {
        "id": category.id,
        "name": category.name,
        "slug": category.slug,
        "description": category.description or "",
        "image": category.image,
        "display_order": category.display_order,
        "featured": bool(category.featured),
    }

    if admin:
        data["created_at"] = iso(category.created_at)
        data["updated_at"] = iso(category.updated_at)

    return data
