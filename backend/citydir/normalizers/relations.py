from typing import Any, Dict, Iterable, List


def iso(value):
    return value.isoformat() if value is not None else None


def normalize_relation(link, flagged=False) -> Dict[str, Any]:
    """
    Keep only the related entity of a junction row.

    Flagged junctions (business relations) also keep the
    relationship-scoped highlight/premium booleans.
    """
    target = link.target
    item = {
        "id": target.id,
        "name": target.name,
        "slug": target.slug,
    }
    if flagged:
        item["is_highlight"] = bool(getattr(link, "is_highlight", False))
        item["is_premium"] = bool(getattr(link, "is_premium", False))
    return item


def attach_relations(data: Dict[str, Any], relations: Dict[str, Iterable[Any]], flagged=False):
    """
    Attach ``<name>`` and ``<singular>_ids`` arrays for every relation.

    relations maps the plural output name ("categories") to junction rows.
    """
    for name, links in relations.items():
        items: List[Dict[str, Any]] = sorted(
            (normalize_relation(link, flagged=flagged) for link in links if link.target is not None),
            key=lambda item: (item["name"].lower(), item["id"]),
        )
        data[name] = items
        data[f"{_singular(name)}_ids"] = [item["id"] for item in items]
    return data


def _singular(name):
    if name.endswith("ies"):
        return name[:-3] + "y"
    return name[:-1]
