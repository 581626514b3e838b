"""
Relationship payloads.

The CMS sends relationship fields either as a bare list of ids
(``["c1", "c2"]``) or as a list of link objects
(``[{"id": "c1", "is_highlight": true}]``). Both shapes are normalized
into ``RelationLink`` records before reaching the data-access layer.
"""
from typing import Any, Dict, Iterable, List, NamedTuple, Optional

from citydir.errors import ValidationError


class RelationLink(NamedTuple):
    id: str
    is_highlight: bool = False
    is_premium: bool = False


# payload key -> alias also accepted from clients
RELATION_FIELDS = {
    "category_ids": "categories",
    "type_ids": "types",
    "section_ids": "sections",
}


def _as_bool(value: Any, field: str) -> bool:
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    if isinstance(value, str) and value.lower() in ("true", "1", "false", "0"):
        return value.lower() in ("true", "1")
    raise ValidationError(f"'{field}' must be a boolean")


def normalize_links(value: Any, field: str = "relations") -> List[RelationLink]:
    """
    Normalize a relationship payload into a list of RelationLink.

    Duplicate ids collapse into one link; the last occurrence wins.
    """
    if value is None:
        return []
    if not isinstance(value, (list, tuple)):
        raise ValidationError(f"'{field}' must be a list")

    links: Dict[str, RelationLink] = {}
    for item in value:
        if isinstance(item, RelationLink):
            link = item
        elif isinstance(item, dict):
            link_id = item.get("id")
            if link_id in (None, ""):
                raise ValidationError(f"Every item in '{field}' needs an id")
            link = RelationLink(
                id=str(link_id),
                is_highlight=_as_bool(item.get("is_highlight"), "is_highlight"),
                is_premium=_as_bool(item.get("is_premium"), "is_premium"),
            )
        elif isinstance(item, (str, int)) and not isinstance(item, bool):
            link = RelationLink(id=str(item))
        else:
            raise ValidationError(f"Invalid item in '{field}': {item!r}")

        links.pop(link.id, None)
        links[link.id] = link

    return list(links.values())


def extract_relations(
    data: Dict[str, Any],
    fields: Iterable[str],
) -> Dict[str, Optional[List[RelationLink]]]:
    """
    Pull relationship fields out of a request payload.

    A field that is absent maps to None ("leave untouched"); a field that
    is present, even as an empty list, maps to the normalized links.
    """
    relations: Dict[str, Optional[List[RelationLink]]] = {}
    for field in fields:
        alias = RELATION_FIELDS.get(field)
        if field in data:
            relations[field] = normalize_links(data[field], field)
        elif alias and alias in data:
            relations[field] = normalize_links(data[alias], alias)
        else:
            relations[field] = None
    return relations
