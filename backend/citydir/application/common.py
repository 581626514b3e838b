"""
Helpers shared by the per-entity data-access modules.
"""
from typing import Any, Callable, Dict, Iterable, List, NamedTuple, Optional

from sqlalchemy import or_

from citydir.extensions import db
from citydir.errors import NotFoundError, ValidationError
from citydir.domain.invariants.dates import parse_timestamp, resolve_date_range
from citydir.domain.relations import RelationLink
from citydir.domain.slug import slugify
from citydir.models.base import utc_now


class RelationSpec(NamedTuple):
    """How one relationship field maps onto a junction table."""

    link_model: Any
    owner_field: str
    target_model: Any
    target_field: str
    flagged: bool = False


# ------------------------
# Field coercion
# ------------------------

def as_text(value):
    return "" if value is None else str(value)


def as_optional_text(value):
    if value is None or value == "":
        return None
    return str(value)


def as_bool(value, default=False):
    """JSON null falls back to the column default."""
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return bool(value)
    if isinstance(value, str) and value.lower() in ("true", "1", "yes", "false", "0", "no", ""):
        return value.lower() in ("true", "1", "yes")
    raise ValidationError(f"Expected a boolean, got {value!r}")


def as_bool_default_true(value):
    return as_bool(value, default=True)


def as_optional_float(value):
    if value is None or value == "":
        return None
    try:
        return float(value)
    except (TypeError, ValueError) as exc:
        raise ValidationError(f"Expected a number, got {value!r}") from exc


def as_int(value):
    try:
        return int(value)
    except (TypeError, ValueError) as exc:
        raise ValidationError(f"Expected an integer, got {value!r}") from exc


def as_media(value):
    """Media is a list of URL paths; a single string is wrapped."""
    if value is None or value == "":
        return None
    if isinstance(value, str):
        return [value]
    if isinstance(value, (list, tuple)):
        return [str(item) for item in value]
    raise ValidationError("'media' must be a list of URLs")


def as_mapping(value):
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ValidationError(f"Expected an object, got {value!r}")
    return value


def apply_fields(
    entity,
    data: Dict[str, Any],
    converters: Dict[str, Callable[[Any], Any]],
) -> List[str]:
    """
    Sparse update: write only the keys present in ``data``.

    Returns the names of the fields whose value actually changed.
    """
    changed: List[str] = []
    for field, convert in converters.items():
        if field not in data:
            continue
        value = convert(data[field])
        if getattr(entity, field) != value:
            setattr(entity, field, value)
            changed.append(field)
    return changed


# ------------------------
# Lookups
# ------------------------

def get_or_404(model, entity_id, label: Optional[str] = None):
    entity = db.session.get(model, str(entity_id))
    if entity is None:
        raise NotFoundError(f"{label or model.__name__} not found")
    return entity


def get_by_slug_or_404(model, slug, label: Optional[str] = None):
    entity = model.query.filter_by(slug=slug).first()
    if entity is None:
        raise NotFoundError(f"{label or model.__name__} not found")
    return entity


def require_name(data: Dict[str, Any]) -> str:
    name = data.get("name")
    if not name or not str(name).strip():
        raise ValidationError("Name is required")
    return str(name).strip()


def resolve_slug(slug: Optional[str], name: str) -> str:
    slug = slugify(slug) if slug else slugify(name)
    if not slug:
        raise ValidationError("Could not derive a slug; name must contain letters or digits")
    return slug


def apply_search(query, model, term: Optional[str]):
    """Case-insensitive substring match over name and slug."""
    if not term:
        return query
    pattern = f"%{term}%"
    return query.filter(or_(model.name.ilike(pattern), model.slug.ilike(pattern)))


def require_exists(model, entity_id, label: Optional[str] = None):
    if entity_id is None:
        return None
    if db.session.get(model, str(entity_id)) is None:
        raise ValidationError(f"Unknown {label or model.__name__.lower()} id: {entity_id}")
    return str(entity_id)


# ------------------------
# Junction rows
# ------------------------

def replace_links(spec: RelationSpec, owner_id: str, links: Iterable[RelationLink]) -> None:
    """
    Replace an owner's junction rows for one relation wholesale.

    Every existing row is deleted, then one row is inserted per link,
    even when the new set overlaps the old one.
    """
    links = list(links)
    ids = [link.id for link in links]

    if ids:
        found = {
            row_id
            for (row_id,) in db.session.query(spec.target_model.id).filter(
                spec.target_model.id.in_(ids)
            )
        }
        missing = [row_id for row_id in ids if row_id not in found]
        if missing:
            raise ValidationError(
                f"Unknown {spec.target_model.__tablename__} id(s): {', '.join(missing)}"
            )

    delete_links(spec, owner_id)

    for link in links:
        row = spec.link_model(**{spec.owner_field: owner_id, spec.target_field: link.id})
        if spec.flagged:
            row.is_highlight = link.is_highlight
            row.is_premium = link.is_premium
        db.session.add(row)

    db.session.flush()


def delete_links(spec: RelationSpec, owner_id: str) -> int:
    owner_column = getattr(spec.link_model, spec.owner_field)
    return spec.link_model.query.filter(owner_column == owner_id).delete(
        synchronize_session="fetch"
    )


def sync_relations(specs: Dict[str, RelationSpec], owner_id: str, relations) -> List[str]:
    """
    Apply every relation that was supplied (None means "leave untouched").
    """
    replaced: List[str] = []
    for field, spec in specs.items():
        links = relations.get(field)
        if links is None:
            continue
        replace_links(spec, owner_id, links)
        replaced.append(field)
    return replaced


def touch(entity) -> None:
    """
    Bump updated_at when only junction rows changed, so If-Unmodified-Since
    also sees relationship edits.
    """
    entity.updated_at = utc_now()


def count_links(link_model, target_field: str, target_id: str) -> int:
    column = getattr(link_model, target_field)
    return link_model.query.filter(column == target_id).count()


def apply_date_range(entity, data: Dict[str, Any]) -> List[str]:
    """
    Merge start_date/end_date from ``data`` into the entity's interval.

    Bounds missing from ``data`` keep their stored value.
    """
    if "start_date" not in data and "end_date" not in data:
        return []

    start = (
        parse_timestamp(data["start_date"], "start_date")
        if "start_date" in data else entity.start_date
    )
    end = (
        parse_timestamp(data["end_date"], "end_date")
        if "end_date" in data else entity.end_date
    )
    start, end = resolve_date_range(start, end)

    changed = []
    if entity.start_date != start:
        entity.start_date = start
        changed.append("start_date")
    if entity.end_date != end:
        entity.end_date = end
        changed.append("end_date")
    return changed
