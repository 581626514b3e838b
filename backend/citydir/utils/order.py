from sqlalchemy import case, func, select, update
from citydir.extensions import db
from citydir.errors import ValidationError
from citydir.domain.invariants.ordering import assert_dense_order
from citydir.utils.optimistic_lock import enforce_unmodified_since
from citydir.utils.transaction import transactional


def next_display_order(model):
    """Position that appends a new row at the end of the listing."""
    current_max = db.session.query(func.max(model.display_order)).scalar()
    return 0 if current_max is None else current_max + 1


def reorder(model, ordered_ids, *, since=None, order_field="display_order"):
    """
    Assign display_order = index for each id, in one bulk statement.

    Rows are locked for the duration of the transaction. Rows not named in
    ``ordered_ids`` keep their relative order after the named ones, so the
    whole table stays dense (0..n-1).
    """
    ids = [str(row_id) for row_id in ordered_ids]
    if len(set(ids)) != len(ids):
        raise ValidationError("Duplicate ids in reorder request")

    column = getattr(model, order_field)

    with transactional():
        rows = db.session.execute(
            select(model.id, model.updated_at)
            .order_by(column.asc(), model.name.asc())
            .with_for_update()
        ).all()

        known = {row.id for row in rows}
        unknown = [row_id for row_id in ids if row_id not in known]
        if unknown:
            raise ValidationError(f"Unknown ids in reorder request: {', '.join(unknown)}")

        enforce_unmodified_since(since, *(row.updated_at for row in rows))

        named = set(ids)
        ranking = ids + [row.id for row in rows if row.id not in named]
        ranks = {row_id: index for index, row_id in enumerate(ranking)}

        if ranks:
            db.session.execute(
                update(model)
                .where(model.id.in_(list(ranks)))
                .values({order_field: case(ranks, value=model.id)})
                .execution_options(synchronize_session=False)
            )

        assert_dense_order(db.session.execute(select(column)).scalars())

    return ranks
