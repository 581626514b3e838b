"""Many-to-many junction rows.

Business junctions carry relationship-scoped ``is_highlight`` and
``is_premium`` flags: a business can be highlighted within one category
and plain in another.
"""
from citydir.extensions import db


def _fk(target):
    return db.Column(db.String(36), db.ForeignKey(f"{target}.id"), primary_key=True)


class FlaggedLinkMixin:
    is_highlight = db.Column(db.Boolean, nullable=False, default=False)
    is_premium = db.Column(db.Boolean, nullable=False, default=False)


class BusinessCategory(db.Model, FlaggedLinkMixin):
    __tablename__ = "business_categories"

    business_id = _fk("businesses")
    category_id = _fk("categories")

    target = db.relationship("Category", lazy="joined")


class BusinessType(db.Model, FlaggedLinkMixin):
    __tablename__ = "business_types"

    business_id = _fk("businesses")
    type_id = _fk("types")

    target = db.relationship("Type", lazy="joined")


class SectionBusiness(db.Model, FlaggedLinkMixin):
    __tablename__ = "section_businesses"

    section_id = _fk("sections")
    business_id = _fk("businesses")

    target = db.relationship("Section", lazy="joined")
    business = db.relationship("Business", viewonly=True)


class AttractionCategory(db.Model):
    __tablename__ = "attraction_categories"

    attraction_id = _fk("attractions")
    category_id = _fk("categories")

    target = db.relationship("Category", lazy="joined")


class AttractionType(db.Model):
    __tablename__ = "attraction_types"

    attraction_id = _fk("attractions")
    type_id = _fk("types")

    target = db.relationship("Type", lazy="joined")


class SectionAttraction(db.Model):
    __tablename__ = "section_attractions"

    section_id = _fk("sections")
    attraction_id = _fk("attractions")

    target = db.relationship("Section", lazy="joined")
    attraction = db.relationship("Attraction", viewonly=True)


class EventCategory(db.Model):
    __tablename__ = "event_categories"

    event_id = _fk("events")
    category_id = _fk("categories")

    target = db.relationship("Category", lazy="joined")


class EventType(db.Model):
    __tablename__ = "event_types"

    event_id = _fk("events")
    type_id = _fk("types")

    target = db.relationship("Type", lazy="joined")


class SectionEvent(db.Model):
    __tablename__ = "section_events"

    section_id = _fk("sections")
    event_id = _fk("events")

    target = db.relationship("Section", lazy="joined")
    event = db.relationship("Event", viewonly=True)


class SubEventCategory(db.Model):
    __tablename__ = "sub_event_categories"

    sub_event_id = _fk("sub_events")
    category_id = _fk("categories")

    target = db.relationship("Category", lazy="joined")


class SubEventType(db.Model):
    __tablename__ = "sub_event_types"

    sub_event_id = _fk("sub_events")
    type_id = _fk("types")

    target = db.relationship("Type", lazy="joined")
