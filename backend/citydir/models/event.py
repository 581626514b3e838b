from citydir.extensions import db
from .base import BaseModel


class Event(BaseModel):
    __tablename__ = "events"

    name = db.Column(db.String(200), nullable=False)
    slug = db.Column(db.String(200), unique=True, nullable=False, index=True)
    description = db.Column(db.Text, default="")
    status = db.Column(db.String(20), nullable=False, default="draft", index=True)
    # draft | published | archived
    media = db.Column(db.JSON, nullable=True)

    # [start, end] when both are set, [start, ) when only start is set
    start_date = db.Column(db.DateTime(timezone=True), nullable=True, index=True)
    end_date = db.Column(db.DateTime(timezone=True), nullable=True)
    show_date_range = db.Column(db.Boolean, nullable=False, default=True)

    category_links = db.relationship("EventCategory", lazy="selectin", viewonly=True)
    type_links = db.relationship("EventType", lazy="selectin", viewonly=True)
    section_links = db.relationship("SectionEvent", lazy="selectin", viewonly=True)
