from citydir.extensions import db
from .base import BaseModel


class SubEvent(BaseModel):
    __tablename__ = "sub_events"

    event_id = db.Column(db.String(36), db.ForeignKey("events.id"), nullable=False, index=True)
    description = db.Column(db.Text, nullable=False, default="")
    media = db.Column(db.JSON, nullable=True)
    status = db.Column(db.String(20), nullable=False, default="draft", index=True)
    start_date = db.Column(db.DateTime(timezone=True), nullable=True, index=True)
    end_date = db.Column(db.DateTime(timezone=True), nullable=True)
    show_event = db.Column(db.Boolean, nullable=False, default=True)

    event = db.relationship("Event", lazy="joined")

    category_links = db.relationship("SubEventCategory", lazy="selectin", viewonly=True)
    type_links = db.relationship("SubEventType", lazy="selectin", viewonly=True)
