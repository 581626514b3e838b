from citydir.extensions import db
from .base import BaseModel


class Section(BaseModel):
    """Named collection of businesses, attractions and events (e.g. a partner microsite)."""

    __tablename__ = "sections"

    name = db.Column(db.String(200), nullable=False)
    slug = db.Column(db.String(200), unique=True, nullable=False, index=True)
    description = db.Column(db.Text, default="")
    domain = db.Column(db.String(255), nullable=True, index=True)
    image = db.Column(db.String(512), nullable=True)
    display_order = db.Column(db.Integer, nullable=False, default=0, index=True)
    is_active = db.Column(db.Boolean, nullable=False, default=True)
    featured = db.Column(db.Boolean, nullable=False, default=False)
    meta = db.Column(db.JSON, nullable=False, default=dict)

    business_links = db.relationship("SectionBusiness", lazy="selectin", viewonly=True)
    attraction_links = db.relationship("SectionAttraction", lazy="selectin", viewonly=True)
    event_links = db.relationship("SectionEvent", lazy="selectin", viewonly=True)
