from citydir.extensions import db
from .base import BaseModel


class Attraction(BaseModel):
    __tablename__ = "attractions"

    name = db.Column(db.String(200), nullable=False)
    slug = db.Column(db.String(200), unique=True, nullable=False, index=True)
    description = db.Column(db.Text, default="")
    address = db.Column(db.String(255), default="")
    location = db.Column(db.String(100), default="")
    featured_location = db.Column(db.Boolean, nullable=False, default=False)
    media = db.Column(db.JSON, nullable=True)

    category_links = db.relationship("AttractionCategory", lazy="selectin", viewonly=True)
    type_links = db.relationship("AttractionType", lazy="selectin", viewonly=True)
    section_links = db.relationship("SectionAttraction", lazy="selectin", viewonly=True)
