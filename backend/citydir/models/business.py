from citydir.extensions import db
from .base import BaseModel


class Business(BaseModel):
    __tablename__ = "businesses"

    name = db.Column(db.String(200), nullable=False)
    slug = db.Column(db.String(200), unique=True, nullable=False, index=True)
    brand_id = db.Column(db.String(36), db.ForeignKey("brands.id"), nullable=True, index=True)
    description = db.Column(db.Text, default="")
    address = db.Column(db.String(255), default="")
    location = db.Column(db.String(100), default="")  # "lat,long"
    rating = db.Column(db.Float, nullable=True)
    working_hours = db.Column(db.String(50), nullable=True)  # "HH:MM-HH:MM"
    telephone = db.Column(db.String(50), nullable=True)
    website = db.Column(db.String(255), nullable=True)
    email = db.Column(db.String(120), nullable=True)
    price_range = db.Column(db.String(20), nullable=True)
    social_media = db.Column(db.JSON, nullable=True)
    featured_business = db.Column(db.Boolean, nullable=False, default=False)
    display_order = db.Column(db.Integer, nullable=False, default=0, index=True)
    media = db.Column(db.JSON, nullable=True)

    brand = db.relationship("Brand", lazy="joined")

    category_links = db.relationship("BusinessCategory", lazy="selectin", viewonly=True)
    type_links = db.relationship("BusinessType", lazy="selectin", viewonly=True)
    section_links = db.relationship("SectionBusiness", lazy="selectin", viewonly=True)
