from citydir.extensions import db
from .base import BaseModel


class Type(BaseModel):
    """Subcategory, optionally nested under a parent category."""

    __tablename__ = "types"

    name = db.Column(db.String(200), nullable=False)
    slug = db.Column(db.String(200), unique=True, nullable=False, index=True)
    description = db.Column(db.Text, default="")
    image = db.Column(db.String(512), nullable=True)
    category_id = db.Column(db.String(36), db.ForeignKey("categories.id"), nullable=True, index=True)
    display_order = db.Column(db.Integer, nullable=False, default=0, index=True)

    category = db.relationship("Category", lazy="joined")
