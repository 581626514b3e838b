from citydir.extensions import db
from .base import BaseModel


class Category(BaseModel):
    __tablename__ = "categories"

    name = db.Column(db.String(200), nullable=False)
    slug = db.Column(db.String(200), unique=True, nullable=False, index=True)
    description = db.Column(db.Text, default="")
    image = db.Column(db.String(512), nullable=True)
    display_order = db.Column(db.Integer, nullable=False, default=0, index=True)
    featured = db.Column(db.Boolean, nullable=False, default=False)
