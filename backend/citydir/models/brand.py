from citydir.extensions import db
from .base import BaseModel


class Brand(BaseModel):
    __tablename__ = "brands"

    name = db.Column(db.String(200), nullable=False)
    slug = db.Column(db.String(200), unique=True, nullable=False, index=True)
    description = db.Column(db.Text, default="")
    media = db.Column(db.JSON, nullable=True)
    business_id = db.Column(db.String(36), nullable=True)
    brand_pdv = db.Column(db.String(64), nullable=True)  # tax id
    parent_brand_id = db.Column(db.String(36), db.ForeignKey("brands.id"), nullable=True, index=True)

    # Self-referential tree, depth is not constrained
    parent = db.relationship("Brand", remote_side="Brand.id", lazy="joined", join_depth=1)
