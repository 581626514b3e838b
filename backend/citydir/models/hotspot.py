from citydir.extensions import db
from .base import BaseModel


class HotspotSettings(BaseModel):
    """
    Single-row document behind the hotspot partner site: block sets, footer,
    editor's picks, discovery, quick-fun banner and utilities.
    """

    __tablename__ = "hotspot_settings"

    data = db.Column(db.JSON, nullable=False, default=dict)
