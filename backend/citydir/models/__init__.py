from .category import Category
from .type import Type
from .brand import Brand
from .section import Section
from .business import Business
from .attraction import Attraction
from .event import Event
from .sub_event import SubEvent
from .user import User
from .hotspot import HotspotSettings
from .junctions import (
    BusinessCategory,
    BusinessType,
    SectionBusiness,
    AttractionCategory,
    AttractionType,
    SectionAttraction,
    EventCategory,
    EventType,
    SectionEvent,
    SubEventCategory,
    SubEventType,
)

__all__ = [
    "Category",
    "Type",
    "Brand",
    "Section",
    "Business",
    "Attraction",
    "Event",
    "SubEvent",
    "User",
    "HotspotSettings",
    "BusinessCategory",
    "BusinessType",
    "SectionBusiness",
    "AttractionCategory",
    "AttractionType",
    "SectionAttraction",
    "EventCategory",
    "EventType",
    "SectionEvent",
    "SubEventCategory",
    "SubEventType",
]
