"""
Content of the hotspot partner site.

Everything lives in one JSON document. Each save replaces one part of the
document and leaves the others untouched; reads merge the stored document
over the defaults so parts added later always have a value.
"""
import copy
import uuid
from typing import Any, Dict, List

from flask import current_app

from citydir.extensions import db
from citydir.errors import ValidationError
from citydir.models import HotspotSettings
from citydir.utils.transaction import transactional

SINGLETON_ID = "hotspot"

MAX_FOOTER_ICONS = 4

BLOCK_SET_STYLES = {
    "blockBackground": "rgba(31, 31, 31, 1)",
    "titleColor": "rgba(255, 255, 255, 1)",
    "descriptionColor": "rgba(196, 196, 196, 1)",
    "buttonBackground": "rgba(122, 73, 240, 1)",
    "buttonTextColor": "rgba(255, 255, 255, 1)",
}

FOOTER_STYLES = {
    "footerBackground": "rgba(33, 37, 41, 1)",
    "iconColor": "rgba(0, 0, 0, 0)",
    "textColor": "rgba(0, 0, 0, 0)",
}

# item field -> default, for every list the site renders
BLOCK_FIELDS = {
    "image": None,
    "title": "",
    "description": "",
    "buttonText": "",
    "buttonLink": "",
}
FOOTER_ICON_FIELDS = {"name": "", "url": "", "iconImage": None}
EDITORS_PICK_FIELDS = {
    "cardImage": None,
    "titleBosnian": "",
    "titleEnglish": "",
    "teaserBosnian": "",
    "teaserEnglish": "",
    "link": "",
}
DISCOVERY_FIELDS = {
    "placeImage": None,
    "nameBosnian": "",
    "nameEnglish": "",
    "categoryBosnian": "",
    "categoryEnglish": "",
    "link": "",
}
QUICK_FUN_FIELDS = {
    "bannerImage": None,
    "titleBosnian": "",
    "titleEnglish": "",
    "subtitleBosnian": "",
    "subtitleEnglish": "",
    "link": "",
}
UTILITIES_FIELDS = {
    "cityName": "",
    "baseCurrency": "",
    "timezone": "",
    "latitude": "",
    "longitude": "",
    "targetCurrencies": "",
}


def default_data() -> Dict[str, Any]:
    return {
        "blockSets": [],
        "footer": {"icons": [], "styles": dict(FOOTER_STYLES)},
        "editorsPicks": [],
        "discovery": [],
        "quickFun": dict(QUICK_FUN_FIELDS),
        "utilities": dict(UTILITIES_FIELDS),
    }


def _new_id() -> str:
    return uuid.uuid4().hex


def _require_mapping(value, field) -> Dict[str, Any]:
    if not isinstance(value, dict):
        raise ValidationError(f"'{field}' must be an object")
    return value


def _require_list(value, field) -> List[Any]:
    if not isinstance(value, list):
        raise ValidationError(f"'{field}' must be a list")
    return value


def _pick(item: Dict[str, Any], defaults: Dict[str, Any]) -> Dict[str, Any]:
    """Keep the known keys; empty values fall back to the default."""
    return {key: item.get(key) or default for key, default in defaults.items()}


def _sanitize_items(items, defaults, field) -> List[Dict[str, Any]]:
    return [
        {"id": str(item.get("id") or _new_id()), **_pick(item, defaults)}
        for item in (_require_mapping(i, field) for i in _require_list(items, field))
    ]


def _load() -> Dict[str, Any]:
    row = db.session.get(HotspotSettings, SINGLETON_ID)
    stored = row.data if row is not None and isinstance(row.data, dict) else {}
    return {**default_data(), **copy.deepcopy(stored)}


def _save(part: str, value) -> None:
    with transactional():
        row = db.session.get(HotspotSettings, SINGLETON_ID)
        if row is None:
            row = HotspotSettings()
            row.id = SINGLETON_ID
            row.data = {}
            db.session.add(row)

        # assign a new dict so the JSON column is flagged dirty
        row.data = {**(row.data or {}), part: value}

    current_app.logger.info("hotspot.save part=%s", part)


# ------------------------
# Block sets
# ------------------------

def get_block_sets() -> List[Dict[str, Any]]:
    return _load()["blockSets"] or []


def save_block_sets(sets) -> List[Dict[str, Any]]:
    """
    Replace every block set. Missing ids are generated, missing styles get
    the site defaults, and blocks keep only the fields the site renders.
    Anything that is not a list stores as no block sets.
    """
    if not isinstance(sets, list):
        sets = []

    sanitized = []
    for block_set in sets:
        block_set = _require_mapping(block_set, "blockSets")
        styles = block_set.get("styles") if isinstance(block_set.get("styles"), dict) else {}
        blocks = block_set.get("blocks") if isinstance(block_set.get("blocks"), list) else []

        sanitized.append({
            "id": str(block_set.get("id") or _new_id()),
            "styles": _pick(styles, BLOCK_SET_STYLES),
            "blocks": _sanitize_items(blocks, BLOCK_FIELDS, "blocks"),
        })

    _save("blockSets", sanitized)
    return sanitized


# ------------------------
# Footer
# ------------------------

def get_footer() -> Dict[str, Any]:
    return _load()["footer"] or default_data()["footer"]


def save_footer(footer) -> Dict[str, Any]:
    footer = _require_mapping(footer, "footer")
    icons = _sanitize_items(footer.get("icons") or [], FOOTER_ICON_FIELDS, "icons")
    if len(icons) > MAX_FOOTER_ICONS:
        raise ValidationError(f"The footer holds at most {MAX_FOOTER_ICONS} icons")

    styles = footer.get("styles") if isinstance(footer.get("styles"), dict) else {}
    saved = {"icons": icons, "styles": _pick(styles, FOOTER_STYLES)}

    _save("footer", saved)
    return saved


# ------------------------
# Editor's picks and discovery
# ------------------------

def get_editors_picks() -> List[Dict[str, Any]]:
    return _load()["editorsPicks"] or []


def save_editors_picks(picks) -> List[Dict[str, Any]]:
    saved = _sanitize_items(picks, EDITORS_PICK_FIELDS, "picks")
    _save("editorsPicks", saved)
    return saved


def get_discovery() -> List[Dict[str, Any]]:
    return _load()["discovery"] or []


def save_discovery(places) -> List[Dict[str, Any]]:
    saved = _sanitize_items(places, DISCOVERY_FIELDS, "places")
    _save("discovery", saved)
    return saved


# ------------------------
# Quick fun and utilities
# ------------------------

def get_quick_fun() -> Dict[str, Any]:
    return _load()["quickFun"] or default_data()["quickFun"]


def save_quick_fun(data) -> Dict[str, Any]:
    saved = _pick(_require_mapping(data, "quickFun"), QUICK_FUN_FIELDS)
    _save("quickFun", saved)
    return saved


def get_utilities() -> Dict[str, Any]:
    return _load()["utilities"] or default_data()["utilities"]


def save_utilities(data) -> Dict[str, Any]:
    saved = _pick(_require_mapping(data, "utilities"), UTILITIES_FIELDS)
    _save("utilities", saved)
    return saved
