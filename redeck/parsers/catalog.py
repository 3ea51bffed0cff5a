"""
Parser for the Lackey card catalog (carddata.txt).

Catalog format: one header line followed by tab-separated rows:

    name  set  imgFile  officialSet  type  brigade  strength  toughness
    class  identifier  specialAbility  rarity  reference  (unused)
    alignment  legality

This module extracts STRUCTURE ONLY. Brigades are left raw and no column
content is validated; see services/catalog.py for enrichment.
"""

import re

from redeck.models.card import Card

COLUMNS: tuple[str, ...] = (
    "name",
    "set",
    "img_file",
    "official_set",
    "type",
    "brigade",
    "strength",
    "toughness",
    "card_class",
    "identifier",
    "special_ability",
    "rarity",
    "reference",
    "",  # unused
    "alignment",
    "legality",
)

_IMAGE_EXTENSION = re.compile(r"\.jpe?g$", re.IGNORECASE)

# Curly/smart apostrophe variants folded to a straight apostrophe
_APOSTROPHES = re.compile("[\u2018\u2019\u201b\u2032]")


def parse_catalog_line(line: str) -> Card:
    """
    Parse one tab-separated catalog row.

    Missing trailing columns default to "". Extra columns are ignored.
    """
    cols = line.rstrip("\r\n").split("\t")
    values = {
        field: cols[i] if i < len(cols) else ""
        for i, field in enumerate(COLUMNS)
        if field
    }
    return Card(**values)


def parse_catalog(text: str) -> list[Card]:
    """
    Parse raw catalog text into Card records.

    Args:
        text: Full catalog text including the header line

    Returns:
        One Card per non-blank data row, in catalog order. Empty list if
        input is empty or header-only.
    """
    if not text:
        return []

    lines = text.split("\n")[1:]
    return [parse_catalog_line(line) for line in lines if line.strip()]


def sanitize_img_file(img_file: str) -> str:
    """Strip a trailing .jpg/.jpeg so image keys are not double-suffixed."""
    return _IMAGE_EXTENSION.sub("", img_file)


def categorize_rarity(rarity: str, official_set: str) -> str:
    """
    Group raw rarity text into display buckets.

    Returns:
        "Common", "Promo", "Rare" or "Ultra Rare". Unknown rarities are
        treated as Common.
    """
    r = rarity.strip().lower()
    os_ = official_set.strip().lower()

    if r in ("common", "deck", "starter", "fixed"):
        return "Common"
    if r in ("promo", "seasonal", "national") or os_ == "promo":
        return "Promo"
    if r in ("uncommon", "rare", "legacy rare"):
        return "Rare"
    if r in ("ultra rare", "ultra-rare"):
        return "Ultra Rare"
    return "Common"


def normalize_card_name(name: str) -> str:
    """Fold apostrophe variants so names compare equal."""
    return _APOSTROPHES.sub("'", name)
