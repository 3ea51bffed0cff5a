from redeck.parsers.catalog import (
    categorize_rarity,
    normalize_card_name,
    parse_catalog,
    parse_catalog_line,
    sanitize_img_file,
)
from redeck.parsers.deck_text import ImportResult, generate_deck_text, parse_deck_text

__all__ = [
    "ImportResult",
    "categorize_rarity",
    "generate_deck_text",
    "normalize_card_name",
    "parse_catalog",
    "parse_catalog_line",
    "parse_deck_text",
    "sanitize_img_file",
]
