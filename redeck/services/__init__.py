"""
Redeck services.

Card normalization, catalog loading and deck legality checks.
"""

from redeck.services.brigades import (
    EVIL_BRIGADES,
    GOOD_BRIGADES,
    GOOD_GOLD_OVERRIDES,
    MULTI_OVERRIDES,
    InvalidBrigadeError,
    join_brigades,
    normalize_brigade_field,
    normalize_card_brigade,
    split_brigade_tokens,
)
from redeck.services.catalog import (
    CardCatalog,
    CatalogNotLoadedError,
    FetchError,
    build_card,
    fetch_catalog_text,
    get_catalog,
    is_catalog_loaded,
    load_catalog,
    load_catalog_file,
    refresh_catalog,
    set_catalog,
)
from redeck.services.deck_validator import (
    FORMAT_LIMITS,
    FormatLimits,
    format_limits,
    is_hopper_lost_soul,
    required_lost_souls,
    validate_deck,
    validation_summary,
)
from redeck.services.paragon import (
    check_paragon_compliance,
    has_brigade,
    paragon_brigade_stats,
)
from redeck.services.references import (
    TestamentInfo,
    classify_reference,
    is_nativity_reference,
    split_references,
)

__all__ = [
    "CardCatalog",
    "CatalogNotLoadedError",
    "EVIL_BRIGADES",
    "FORMAT_LIMITS",
    "FetchError",
    "FormatLimits",
    "GOOD_BRIGADES",
    "GOOD_GOLD_OVERRIDES",
    "InvalidBrigadeError",
    "MULTI_OVERRIDES",
    "TestamentInfo",
    "build_card",
    "check_paragon_compliance",
    "classify_reference",
    "fetch_catalog_text",
    "format_limits",
    "get_catalog",
    "has_brigade",
    "is_catalog_loaded",
    "is_hopper_lost_soul",
    "is_nativity_reference",
    "join_brigades",
    "load_catalog",
    "load_catalog_file",
    "normalize_brigade_field",
    "normalize_card_brigade",
    "paragon_brigade_stats",
    "refresh_catalog",
    "required_lost_souls",
    "set_catalog",
    "split_brigade_tokens",
    "split_references",
    "validate_deck",
    "validation_summary",
]
