"""
Brigade normalization.

The catalog encodes brigades ambiguously: several brigades may be joined
with "/", qualified with "and" or a parenthetical list, and the shared
placeholders "Gold" and "Multi" are used by both alignments. This module
resolves a raw brigade field into a canonical sorted list of concrete
brigade names, using the card's alignment and name.

Every consumer that loads cards must go through normalize_brigade_field so
that resolution is identical everywhere.
"""

import logging
from collections.abc import Mapping
from types import MappingProxyType

from redeck.models.card import Alignment, Card

logger = logging.getLogger(__name__)

GOOD_BRIGADES: tuple[str, ...] = (
    "Blue",
    "Clay",
    "Good Gold",
    "Green",
    "Purple",
    "Red",
    "Silver",
    "Teal",
    "White",
)

EVIL_BRIGADES: tuple[str, ...] = (
    "Black",
    "Brown",
    "Crimson",
    "Evil Gold",
    "Gray",
    "Orange",
    "Pale Green",
)

ALLOWED_BRIGADES: frozenset[str] = frozenset(GOOD_BRIGADES) | frozenset(EVIL_BRIGADES)

GOOD_MULTI = "Good Multi"
EVIL_MULTI = "Evil Multi"
GOOD_GOLD = "Good Gold"
EVIL_GOLD = "Evil Gold"

_MULTI = "Multi"
_GOLD = "Gold"

# Cards whose single "Multi" token resolves by name rather than alignment.
# Checked before the alignment default.
MULTI_OVERRIDES: Mapping[str, str] = MappingProxyType({})

# Neutral cards whose "Gold" is Good Gold even when Gold is not listed first.
GOOD_GOLD_OVERRIDES: frozenset[str] = frozenset(
    {
        "First Bowl of Wrath (RoJ)",
        "Banks of the Nile/Pharaoh's Court",
    }
)


class InvalidBrigadeError(Exception):
    """
    Raised when a brigade token cannot be resolved to a known brigade.

    This is a data-integrity fault for a single catalog row. Catalog
    loaders catch it per record and fall back to the raw brigade text.
    """

    def __init__(self, card_name: str, brigade: str):
        self.card_name = card_name
        self.brigade = brigade
        super().__init__(f"Card {card_name} has an invalid brigade: {brigade}.")


def split_brigade_tokens(brigade: str) -> list[str]:
    """
    Split a raw brigade field into tokens.

    Examples:
        "Blue"                 -> ["Blue"]
        "Blue/Green"           -> ["Blue", "Green"]
        "Gold and Silver"      -> ["Gold"]   (text after "and" is a qualifier)
        "Multi (Blue/Green)"   -> ["Multi", "Blue", "Green"]
    """
    if not brigade or not brigade.strip():
        return []

    if "and" in brigade:
        tokens = brigade.split("and", 1)[0].strip().split("/")
    elif "(" in brigade:
        main, _, qualifiers = brigade.partition("(")
        tokens = main.strip().split("/") + qualifiers.replace(")", "").split("/")
    elif "/" in brigade:
        tokens = brigade.split("/")
    else:
        tokens = [brigade]

    return [token.strip() for token in tokens]


def _resolve_multi(tokens: list[str], alignment: Alignment | None, card_name: str) -> list[str]:
    multi_count = tokens.count(_MULTI)

    if multi_count == 2:
        # Dual-alignment card listing both multi placeholders
        return [t for t in tokens if t != _MULTI] + [GOOD_MULTI, EVIL_MULTI]

    if multi_count == 0:
        return tokens

    replacement = MULTI_OVERRIDES.get(card_name)
    if replacement is None:
        match alignment:
            case Alignment.GOOD | Alignment.NEUTRAL:
                replacement = GOOD_MULTI
            case Alignment.EVIL:
                replacement = EVIL_MULTI
            case Alignment.GOOD_EVIL | None:
                # No default; left unresolved and rejected during validation
                return tokens

    return [replacement if t == _MULTI else t for t in tokens]


def resolve_gold(
    tokens: list[str], alignment: Alignment | None, card_name: str
) -> str | None:
    """
    Decide which Gold brigade a "Gold" token stands for.

    Returns None for a Good/Evil card, which has no Gold default; the token
    is then left unresolved and rejected during validation.
    """
    match alignment:
        case Alignment.GOOD:
            return GOOD_GOLD
        case Alignment.EVIL:
            return EVIL_GOLD
        case Alignment.NEUTRAL:
            if (tokens and tokens[0] == _GOLD) or card_name in GOOD_GOLD_OVERRIDES:
                return GOOD_GOLD
            return EVIL_GOLD
        case None:
            return GOOD_GOLD
        case Alignment.GOOD_EVIL:
            return None


def _expand_multi(tokens: list[str]) -> list[str]:
    result = list(tokens)
    if GOOD_MULTI in result:
        result = [t for t in result if t != GOOD_MULTI] + list(GOOD_BRIGADES)
    if EVIL_MULTI in result:
        result = [t for t in result if t != EVIL_MULTI] + list(EVIL_BRIGADES)
    return result


def normalize_brigade_field(
    brigade: str,
    alignment: Alignment | str | None,
    card_name: str,
) -> list[str]:
    """
    Resolve a raw brigade field into a sorted list of brigade names.

    Args:
        brigade: Raw brigade text from the catalog
        alignment: Card alignment (enum or raw catalog text)
        card_name: Card name, used for the override tables and errors

    Returns:
        Sorted list of distinct brigade names, each a member of
        GOOD_BRIGADES or EVIL_BRIGADES. Empty for a blank field.

    Raises:
        InvalidBrigadeError: If any token cannot be resolved
    """
    if not isinstance(alignment, Alignment):
        alignment = Alignment.parse(alignment)

    tokens = split_brigade_tokens(brigade)
    if not tokens:
        return []

    tokens = _resolve_multi(tokens, alignment, card_name)

    if _GOLD in tokens:
        gold = resolve_gold(tokens, alignment, card_name)
        if gold is not None:
            tokens = [gold if t == _GOLD else t for t in tokens]

    tokens = _expand_multi(tokens)

    for token in tokens:
        if token not in ALLOWED_BRIGADES:
            raise InvalidBrigadeError(card_name, token)

    return sorted(set(tokens))


def join_brigades(brigades: list[str]) -> str:
    """Join a normalized brigade list for storage on a Card."""
    return "/".join(brigades)


def normalize_card_brigade(card: Card) -> list[str]:
    """
    Normalize a card's raw brigade, falling back on bad data.

    A card with an unresolvable brigade keeps its raw text as a single
    brigade so one bad row never blocks the rest of the catalog.
    """
    try:
        return normalize_brigade_field(card.brigade, card.alignment, card.name)
    except InvalidBrigadeError as e:
        logger.warning("Brigade fallback for %s (%s): %s", card.name, card.set, e)
        return [card.brigade] if card.brigade else []
