"""
Lackey deck text import/export.

Format:
    <quantity>\\t<card name>[\\t<set>]
    ...
    Reserve:
    <quantity>\\t<card name>
    Tokens:
    <ignored>

Cards after "Reserve:" go to the Reserve. Everything after "Tokens:" is
ignored. Import problems are collected and returned, never raised, so the
caller can decide whether a partial import is acceptable.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from redeck.models.card import Card
from redeck.models.deck import Deck, DeckCard, DeckFormat
from redeck.parsers.catalog import normalize_card_name

if TYPE_CHECKING:
    from redeck.services.catalog import CardCatalog

RESERVE_MARKER = "reserve:"
TOKENS_MARKER = "tokens:"


@dataclass
class ImportResult:
    """
    Result of parsing deck text.

    Attributes:
        deck: Parsed deck, or None if no card could be matched
        warnings: Non-fatal notes (e.g., ambiguous printings)
        errors: Lines that could not be imported
    """

    deck: Deck | None
    warnings: list[str] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)


def _resolve_card(
    catalog: CardCatalog,
    card_name: str,
    set_name: str | None,
    line_num: int,
    warnings: list[str],
) -> Card | None:
    card = catalog.find(card_name, set_name)
    if card is None:
        return None

    printings = catalog.find_by_name(card_name)
    if len(printings) > 1 and set_name not in (card.set, card.official_set):
        warnings.append(
            f'Line {line_num}: Multiple versions of "{card_name}" found, using {card.set}'
        )
    return card


def parse_deck_text(
    text: str,
    catalog: CardCatalog,
    name: str = "Imported Deck",
    format: DeckFormat = DeckFormat.TYPE_1,
    paragon: str | None = None,
) -> ImportResult:
    """
    Parse Lackey deck text against a card catalog.

    Args:
        text: Raw deck text (clipboard paste or file contents)
        catalog: Normalized catalog used to resolve card names
        name: Name for the imported deck
        format: Format for the imported deck
        paragon: Paragon name for Paragon decks

    Returns:
        ImportResult. Repeated lines for the same printing and zone are
        folded into one entry.
    """
    deck = Deck(name=name, format=format, paragon=paragon)
    warnings: list[str] = []
    errors: list[str] = []
    is_reserve = False

    for line_num, raw_line in enumerate(text.strip().split("\n"), 1):
        line = raw_line.strip()
        if not line:
            continue

        marker = line.lower()
        if marker == TOKENS_MARKER:
            break
        if marker == RESERVE_MARKER:
            is_reserve = True
            continue

        parts = line.split("\t")
        if len(parts) < 2:
            errors.append(f"Line {line_num}: Invalid format (expected tab-separated values)")
            continue

        quantity_str = parts[0].strip()
        card_name = normalize_card_name(parts[1].strip())
        set_name = parts[2].strip() if len(parts) >= 3 else None

        try:
            quantity = int(quantity_str)
        except ValueError:
            quantity = 0
        if quantity < 1:
            errors.append(
                f'Line {line_num}: Invalid quantity "{quantity_str}" (must be at least 1)'
            )
            continue

        card = _resolve_card(catalog, card_name, set_name, line_num, warnings)
        if card is None:
            errors.append(f'Line {line_num}: Card not found: "{card_name}"')
            continue

        deck.add_card(card, quantity, is_reserve=is_reserve)

    return ImportResult(
        deck=deck if deck.cards else None,
        warnings=warnings,
        errors=errors,
    )


def _format_line(dc: DeckCard, include_sets: bool) -> str:
    line = f"{dc.quantity}\t{normalize_card_name(dc.card.name)}"
    if include_sets and dc.card.set:
        line += f"\t{dc.card.set}"
    return line


def generate_deck_text(deck: Deck, include_sets: bool = False) -> str:
    """
    Render a deck as Lackey deck text.

    Cards are sorted by name within each zone. With include_sets, each
    line carries the printing's set so re-importing picks the same
    printing.
    """

    def sort_key(dc: DeckCard) -> tuple[str, str]:
        return (dc.card.name.lower(), dc.card.set)

    lines = [_format_line(dc, include_sets) for dc in sorted(deck.main_deck, key=sort_key)]

    reserve = sorted(deck.reserve, key=sort_key)
    if reserve:
        lines.append("")
        lines.append("Reserve:")
        lines.extend(_format_line(dc, include_sets) for dc in reserve)

    return "\n".join(lines)
