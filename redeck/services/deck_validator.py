"""
Deck validation against Redemption construction rules.

Rules summary:

1. Main deck size: Type 1 50-154, Type 2 100-252, Paragon exactly 40.
2. Lost Souls: one per 7 main deck cards, starting at 7 for 50-56 cards.
   Counted from the main deck only; Hopper Lost Souls do not count.
   Paragon decks may not contain Lost Souls at all.
3. Reserve size: Type 1 10, Type 2 15, Paragon 10.
4. No Dominants or Lost Souls in the Reserve.
5. One copy of each Dominant.
6. Total Dominants may not exceed the Lost Soul requirement
   (Paragon: flat cap of 7).
7. Type 2: equal Good and Evil cards, checked separately for main deck
   and Reserve.
8. Lost Souls with special abilities: unique in Type 1, 2 copies in Type 2.
9. Paragon: exact brigade bucket quotas (see services/paragon.py).

Validation is pure. Violations are collected as issues, never raised, and
every rule is evaluated on each pass.
"""

import math
from dataclasses import dataclass

from redeck.config import (
    PARAGON_MAX_DOMINANTS,
    TYPE_1_MAX_ABILITY_SOUL_COPIES,
    TYPE_2_MAX_ABILITY_SOUL_COPIES,
)
from redeck.models.card import Card
from redeck.models.deck import Deck, DeckCard, DeckFormat
from redeck.models.validation import (
    DeckValidation,
    IssueCategory,
    IssueType,
    ValidationIssue,
    ValidationStats,
)
from redeck.services.paragon import check_paragon_compliance

# Lost Soul requirement table runs in 7-card bands from 50 to 252
_SOUL_TABLE_MIN = 50
_SOUL_TABLE_MAX = 252
_SOUL_BAND = 7
_SOUL_BASE = 7

_HOPPER_NAME = "hopper"
_HOPPER_REFERENCE = "ii chronicles 28:13"


@dataclass(frozen=True, slots=True)
class FormatLimits:
    """Size limits for a deck format."""

    min_main: int
    max_main: int
    max_reserve: int


FORMAT_LIMITS: dict[DeckFormat, FormatLimits] = {
    DeckFormat.TYPE_1: FormatLimits(min_main=50, max_main=154, max_reserve=10),
    DeckFormat.TYPE_2: FormatLimits(min_main=100, max_main=252, max_reserve=15),
    DeckFormat.PARAGON: FormatLimits(min_main=40, max_main=40, max_reserve=10),
}


def format_limits(fmt: DeckFormat) -> FormatLimits:
    return FORMAT_LIMITS[fmt]


def required_lost_souls(main_deck_size: int) -> int:
    """
    Lost Souls required for a main deck size.

    50-56 cards need 7, 57-63 need 8, and so on up to 35 for 246-252.
    Below 50 there is no valid requirement and 0 is returned.
    """
    if main_deck_size < _SOUL_TABLE_MIN:
        return 0
    if main_deck_size <= _SOUL_TABLE_MAX:
        return (main_deck_size - _SOUL_TABLE_MIN) // _SOUL_BAND + _SOUL_BASE
    return math.ceil((main_deck_size - _SOUL_TABLE_MIN) / _SOUL_BAND) + _SOUL_BASE


def is_hopper_lost_soul(card: Card) -> bool:
    """
    Hopper Lost Souls (II Chronicles 28:13) don't count toward the
    Lost Soul requirement.
    """
    if not card.is_lost_soul:
        return False
    name = card.name.lower()
    return (
        _HOPPER_NAME in name
        or _HOPPER_REFERENCE in name
        or _HOPPER_REFERENCE in card.reference.lower()
    )


def _quantity(cards: list[DeckCard]) -> int:
    return sum(dc.quantity for dc in cards)


def _error(category: IssueCategory, message: str) -> ValidationIssue:
    return ValidationIssue(type=IssueType.ERROR, category=category, message=message)


def _check_size(size: int, fmt: DeckFormat, limits: FormatLimits) -> list[ValidationIssue]:
    if size < limits.min_main:
        return [
            _error(
                IssueCategory.SIZE,
                f"Main deck is too small: {size} cards "
                f"(minimum {limits.min_main} for {fmt.value})",
            )
        ]
    if size > limits.max_main:
        return [
            _error(
                IssueCategory.SIZE,
                f"Main deck is too large: {size} cards "
                f"(maximum {limits.max_main} for {fmt.value})",
            )
        ]
    return []


def _check_lost_souls(
    deck: Deck, main_size: int, main_souls: int, required: int, limits: FormatLimits
) -> list[ValidationIssue]:
    if deck.format == DeckFormat.PARAGON:
        soul_count = _quantity([dc for dc in deck.cards if dc.card.is_lost_soul])
        if soul_count:
            return [
                _error(
                    IssueCategory.SOULS,
                    f"Lost Souls are not allowed in Paragon format: found {soul_count}",
                )
            ]
        return []

    if main_size < limits.min_main:
        return []

    if main_souls < required:
        return [
            _error(
                IssueCategory.SOULS,
                f"Not enough Lost Souls in Main Deck: {main_souls}/{required} required "
                f"for {main_size} cards ({required - main_souls} missing)",
            )
        ]
    if main_souls > required:
        return [
            _error(
                IssueCategory.SOULS,
                f"Too many Lost Souls in Main Deck: {main_souls}/{required} required "
                f"for {main_size} cards ({main_souls - required} extra)",
            )
        ]
    return []


def _check_reserve(
    reserve: list[DeckCard], reserve_size: int, fmt: DeckFormat, limits: FormatLimits
) -> list[ValidationIssue]:
    issues: list[ValidationIssue] = []

    if reserve_size > limits.max_reserve:
        issues.append(
            _error(
                IssueCategory.RESERVE,
                f"Reserve is too large: {reserve_size} cards "
                f"(maximum {limits.max_reserve} for {fmt.value})",
            )
        )

    for dc in reserve:
        if dc.card.is_dominant:
            issues.append(
                _error(
                    IssueCategory.RESERVE,
                    f'Dominants cannot be in Reserve: "{dc.card.name}" must be in Main Deck',
                )
            )
    for dc in reserve:
        if dc.card.is_lost_soul:
            issues.append(
                _error(
                    IssueCategory.RESERVE,
                    f'Lost Souls cannot be in Reserve: "{dc.card.name}" must be in Main Deck',
                )
            )

    return issues


def _count_by_name(cards: list[DeckCard]) -> dict[str, tuple[str, int]]:
    """Sum quantities by case-insensitive name, keeping the first display name."""
    counts: dict[str, tuple[str, int]] = {}
    for dc in cards:
        key = dc.card.name.lower()
        display, count = counts.get(key, (dc.card.name, 0))
        counts[key] = (display, count + dc.quantity)
    return counts


def _check_dominants(
    deck: Deck, main_size: int, dominant_count: int, required: int, limits: FormatLimits
) -> list[ValidationIssue]:
    issues: list[ValidationIssue] = []

    dominants = [dc for dc in deck.cards if dc.card.is_dominant]
    for name, quantity in _count_by_name(dominants).values():
        # One error per copy beyond the first
        for copy in range(2, quantity + 1):
            issues.append(
                _error(
                    IssueCategory.DOMINANTS,
                    f'Duplicate Dominant "{name}": copy {copy} of {quantity} (1 allowed)',
                )
            )

    if deck.format == DeckFormat.PARAGON:
        if dominant_count > PARAGON_MAX_DOMINANTS:
            issues.append(
                _error(
                    IssueCategory.DOMINANTS,
                    f"Too many Dominants: {dominant_count}/{PARAGON_MAX_DOMINANTS} "
                    "maximum for Paragon format",
                )
            )
    elif main_size >= limits.min_main and dominant_count > required:
        issues.append(
            _error(
                IssueCategory.DOMINANTS,
                f"Too many Dominants: {dominant_count}/{required} maximum "
                f"for {main_size}-card deck",
            )
        )

    return issues


def _alignment_parity(cards: list[DeckCard], zone: str) -> list[ValidationIssue]:
    good = _quantity([dc for dc in cards if dc.card.alignment.strip() == "Good"])
    evil = _quantity([dc for dc in cards if dc.card.alignment.strip() == "Evil"])

    if good == evil:
        return []

    needed, short = (good - evil, "Evil") if good > evil else (evil - good, "Good")
    return [
        _error(
            IssueCategory.FORMAT,
            f"Type 2 {zone} must have equal Good and Evil cards: "
            f"{good} Good, {evil} Evil ({needed} more {short} needed)",
        )
    ]


def _check_ability_soul_copies(deck: Deck) -> list[ValidationIssue]:
    match deck.format:
        case DeckFormat.TYPE_1:
            limit = TYPE_1_MAX_ABILITY_SOUL_COPIES
        case DeckFormat.TYPE_2:
            limit = TYPE_2_MAX_ABILITY_SOUL_COPIES
        case DeckFormat.PARAGON:
            return []

    souls = [dc for dc in deck.cards if dc.card.is_lost_soul and dc.card.has_special_ability]
    issues: list[ValidationIssue] = []
    for name, quantity in _count_by_name(souls).values():
        if quantity > limit:
            issues.append(
                _error(
                    IssueCategory.QUANTITY,
                    f'Too many copies of Lost Soul "{name}": {quantity}/{limit} maximum '
                    f"for {deck.format.value}",
                )
            )
    return issues


def validate_deck(deck: Deck) -> DeckValidation:
    """
    Validate a deck according to Redemption construction rules.

    Args:
        deck: Deck to validate (not modified)

    Returns:
        DeckValidation with every issue found and aggregate stats.
        is_valid is True when no error-level issue was raised.
    """
    fmt = deck.format
    limits = format_limits(fmt)

    main_deck = deck.main_deck
    reserve = deck.reserve

    main_size = _quantity(main_deck)
    reserve_size = _quantity(reserve)
    main_souls = _quantity(
        [dc for dc in main_deck if dc.card.is_lost_soul and not is_hopper_lost_soul(dc.card)]
    )
    dominant_count = _quantity([dc for dc in deck.cards if dc.card.is_dominant])
    required = 0 if fmt == DeckFormat.PARAGON else required_lost_souls(main_size)

    issues: list[ValidationIssue] = []
    issues += _check_size(main_size, fmt, limits)
    issues += _check_lost_souls(deck, main_size, main_souls, required, limits)
    issues += _check_reserve(reserve, reserve_size, fmt, limits)
    issues += _check_dominants(deck, main_size, dominant_count, required, limits)

    if fmt == DeckFormat.TYPE_2:
        issues += _alignment_parity(main_deck, "Main Deck")
        issues += _alignment_parity(reserve, "Reserve")

    issues += _check_ability_soul_copies(deck)

    paragon_stats = None
    if fmt == DeckFormat.PARAGON:
        paragon_issues, paragon_stats = check_paragon_compliance(deck)
        issues += paragon_issues

    total_cards = main_size + reserve_size
    if total_cards == 0:
        issues.append(
            ValidationIssue(
                type=IssueType.INFO,
                category=IssueCategory.SIZE,
                message="Deck is empty",
            )
        )

    return DeckValidation(
        is_valid=not any(issue.type == IssueType.ERROR for issue in issues),
        issues=issues,
        stats=ValidationStats(
            total_cards=total_cards,
            main_deck_size=main_size,
            reserve_size=reserve_size,
            lost_soul_count=main_souls,
            required_lost_souls=required,
            dominant_count=dominant_count,
        ),
        paragon_stats=paragon_stats,
    )


def validation_summary(validation: DeckValidation) -> str:
    """One-line status for a validation result."""
    if validation.stats.total_cards == 0:
        return "Empty deck"
    if validation.is_valid:
        return "Valid deck"

    error_count = len(validation.errors)
    return f"{error_count} error{'' if error_count == 1 else 's'}"
