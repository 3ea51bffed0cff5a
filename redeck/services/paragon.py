"""
Paragon quota compliance.

A Paragon deck must hit each of its character's five bucket quotas
exactly. Every card except Lost Souls lands in exactly one bucket:

    primary good   Good cards of the Paragon's Good brigade
    other good     all other Good cards
    neutral        Neutral, Good/Evil, or unaligned cards
    primary evil   Evil cards of the Paragon's Evil brigade
    other evil     all other Evil cards

Dominants count into their alignment bucket like any other card and are
also tallied separately for the Paragon Dominant cap.
"""

from redeck.models.card import Alignment, Card
from redeck.models.deck import Deck
from redeck.models.paragon import ParagonQuota, get_paragon
from redeck.models.validation import (
    IssueCategory,
    IssueType,
    ParagonBrigadeStats,
    ValidationIssue,
)

_GOLD_VARIANTS = frozenset({"good gold", "evil gold"})


def has_brigade(card: Card, target: str) -> bool:
    """
    Check whether a card belongs to a brigade.

    Case-insensitive. Multi-brigade cards match if the target appears
    anywhere in their brigade list. A target of "Gold" matches either
    Good Gold or Evil Gold.
    """
    wanted = target.strip().lower()
    brigades = {b.strip().lower() for b in card.brigades}

    if wanted == "gold":
        return bool(brigades & _GOLD_VARIANTS)
    return wanted in brigades


def paragon_brigade_stats(deck: Deck, quota: ParagonQuota) -> ParagonBrigadeStats:
    """Count main deck and reserve cards into the Paragon buckets."""
    stats = ParagonBrigadeStats()

    for dc in deck.cards:
        card = dc.card
        if card.is_lost_soul:
            continue

        if card.is_dominant:
            stats.dominants += dc.quantity

        match Alignment.parse(card.alignment):
            case Alignment.GOOD:
                if has_brigade(card, quota.good_brigade):
                    stats.primary_good += dc.quantity
                else:
                    stats.other_good += dc.quantity
            case Alignment.EVIL:
                if has_brigade(card, quota.evil_brigade):
                    stats.primary_evil += dc.quantity
                else:
                    stats.other_evil += dc.quantity
            case Alignment.NEUTRAL | Alignment.GOOD_EVIL | None:
                stats.neutral += dc.quantity

    return stats


def _bucket_checks(
    quota: ParagonQuota, stats: ParagonBrigadeStats
) -> list[tuple[str, int, int]]:
    return [
        (f"{quota.good_brigade} (primary Good)", quota.primary_good, stats.primary_good),
        ("Other Good", quota.other_good, stats.other_good),
        ("Neutral", quota.neutral, stats.neutral),
        (f"{quota.evil_brigade} (primary Evil)", quota.primary_evil, stats.primary_evil),
        ("Other Evil", quota.other_evil, stats.other_evil),
    ]


def check_paragon_compliance(
    deck: Deck,
) -> tuple[list[ValidationIssue], ParagonBrigadeStats | None]:
    """
    Check a Paragon deck against its character's quotas.

    Returns:
        (issues, stats). A missing Paragon selection yields a warning, an
        unknown Paragon an error; in both cases stats is None.
    """
    if not deck.paragon:
        return [
            ValidationIssue(
                type=IssueType.WARNING,
                category=IssueCategory.PARAGON,
                message="No Paragon selected for Paragon format deck",
            )
        ], None

    quota = get_paragon(deck.paragon)
    if quota is None:
        return [
            ValidationIssue(
                type=IssueType.ERROR,
                category=IssueCategory.PARAGON,
                message=f'Unknown Paragon "{deck.paragon}"',
            )
        ], None

    stats = paragon_brigade_stats(deck, quota)
    issues: list[ValidationIssue] = []

    for label, required, actual in _bucket_checks(quota, stats):
        if actual != required:
            issues.append(
                ValidationIssue(
                    type=IssueType.ERROR,
                    category=IssueCategory.PARAGON,
                    message=(
                        f"{quota.name} requires {required} {label} cards, "
                        f"found {actual}"
                    ),
                )
            )

    return issues, stats
