"""Tests for deck validation."""

import pytest

from redeck.models.card import Card
from redeck.models.deck import Deck, DeckFormat
from redeck.models.validation import IssueCategory, IssueType
from redeck.services.deck_validator import (
    format_limits,
    is_hopper_lost_soul,
    required_lost_souls,
    validate_deck,
    validation_summary,
)

HERO = Card(name="Moses", set="Pa", type="Hero", brigade="White", alignment="Good")
EVIL = Card(name="Pharaoh", set="Pa", type="Evil Character", brigade="Black", alignment="Evil")
SON_OF_GOD = Card(name="Son of God", set="Pa", type="Dominant", alignment="Good")
HOPPER = Card(
    name="Lost Soul (Hopper)",
    set="Pa",
    type="Lost Soul",
    alignment="Neutral",
    reference="II Chronicles 28:13",
)


def lost_soul(index: int, ability: str = "Cannot be rescued by a Hero with a weapon.") -> Card:
    return Card(
        name=f"Lost Soul (Proverbs {index})",
        set="Pa",
        type="Lost Soul",
        alignment="Neutral",
        special_ability=ability,
        reference=f"Proverbs {index}:1",
    )


def dominant(name: str) -> Card:
    return Card(name=name, set="Pa", type="Dominant", alignment="Good")


def type_1_deck(souls: int = 7, size: int = 50) -> Deck:
    """Type 1 deck with `souls` unique Lost Souls, padded with Heroes."""
    deck = Deck(format=DeckFormat.TYPE_1)
    for i in range(souls):
        deck.add_card(lost_soul(i + 1))
    if size > souls:
        deck.add_card(HERO, size - souls)
    return deck


def errors_in(result, category: IssueCategory) -> list[str]:
    return [i.message for i in result.issues_in(category) if i.type == IssueType.ERROR]


class TestRequiredLostSouls:
    """Tests for the Lost Soul requirement table."""

    @pytest.mark.parametrize(
        ("size", "required"),
        [
            (0, 0),
            (49, 0),
            (50, 7),
            (56, 7),
            (57, 8),
            (63, 8),
            (64, 9),
            (100, 14),
            (154, 21),
            (252, 35),
            (253, 36),
            (260, 37),
        ],
    )
    def test_table(self, size: int, required: int) -> None:
        assert required_lost_souls(size) == required


class TestFormatLimits:
    """Tests for per-format size limits."""

    def test_type_1(self) -> None:
        limits = format_limits(DeckFormat.TYPE_1)
        assert (limits.min_main, limits.max_main, limits.max_reserve) == (50, 154, 10)

    def test_type_2(self) -> None:
        limits = format_limits(DeckFormat.TYPE_2)
        assert (limits.min_main, limits.max_main, limits.max_reserve) == (100, 252, 15)

    def test_paragon(self) -> None:
        limits = format_limits(DeckFormat.PARAGON)
        assert (limits.min_main, limits.max_main, limits.max_reserve) == (40, 40, 10)


class TestHopperLostSoul:
    """Tests for Hopper Lost Soul detection."""

    def test_reference_match(self) -> None:
        assert is_hopper_lost_soul(HOPPER) is True

    def test_name_match(self) -> None:
        card = Card(name="Lost Soul Hopper", type="Lost Soul")
        assert is_hopper_lost_soul(card) is True

    def test_regular_lost_soul(self) -> None:
        assert is_hopper_lost_soul(lost_soul(1)) is False

    def test_non_lost_soul_never_matches(self) -> None:
        card = Card(name="Grasshopper", type="Hero")
        assert is_hopper_lost_soul(card) is False


class TestSizeRules:
    """Tests for main deck and reserve size rules."""

    def test_valid_type_1_deck(self) -> None:
        """50 cards with 7 unique ability Lost Souls is legal."""
        result = validate_deck(type_1_deck())

        assert result.is_valid is True
        assert result.issues == []
        assert result.stats.main_deck_size == 50
        assert result.stats.lost_soul_count == 7
        assert result.stats.required_lost_souls == 7

    def test_too_small(self) -> None:
        result = validate_deck(type_1_deck(souls=0, size=30))

        assert errors_in(result, IssueCategory.SIZE) == [
            "Main deck is too small: 30 cards (minimum 50 for Type 1)"
        ]
        # Lost Soul requirement is not checked below the minimum
        assert errors_in(result, IssueCategory.SOULS) == []

    def test_too_large(self) -> None:
        result = validate_deck(type_1_deck(souls=22, size=155))

        assert errors_in(result, IssueCategory.SIZE) == [
            "Main deck is too large: 155 cards (maximum 154 for Type 1)"
        ]

    def test_reserve_cap(self) -> None:
        deck = type_1_deck()
        deck.add_card(EVIL, 11, is_reserve=True)

        result = validate_deck(deck)

        assert errors_in(result, IssueCategory.RESERVE) == [
            "Reserve is too large: 11 cards (maximum 10 for Type 1)"
        ]
        assert result.stats.reserve_size == 11
        assert result.stats.total_cards == 61

    def test_type_2_reserve_allows_fifteen(self) -> None:
        deck = Deck(format=DeckFormat.TYPE_2)
        deck.add_card(HERO, 8, is_reserve=True)
        deck.add_card(EVIL, 8, is_reserve=True)

        result = validate_deck(deck)

        assert errors_in(result, IssueCategory.RESERVE) == [
            "Reserve is too large: 16 cards (maximum 15 for Type 2)"
        ]


class TestLostSoulRules:
    """Tests for the Lost Soul requirement."""

    def test_one_missing(self) -> None:
        """One Lost Soul short is a single souls error naming the deficit."""
        result = validate_deck(type_1_deck(souls=6))

        souls = result.issues_in(IssueCategory.SOULS)
        assert len(souls) == 1
        assert souls[0].type == IssueType.ERROR
        assert "6/7" in souls[0].message
        assert "(1 missing)" in souls[0].message
        assert result.is_valid is False

    def test_surplus(self) -> None:
        result = validate_deck(type_1_deck(souls=8))

        assert errors_in(result, IssueCategory.SOULS) == [
            "Too many Lost Souls in Main Deck: 8/7 required for 50 cards (1 extra)"
        ]

    def test_hopper_does_not_count(self) -> None:
        deck = type_1_deck(souls=7, size=49)
        deck.add_card(HOPPER)

        result = validate_deck(deck)

        assert result.stats.main_deck_size == 50
        assert result.stats.lost_soul_count == 7
        assert errors_in(result, IssueCategory.SOULS) == []

    def test_reserve_souls_do_not_count(self) -> None:
        deck = type_1_deck(souls=6, size=50)
        deck.add_card(lost_soul(99), is_reserve=True)

        result = validate_deck(deck)

        assert result.stats.lost_soul_count == 6
        assert len(errors_in(result, IssueCategory.SOULS)) == 1


class TestReserveComposition:
    """Tests for cards that may not sit in the Reserve."""

    @pytest.mark.parametrize("fmt", list(DeckFormat))
    def test_dominant_in_reserve(self, fmt: DeckFormat) -> None:
        deck = Deck(format=fmt)
        deck.add_card(SON_OF_GOD, is_reserve=True)

        result = validate_deck(deck)

        reserve_errors = errors_in(result, IssueCategory.RESERVE)
        assert len(reserve_errors) == 1
        assert "Son of God" in reserve_errors[0]

    def test_lost_soul_in_reserve(self) -> None:
        deck = type_1_deck()
        deck.add_card(lost_soul(42), is_reserve=True)

        result = validate_deck(deck)

        assert errors_in(result, IssueCategory.RESERVE) == [
            'Lost Souls cannot be in Reserve: "Lost Soul (Proverbs 42)" must be in Main Deck'
        ]

    def test_one_error_per_distinct_card(self) -> None:
        deck = Deck()
        deck.add_card(dominant("Christian Martyr"), is_reserve=True)
        deck.add_card(dominant("Angel at the Tomb"), is_reserve=True)

        result = validate_deck(deck)

        assert len(errors_in(result, IssueCategory.RESERVE)) == 2


class TestDominantRules:
    """Tests for Dominant uniqueness and the Dominant cap."""

    def test_duplicate_dominant(self) -> None:
        deck = type_1_deck(size=49)
        deck.add_card(SON_OF_GOD, 2)

        result = validate_deck(deck)

        assert errors_in(result, IssueCategory.DOMINANTS) == [
            'Duplicate Dominant "Son of God": copy 2 of 2 (1 allowed)'
        ]

    def test_each_excess_copy_is_an_error(self) -> None:
        deck = type_1_deck(size=47)
        deck.add_card(SON_OF_GOD, 3)

        result = validate_deck(deck)

        assert len(errors_in(result, IssueCategory.DOMINANTS)) == 2

    def test_uniqueness_ignores_case_and_printing(self) -> None:
        deck = type_1_deck(size=48)
        deck.add_card(SON_OF_GOD)
        deck.add_card(Card(name="son of god", set="Pri", type="Dominant", alignment="Good"))

        result = validate_deck(deck)

        assert len(errors_in(result, IssueCategory.DOMINANTS)) == 1

    def test_uniqueness_spans_reserve(self) -> None:
        deck = type_1_deck()
        deck.add_card(SON_OF_GOD)
        deck.add_card(SON_OF_GOD, is_reserve=True)

        result = validate_deck(deck)

        assert len(errors_in(result, IssueCategory.DOMINANTS)) == 1
        assert result.stats.dominant_count == 2

    def test_dominant_cap_follows_soul_requirement(self) -> None:
        deck = type_1_deck(size=42)
        for i in range(8):
            deck.add_card(dominant(f"Dominant {i}"))

        result = validate_deck(deck)

        assert result.stats.main_deck_size == 50
        assert errors_in(result, IssueCategory.DOMINANTS) == [
            "Too many Dominants: 8/7 maximum for 50-card deck"
        ]

    def test_dominant_cap_at_limit(self) -> None:
        deck = type_1_deck(size=43)
        for i in range(7):
            deck.add_card(dominant(f"Dominant {i}"))

        result = validate_deck(deck)

        assert errors_in(result, IssueCategory.DOMINANTS) == []
        assert result.is_valid is True


class TestTypeTwoParity:
    """Tests for Type 2 Good/Evil parity."""

    def test_two_more_evil_needed(self) -> None:
        deck = Deck(format=DeckFormat.TYPE_2)
        deck.add_card(HERO, 40)
        deck.add_card(EVIL, 38)

        result = validate_deck(deck)

        parity = result.issues_in(IssueCategory.FORMAT)
        assert len(parity) == 1
        assert parity[0].type == IssueType.ERROR
        assert "2 more Evil" in parity[0].message
        assert "Main Deck" in parity[0].message

    def test_reserve_checked_independently(self) -> None:
        deck = Deck(format=DeckFormat.TYPE_2)
        deck.add_card(HERO, 50)
        deck.add_card(EVIL, 50)
        deck.add_card(EVIL, 3, is_reserve=True)

        result = validate_deck(deck)

        parity = errors_in(result, IssueCategory.FORMAT)
        assert parity == [
            "Type 2 Reserve must have equal Good and Evil cards: 0 Good, 3 Evil "
            "(3 more Good needed)"
        ]

    def test_neutral_and_dual_alignment_ignored(self) -> None:
        deck = Deck(format=DeckFormat.TYPE_2)
        deck.add_card(HERO, 5)
        deck.add_card(EVIL, 5)
        deck.add_card(lost_soul(1))
        deck.add_card(Card(name="Dual", set="Pa", type="Hero/EC", alignment="Good/Evil"), 3)

        result = validate_deck(deck)

        assert errors_in(result, IssueCategory.FORMAT) == []

    def test_not_checked_for_type_1(self) -> None:
        deck = type_1_deck(size=50)

        result = validate_deck(deck)

        assert result.issues_in(IssueCategory.FORMAT) == []


class TestAbilityLostSoulCopies:
    """Tests for copy limits on Lost Souls with special abilities."""

    def test_type_1_allows_one_copy(self) -> None:
        deck = type_1_deck(souls=6, size=49)
        deck.add_card(lost_soul(1))

        result = validate_deck(deck)

        assert errors_in(result, IssueCategory.QUANTITY) == [
            'Too many copies of Lost Soul "Lost Soul (Proverbs 1)": 2/1 maximum for Type 1'
        ]

    def test_type_2_allows_two_copies(self) -> None:
        deck = Deck(format=DeckFormat.TYPE_2)
        deck.add_card(lost_soul(1), 2)

        assert errors_in(validate_deck(deck), IssueCategory.QUANTITY) == []

        deck.add_card(lost_soul(1))

        assert len(errors_in(validate_deck(deck), IssueCategory.QUANTITY)) == 1

    def test_plain_lost_souls_unlimited(self) -> None:
        deck = type_1_deck(souls=0, size=43)
        deck.add_card(lost_soul(1, ability=""), 7)

        result = validate_deck(deck)

        assert errors_in(result, IssueCategory.QUANTITY) == []
        assert result.is_valid is True


class TestParagonFormat:
    """Tests for Paragon-specific validator rules."""

    def test_lost_souls_forbidden(self) -> None:
        deck = Deck(format=DeckFormat.PARAGON, paragon="Judah")
        deck.add_card(lost_soul(1))
        deck.add_card(lost_soul(2))

        result = validate_deck(deck)

        assert errors_in(result, IssueCategory.SOULS) == [
            "Lost Souls are not allowed in Paragon format: found 2"
        ]
        assert result.stats.required_lost_souls == 0

    def test_dominant_cap_of_seven(self) -> None:
        deck = Deck(format=DeckFormat.PARAGON, paragon="Judah")
        for i in range(8):
            deck.add_card(dominant(f"Dominant {i}"))

        result = validate_deck(deck)

        assert errors_in(result, IssueCategory.DOMINANTS) == [
            "Too many Dominants: 8/7 maximum for Paragon format"
        ]

    def test_exactly_forty_main_deck_cards(self) -> None:
        deck = Deck(format=DeckFormat.PARAGON, paragon="Judah")
        deck.add_card(HERO, 41)

        result = validate_deck(deck)

        assert errors_in(result, IssueCategory.SIZE) == [
            "Main deck is too large: 41 cards (maximum 40 for Paragon)"
        ]

    def test_paragon_stats_attached(self) -> None:
        deck = Deck(format=DeckFormat.PARAGON, paragon="Judah")
        deck.add_card(HERO, 40)

        result = validate_deck(deck)

        assert result.paragon_stats is not None
        assert result.paragon_stats.other_good == 40

    def test_other_formats_have_no_paragon_stats(self) -> None:
        assert validate_deck(type_1_deck()).paragon_stats is None


class TestValidateDeck:
    """Tests for whole-deck validation behavior."""

    def test_empty_deck(self) -> None:
        result = validate_deck(Deck())

        infos = [i for i in result.issues if i.type == IssueType.INFO]
        assert [i.message for i in infos] == ["Deck is empty"]
        assert result.stats.total_cards == 0
        assert validation_summary(result) == "Empty deck"

    def test_reports_every_violation(self) -> None:
        """All rules are evaluated in one pass."""
        deck = type_1_deck(souls=6, size=50)
        deck.add_card(SON_OF_GOD, is_reserve=True)
        deck.add_card(HERO, 11, is_reserve=True)

        result = validate_deck(deck)

        categories = {i.category for i in result.errors}
        assert categories == {IssueCategory.SOULS, IssueCategory.RESERVE}
        assert len(result.errors) == 3

    def test_does_not_modify_deck(self) -> None:
        deck = type_1_deck(souls=6)
        before = list(deck.cards)

        validate_deck(deck)

        assert deck.cards == before

    def test_summary(self) -> None:
        assert validation_summary(validate_deck(type_1_deck())) == "Valid deck"
        assert validation_summary(validate_deck(type_1_deck(souls=6))) == "1 error"
        assert validation_summary(validate_deck(type_1_deck(souls=0, size=10))) == "1 error"

        deck = type_1_deck(souls=6)
        deck.add_card(SON_OF_GOD, is_reserve=True)
        assert validation_summary(validate_deck(deck)) == "2 errors"
