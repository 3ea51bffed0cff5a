from dataclasses import dataclass
from enum import Enum


class Alignment(str, Enum):
    """Card alignment as printed in the catalog."""

    GOOD = "Good"
    EVIL = "Evil"
    NEUTRAL = "Neutral"
    GOOD_EVIL = "Good/Evil"

    @classmethod
    def parse(cls, text: str | None) -> "Alignment | None":
        """
        Parse catalog alignment text.

        Returns None for blank or unrecognized text, which callers treat
        as "unspecified".
        """
        if not text:
            return None
        try:
            return cls(text.strip())
        except ValueError:
            return None


@dataclass(frozen=True, slots=True)
class Card:
    """
    One printed card variant from the catalog.

    Attributes:
        name: Card name exactly as it appears in the catalog
        set: Printing/edition code (e.g., "PoC", "RoJ")
        img_file: Image key for the card art
        official_set: Official set name
        type: Card type, possibly slash-joined (e.g., "Hero/GE")
        brigade: Canonical slash-joined sorted brigades once normalized
        card_class: Sub-type tags such as "Warrior" or "Territory"
        special_ability: Special ability text (may be blank)
        reference: Scripture reference text
        alignment: "Good", "Evil", "Neutral" or "Good/Evil"
        legality: Rotation status
        testament: "", "OT", "NT" or "NT/OT" once classified
        is_gospel: True if any reference is from a Gospel book
    """

    name: str = ""
    set: str = ""
    img_file: str = ""
    official_set: str = ""
    type: str = ""
    brigade: str = ""
    strength: str = ""
    toughness: str = ""
    card_class: str = ""
    identifier: str = ""
    special_ability: str = ""
    rarity: str = ""
    reference: str = ""
    alignment: str = ""
    legality: str = ""
    testament: str = ""
    is_gospel: bool = False

    @property
    def identity(self) -> tuple[str, str]:
        """(name, set) pair identifying this printing."""
        return (self.name, self.set)

    @property
    def brigades(self) -> list[str]:
        """Brigade field split into a list."""
        if not self.brigade:
            return []
        return self.brigade.split("/")

    @property
    def is_lost_soul(self) -> bool:
        return "lost soul" in self.type.lower()

    @property
    def is_dominant(self) -> bool:
        return "dominant" in self.type.lower()

    @property
    def has_special_ability(self) -> bool:
        return bool(self.special_ability.strip())
