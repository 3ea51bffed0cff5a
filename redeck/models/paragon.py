"""
Paragon quota table.

Each Paragon character names a primary Good brigade and a primary Evil
brigade and fixes how many cards of the 50-card deck (40 main + 10 reserve)
must come from each alignment bucket. Lost Souls are not allowed in Paragon
decks and are excluded from every bucket.
"""

from dataclasses import dataclass

# Main deck + reserve
PARAGON_DECK_TOTAL = 50


@dataclass(frozen=True, slots=True)
class ParagonQuota:
    """
    Brigade quotas for one Paragon character.

    Attributes:
        name: Character name
        good_brigade: Primary Good brigade
        evil_brigade: Primary Evil brigade
        primary_good: Good cards required from good_brigade
        other_good: Good cards required from any other brigade
        neutral: Neutral cards required
        primary_evil: Evil cards required from evil_brigade
        other_evil: Evil cards required from any other brigade
        title: Paragon title (e.g., "Paragon of Faith")
        reference: Scripture reference printed on the Paragon
    """

    name: str
    good_brigade: str
    evil_brigade: str
    primary_good: int
    other_good: int
    neutral: int
    primary_evil: int
    other_evil: int
    title: str = ""
    reference: str = ""

    @property
    def total(self) -> int:
        return (
            self.primary_good + self.other_good + self.neutral + self.primary_evil + self.other_evil
        )


PARAGONS: tuple[ParagonQuota, ...] = (
    ParagonQuota("Abraham", "Blue", "Black", 11, 14, 5, 10, 10, "Paragon of Faith", "Genesis 15:5-6"),
    ParagonQuota("Judah", "Blue", "Brown", 12, 12, 5, 11, 10, "Paragon of Substitution", "Genesis 44:32-33"),
    ParagonQuota("Eve", "Blue", "Crimson", 11, 13, 6, 10, 10, "Paragon of Motherhood", "Genesis 3:15"),
    ParagonQuota("Rachel", "Blue", "Gray", 13, 12, 4, 11, 10, "Paragon of Favor", "Genesis 30:22-23"),
    ParagonQuota("Reuben", "Blue", "Orange", 12, 13, 4, 11, 10, "Paragon of Rescue", "Genesis 37:21-22"),
    ParagonQuota("Joseph", "Blue", "Pale Green", 13, 11, 6, 11, 9, "Paragon of Forgiveness", "Genesis 45:4-5"),
    ParagonQuota("Titus", "Clay", "Black", 12, 12, 5, 11, 10, "Paragon of Order", "Titus 1:4-5"),
    ParagonQuota("Zadok", "Clay", "Brown", 13, 11, 6, 9, 11, "Paragon of Dedication", "I Kings 1:38-39"),
    ParagonQuota("Phinehas", "Clay", "Crimson", 13, 12, 5, 11, 9, "Paragon of Zeal", "Numbers 25:10-11"),
    ParagonQuota("Aaron", "Clay", "Gray", 11, 13, 6, 10, 10, "Paragon of Priesthood", "Exodus 28:1-2"),
    ParagonQuota("Claudia", "Clay", "Orange", 11, 14, 4, 9, 12, "Paragon of Hospitality", "II Timothy 4:21-22"),
    ParagonQuota("Melchizedek", "Clay", "Pale Green", 12, 13, 4, 11, 10, "Paragon of Blessing", "Genesis 14:18-19"),
    ParagonQuota("Rahab", "Gold", "Black", 13, 11, 6, 11, 9, "Paragon of Kindness", "Joshua 2:11-12"),
    ParagonQuota("Joshua", "Gold", "Brown", 11, 14, 4, 9, 12, "Paragon of Obedience", "Joshua 1:16-17"),
    ParagonQuota("Caleb", "Gold", "Crimson", 12, 12, 6, 9, 11, "Paragon of Inheritance", "Joshua 14:13-14"),
    ParagonQuota("Deborah", "Gold", "Gray", 11, 13, 5, 9, 12, "Paragon of Justice", "Judges 4:4-5"),
    ParagonQuota("Gideon", "Gold", "Orange", 12, 13, 4, 10, 11, "Paragon of Humility", "Judges 6:15-16"),
    ParagonQuota("Jephthah", "Gold", "Pale Green", 13, 12, 5, 11, 9, "Paragon of Deliverance", "Judges 11:11"),
    ParagonQuota("Samuel", "Green", "Black", 11, 14, 5, 9, 11, "Paragon of Leadership", "I Samuel 7:15-17"),
    ParagonQuota("Jeremiah", "Green", "Brown", 12, 12, 5, 10, 11, "Paragon of Lament", "Jeremiah 7:1-2"),
    ParagonQuota("David", "Green", "Crimson", 11, 13, 6, 10, 10, "Paragon of Bravery", "I Samuel 17:37"),
    ParagonQuota("Hannah", "Green", "Gray", 13, 12, 4, 10, 11, "Paragon of Prayer", "I Samuel 1:26-27"),
    ParagonQuota("Malachi", "Green", "Orange", 12, 13, 4, 11, 10, "Paragon of Warning", "Malachi 3:5"),
    ParagonQuota("Nathan", "Green", "Pale Green", 13, 11, 6, 9, 11, "Paragon of Rebuke", "II Samuel 12:7"),
    ParagonQuota("Jonathan", "Purple", "Black", 13, 12, 4, 9, 12, "Paragon of Loyalty", "I Samuel 20:16-17"),
    ParagonQuota("Esther", "Purple", "Brown", 13, 11, 6, 11, 9, "Paragon of Courage", "Esther 4:16"),
    ParagonQuota("Abigail", "Purple", "Crimson", 11, 14, 4, 11, 10, "Paragon of Wisdom", "I Samuel 25:32-33"),
    ParagonQuota("Abishai", "Purple", "Gray", 12, 12, 6, 9, 11, "Paragon of Might", "II Samuel 23:18-19"),
    ParagonQuota("Peter", "Purple", "Orange", 11, 13, 5, 10, 11, "Paragon of Boldness", "Matthew 16:15-17"),
    ParagonQuota("Benaiah", "Purple", "Pale Green", 12, 13, 5, 10, 10, "Paragon of Prowess", "II Samuel 23:21"),
    ParagonQuota("Zechariah", "Silver", "Black", 13, 12, 5, 9, 11, "Paragon of Visions", "Zechariah 1:9-10"),
    ParagonQuota("Job", "Silver", "Brown", 13, 11, 5, 9, 12, "Paragon of Patience", "Job 2:3"),
    ParagonQuota("Ezekiel", "Silver", "Crimson", 12, 12, 6, 11, 9, "Paragon of Prophecy", "Ezekiel 1:2-3"),
    ParagonQuota("Jacob", "Silver", "Gray", 12, 13, 4, 9, 12, "Paragon of Perserverance", "Genesis 32:27-28"),
    ParagonQuota("John", "Silver", "Orange", 11, 14, 4, 9, 12, "Paragon of Witness", "John 21:24-25"),
    ParagonQuota("Isaiah", "Silver", "Pale Green", 11, 13, 6, 10, 10, "Paragon of Hope", "Isaiah 6:7-8"),
    ParagonQuota("Boaz", "White", "Black", 12, 13, 4, 10, 11, "Paragon of Generosity", "Ruth 2:15-16"),
    ParagonQuota("Moses", "White", "Brown", 12, 12, 6, 10, 10, "Paragon of Command", "Exodus 24:12"),
    ParagonQuota("Chenaniah", "White", "Crimson", 11, 14, 4, 10, 11, "Paragon of Song", "I Chronicles 15:22"),
    ParagonQuota("Ruth", "White", "Gray", 13, 12, 5, 11, 9, "Paragon of Devotion", "Ruth 1:16"),
    ParagonQuota("Daniel", "White", "Orange", 11, 13, 6, 9, 11, "Paragon of Insight", "Daniel 2:27-28"),
    ParagonQuota("Miriam", "White", "Pale Green", 13, 11, 5, 10, 11, "Paragon of Praise", "Exodus 15:20-21"),
)

_PARAGONS_BY_NAME: dict[str, ParagonQuota] = {p.name.lower(): p for p in PARAGONS}


def get_paragon(name: str | None) -> ParagonQuota | None:
    """Look up a Paragon by name (case-insensitive)."""
    if not name:
        return None
    return _PARAGONS_BY_NAME.get(name.strip().lower())


def get_paragon_names() -> list[str]:
    """All Paragon names in table order."""
    return [p.name for p in PARAGONS]
