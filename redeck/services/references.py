"""
Scripture reference classification.

Derives testament and Gospel tags from a card's reference field. These
tags feed search filtering only; they play no part in deck legality.
"""

import re
from dataclasses import dataclass

OT_BOOKS: frozenset[str] = frozenset(
    {
        "genesis", "exodus", "leviticus", "numbers", "deuteronomy",
        "joshua", "judges", "ruth", "samuel", "kings", "chronicles",
        "ezra", "nehemiah", "esther", "job", "psalms", "proverbs",
        "ecclesiastes", "song of solomon", "isaiah", "jeremiah",
        "lamentations", "ezekiel", "daniel", "hosea", "joel", "amos",
        "obadiah", "jonah", "micah", "nahum", "habakkuk", "zephaniah",
        "haggai", "zechariah", "malachi",
    }
)  # fmt: skip

NT_BOOKS: frozenset[str] = frozenset(
    {
        "matthew", "mark", "luke", "john", "acts", "romans",
        "corinthians", "galatians", "ephesians", "philippians",
        "colossians", "thessalonians", "timothy", "titus", "philemon",
        "hebrews", "james", "peter", "jude", "revelation",
    }
)  # fmt: skip

GOSPEL_BOOKS: tuple[str, ...] = ("matthew", "mark", "luke", "john")

# Leading book numbers: "II Samuel", "1 John", "Three John"
_ORDINAL_PREFIX = re.compile(r"^(i{1,3}|1|2|3|4|one|two|three|four)\s+", re.IGNORECASE)


@dataclass(frozen=True, slots=True)
class TestamentInfo:
    """Testament tags for a reference field."""

    testament: str
    is_gospel: bool


def split_references(reference: str) -> list[str]:
    """
    Split a reference field into individual references.

    Segments are separated by ";". A parenthetical list of alternates
    yields the main reference plus each comma-separated alternate:

        "Genesis 1:1; Mark 2 (Luke 5, John 3)"
        -> ["Genesis 1:1", "Mark 2", "Luke 5", "John 3"]
    """
    references: list[str] = []

    for group in reference.split(";"):
        group = group.strip()
        if not group:
            continue

        if "(" in group and ")" in group:
            main = group.split("(", 1)[0].strip()
            if main:
                references.append(main)
            inner = group[group.index("(") + 1 : group.index(")")]
            references.extend(r.strip() for r in inner.split(",") if r.strip())
        else:
            references.append(group)

    return references


def _book_candidates(reference: str) -> tuple[str, str]:
    ref = reference.lower()
    book = ref.split(" ")[0]
    stripped = _ORDINAL_PREFIX.sub("", ref).strip()
    if stripped.startswith("song of solomon"):
        return book, "song of solomon"
    return book, stripped.split(" ")[0]


def classify_reference(reference: str) -> TestamentInfo:
    """
    Classify a reference field by testament.

    Returns:
        TestamentInfo with testament "" (no match), "OT", "NT", or "NT/OT"
        when references span both testaments.
    """
    references = split_references(reference or "")
    found: set[str] = set()

    for ref in references:
        candidates = _book_candidates(ref)
        if any(c in NT_BOOKS for c in candidates):
            found.add("NT")
        if any(c in OT_BOOKS for c in candidates):
            found.add("OT")

    lowered = [r.lower() for r in references]
    is_gospel = any(r.startswith(book) for r in lowered for book in GOSPEL_BOOKS)

    return TestamentInfo(testament="/".join(sorted(found)), is_gospel=is_gospel)


def _chapter_verse(text: str) -> tuple[int, str]:
    chapter, _, verses = text.partition(":")
    return int(chapter), verses


def is_nativity_reference(reference: str) -> bool:
    """
    True for references to the Nativity narratives.

    Matches Matthew 1:18-25, all of Matthew 2, and Luke 1-2.
    """
    ref = reference.strip()

    try:
        if ref.startswith("Matthew "):
            chapter, verses = _chapter_verse(ref.removeprefix("Matthew "))
            if chapter == 2:
                return True
            if chapter != 1 or not verses:
                return False
            if "-" in verses:
                start, end = (int(v) for v in verses.split("-", 1))
                return start >= 18 and end <= 25
            return 18 <= int(verses) <= 25

        if ref.startswith("Luke "):
            chapter, _ = _chapter_verse(ref.removeprefix("Luke "))
            return chapter in (1, 2)
    except ValueError:
        return False

    return False
