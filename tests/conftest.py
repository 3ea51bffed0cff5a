from collections.abc import AsyncIterator

import pytest
from httpx import ASGITransport, AsyncClient

from redeck.main import app
from redeck.services import catalog as catalog_module
from redeck.services.catalog import CardCatalog, load_catalog

CATALOG_HEADER = "\t".join(
    [
        "Name",
        "Set",
        "ImageFile",
        "OfficialSet",
        "Type",
        "Brigade",
        "Strength",
        "Toughness",
        "Class",
        "Identifier",
        "SpecialAbility",
        "Rarity",
        "Reference",
        "Sound",
        "Alignment",
        "Legality",
    ]
)


def catalog_row(
    name: str,
    set_code: str = "Pa",
    card_type: str = "Hero",
    brigade: str = "",
    alignment: str = "Good",
    special_ability: str = "",
    reference: str = "",
    official_set: str = "",
) -> str:
    """Build one tab-separated catalog row."""
    return "\t".join(
        [
            name,
            set_code,
            f"{name} ({set_code}).jpg",
            official_set or set_code,
            card_type,
            brigade,
            "5",
            "5",
            "",
            "",
            special_ability,
            "Common",
            reference,
            "",
            alignment,
            "Rotation",
        ]
    )


@pytest.fixture(autouse=True)
def clear_catalog_snapshot():
    """Reset the process-wide catalog between tests."""
    catalog_module.set_catalog(None)
    yield
    catalog_module.set_catalog(None)


@pytest.fixture
def sample_catalog_text() -> str:
    """Small catalog covering brigade, testament and printing edge cases."""
    rows = [
        catalog_row("Moses", "Pa", "Hero", "White", "Good", reference="Exodus 2:10"),
        catalog_row("Moses", "Pri", "Hero", "White", "Good", reference="Exodus 3:10"),
        catalog_row("Abraham", "PoC", "Hero", "Blue", "Good", reference="Genesis 11:26"),
        catalog_row(
            "Pharaoh's Court",
            "Pa",
            "Evil Character",
            "Black/Brown",
            "Evil",
            reference="Exodus 5:2",
        ),
        catalog_row("Angel of the Lord", "Pa", "Hero", "Multi", "Good", reference="Luke 2:9"),
        catalog_row(
            "Son of God",
            "Pa",
            "Dominant",
            "",
            "Good",
            reference="Matthew 16:16 (Mark 8:29, Genesis 3:15)",
        ),
        catalog_row(
            "Lost Soul (Proverbs 2:16)",
            "Pa",
            "Lost Soul",
            "",
            "Neutral",
            special_ability="Protect all Lost Souls from capture.",
            reference="Proverbs 2:16",
        ),
        catalog_row("Broken Card", "Pa", "Hero", "Chartreuse", "Good"),
    ]
    return "\n".join([CATALOG_HEADER, *rows]) + "\n"


@pytest.fixture
def sample_catalog(sample_catalog_text: str) -> CardCatalog:
    """Normalized catalog built from sample_catalog_text."""
    return load_catalog(sample_catalog_text)


@pytest.fixture
async def client() -> AsyncIterator[AsyncClient]:
    """Async test client for the app, with no catalog loaded."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture
async def loaded_client(client: AsyncClient, sample_catalog: CardCatalog) -> AsyncClient:
    """Test client with sample_catalog installed as the process catalog."""
    catalog_module.set_catalog(sample_catalog)
    return client
