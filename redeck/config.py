from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = SettingsConfigDict(env_file=".env", env_prefix="REDECK_")

    app_name: str = "Redeck"
    debug: bool = False

    catalog_url: str = (
        "https://raw.githubusercontent.com/jalstad/RedemptionLackeyCCG/"
        "master/RedemptionQuick/sets/carddata.txt"
    )
    catalog_timeout: float = 30.0

    # Local copy of carddata.txt loaded at startup (see jobs/download_catalog.py)
    catalog_path: str | None = None


settings = Settings()


# =============================================================================
# DECK CONSTRUCTION LIMITS
# =============================================================================

# Paragon decks use a flat Dominant cap instead of the Lost Soul budget
PARAGON_MAX_DOMINANTS = 7

# Copies allowed of a Lost Soul that has special ability text
TYPE_1_MAX_ABILITY_SOUL_COPIES = 1
TYPE_2_MAX_ABILITY_SOUL_COPIES = 2
