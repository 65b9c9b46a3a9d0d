from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = SettingsConfigDict(env_file=".env")

    app_name: str = "RosterForge"
    debug: bool = False

    database_url: str = "postgresql+asyncpg://localhost:5432/rosterforge"

    # Seed the sample characters, combo and deck at startup when the
    # character table is empty
    seed_sample_catalog: bool = False


settings = Settings()


# =============================================================================
# DECK LIMITS
# =============================================================================

# Maximum number of characters in a deck (one per slot)
MAX_DECK_SIZE = 6

# Name given to a working deck that has never been saved
DEFAULT_DECK_NAME = "マイデッキ"
