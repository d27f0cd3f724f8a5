from pydantic_settings import BaseSettings, SettingsConfigDict

# =============================================================================
# TYPE LINE VOCABULARY
# =============================================================================

# Separates supertypes/types from subtypes: "Legendary Creature — Elf Warrior"
TYPE_LINE_SEPARATOR = " — "

# Primary card types, checked first when reducing a type line to a main type
DEFAULT_PRIORITY_TYPES = (
    "Creature",
    "Land",
    "Artifact",
    "Enchantment",
    "Planeswalker",
    "Instant",
    "Sorcery",
    "Battle",
    "Kindred",
    "Tribal",
    "Dungeon",
    "Conspiracy",
)

# Supertypes are never a main type on their own unless nothing else is present
DEFAULT_SUPERTYPES = (
    "Legendary",
    "Basic",
    "Snow",
    "World",
    "Ongoing",
    "Elite",
    "Host",
)


class Settings(BaseSettings):
    """Statistics settings loaded from environment."""

    model_config = SettingsConfigDict(env_prefix="ZONESTATS_", env_file=".env")

    type_line_separator: str = TYPE_LINE_SEPARATOR
    priority_types: tuple[str, ...] = DEFAULT_PRIORITY_TYPES
    supertypes: tuple[str, ...] = DEFAULT_SUPERTYPES

    # Battlefield sub-counts match these as case-insensitive substrings
    land_keyword: str = "Land"
    creature_keyword: str = "Creature"


settings = Settings()
