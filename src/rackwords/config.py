"""Rackwords configuration."""

from dotenv import find_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from rackwords.letters import ALPHABET

# Determine the environment file path, or None if not found
ENV_FILE = find_dotenv() or None


class RackwordsConfig(BaseSettings):
    """Configuration settings for rackwords lookups and dictionary loading."""

    wildcard: str = Field(default="?", min_length=1, max_length=1)
    """Character standing in for a blank tile in wildcard searches. Default: '?'."""

    min_word_length: int = Field(default=2, ge=1)
    """Shortest word length produced by a search. Default: 2."""

    dedupe_wildcard_words: bool = False
    """Whether wildcard searches drop words found through more than one substitution.

    Default is False (every substitution contributes its own copy of a word).
    """

    dictionary_dir: str = "dictionaries"
    """Directory holding the dictionary resources of a catalog."""

    dictionary_names: list[str] = ["wordswithfriends", "twl06", "sowpods"]
    """Names of the dictionaries loaded into a catalog, in display order."""

    dictionary_file_pattern: str = "{name}_anagrams.json"
    """File name of a dictionary resource, formatted with the dictionary name."""

    max_workers: int | None = None
    """Maximum number of loader threads. If None (default), one per dictionary."""

    @field_validator("wildcard")
    @classmethod
    def wildcard_is_not_a_letter(cls, value: str) -> str:
        """A letter wildcard would be substituted by itself forever."""
        if value.lower() in ALPHABET:
            raise ValueError(f"Wildcard must not be a letter, got {value!r}.")
        return value

    model_config = SettingsConfigDict(
        env_file=ENV_FILE,
        env_file_encoding="utf-8",
        extra="forbid",
    )


config = RackwordsConfig()
