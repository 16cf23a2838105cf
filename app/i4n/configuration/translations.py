"""Translation source settings."""

from typing import Optional

from pydantic import Field

from i4n.configuration.base import I4nSettings


class TranslationSettings(I4nSettings):
    """Settings describing where translations live and which languages to use.

    Environment Variables:
        I4N_TRANSLATIONS_DIR: Directory holding <lang>.yml / <domain>.<lang>.yml
            files. When unset, create_translator() requires an explicit path.
        I4N_DEFAULT_LANGUAGE: Active language on construction (default: en)
        I4N_FALLBACK_LANGUAGE: Language consulted when a key is missing in the
            active language (default: unset, no language fallback)
    """

    translations_dir: Optional[str] = Field(
        default=None,
        alias="I4N_TRANSLATIONS_DIR",
        description="Directory containing translation files",
    )
    default_language: str = Field(
        default="en",
        alias="I4N_DEFAULT_LANGUAGE",
        description="Active language used when none is given",
    )
    fallback_language: Optional[str] = Field(
        default=None,
        alias="I4N_FALLBACK_LANGUAGE",
        description="Language used when a key is missing in the active language",
    )
