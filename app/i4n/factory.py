"""Factory functions for creating translators.

Provides a convenience function initializing a Translator from translation
files with defaults taken from settings.
"""

from pathlib import Path
from typing import Optional

from i4n.configuration import settings
from i4n.file_loader import TranslationFileLoader
from i4n.logging import get_module_logger
from i4n.translator import Translator

logger = get_module_logger()


def create_translator(
    translations_dir: Optional[Path] = None,
    language: Optional[str] = None,
    fallback_language: Optional[str] = None,
    preload: bool = True,
    use_cache: bool = True,
) -> Translator:
    """Create and configure a Translator reading translation files.

    Args:
        translations_dir: Directory with translation files
            (default: settings.translations.translations_dir)
        language: Active language (default: settings.translations.default_language)
        fallback_language: Fallback language
            (default: settings.translations.fallback_language)
        preload: Load every language now (True), or let the Translator load
            them asynchronously (False, requires a running event loop)
        use_cache: Whether the file loader caches parsed files

    Returns:
        Translator: Configured translator instance

    Raises:
        ValueError: If no translations directory is configured or it does
            not exist

    Usage:
        # Preloaded
        translator = create_translator(translations_dir=Path("locales"))

        # Loaded in the background
        translator = create_translator(preload=False)
        await translator.await_ready()
    """
    if translations_dir is None:
        if not settings.translations.translations_dir:
            raise ValueError(
                "No translations directory given and I4N_TRANSLATIONS_DIR is not set"
            )
        translations_dir = Path(settings.translations.translations_dir)

    language = language or settings.translations.default_language
    if fallback_language is None:
        fallback_language = settings.translations.fallback_language

    loader = TranslationFileLoader(translations_dir, use_cache=use_cache)

    if preload:
        translator = Translator(
            loader.load_all(),
            language=language,
            fallback_language=fallback_language,
        )
        logger.info(
            "translator_created_with_preload",
            translations_dir=str(translations_dir),
            language_count=len(translator.known_languages),
        )
    else:
        translator = Translator(
            loader=loader,
            language=language,
            fallback_language=fallback_language,
        )
        logger.info(
            "translator_created_lazy",
            translations_dir=str(translations_dir),
        )

    return translator
