"""Translation store holding the language tables."""

from typing import Any, Dict, FrozenSet, Optional

from i4n.exceptions import InvalidLanguageError, InvalidTranslationsError
from i4n.logging import get_module_logger
from i4n.models import Node, build_store, build_table

logger = get_module_logger()


class TranslationStore:
    """Container for the translations of every known language.

    The store is unpopulated until data is first replaced or merged into it.
    Incoming data is fully validated before the store is touched, so a
    failing update never leaves a partial store behind.
    """

    def __init__(self, translations: Optional[Any] = None):
        """Initialize the store.

        Args:
            translations: Optional raw ``{language: table}`` mapping used to
                populate the store right away.

        Raises:
            InvalidTranslationsError: If ``translations`` is malformed.
        """
        self._languages: Optional[Dict[str, Node]] = None
        if translations is not None:
            self.replace(translations)

    @property
    def populated(self) -> bool:
        return self._languages is not None

    @property
    def known_languages(self) -> FrozenSet[str]:
        """Languages currently present in the store.

        Raises:
            InvalidTranslationsError: If no translations have been loaded yet.
        """
        if self._languages is None:
            raise InvalidTranslationsError("Translations have not been loaded yet")
        return frozenset(self._languages)

    def has_language(self, language: Optional[str]) -> bool:
        return self._languages is not None and language in self._languages

    def table(self, language: str) -> Optional[Node]:
        """Get the table of a language, or None when absent."""
        if self._languages is None:
            return None
        return self._languages.get(language)

    def replace(self, translations: Any) -> None:
        """Replace the whole store.

        Args:
            translations: Raw ``{language: table}`` mapping.

        Raises:
            InvalidTranslationsError: If ``translations`` is malformed.
        """
        self._languages = build_store(translations)
        logger.debug("replaced_translations", languages=sorted(self._languages))

    def merge(self, translations: Any) -> None:
        """Deep merge a raw ``{language: table}`` mapping into the store.

        Raises:
            InvalidTranslationsError: If ``translations`` is malformed.
        """
        self.merge_nodes(build_store(translations))

    def merge_language(self, language: str, table: Any) -> None:
        """Deep merge a raw table into a single language.

        Raises:
            InvalidLanguageError: If ``language`` is empty.
            InvalidTranslationsError: If ``table`` is malformed.
        """
        if not language or not isinstance(language, str):
            raise InvalidLanguageError("Language cannot be empty.")
        self.merge_nodes({language: build_table(table, language)})

    def merge_nodes(self, incoming: Dict[str, Node]) -> None:
        """Deep merge already built language nodes into the store.

        The nodes are taken over by the store and must not be shared.
        """
        if self._languages is None:
            self._languages = {}
        for language, node in incoming.items():
            current = self._languages.get(language)
            if current is None:
                self._languages[language] = node
            else:
                current.merge(node)
        logger.debug("merged_translations", languages=sorted(incoming))
