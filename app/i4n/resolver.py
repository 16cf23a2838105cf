"""Path resolution against the translation store.

Resolution order for a path under an active language:
1. Primary path in the active language
2. Fallback path (if given) in the active language
3. Primary path in the fallback language (if configured and different);
   the fallback path is only retried there when explicitly enabled
"""

from typing import Optional, Sequence

from i4n.logging import get_module_logger
from i4n.models import Entry, Node, TranslationPath
from i4n.store import TranslationStore

logger = get_module_logger()


def traverse(table: Optional[Node], keys: Sequence[str]) -> Optional[Entry]:
    """Walk a table segment by segment.

    Args:
        table: Language table to start from.
        keys: Key segments, traversed left to right.

    Returns:
        Entry found at the end of the path, or None if any segment is missing
        or a non-table is reached before the last segment.
    """
    result: Optional[Entry] = table
    for key in keys:
        if not isinstance(result, Node):
            return None
        result = result.get(key)
        if result is None:
            return None
    return result


class Resolver:
    """Resolves translation paths with key and language fallback.

    Attributes:
        store: TranslationStore to read from.
        fallback_key_in_fallback_language: Whether the fallback path of a
            (path, fallback) pair is also tried under the fallback language.
    """

    def __init__(
        self,
        store: TranslationStore,
        fallback_key_in_fallback_language: bool = False,
    ):
        self.store = store
        self.fallback_key_in_fallback_language = fallback_key_in_fallback_language

    def resolve_in_language(
        self,
        path: TranslationPath,
        language: str,
        use_fallback_key: bool = True,
    ) -> Optional[Entry]:
        """Resolve a path within a single language.

        Args:
            path: Parsed translation path.
            language: Language whose table is searched.
            use_fallback_key: Whether to try the fallback path when the
                primary one is missing.

        Returns:
            Entry, or None when neither path resolves.
        """
        table = self.store.table(language)
        if table is None:
            return None

        for keys in path.candidates(use_fallback_key):
            entry = traverse(table, keys)
            if entry is not None:
                return entry
        return None

    def resolve(
        self,
        path: TranslationPath,
        language: str,
        fallback_language: Optional[str] = None,
    ) -> Optional[Entry]:
        """Resolve a path under the active language, then the fallback language.

        Args:
            path: Parsed translation path.
            language: Active language.
            fallback_language: Language retried when ``language`` misses.

        Returns:
            Entry, or None when nothing resolves. Never raises for missing
            keys or languages.
        """
        if not self.store.populated:
            return None

        entry = self.resolve_in_language(path, language)
        if entry is not None:
            return entry

        if fallback_language and fallback_language != language:
            entry = self.resolve_in_language(
                path,
                fallback_language,
                use_fallback_key=self.fallback_key_in_fallback_language,
            )
            if entry is not None:
                logger.debug(
                    "used_fallback_language",
                    path=str(path),
                    language=language,
                    fallback_language=fallback_language,
                )
        return entry
