"""Translation files loader.

Reads translation tables from YAML or JSON files in a directory. Files are
named ``<lang>.<ext>`` or ``<domain>.<lang>.<ext>`` (e.g. ``en.yml``,
``incident.fr.yml``, ``common.es.json``); every file of a language is deep
merged into that language's table, in file name order.

The loader is a plain collaborator of the Translator: an instance can be
passed as ``loader=`` (it loads every language when called) and
``for_language()`` returns a loader for ``Translator.lazy(loader=..., lang=...)``.

Blank values (``key:`` in YAML, null in JSON) are skipped with a warning.
Other non-translation values, such as YAML dates, are kept and rejected by
the Translator when the tables are loaded.
"""

import json
from pathlib import Path
from typing import Any, Callable, Dict, List, Set

import yaml

from i4n.logging import get_module_logger

logger = get_module_logger()

SUPPORTED_SUFFIXES = (".yml", ".yaml", ".json")


def deep_merge(target: Dict[str, Any], source: Dict[str, Any]) -> Dict[str, Any]:
    """Recursively merge ``source`` into ``target`` and return ``target``."""
    for key, value in source.items():
        current = target.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            deep_merge(current, value)
        else:
            target[key] = value
    return target


class TranslationFileLoader:
    """Loader for YAML/JSON translation files.

    Attributes:
        translations_dir: Path to directory containing translation files.
        use_cache: Whether loaded tables are kept in memory.
        cache: Cache of loaded tables (language -> table).
    """

    def __init__(
        self,
        translations_dir: Path,
        use_cache: bool = True,
    ):
        """Initialize translation file loader.

        Args:
            translations_dir: Path to directory with translation files.
            use_cache: Whether to cache loaded tables in memory.

        Raises:
            ValueError: If the directory does not exist.
        """
        self.translations_dir = Path(translations_dir)
        self.use_cache = use_cache
        self.cache: Dict[str, Dict[str, Any]] = {}

        if not self.translations_dir.exists():
            raise ValueError(
                f"Translations directory not found: {self.translations_dir}"
            )

        logger.info(
            "initialized_file_loader",
            translations_dir=str(self.translations_dir),
            use_cache=use_cache,
        )

    def __call__(self) -> Dict[str, Dict[str, Any]]:
        return self.load_all()

    @staticmethod
    def language_of(path: Path) -> str:
        """Extract the language from a file name ("incident.fr.yml" -> "fr")."""
        return path.stem.split(".")[-1]

    def _files(self) -> List[Path]:
        return sorted(
            p
            for p in self.translations_dir.iterdir()
            if p.is_file() and p.suffix in SUPPORTED_SUFFIXES
        )

    def languages(self) -> Set[str]:
        """Languages that have at least one translation file."""
        return {self.language_of(p) for p in self._files()}

    def load(self, language: str) -> Dict[str, Any]:
        """Load the table of a single language.

        Args:
            language: Language to load.

        Returns:
            Language table merged from every matching file.

        Raises:
            FileNotFoundError: If no file exists for the language.
            ValueError: If a file cannot be parsed.
        """
        if self.use_cache and language in self.cache:
            logger.debug("loaded_from_cache", language=language)
            return self.cache[language]

        files = [p for p in self._files() if self.language_of(p) == language]
        if not files:
            raise FileNotFoundError(
                f"No translation files found for language {language} in {self.translations_dir}"
            )

        table: Dict[str, Any] = {}
        for path in files:
            data = self._read(path)
            if not isinstance(data, dict):
                logger.warning(
                    "invalid_translation_file_format",
                    file=str(path),
                    expected="dict",
                )
                continue
            deep_merge(table, self._drop_blank(data, path))

        logger.info(
            "loaded_translations",
            language=language,
            file_count=len(files),
            key_count=len(table),
        )

        if self.use_cache:
            self.cache[language] = table

        return table

    def load_all(self) -> Dict[str, Dict[str, Any]]:
        """Load the tables of every language found in the directory.

        Returns:
            Dict mapping each language to its table.

        Raises:
            ValueError: If there are no translation files at all.
        """
        languages = self.languages()
        if not languages:
            raise ValueError(f"No translation files found in {self.translations_dir}")
        return {language: self.load(language) for language in sorted(languages)}

    def for_language(self, language: str) -> Callable[[], Dict[str, Any]]:
        """Return a zero-argument loader for a single language."""

        def load_language() -> Dict[str, Any]:
            return self.load(language)

        load_language.__qualname__ = f"load_language[{language}]"
        return load_language

    def clear_cache(self) -> None:
        """Clear all cached translations."""
        self.cache.clear()
        logger.info("cleared_translation_cache")

    def _read(self, path: Path) -> Any:
        try:
            with open(path, "r", encoding="utf-8") as f:
                if path.suffix == ".json":
                    return json.load(f)
                return yaml.safe_load(f)
        except (yaml.YAMLError, json.JSONDecodeError) as e:
            logger.error("translation_parse_error", file=str(path), error=str(e))
            raise ValueError(f"Failed to parse {path}: {e}") from e

    def _drop_blank(
        self, data: Dict[str, Any], path: Path, prefix: str = ""
    ) -> Dict[str, Any]:
        cleaned: Dict[str, Any] = {}
        for key, value in data.items():
            location = f"{prefix}.{key}" if prefix else str(key)
            if value is None:
                logger.warning("skipped_blank_translation", file=str(path), key=location)
                continue
            if isinstance(value, dict):
                value = self._drop_blank(value, path, location)
            cleaned[key] = value
        return cleaned
