"""Exceptions raised by the i4n translation engine.

Missing keys and missing languages at lookup time are not errors:
Translator.t() returns None for them. Exceptions are reserved for
malformed configuration and failing loaders.
"""

from typing import Optional


class I4nError(Exception):
    """Base exception for all i4n errors.

    Example:
        try:
            translator.switch(language)
        except I4nError as e:
            logger.error("translation_error", error=str(e))
    """

    def __init__(self, message: str):
        super().__init__(f"I4n: {message}")


class InvalidTranslationsError(I4nError):
    """Raised when translation data or its configuration is malformed.

    Covers missing translations/loader, non-keyed containers (list, tuple,
    set) used where a mapping is required, conflicting ``lazy()`` arguments
    and queries that need data before any has been loaded.

    Example:
        >>> Translator(translations=["en"], language="en")
        Traceback (most recent call last):
        ...
        InvalidTranslationsError: I4n: list cannot be used as translations, translations require keys
    """

    pass


class InvalidLanguageError(I4nError):
    """Raised when a language is empty or not present in the translations.

    Example:
        >>> translator.switch("xx")
        Traceback (most recent call last):
        ...
        InvalidLanguageError: I4n: Language 'xx' is not in the translations
    """

    pass


class LoaderFailureError(I4nError):
    """Raised when a caller supplied loader fails.

    The original exception is available as ``cause`` and is chained as
    ``__cause__``.

    Attributes:
        cause: Exception raised by the loader (or by validating its result).
        language: Language the loader was scoped to, if any.
    """

    def __init__(
        self,
        message: str,
        cause: Optional[BaseException] = None,
        language: Optional[str] = None,
    ):
        super().__init__(message)
        self.cause = cause
        self.language = language
