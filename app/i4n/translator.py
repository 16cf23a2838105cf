"""Translation engine resolving dotted paths against per-language tables.

The Translator is populated either synchronously from a literal
``{language: table}`` mapping, or asynchronously by a loader. Lookups never
raise for missing keys: they return None, so ``t()`` stays usable in hot
rendering paths.

Example:
    translator = Translator(
        translations={"en": {"hello": "Hello", "greet": lambda name: f"Hi {name}"}},
        language="en",
    )
    translator.t("hello")          # "Hello"
    translator.t("greet", "Ana")   # "Hi Ana"
"""

from typing import Any, FrozenSet, Optional, Sequence, Union

from i4n.configuration import settings
from i4n.exceptions import (
    InvalidLanguageError,
    InvalidTranslationsError,
    LoaderFailureError,
)
from i4n.loader import LoaderFn, LoadRequest, LoaderStateMachine
from i4n.logging import get_module_logger
from i4n.models import (
    CancelToken,
    LoadState,
    Template,
    TranslationPath,
    build_store,
    build_table,
)
from i4n.resolver import Resolver
from i4n.store import TranslationStore

logger = get_module_logger()

PathLike = Union[TranslationPath, str, Sequence[str]]


class Translator:
    """Translation engine with key fallback, language fallback and lazy loading.

    Attributes:
        store: TranslationStore holding every loaded language.
        resolver: Resolver used by t().
        loading: LoaderStateMachine tracking loaders and merges.
        poll_interval_ms: Default polling interval of await_ready().
    """

    def __init__(
        self,
        translations: Optional[Any] = None,
        *,
        language: str,
        loader: Optional[LoaderFn] = None,
        fallback_language: Optional[str] = None,
        poll_interval_ms: Optional[int] = None,
        fallback_key_in_fallback_language: bool = False,
    ):
        """Initialize Translator.

        Args:
            translations: ``{language: table}`` mapping. Populates the store
                synchronously.
            language: Active language.
            loader: Zero-argument callable returning translations (or an
                awaitable of them). Runs as a task on the running event loop
                and replaces the store once it settles.
            fallback_language: Language retried when a path is missing in the
                active language.
            poll_interval_ms: Default polling interval for await_ready()
                (default: settings.loader.ready_poll_interval_ms).
            fallback_key_in_fallback_language: Also retry the fallback path of
                a (path, fallback) pair under the fallback language.

        Raises:
            InvalidTranslationsError: If neither or both of translations and
                loader are given, or translations are not keyed.
            InvalidLanguageError: If language is empty.
            RuntimeError: If a loader is given outside a running event loop.
        """
        if translations is None and loader is None:
            raise InvalidTranslationsError(
                "Either translations or a loader must be provided"
            )
        if translations is not None and loader is not None:
            raise InvalidTranslationsError(
                "Translations and a loader cannot be provided together"
            )
        if not language:
            raise InvalidLanguageError("Language cannot be empty.")

        self.store = TranslationStore(translations)
        self.resolver = Resolver(
            self.store,
            fallback_key_in_fallback_language=fallback_key_in_fallback_language,
        )
        self.loading = LoaderStateMachine(self.store)
        self.poll_interval_ms = (
            poll_interval_ms or settings.loader.ready_poll_interval_ms
        )
        self._language = language
        self._fallback_language = fallback_language or None

        if loader is not None:
            self.loading.submit(LoadRequest(loader=loader, replace=True))

        logger.info(
            "initialized_translator",
            language=language,
            fallback_language=self._fallback_language,
            state=self.loading.state.value,
        )

    def t(self, path: PathLike, *args: Any, **kwargs: Any) -> Any:
        """Get a translation by dotted path.

        Args:
            path: Dotted path ("nested.key"), or a (path, fallback) pair where
                the fallback path is used when the first one is missing.
            *args: Arguments passed to a callable translation.
            **kwargs: Keyword arguments passed to a callable translation.

        Returns:
            The string, nested table (as a dict) or callable found, the result
            of calling the callable when arguments are given, or None when the
            path does not resolve or translations are not loaded yet.

        Raises:
            TypeError: If path is neither a string nor a pair of strings.
        """
        if not self.store.populated:
            return None

        entry = self.resolver.resolve(
            TranslationPath.parse(path),
            self._language,
            self._fallback_language,
        )
        if entry is None:
            return None
        if isinstance(entry, Template) and (args or kwargs):
            return entry.render(*args, **kwargs)
        return entry.unwrap()

    def switch(self, language: Optional[str]) -> None:
        """Switch the active language.

        Args:
            language: Language to switch to.

        Raises:
            InvalidLanguageError: If language is empty or not present in the
                translations.
        """
        if not language:
            raise InvalidLanguageError("Language cannot be empty.")
        if not self.store.has_language(language):
            raise InvalidLanguageError(
                f"Language '{language}' is not in the translations"
            )
        previous = self._language
        self._language = language
        logger.info("switched_language", previous=previous, language=language)

    @property
    def active_language(self) -> str:
        return self._language

    @property
    def fallback_language(self) -> Optional[str]:
        return self._fallback_language

    @property
    def known_languages(self) -> FrozenSet[str]:
        """Languages currently present in the translations.

        Raises:
            InvalidTranslationsError: If translations are not loaded yet.
        """
        return self.store.known_languages

    @property
    def state(self) -> LoadState:
        return self.loading.state

    @property
    def is_ready(self) -> bool:
        """True when translations are present and no loader is in flight."""
        return self.loading.state is LoadState.READY

    @property
    def last_error(self) -> Optional[LoaderFailureError]:
        return self.loading.last_error

    async def await_ready(
        self,
        *,
        poll_interval_ms: Optional[int] = None,
        cancel: Optional[CancelToken] = None,
        require_key: Optional[PathLike] = None,
        require_language: Optional[str] = None,
    ) -> bool:
        """Wait until translations are available.

        Without requirements this waits for any translations to be present.
        With ``require_language`` it waits for that language, with
        ``require_key`` for the path to resolve under ``require_language``
        (or the active language).

        Args:
            poll_interval_ms: Polling interval, defaults to the translator's.
            cancel: Token that ends the wait with False when cancelled.
            require_key: Path that must resolve.
            require_language: Language that must be present.

        Returns:
            True once the requirement holds, False if cancelled.

        Raises:
            LoaderFailureError: If loading failed and nothing else is in
                flight that could still satisfy the requirement.
        """
        required_path = (
            TranslationPath.parse(require_key) if require_key is not None else None
        )

        def predicate() -> bool:
            if not self.store.populated:
                return False
            if required_path is not None:
                language = require_language or self._language
                return (
                    self.resolver.resolve_in_language(required_path, language)
                    is not None
                )
            if require_language is not None:
                return self.store.has_language(require_language)
            return True

        ready = await self.loading.wait_until(
            predicate,
            poll_interval_ms or self.poll_interval_ms,
            cancel,
            scope=require_language,
        )
        if ready:
            logger.debug(
                "translations_ready",
                require_key=str(required_path) if required_path else None,
                require_language=require_language,
            )
        return ready

    def lazy(
        self,
        data: Optional[Any] = None,
        *,
        loader: Optional[LoaderFn] = None,
        lang: Optional[str] = None,
    ) -> None:
        """Merge more translations into the store.

        Args:
            data: Literal translations. A ``{language: table}`` mapping, or a
                single language table when ``lang`` is given.
            loader: Zero-argument callable producing such translations,
                possibly asynchronously. Runs on the running event loop.
            lang: Scope the payload to a single language.

        Raises:
            InvalidTranslationsError: If both or neither of data and loader
                are given, or data is malformed.
            InvalidLanguageError: If lang is given but empty.
        """
        if data is not None and loader is not None:
            raise InvalidTranslationsError(
                "lazy() accepts either data or a loader, not both"
            )
        if data is None and loader is None:
            raise InvalidTranslationsError("lazy() requires data or a loader")
        if lang is not None and not lang:
            raise InvalidLanguageError("Language cannot be empty.")

        if loader is not None:
            self.loading.submit(LoadRequest(loader=loader, language=lang))
            return

        # Built here: a queued merge holds these nodes, not ``data``
        if lang is not None:
            incoming = {lang: build_table(data, lang)}
        else:
            incoming = build_store(data)
        self.loading.apply(incoming, language=lang)
        logger.info("received_lazy_translations", language=lang)
