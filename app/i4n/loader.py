"""Loader state machine for asynchronously supplied translations.

Loaders are zero-argument callables returning translations, either directly
or as an awaitable. They run as asyncio tasks on the running event loop.
Several loaders may run at the same time, but their results are applied to
the store strictly in the order the loaders were submitted.
"""

import asyncio
import inspect
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Dict, Optional, Set, Union

from i4n.exceptions import I4nError, LoaderFailureError
from i4n.logging import get_module_logger
from i4n.models import CancelToken, LoadState, Node
from i4n.store import TranslationStore

logger = get_module_logger()

LoaderFn = Callable[[], Union[Any, Awaitable[Any]]]


@dataclass(frozen=True)
class LoadRequest:
    """A loader together with how its result is applied.

    Attributes:
        loader: Zero-argument callable producing translations.
        replace: Replace the whole store (initial load) instead of merging.
        language: When set, the loader produces a single language table that
            is merged under this language.
        built: The loader returns ``{language: Node}`` already built and
            validated, merged as-is.
    """

    loader: LoaderFn
    replace: bool = False
    language: Optional[str] = None
    built: bool = False

    @property
    def description(self) -> str:
        return getattr(self.loader, "__qualname__", type(self.loader).__name__)


async def invoke_loader(loader: LoaderFn) -> Any:
    """Call a loader and await its result when it is awaitable."""
    result = loader()
    if inspect.isawaitable(result):
        result = await result
    return result


class LoaderStateMachine:
    """Tracks the loading lifecycle of a TranslationStore.

    Failures are recorded per scope: the language of a language scoped load,
    or None for loads of whole ``{language: table}`` mappings. A failure stays
    recorded until a later load of the same scope succeeds, or a replacing
    load succeeds.

    Attributes:
        store: Store that loader results are applied to.
        state: Current LoadState.
        failures: Outstanding LoaderFailureError per scope, oldest first.
    """

    def __init__(self, store: TranslationStore):
        self.store = store
        self.state = LoadState.READY if store.populated else LoadState.IDLE
        self.failures: Dict[Optional[str], LoaderFailureError] = {}
        self._pending = 0
        self._tail: Optional["asyncio.Task[None]"] = None
        self._tasks: Set["asyncio.Task[None]"] = set()

    @property
    def busy(self) -> bool:
        """Whether any loader (or queued update) is still in flight."""
        return self._pending > 0

    @property
    def last_error(self) -> Optional[LoaderFailureError]:
        """Most recently recorded outstanding failure, if any."""
        if not self.failures:
            return None
        return list(self.failures.values())[-1]

    def submit(self, request: LoadRequest) -> "asyncio.Task[None]":
        """Start a loader as a task on the running event loop.

        Args:
            request: Loader and the way its result is applied.

        Returns:
            The task running the loader. It never raises: failures are
            recorded in ``failures``.

        Raises:
            RuntimeError: If no event loop is running.
        """
        loop = asyncio.get_running_loop()
        previous = self._tail
        task = loop.create_task(self._run(request, previous))
        self._tail = task
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        self._pending += 1
        self.state = LoadState.LOADING
        logger.info(
            "loader_started",
            loader=request.description,
            replace=request.replace,
            language=request.language,
        )
        return task

    def apply(
        self,
        incoming: Dict[str, Node],
        language: Optional[str] = None,
    ) -> None:
        """Merge built language nodes, after any loader still in flight.

        When nothing is loading the merge happens immediately, otherwise it is
        queued behind the loaders submitted before it.

        Args:
            incoming: ``{language: Node}`` as returned by build_store().
            language: Scope of the update when it covers a single language.
        """
        if self.busy:
            self.submit(
                LoadRequest(loader=lambda: incoming, language=language, built=True)
            )
            return
        self.store.merge_nodes(incoming)
        self.failures.pop(language, None)
        self._settle()

    async def wait_until(
        self,
        predicate: Callable[[], bool],
        poll_interval_ms: int,
        cancel: Optional[CancelToken] = None,
        scope: Optional[str] = None,
    ) -> bool:
        """Poll until ``predicate`` holds or ``cancel`` is cancelled.

        Args:
            predicate: Readiness check, evaluated on every poll.
            poll_interval_ms: Delay between checks in milliseconds.
            cancel: Optional token; cancelling it ends the wait.
            scope: Language the wait is about. Its failure is raised in
                preference to the most recent one.

        Returns:
            True when the predicate holds, False when cancelled.

        Raises:
            LoaderFailureError: If no loader is in flight, the predicate does
                not hold and a failure is recorded.
        """
        interval = poll_interval_ms / 1000
        while True:
            if predicate():
                return True
            if cancel is not None and cancel.cancelled:
                logger.debug("wait_cancelled", state=self.state.value)
                return False
            if not self.busy and self.failures:
                raise self.failures.get(scope) or self.last_error
            await asyncio.sleep(interval)

    async def _run(
        self,
        request: LoadRequest,
        previous: Optional["asyncio.Task[None]"],
    ) -> None:
        error: Optional[Exception] = None
        translations: Any = None
        try:
            try:
                translations = await invoke_loader(request.loader)
            except Exception as e:  # pylint: disable=broad-except
                error = e

            # Results are applied in submission order
            if previous is not None and not previous.done():
                await asyncio.wait({previous})

            if error is None:
                try:
                    self._apply(translations, request)
                except I4nError as e:
                    error = e
        except asyncio.CancelledError:
            logger.warning(
                "loader_cancelled",
                loader=request.description,
                language=request.language,
            )
            raise
        finally:
            self._pending -= 1
            self._settle()

        if error is None:
            if request.replace:
                self.failures.clear()
            else:
                self.failures.pop(request.language, None)
            logger.info(
                "loader_completed",
                loader=request.description,
                replace=request.replace,
                language=request.language,
            )
        else:
            failure = LoaderFailureError(
                f"Loader {request.description} failed: {error}",
                cause=error,
                language=request.language,
            )
            failure.__cause__ = error
            self.failures.pop(request.language, None)
            self.failures[request.language] = failure
            logger.error(
                "loader_failed",
                loader=request.description,
                language=request.language,
                error=str(error),
                error_type=type(error).__name__,
            )
        self._settle()

    def _apply(self, translations: Any, request: LoadRequest) -> None:
        if request.built:
            self.store.merge_nodes(translations)
        elif request.language is not None:
            self.store.merge_language(request.language, translations)
        elif request.replace:
            self.store.replace(translations)
        else:
            self.store.merge(translations)

    def _settle(self) -> None:
        if self.busy:
            self.state = LoadState.LOADING
        elif self.store.populated:
            self.state = LoadState.READY
        elif self.failures:
            self.state = LoadState.FAILED
        else:
            self.state = LoadState.IDLE
