"""Translation models for the i4n engine.

Defines the tagged variants stored for every translation entry, the parsed
translation path, the loader states and the cancellation token used while
waiting for translations.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, Optional, Sequence, Tuple, Union

from i4n.exceptions import InvalidTranslationsError

# Scalars accepted as leaves in addition to strings
LEAF_TYPES = (str, int, float)


@dataclass(frozen=True)
class Leaf:
    """Plain translated value (usually a string)."""

    value: Any

    def unwrap(self) -> Any:
        return self.value


@dataclass(frozen=True)
class Template:
    """Callable translation producing a value from call arguments.

    Attributes:
        fn: Callable stored in the translations, returned as-is when no
            arguments are supplied to Translator.t().
    """

    fn: Callable[..., Any]

    def unwrap(self) -> Callable[..., Any]:
        return self.fn

    def render(self, *args: Any, **kwargs: Any) -> Any:
        return self.fn(*args, **kwargs)


@dataclass
class Node:
    """Nested translation table.

    Attributes:
        children: Mapping of key to Leaf, Template or Node.
    """

    children: Dict[str, "Entry"] = field(default_factory=dict)

    def get(self, key: str) -> Optional["Entry"]:
        return self.children.get(key)

    def unwrap(self) -> Dict[str, Any]:
        """Return a plain dict copy of this table.

        Returns:
            Nested dict with leaves and callables in place of the variants.
        """
        return {key: child.unwrap() for key, child in self.children.items()}

    def merge(self, other: "Node") -> None:
        """Deep merge another table into this one.

        Nested tables present on both sides are merged recursively, any other
        entry from ``other`` replaces the existing one.

        Args:
            other: Node to merge.
        """
        for key, incoming in other.children.items():
            current = self.children.get(key)
            if isinstance(current, Node) and isinstance(incoming, Node):
                current.merge(incoming)
            else:
                self.children[key] = incoming


Entry = Union[Leaf, Template, Node]


def _describe(value: Any) -> str:
    return type(value).__name__


def build_entry(value: Any, path: str = "") -> Entry:
    """Convert a raw translation value into its tagged variant.

    Args:
        value: String or numeric leaf (booleans included), callable, or
            mapping of str keys.
        path: Dotted location of ``value``, used in error messages.

    Returns:
        Leaf, Template or Node.

    Raises:
        InvalidTranslationsError: If the value (or anything nested in it) is
            a non-keyed container, None, or a mapping with non-str keys.
    """
    if isinstance(value, LEAF_TYPES):
        return Leaf(value)
    if isinstance(value, Mapping):
        return build_table(value, path)
    if callable(value):
        return Template(value)
    location = f" at '{path}'" if path else ""
    raise InvalidTranslationsError(
        f"{_describe(value)} cannot be used as a translation value{location}"
    )


def build_table(value: Any, path: str = "") -> Node:
    """Convert a raw mapping into a Node.

    Args:
        value: Mapping of str keys to translation values.
        path: Dotted location of ``value``, used in error messages.

    Returns:
        Node holding the converted children.

    Raises:
        InvalidTranslationsError: If ``value`` is not a mapping or contains
            invalid entries.
    """
    if not isinstance(value, Mapping):
        location = f" at '{path}'" if path else ""
        raise InvalidTranslationsError(
            f"{_describe(value)} cannot be used as a translation table{location}, "
            "translations require keys"
        )

    children: Dict[str, Entry] = {}
    for key, child in value.items():
        if not isinstance(key, str):
            raise InvalidTranslationsError(
                f"Translation keys must be strings, got {_describe(key)} "
                f"at '{path or '<root>'}'"
            )
        child_path = f"{path}.{key}" if path else key
        children[key] = build_entry(child, child_path)
    return Node(children)


def build_store(value: Any) -> Dict[str, Node]:
    """Convert a raw ``{language: table}`` mapping into language nodes.

    Args:
        value: Mapping of language identifier to language table.

    Returns:
        Dict of language to Node.

    Raises:
        InvalidTranslationsError: If ``value`` is not a mapping (list, set,
            tuple...), a language is empty or a table is invalid.
    """
    if not isinstance(value, Mapping):
        raise InvalidTranslationsError(
            f"{_describe(value)} cannot be used as translations, "
            "translations require keys"
        )

    languages: Dict[str, Node] = {}
    for language, table in value.items():
        if not isinstance(language, str) or not language:
            raise InvalidTranslationsError(
                f"Languages must be non-empty strings, got {language!r}"
            )
        languages[language] = build_table(table, language)
    return languages


@dataclass(frozen=True)
class TranslationPath:
    """Parsed translation path.

    A path is either a dotted string ("nested.key") or a pair of dotted
    strings where the second one is consulted when the first is missing.

    Attributes:
        primary: Key segments of the main path.
        fallback: Key segments of the fallback path, if any.
    """

    primary: Tuple[str, ...]
    fallback: Optional[Tuple[str, ...]] = None

    def __str__(self) -> str:
        primary = ".".join(self.primary)
        if self.fallback is None:
            return primary
        return f"{primary}|{'.'.join(self.fallback)}"

    @staticmethod
    def split(key: str) -> Tuple[str, ...]:
        return tuple(str(key).split("."))

    @classmethod
    def parse(
        cls, path: Union["TranslationPath", str, Sequence[str]]
    ) -> "TranslationPath":
        """Create a TranslationPath from a string or a (primary, fallback) pair.

        Args:
            path: Dotted string, two element list/tuple, or TranslationPath.

        Returns:
            TranslationPath instance.

        Raises:
            TypeError: If ``path`` is neither a string nor a pair of strings.
        """
        if isinstance(path, TranslationPath):
            return path
        if isinstance(path, str):
            return cls(primary=cls.split(path))
        if isinstance(path, (list, tuple)) and len(path) == 2:
            primary, fallback = path
            if isinstance(primary, str) and isinstance(fallback, str):
                return cls(primary=cls.split(primary), fallback=cls.split(fallback))
        raise TypeError(
            f"Translation path must be a string or a (path, fallback) pair: {path!r}"
        )

    def candidates(self, use_fallback: bool = True) -> Tuple[Tuple[str, ...], ...]:
        """Return the key sequences to try, in order."""
        if use_fallback and self.fallback is not None:
            return (self.primary, self.fallback)
        return (self.primary,)


class LoadState(str, Enum):
    """States of the translation loader.

    IDLE: no loader has ever been configured.
    LOADING: at least one loader is in flight.
    READY: translations are present and no loader is in flight.
    FAILED: the last loader failed and no translations are present.
    """

    IDLE = "idle"
    LOADING = "loading"
    READY = "ready"
    FAILED = "failed"


class CancelToken:
    """Cancellation signal for Translator.await_ready().

    Cancelling a token makes pending waits return False. It never affects
    the loaders themselves.
    """

    def __init__(self) -> None:
        self._cancelled = False

    def cancel(self) -> None:
        self._cancelled = True

    @property
    def cancelled(self) -> bool:
        return self._cancelled
