"""i4n - nested translations with fallback and lazy loading.

Resolves dotted key paths ("nested.key") against per-language nested
tables, with key fallback (a secondary path in the same language),
language fallback and asynchronously loaded or lazily merged translations.

Main components:
- translator: Translator engine (t, switch, await_ready, lazy)
- models: Leaf, Node, Template, TranslationPath, LoadState, CancelToken
- exceptions: I4nError and its subclasses
- file_loader: TranslationFileLoader for YAML/JSON translation files
- factory: create_translator() configured from settings
"""

from i4n.exceptions import (
    I4nError,
    InvalidLanguageError,
    InvalidTranslationsError,
    LoaderFailureError,
)
from i4n.factory import create_translator
from i4n.file_loader import TranslationFileLoader
from i4n.models import (
    CancelToken,
    Leaf,
    LoadState,
    Node,
    Template,
    TranslationPath,
)
from i4n.translator import Translator

__all__ = [
    "Translator",
    "create_translator",
    "TranslationFileLoader",
    "CancelToken",
    "Leaf",
    "LoadState",
    "Node",
    "Template",
    "TranslationPath",
    "I4nError",
    "InvalidLanguageError",
    "InvalidTranslationsError",
    "LoaderFailureError",
]
