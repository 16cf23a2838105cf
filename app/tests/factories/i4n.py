"""Test data factories for i4n testing.

Provides deterministic builders for:
- Translation tables (literal store data)
- Translator instances
- Loaders (sync, async, failing, gated)
"""

import asyncio
from typing import Any, Dict, Optional

from i4n import Translator


def greet(name: str) -> str:
    return f"Hello {name}"


def saludar(name: str) -> str:
    return f"Ola {name}"


def make_translations(include_templates: bool = True) -> Dict[str, Dict[str, Any]]:
    """Create a two language translation store.

    Args:
        include_templates: Whether callable leaves are included.

    Returns:
        Dict of language -> table. "es" lacks "nested.key" and "farewell".
    """
    translations: Dict[str, Dict[str, Any]] = {
        "en": {
            "earth": "world",
            "farewell": "Goodbye",
            "nested": {
                "key": "english key",
                "deeper": {"leaf": "deep english"},
            },
        },
        "es": {
            "earth": "Mundo",
        },
    }
    if include_templates:
        translations["en"]["greet"] = greet
        translations["en"]["count"] = lambda kind, count: f"[{kind}]: has {count}"
        translations["es"]["greet"] = saludar
    return translations


def make_translator(
    translations: Optional[Dict[str, Any]] = None,
    language: str = "en",
    fallback_language: Optional[str] = None,
    **kwargs: Any,
) -> Translator:
    """Create a Translator populated synchronously."""
    if translations is None:
        translations = make_translations()
    return Translator(
        translations,
        language=language,
        fallback_language=fallback_language,
        **kwargs,
    )


def make_async_loader(data: Any, delay: float = 0.0):
    """Create an async loader returning ``data`` after ``delay`` seconds."""

    async def load() -> Any:
        if delay:
            await asyncio.sleep(delay)
        return data

    return load


def make_failing_loader(error: Exception, delay: float = 0.0):
    """Create an async loader raising ``error`` after ``delay`` seconds."""

    async def load() -> Any:
        if delay:
            await asyncio.sleep(delay)
        raise error

    return load


def make_gated_loader(data: Any, gate: asyncio.Event):
    """Create an async loader that returns ``data`` once ``gate`` is set."""

    async def load() -> Any:
        await gate.wait()
        return data

    return load
