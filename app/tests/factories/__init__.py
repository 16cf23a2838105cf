"""Test data factories for deterministic test data generation."""

from tests.factories.i4n import (
    make_async_loader,
    make_failing_loader,
    make_gated_loader,
    make_translations,
    make_translator,
)

__all__ = [
    "make_async_loader",
    "make_failing_loader",
    "make_gated_loader",
    "make_translations",
    "make_translator",
]
