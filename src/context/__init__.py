"""Editing-context snapshots used to fill snippet templates."""

from .record import ContextRecord, build_context_record
from .static import StaticContextProvider

__all__ = ["ContextRecord", "StaticContextProvider", "build_context_record"]
