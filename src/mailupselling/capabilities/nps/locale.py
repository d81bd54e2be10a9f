"""Locale formatting for feedback context."""

from __future__ import annotations


def display_with_timezone(locale_display_name: str, timezone_display_name: str) -> str:
    """Join locale and timezone display names, e.g. ``English-Greenwich Mean Time``."""
    return f"{locale_display_name}-{timezone_display_name}"


__all__ = ["display_with_timezone"]
