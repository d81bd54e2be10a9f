"""Configuration module for the mail upselling service."""

from .settings import Settings, load_settings

__all__ = ["Settings", "load_settings"]
