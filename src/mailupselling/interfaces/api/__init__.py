"""FastAPI ingress for NPS feedback."""

from .main import create_app

__all__ = ["create_app"]
