"""Routers package."""

from . import health, projects, settings, versions

__all__ = ["health", "projects", "settings", "versions"]
