"""Configuration for the review gate."""

from .settings import Settings, settings

__all__ = ["Settings", "settings"]
