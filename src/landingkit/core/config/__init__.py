"""Layered YAML configuration."""
from __future__ import annotations

from .manager import ConfigManager
from .site import SiteConfig

__all__ = ["ConfigManager", "SiteConfig"]
