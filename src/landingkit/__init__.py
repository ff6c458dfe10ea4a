"""
landingkit - static build pipeline for localized landing pages

Renders one HTML page per language from JSON translation data and a shared
template, writes sitemap/robots files, and validates the built pages.
"""

__version__ = "1.0.0"
__all__ = ["__version__"]
