"""
Central version management for Game Hub.
"""

from __future__ import annotations

__all__ = ["__app_name__", "__version__", "__release_date__", "__author__", "__license__"]

__app_name__ = "Game Hub"
__version__ = "1.0.0"
__release_date__ = "2026-10-18"
__author__ = "Game Hub Contributors"
__license__ = "Apache-2.0"
