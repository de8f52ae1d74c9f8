"""Reusable widgets for the library and player screens."""
