"""Collaborative poems whose earlier lines are hidden as base64, with a text-mode session."""

__version__ = "0.1.0"
__all__ = ["poem", "app"]