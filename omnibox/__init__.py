"""Omnibox - unified omni-channel inbox with AI-assisted replies."""

__version__ = "1.0.0"
