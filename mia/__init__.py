"""Mia: state and HTML rendering for chat, to-do and inbox views, plus their stylesheets."""

__version__ = "0.1.0"