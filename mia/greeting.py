"""Greeting command offered by the application backend."""


def greet(name: str) -> str:
    """Return a greeting for ``name``."""
    return f"Hello, {name}! You've been greeted from Python!"