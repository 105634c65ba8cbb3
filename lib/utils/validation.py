"""Validation helpers."""
from typing import Any, Type


def ensure(condition: bool, message: str, exc: Type[Exception] = ValueError) -> None:
    if not condition:
        raise exc(message)


def ensure_text(value: Any, name: str, exc: Type[Exception] = ValueError) -> str:
    """Return ``value`` if it is text, otherwise raise ``exc``."""

    ensure(isinstance(value, str), f"{name} is required", exc)
    return value
