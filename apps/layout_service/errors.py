"""Errors raised by the layout service."""


class LayoutServiceError(Exception):
    pass


class MalformedDocument(LayoutServiceError):
    """A route document exists but cannot be parsed into a route."""

    def __init__(self, location: str, reason: str):
        self.location = location
        self.reason = reason
        super().__init__(f"malformed route document {location}: {reason}")


class InvalidQuery(LayoutServiceError, ValueError):
    pass
