"""Errors raised by the data access layer; routers map them to HTTP statuses."""


class WordboardError(Exception):
    """Base class for service errors."""


class NotFoundError(WordboardError):
    pass


class ConflictError(WordboardError):
    """A unique constraint was hit (list slug, or word text within a list)."""
