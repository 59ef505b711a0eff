"""Infrastructure layer implementations."""

from goldbook.infrastructure import storage

__all__ = ["storage"]
