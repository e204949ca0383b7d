"""Feature modules."""

from . import templates

__all__ = ["templates"]
