"""SQLAlchemy-backed repository implementations."""

from .template_repository import SqlWorkflowTemplateRepository

__all__ = [
    "SqlWorkflowTemplateRepository",
]
