"""Workflow template domain specific exceptions."""


class TemplateError(Exception):
    """Base class for template domain errors."""


class TemplateValidationError(TemplateError):
    """Raised when a template payload misses a required field."""


class TemplateNotFoundError(TemplateError):
    """Raised when the requested template does not exist or is not active."""


class TemplateStoreUnavailableError(TemplateError):
    """Raised when the underlying template store cannot be reached or queried."""
