"""Public exports for workflow template domain services."""

from .exceptions import (
    TemplateError,
    TemplateNotFoundError,
    TemplateStoreUnavailableError,
    TemplateValidationError,
)
from .metadata import PageMetadata, build_page_metadata
from .models import (
    ALL_CATEGORIES,
    TEMPLATE_FIELD_DEFAULTS,
    TemplateCreateInput,
    TemplateListQuery,
    TemplatePage,
    TemplateStatus,
    WorkflowTemplate,
)
from .service import WorkflowTemplateService

__all__ = [
    "ALL_CATEGORIES",
    "TEMPLATE_FIELD_DEFAULTS",
    "PageMetadata",
    "TemplateCreateInput",
    "TemplateError",
    "TemplateListQuery",
    "TemplateNotFoundError",
    "TemplatePage",
    "TemplateStatus",
    "TemplateStoreUnavailableError",
    "TemplateValidationError",
    "WorkflowTemplate",
    "WorkflowTemplateService",
    "build_page_metadata",
]
