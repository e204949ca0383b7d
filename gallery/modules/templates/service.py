"""Application service handling the workflow template gallery."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from gallery.infrastructure.database.repositories.template_repository import SqlWorkflowTemplateRepository

from .exceptions import TemplateNotFoundError, TemplateStoreUnavailableError, TemplateValidationError
from .models import (
    TEMPLATE_FIELD_DEFAULTS,
    TemplateCreateInput,
    TemplateListQuery,
    TemplatePage,
    WorkflowTemplate,
    utf16_length,
)
from .repository import WorkflowTemplateRepository

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class WorkflowTemplateService:
    repository: WorkflowTemplateRepository

    @classmethod
    def with_session(cls, session: AsyncSession) -> "WorkflowTemplateService":
        return cls(SqlWorkflowTemplateRepository(session))

    async def create_template(self, payload: TemplateCreateInput) -> WorkflowTemplate:
        title = payload.title.strip() if isinstance(payload.title, str) else ""
        if not title:
            raise TemplateValidationError("Title is required")

        values = self._apply_defaults(payload)
        try:
            model = await self.repository.create(
                title=title,
                content_length=utf16_length(values["html_content"]),
                **values,
            )
        except SQLAlchemyError as exc:
            logger.error("Failed to create template %r: %s", title, exc)
            raise TemplateStoreUnavailableError(str(exc)) from exc

        logger.info("Created template %s (%s)", model.id, title)
        return WorkflowTemplate.from_orm(model)

    async def list_templates(self, query: TemplateListQuery) -> TemplatePage:
        try:
            models, total = await self.repository.list_active(
                category=query.category,
                search=query.search,
                offset=query.offset,
                limit=query.limit,
            )
            categories = await self.repository.list_active_categories()
        except SQLAlchemyError as exc:
            logger.error("Failed to list templates for %s: %s", query, exc)
            raise TemplateStoreUnavailableError(str(exc)) from exc

        return TemplatePage(
            items=[WorkflowTemplate.from_orm(model) for model in models],
            page=query.page,
            limit=query.limit,
            total_items=total,
            categories=categories,
        )

    async def get_template(self, template_id: int | str) -> WorkflowTemplate:
        try:
            identifier = int(str(template_id).strip())
        except ValueError:
            logger.debug("Rejected non-numeric template id %r", template_id)
            raise TemplateNotFoundError(str(template_id)) from None

        try:
            model = await self.repository.get_active_by_id(identifier)
        except SQLAlchemyError as exc:
            logger.error("Failed to fetch template %s: %s", identifier, exc)
            raise TemplateStoreUnavailableError(str(exc)) from exc

        if model is None:
            logger.debug("Template %s not found or inactive", identifier)
            raise TemplateNotFoundError(str(identifier))
        return WorkflowTemplate.from_orm(model)

    async def count_templates(self) -> int:
        try:
            return await self.repository.count_all()
        except SQLAlchemyError as exc:
            logger.error("Failed to count templates: %s", exc)
            raise TemplateStoreUnavailableError(str(exc)) from exc

    @staticmethod
    def _apply_defaults(payload: TemplateCreateInput) -> dict[str, Any]:
        values = dict(TEMPLATE_FIELD_DEFAULTS)
        for name in ("description", "category", "link", "html_content", "author"):
            supplied = getattr(payload, name)
            if supplied:
                values[name] = supplied
        return values
