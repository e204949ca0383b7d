"""Repository protocol for workflow template persistence."""

from __future__ import annotations

from typing import Protocol, Sequence

from gallery.db.models import WorkflowTemplate as WorkflowTemplateModel


class WorkflowTemplateRepository(Protocol):
    async def create(
        self,
        *,
        title: str,
        description: str,
        category: str,
        link: str,
        html_content: str,
        content_length: int,
        author: str,
        views: int,
        downloads: int,
        rating: float,
        is_free: bool,
        status: str,
    ) -> WorkflowTemplateModel:
        ...

    async def get_active_by_id(self, template_id: int) -> WorkflowTemplateModel | None:
        ...

    async def list_active(
        self,
        *,
        category: str | None,
        search: str | None,
        offset: int,
        limit: int,
    ) -> tuple[Sequence[WorkflowTemplateModel], int]:
        ...

    async def list_active_categories(self) -> list[str]:
        ...

    async def count_all(self) -> int:
        ...
