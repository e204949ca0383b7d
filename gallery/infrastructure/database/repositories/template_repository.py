"""SQLAlchemy implementation for the workflow template repository."""

from __future__ import annotations

from typing import Any, Sequence

from sqlalchemy import func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from gallery.db.models import WorkflowTemplate

ACTIVE_STATUS = "active"
# largest value a signed 64-bit LIMIT/OFFSET parameter accepts
MAX_ROW_BOUND = 2**63 - 1


class SqlWorkflowTemplateRepository:
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

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
    ) -> WorkflowTemplate:
        template = WorkflowTemplate(
            title=title,
            description=description,
            category=category,
            link=link,
            html_content=html_content,
            content_length=content_length,
            author=author,
            views=views,
            downloads=downloads,
            rating=rating,
            is_free=is_free,
            status=status,
        )
        self.session.add(template)
        await self.session.flush()
        await self.session.refresh(template)
        return template

    async def get_active_by_id(self, template_id: int) -> WorkflowTemplate | None:
        stmt = (
            select(WorkflowTemplate)
            .where(WorkflowTemplate.id == template_id)
            .where(WorkflowTemplate.status == ACTIVE_STATUS)
        )
        result = await self.session.execute(stmt)
        return result.scalars().first()

    async def list_active(
        self,
        *,
        category: str | None,
        search: str | None,
        offset: int,
        limit: int,
    ) -> tuple[Sequence[WorkflowTemplate], int]:
        conditions = self._listing_conditions(category, search)
        count_query = select(func.count(WorkflowTemplate.id)).where(*conditions)
        total = (await self.session.execute(count_query)).scalar() or 0

        limit = min(limit, MAX_ROW_BOUND)
        if offset > MAX_ROW_BOUND - limit:
            # no store can hold that many rows; LIMIT/OFFSET would not bind
            return [], int(total)

        query = (
            select(WorkflowTemplate)
            .where(*conditions)
            .order_by(WorkflowTemplate.created_at.desc(), WorkflowTemplate.id.desc())
            .offset(offset)
            .limit(limit)
        )
        result = await self.session.execute(query)
        return result.scalars().all(), int(total)

    async def list_active_categories(self) -> list[str]:
        stmt = (
            select(WorkflowTemplate.category)
            .where(WorkflowTemplate.status == ACTIVE_STATUS)
            .distinct()
        )
        result = await self.session.execute(stmt)
        return sorted(category for category in result.scalars().all() if category is not None)

    async def count_all(self) -> int:
        total = (await self.session.execute(select(func.count(WorkflowTemplate.id)))).scalar()
        return int(total or 0)

    @staticmethod
    def _listing_conditions(category: str | None, search: str | None) -> list[Any]:
        conditions: list[Any] = [WorkflowTemplate.status == ACTIVE_STATUS]
        if category:
            conditions.append(WorkflowTemplate.category == category)
        if search:
            # bound parameter with LIKE wildcards escaped: a literal substring match
            conditions.append(
                or_(
                    WorkflowTemplate.title.icontains(search, autoescape=True),
                    WorkflowTemplate.description.icontains(search, autoescape=True),
                )
            )
        return conditions
