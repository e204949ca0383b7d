"""Server-rendered gallery and template detail pages."""
from __future__ import annotations

from datetime import datetime
from typing import Any, Optional

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates
from sqlalchemy.ext.asyncio import AsyncSession

from gallery.core.config import Settings, get_settings
from gallery.interfaces.http.deps import get_db_session, get_list_query
from gallery.modules.templates import (
    ALL_CATEGORIES,
    TemplateListQuery,
    TemplateNotFoundError,
    TemplatePage,
    TemplateStoreUnavailableError,
    WorkflowTemplateService,
    build_page_metadata,
)

router = APIRouter()


def compact_number(value: Any) -> str:
    number = int(value or 0)
    if number >= 1_000_000:
        return f"{number / 1_000_000:.1f}M"
    if number >= 1_000:
        return f"{number / 1_000:.0f}K"
    return str(number)


def long_date(value: Optional[datetime]) -> str:
    if value is None:
        return ""
    return f"{value:%B} {value.day}, {value.year}"


def build_templates(settings: Settings) -> Jinja2Templates:
    templates = Jinja2Templates(directory=str(settings.template_dir))
    templates.env.filters["compact_number"] = compact_number
    templates.env.filters["long_date"] = long_date
    return templates


templates = build_templates(get_settings())


@router.get("/", response_class=HTMLResponse)
async def gallery_page(
    request: Request,
    query: TemplateListQuery = Depends(get_list_query),
    db: AsyncSession = Depends(get_db_session),
    settings: Settings = Depends(get_settings),
):
    service = WorkflowTemplateService.with_session(db)
    error = None
    status_code = status.HTTP_200_OK
    try:
        page = await service.list_templates(query)
    except TemplateStoreUnavailableError:
        await db.rollback()
        page = TemplatePage.empty(query)
        error = "Templates are temporarily unavailable."
        status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    return templates.TemplateResponse(
        request,
        "index.html",
        {
            "site_name": settings.gallery.site_name,
            "page": page,
            "query": query,
            "categories": [ALL_CATEGORIES, *page.categories],
            "selected_category": query.category or ALL_CATEGORIES,
            "error": error,
        },
        status_code=status_code,
    )


@router.get("/template/{template_id}", response_class=HTMLResponse)
async def template_page(
    request: Request,
    template_id: str,
    db: AsyncSession = Depends(get_db_session),
    settings: Settings = Depends(get_settings),
):
    service = WorkflowTemplateService.with_session(db)
    site_name = settings.gallery.site_name
    try:
        template = await service.get_template(template_id)
    except (TemplateNotFoundError, TemplateStoreUnavailableError):
        return templates.TemplateResponse(
            request,
            "not_found.html",
            {"site_name": site_name, "meta": build_page_metadata(None, site_name)},
            status_code=status.HTTP_404_NOT_FOUND,
        )

    return templates.TemplateResponse(
        request,
        "template_detail.html",
        {
            "site_name": site_name,
            "template": template,
            "meta": build_page_metadata(template, site_name),
            "trust_html": settings.gallery.trust_html_content,
        },
    )
