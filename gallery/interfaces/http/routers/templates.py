"""Public endpoints for browsing and publishing workflow templates."""
from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Path, status
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from gallery.interfaces.http.deps import get_db_session, get_list_query
from gallery.modules.templates import (
    TemplateCreateInput,
    TemplateListQuery,
    TemplateNotFoundError,
    TemplatePage,
    TemplateStoreUnavailableError,
    TemplateValidationError,
    WorkflowTemplateService,
)
from gallery.schemas import (
    ErrorResponse,
    PaginationInfo,
    TemplateCreate,
    TemplateCreateResponse,
    TemplateDetail,
    TemplateListErrorResponse,
    TemplateListResponse,
    TemplateSummary,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get(
    "",
    response_model=TemplateListResponse,
    responses={500: {"model": TemplateListErrorResponse}},
    summary="List active templates with filters and pagination",
)
async def list_templates(
    query: TemplateListQuery = Depends(get_list_query),
    db: AsyncSession = Depends(get_db_session),
):
    service = WorkflowTemplateService.with_session(db)
    try:
        page = await service.list_templates(query)
    except TemplateStoreUnavailableError:
        await db.rollback()
        failed = TemplateListErrorResponse(
            error="Failed to fetch templates",
            pagination=_to_pagination(TemplatePage.empty(query), failed=True),
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=failed.model_dump(mode="json", by_alias=True),
        )
    return _to_list_response(page)


@router.post(
    "/create",
    response_model=TemplateCreateResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
    summary="Publish a new template",
)
async def create_template(
    payload: TemplateCreate,
    db: AsyncSession = Depends(get_db_session),
):
    service = WorkflowTemplateService.with_session(db)
    try:
        template = await service.create_template(TemplateCreateInput(**payload.model_dump()))
        await db.commit()
    except TemplateValidationError as exc:
        return _error(status.HTTP_400_BAD_REQUEST, str(exc))
    except (TemplateStoreUnavailableError, SQLAlchemyError) as exc:
        await db.rollback()
        logger.error("Template creation failed: %s", exc)
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, "Failed to create template", str(exc))
    return TemplateCreateResponse(id=template.id)


@router.get(
    "/{template_id}",
    response_model=TemplateDetail,
    responses={404: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
    summary="Get a single active template",
)
async def get_template(
    template_id: str = Path(..., description="Template ID"),
    db: AsyncSession = Depends(get_db_session),
):
    service = WorkflowTemplateService.with_session(db)
    try:
        template = await service.get_template(template_id)
    except TemplateNotFoundError:
        return _error(status.HTTP_404_NOT_FOUND, "Template not found")
    except TemplateStoreUnavailableError:
        await db.rollback()
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, "Failed to fetch template")
    return TemplateDetail.model_validate(template)


def _to_list_response(page: TemplatePage) -> TemplateListResponse:
    return TemplateListResponse(
        data=[TemplateSummary.model_validate(item) for item in page.items],
        pagination=_to_pagination(page),
        categories=list(page.categories),
    )


def _to_pagination(page: TemplatePage, *, failed: bool = False) -> PaginationInfo:
    return PaginationInfo(
        current_page=page.page,
        total_pages=page.total_pages,
        total_items=page.total_items,
        items_per_page=page.limit,
        has_next_page=page.has_next_page,
        has_prev_page=False if failed else page.has_prev_page,
    )


def _error(status_code: int, message: str, details: str | None = None) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(error=message, details=details).model_dump(exclude_none=True),
    )
