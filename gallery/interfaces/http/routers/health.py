"""Store connectivity check."""
from __future__ import annotations

import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncSession

from gallery.interfaces.http.deps import get_db_session
from gallery.modules.templates import TemplateStoreUnavailableError, WorkflowTemplateService
from gallery.schemas import HealthErrorResponse, HealthResponse

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get(
    "/health",
    response_model=HealthResponse,
    responses={500: {"model": HealthErrorResponse}},
    summary="Check that the template store is reachable",
)
async def health(db: AsyncSession = Depends(get_db_session)):
    service = WorkflowTemplateService.with_session(db)
    timestamp = datetime.now(timezone.utc)
    try:
        count = await service.count_templates()
    except TemplateStoreUnavailableError as exc:
        await db.rollback()
        logger.warning("Health check failed: %s", exc)
        failed = HealthErrorResponse(error="Database connection failed", timestamp=timestamp)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=failed.model_dump(mode="json"),
        )
    return HealthResponse(templates_count=count, timestamp=timestamp)
