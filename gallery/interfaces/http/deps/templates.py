"""Template gallery dependency providers."""

from typing import Optional

from fastapi import Depends, Query

from gallery.core.config import Settings, get_settings
from gallery.modules.templates import TemplateListQuery


def get_list_query(
    page: Optional[str] = Query(None, description="Page number, starting at 1"),
    limit: Optional[str] = Query(None, description="Page size"),
    category: Optional[str] = Query(None, description='Exact category, "All" for no filter'),
    search: Optional[str] = Query(None, description="Case-insensitive title/description substring"),
    settings: Settings = Depends(get_settings),
) -> TemplateListQuery:
    # numbers arrive as raw strings so malformed values are clamped, not rejected
    return TemplateListQuery.build(
        page=page,
        limit=limit,
        category=category,
        search=search,
        default_limit=settings.default_page_size,
        max_limit=settings.max_page_size,
    )


__all__ = ["get_list_query"]
