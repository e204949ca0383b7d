"""Pydantic schemas used across the project."""
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Response model serialised with camelCase keys."""

    model_config = ConfigDict(
        from_attributes=True,
        populate_by_name=True,
        alias_generator=to_camel,
    )


class TemplateSummary(CamelModel):
    id: int
    title: str
    description: str = ""
    category: str
    link: str
    author: str
    content_length: int = 0
    views: int
    downloads: int
    rating: float
    is_free: bool
    status: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class TemplateDetail(TemplateSummary):
    html_content: str = ""


class PaginationInfo(CamelModel):
    current_page: int
    total_pages: int
    total_items: int
    items_per_page: int
    has_next_page: bool
    has_prev_page: bool


class TemplateListResponse(CamelModel):
    data: list[TemplateSummary] = Field(default_factory=list)
    pagination: PaginationInfo
    categories: list[str] = Field(default_factory=list)


class TemplateListErrorResponse(TemplateListResponse):
    error: str


class TemplateCreate(BaseModel):
    title: Optional[str] = None
    description: Optional[str] = None
    category: Optional[str] = None
    link: Optional[str] = None
    html_content: Optional[str] = None
    author: Optional[str] = None


class TemplateCreateResponse(BaseModel):
    success: bool = True
    id: int
    message: str = "Template created successfully"


class ErrorResponse(BaseModel):
    error: str
    details: Optional[str] = None


class HealthResponse(CamelModel):
    success: bool = True
    message: str = "Database connected!"
    templates_count: int
    timestamp: datetime


class HealthErrorResponse(BaseModel):
    success: bool = False
    error: str
    timestamp: datetime
