"""Domain models for workflow templates and the gallery listing contract."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Optional

from gallery.db import models as orm

# Sentinel category meaning "do not filter by category".
ALL_CATEGORIES = "All"


class TemplateStatus(str, Enum):
    ACTIVE = "active"
    DRAFT = "draft"
    ARCHIVED = "archived"


# Field defaults applied at creation time when a value is missing or empty.
TEMPLATE_FIELD_DEFAULTS: dict[str, Any] = {
    "description": "",
    "category": "Other",
    "link": "#",
    "html_content": "",
    "author": "Anonymous",
    "views": 50000,
    "downloads": 25,
    "rating": 4.5,
    "is_free": True,
    "status": TemplateStatus.ACTIVE.value,
}


def utf16_length(text: str) -> int:
    """Length of ``text`` in UTF-16 code units, as browsers report it."""
    return len(text.encode("utf-16-le")) // 2


@dataclass(slots=True)
class WorkflowTemplate:
    id: int
    title: str
    description: str
    category: str
    link: str
    html_content: str
    content_length: int
    author: str
    views: int
    downloads: int
    rating: float
    is_free: bool
    status: str
    created_at: Optional[datetime]
    updated_at: Optional[datetime]

    @property
    def is_active(self) -> bool:
        return self.status == TemplateStatus.ACTIVE.value

    @classmethod
    def from_orm(cls, instance: orm.WorkflowTemplate) -> "WorkflowTemplate":
        return cls(
            id=int(instance.id),
            title=instance.title,
            description=instance.description or "",
            category=instance.category,
            link=instance.link,
            html_content=instance.html_content or "",
            content_length=int(instance.content_length or 0),
            author=instance.author,
            views=int(instance.views or 0),
            downloads=int(instance.downloads or 0),
            rating=float(instance.rating) if instance.rating is not None else 0.0,
            is_free=bool(instance.is_free),
            status=instance.status,
            created_at=instance.created_at,
            updated_at=instance.updated_at,
        )


@dataclass(slots=True)
class TemplateCreateInput:
    title: Optional[str]
    description: Optional[str] = None
    category: Optional[str] = None
    link: Optional[str] = None
    html_content: Optional[str] = None
    author: Optional[str] = None


def _coerce_int(value: Any, default: int) -> int:
    if value is None or isinstance(value, bool):
        return default
    if isinstance(value, int):
        return value
    try:
        return int(str(value).strip())
    except ValueError:
        return default


@dataclass(slots=True, frozen=True)
class TemplateListQuery:
    """Validated listing parameters with defaults and clamping applied."""

    page: int = 1
    limit: int = 12
    category: Optional[str] = None
    search: Optional[str] = None

    @classmethod
    def build(
        cls,
        *,
        page: Any = None,
        limit: Any = None,
        category: Optional[str] = None,
        search: Optional[str] = None,
        default_limit: int = 12,
        max_limit: Optional[int] = None,
    ) -> "TemplateListQuery":
        """Normalise raw request values.

        Unparseable numbers fall back to their defaults, ``page`` and ``limit``
        are floored at 1 and ``limit`` is capped at ``max_limit`` when one is
        given. Blank strings and the ``"All"`` category mean "no filter". A
        non-blank search term is matched as given, surrounding spaces included.
        """
        page_value = max(_coerce_int(page, 1), 1)
        limit_value = max(_coerce_int(limit, default_limit), 1)
        if max_limit is not None:
            limit_value = min(limit_value, max(max_limit, 1))

        category_value = (category or "").strip()
        if not category_value or category_value == ALL_CATEGORIES:
            category_value = None

        search_value = search if search and search.strip() else None

        return cls(
            page=page_value,
            limit=limit_value,
            category=category_value,
            search=search_value,
        )

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit


@dataclass(slots=True)
class TemplatePage:
    """One page of the filtered, ordered active-template set."""

    items: list[WorkflowTemplate]
    page: int
    limit: int
    total_items: int
    categories: list[str] = field(default_factory=list)

    @property
    def total_pages(self) -> int:
        if self.total_items <= 0:
            return 0
        return math.ceil(self.total_items / self.limit)

    @property
    def has_next_page(self) -> bool:
        return self.page < self.total_pages

    @property
    def has_prev_page(self) -> bool:
        return self.page > 1

    @classmethod
    def empty(cls, query: TemplateListQuery) -> "TemplatePage":
        return cls(items=[], page=query.page, limit=query.limit, total_items=0)
