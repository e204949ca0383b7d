"""Page metadata derived from a template for the detail view."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from .models import WorkflowTemplate

NOT_FOUND_DESCRIPTION = "The requested template could not be found."


@dataclass(slots=True)
class PageMetadata:
    title: str
    description: str
    keywords: str = ""
    open_graph: dict[str, str] = field(default_factory=dict)
    twitter: dict[str, str] = field(default_factory=dict)


def build_page_metadata(template: Optional[WorkflowTemplate], site_name: str) -> PageMetadata:
    if template is None:
        return PageMetadata(
            title=f"Template Not Found | {site_name}",
            description=NOT_FOUND_DESCRIPTION,
        )

    category = template.category.lower()
    keywords = [
        template.title,
        template.category,
        "n8n workflow",
        "automation template",
        "workflow automation",
        f"{category} automation",
    ]
    return PageMetadata(
        title=f"{template.title} - {template.category} Template | {site_name}",
        description=(
            f"{template.description} Download this {category} workflow template for n8n automation."
        ),
        keywords=", ".join(keywords),
        open_graph={
            "title": template.title,
            "description": template.description,
            "type": "article",
            "url": f"/template/{template.id}",
        },
        twitter={
            "card": "summary_large_image",
            "title": template.title,
            "description": template.description,
        },
    )
