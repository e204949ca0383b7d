"""SQLAlchemy ORM models."""
from sqlalchemy import Boolean, Column, DateTime, Index, Integer, Numeric, String, Text
from sqlalchemy.sql import func

from gallery.infrastructure.database.base import Base


class WorkflowTemplate(Base):
    __tablename__ = "workflow_templates"
    __table_args__ = (
        Index("ix_workflow_templates_status_created", "status", "created_at"),
        Index("ix_workflow_templates_category_status", "category", "status"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(500), nullable=False)
    description = Column(Text, nullable=False, default="")
    category = Column(String(100), nullable=False, default="Other")
    link = Column(String(500), nullable=False, default="#")
    html_content = Column(Text, nullable=False, default="")
    content_length = Column(Integer, nullable=False, default=0)
    author = Column(String(200), nullable=False, default="Anonymous")
    views = Column(Integer, nullable=False, default=50000)
    downloads = Column(Integer, nullable=False, default=25)
    rating = Column(Numeric(2, 1, asdecimal=False), nullable=False, default=4.5)
    is_free = Column(Boolean, nullable=False, default=True)
    status = Column(String(50), nullable=False, default="active")
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(
        DateTime(timezone=True), nullable=False, server_default=func.now(), onupdate=func.now()
    )
