"""Shared fixtures: a throwaway SQLite store and an HTTP client bound to it."""

from __future__ import annotations

import itertools
from collections.abc import AsyncGenerator
from datetime import datetime, timedelta, timezone

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from gallery.db.models import WorkflowTemplate as WorkflowTemplateModel
from gallery.infrastructure.database import build_engine, init_db
from gallery.interfaces.http.deps import get_db_session
from gallery.main import create_app

BASE_TIME = datetime(2020, 1, 1, tzinfo=timezone.utc)


def _session_factory(engine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(bind=engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def session_factory(tmp_path) -> AsyncGenerator[async_sessionmaker[AsyncSession], None]:
    engine = build_engine(f"sqlite+aiosqlite:///{tmp_path / 'gallery.db'}")
    await init_db(engine)
    yield _session_factory(engine)
    await engine.dispose()


@pytest_asyncio.fixture
async def broken_session_factory(tmp_path) -> AsyncGenerator[async_sessionmaker[AsyncSession], None]:
    """Sessions on a database that was never migrated: every query fails."""
    engine = build_engine(f"sqlite+aiosqlite:///{tmp_path / 'unmigrated.db'}")
    yield _session_factory(engine)
    await engine.dispose()


@pytest_asyncio.fixture
async def session(session_factory) -> AsyncGenerator[AsyncSession, None]:
    async with session_factory() as session:
        yield session


@pytest.fixture
def add_template(session_factory):
    """Insert a template row directly, with increasing ``created_at`` by default."""
    counter = itertools.count()

    async def _add(**overrides) -> int:
        index = next(counter)
        values = {
            "title": f"Template {index}",
            "description": "",
            "category": "Other",
            "link": "#",
            "html_content": "",
            "content_length": 0,
            "author": "Anonymous",
            "views": 50000,
            "downloads": 25,
            "rating": 4.5,
            "is_free": True,
            "status": "active",
            "created_at": BASE_TIME + timedelta(minutes=index),
        }
        values.update(overrides)
        async with session_factory() as session:
            model = WorkflowTemplateModel(**values)
            session.add(model)
            await session.commit()
            return model.id

    return _add


def _override_session(factory: async_sessionmaker[AsyncSession]):
    async def _get_db_session() -> AsyncGenerator[AsyncSession, None]:
        async with factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    return _get_db_session


@pytest.fixture
def app(session_factory):
    application = create_app()
    application.dependency_overrides[get_db_session] = _override_session(session_factory)
    return application


@pytest_asyncio.fixture
async def client(app) -> AsyncGenerator[AsyncClient, None]:
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as http:
        yield http


@pytest_asyncio.fixture
async def broken_client(broken_session_factory) -> AsyncGenerator[AsyncClient, None]:
    application = create_app()
    application.dependency_overrides[get_db_session] = _override_session(broken_session_factory)
    async with AsyncClient(transport=ASGITransport(app=application), base_url="http://test") as http:
        yield http
