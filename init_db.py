"""
Initialise the template store
Creates the tables and inserts sample templates into an empty store
"""
import asyncio

from gallery.infrastructure.database import get_session, init_db
from gallery.modules.templates import TemplateCreateInput, WorkflowTemplateService

SAMPLE_TEMPLATES = [
    TemplateCreateInput(
        title="Sample AI Workflow",
        description="Sample AI workflow",
        category="AI",
        link="https://example.com",
        html_content="<h2>Sample HTML</h2>",
    ),
    TemplateCreateInput(
        title="API Template",
        description="Template API",
        category="Engineering",
        link="https://example.com",
        html_content="<h2>API Guide</h2>",
    ),
]


async def seed_templates():
    """Create tables and insert the sample templates."""
    await init_db()

    async for db in get_session():
        service = WorkflowTemplateService.with_session(db)

        if await service.count_templates():
            print("Templates already present, skipping samples")
            return

        for payload in SAMPLE_TEMPLATES:
            await service.create_template(payload)
        await db.commit()

        print("=" * 50)
        print(f"Inserted {len(SAMPLE_TEMPLATES)} sample templates")
        print("=" * 50)


if __name__ == "__main__":
    asyncio.run(seed_templates())
