"""HTTP contract of the template listing, creation, detail and health routes."""

from __future__ import annotations

import pytest

pytestmark = pytest.mark.asyncio

PAGINATION_KEYS = {
    "currentPage",
    "totalPages",
    "totalItems",
    "itemsPerPage",
    "hasNextPage",
    "hasPrevPage",
}


async def test_listing_fourteen_templates_over_two_pages(client, add_template):
    for _ in range(14):
        await add_template(category="AI")

    first = await client.get("/api/templates", params={"page": 1, "limit": 12})
    second = await client.get("/api/templates", params={"page": 2, "limit": 12})

    assert first.status_code == 200
    body = first.json()
    assert len(body["data"]) == 12
    assert body["pagination"] == {
        "currentPage": 1,
        "totalPages": 2,
        "totalItems": 14,
        "itemsPerPage": 12,
        "hasNextPage": True,
        "hasPrevPage": False,
    }
    assert body["categories"] == ["AI"]

    body = second.json()
    assert len(body["data"]) == 2
    assert body["pagination"]["hasNextPage"] is False
    assert body["pagination"]["hasPrevPage"] is True


async def test_listing_uses_camel_case_and_omits_html(client, add_template):
    await add_template(title="Mail triage", html_content="<h2>Steps</h2>", content_length=14)

    response = await client.get("/api/templates")

    item = response.json()["data"][0]
    assert item["title"] == "Mail triage"
    assert item["contentLength"] == 14
    assert item["isFree"] is True
    assert "createdAt" in item
    assert "htmlContent" not in item
    assert "html_content" not in item


async def test_listing_defaults_to_twelve_per_page(client, add_template):
    for _ in range(13):
        await add_template()

    response = await client.get("/api/templates")

    body = response.json()
    assert len(body["data"]) == 12
    assert body["pagination"]["itemsPerPage"] == 12
    assert body["pagination"]["totalPages"] == 2


async def test_listing_page_beyond_range(client, add_template):
    for _ in range(3):
        await add_template()

    response = await client.get("/api/templates", params={"page": 4, "limit": 2})

    body = response.json()
    assert response.status_code == 200
    assert body["data"] == []
    assert body["pagination"]["totalItems"] == 3
    assert body["pagination"]["totalPages"] == 2
    assert body["pagination"]["hasNextPage"] is False
    assert body["pagination"]["hasPrevPage"] is True


async def test_listing_empty_store(client):
    response = await client.get("/api/templates")

    assert response.status_code == 200
    body = response.json()
    assert body["data"] == []
    assert body["categories"] == []
    assert body["pagination"]["totalItems"] == 0
    assert body["pagination"]["totalPages"] == 0
    assert body["pagination"]["hasNextPage"] is False


async def test_listing_clamps_malformed_parameters(client, add_template):
    for _ in range(3):
        await add_template()

    response = await client.get("/api/templates", params={"page": "abc", "limit": "-5"})

    assert response.status_code == 200
    pagination = response.json()["pagination"]
    assert pagination["currentPage"] == 1
    assert pagination["itemsPerPage"] == 1
    assert pagination["totalPages"] == 3


async def test_listing_overflowing_page_is_empty_not_an_error(client, add_template):
    for _ in range(3):
        await add_template()

    response = await client.get("/api/templates", params={"page": "10000000000000000000"})

    assert response.status_code == 200
    body = response.json()
    assert body["data"] == []
    assert body["pagination"]["currentPage"] == 10**19
    assert body["pagination"]["totalItems"] == 3
    assert body["pagination"]["totalPages"] == 1
    assert body["pagination"]["hasNextPage"] is False


async def test_listing_honours_large_limit(client, add_template):
    for _ in range(3):
        await add_template()

    response = await client.get("/api/templates", params={"limit": "500"})

    pagination = response.json()["pagination"]
    assert pagination["itemsPerPage"] == 500
    assert pagination["totalPages"] == 1


async def test_listing_category_and_search(client, add_template):
    await add_template(title="AI guide", category="AI")
    await add_template(title="AI flow", category="AI", description="Guide inside")
    await add_template(title="Sales guide", category="Sales")
    await add_template(title="Draft guide", category="AI", status="draft")

    by_category = (await client.get("/api/templates", params={"category": "AI"})).json()
    everything = (await client.get("/api/templates", params={"category": "All"})).json()
    searched = (await client.get("/api/templates", params={"category": "AI", "search": "GUIDE"})).json()

    assert {item["category"] for item in by_category["data"]} == {"AI"}
    assert by_category["pagination"]["totalItems"] == 2
    assert everything["pagination"]["totalItems"] == 3
    assert sorted(item["title"] for item in searched["data"]) == ["AI flow", "AI guide"]
    assert by_category["categories"] == ["AI", "Sales"]


async def test_listing_search_injection_is_literal(client, add_template):
    await add_template(title="First")
    await add_template(title="Second")

    response = await client.get("/api/templates", params={"search": "' OR '1'='1"})

    body = response.json()
    assert response.status_code == 200
    assert body["data"] == []
    assert body["pagination"]["totalItems"] == 0


async def test_listing_store_failure_returns_zeroed_page(broken_client):
    response = await broken_client.get("/api/templates", params={"page": 2, "limit": 5})

    assert response.status_code == 500
    body = response.json()
    assert body["error"] == "Failed to fetch templates"
    assert body["data"] == []
    assert body["categories"] == []
    assert set(body["pagination"]) == PAGINATION_KEYS
    assert body["pagination"]["totalItems"] == 0
    assert body["pagination"]["totalPages"] == 0
    assert body["pagination"]["hasNextPage"] is False
    assert body["pagination"]["hasPrevPage"] is False


async def test_create_then_list_round_trip(client, add_template):
    await add_template(title="Older")

    created = await client.post(
        "/api/templates/create",
        json={"title": "Fresh", "category": "AI", "html_content": "<h2>Hi</h2>"},
    )

    assert created.status_code == 200
    body = created.json()
    assert body["success"] is True
    assert body["message"] == "Template created successfully"
    assert isinstance(body["id"], int)

    listing = (await client.get("/api/templates")).json()
    assert listing["data"][0]["id"] == body["id"]
    assert listing["data"][0]["contentLength"] == 11
    assert listing["categories"] == ["AI", "Other"]


async def test_create_with_only_title_uses_defaults(client):
    created = (await client.post("/api/templates/create", json={"title": "Bare"})).json()

    detail = (await client.get(f"/api/templates/{created['id']}")).json()

    assert detail["category"] == "Other"
    assert detail["author"] == "Anonymous"
    assert detail["link"] == "#"
    assert detail["description"] == ""
    assert detail["htmlContent"] == ""
    assert detail["isFree"] is True
    assert detail["views"] == 50000
    assert detail["downloads"] == 25
    assert detail["rating"] == 4.5
    assert detail["status"] == "active"


@pytest.mark.parametrize("payload", [{}, {"title": ""}, {"title": "   "}, {"description": "no title"}])
async def test_create_without_title_is_a_client_error(client, payload):
    response = await client.post("/api/templates/create", json=payload)

    assert response.status_code == 400
    assert response.json() == {"error": "Title is required"}


async def test_create_store_failure(broken_client):
    response = await broken_client.post("/api/templates/create", json={"title": "Lost"})

    assert response.status_code == 500
    body = response.json()
    assert body["error"] == "Failed to create template"
    assert body["details"]


async def test_detail_returns_html_content(client, add_template):
    template_id = await add_template(title="Detail", html_content="<h2>API Guide</h2>")

    response = await client.get(f"/api/templates/{template_id}")

    assert response.status_code == 200
    body = response.json()
    assert body["id"] == template_id
    assert body["htmlContent"] == "<h2>API Guide</h2>"


@pytest.mark.parametrize("path", ["/api/templates/9999", "/api/templates/not-a-number"])
async def test_detail_not_found(client, path):
    response = await client.get(path)

    assert response.status_code == 404
    assert response.json() == {"error": "Template not found"}


async def test_detail_hides_inactive_template(client, add_template):
    template_id = await add_template(status="draft")

    response = await client.get(f"/api/templates/{template_id}")

    assert response.status_code == 404


async def test_detail_store_failure(broken_client):
    response = await broken_client.get("/api/templates/1")

    assert response.status_code == 500
    assert response.json() == {"error": "Failed to fetch template"}


async def test_health_counts_all_rows(client, add_template):
    await add_template()
    await add_template(status="archived")

    response = await client.get("/api/health")

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["message"] == "Database connected!"
    assert body["templatesCount"] == 2
    assert body["timestamp"]


async def test_health_reports_store_failure(broken_client):
    response = await broken_client.get("/api/health")

    assert response.status_code == 500
    body = response.json()
    assert body["success"] is False
    assert body["error"] == "Database connection failed"
    assert body["timestamp"]
