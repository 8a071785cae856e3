"""
Integration tests for enterprise management endpoints, including the
events and cache lookups they send through the publisher.
"""

from uuid import uuid4

import pytest
from httpx import AsyncClient

from enterprise_service.events.publisher import (
    CACHE_ENTERPRISE,
    CACHE_ENTERPRISES,
    ENTERPRISE_CREATED,
    ENTERPRISE_DELETED,
    ENTERPRISE_UPDATED,
    GET_ALL_ENTERPRISES,
    GET_ENTERPRISE,
    INVALIDATE_ENTERPRISE_CACHE,
)
from enterprise_service.models import Enterprise

NEW_ENTERPRISE = {
    "name": "Acme",
    "contact_email": "contact@acme.com",
    "website": "acme.com",
    "industry": "Manufacturing",
}

pytestmark = pytest.mark.integration


class TestCreateEnterprise:
    """Test POST /enterprises endpoint."""

    @pytest.mark.asyncio
    async def test_requires_token(self, client: AsyncClient):
        response = await client.post("/enterprises", json=NEW_ENTERPRISE)

        assert response.status_code == 401

    @pytest.mark.asyncio
    async def test_create_with_default_settings(
        self, client: AsyncClient, auth_headers: dict, event_publisher
    ):
        response = await client.post("/enterprises", json=NEW_ENTERPRISE, headers=auth_headers)

        assert response.status_code == 201
        data = response.json()["data"]
        assert data["name"] == "Acme"
        assert data["settings"]["report_generation_type"] == "immediate"
        assert data["settings"]["access_type"] == "full"
        assert "contact_email" not in data

        assert event_publisher.emitted == [
            (ENTERPRISE_CREATED, {"enterpriseId": data["enterprise_id"], "name": "Acme"})
        ]

    @pytest.mark.asyncio
    async def test_create_with_settings(self, client: AsyncClient, auth_headers: dict):
        response = await client.post(
            "/enterprises",
            json={**NEW_ENTERPRISE, "settings": {"report_generation_type": "batch"}},
            headers=auth_headers,
        )

        settings = response.json()["data"]["settings"]
        assert settings["report_generation_type"] == "batch"
        assert settings["access_type"] == "full"

    @pytest.mark.asyncio
    async def test_create_missing_contact_email(
        self, client: AsyncClient, auth_headers: dict, event_publisher
    ):
        response = await client.post("/enterprises", json={"name": "Acme"}, headers=auth_headers)

        assert response.status_code == 400
        assert event_publisher.emitted == []

    @pytest.mark.asyncio
    async def test_create_invalid_setting(self, client: AsyncClient, auth_headers: dict):
        response = await client.post(
            "/enterprises",
            json={**NEW_ENTERPRISE, "settings": {"access_type": "everything"}},
            headers=auth_headers,
        )

        assert response.status_code == 400


class TestReadEnterprises:
    """Test GET /enterprises endpoints."""

    @pytest.mark.asyncio
    async def test_list_from_database(
        self, client: AsyncClient, auth_headers: dict, test_enterprise: Enterprise, event_publisher
    ):
        response = await client.get("/enterprises", headers=auth_headers)

        assert response.status_code == 200
        data = response.json()["data"]
        assert [enterprise["name"] for enterprise in data] == ["Test Enterprise"]
        assert data[0]["settings"]["access_type"] == "limited"

        assert event_publisher.sent == [(GET_ALL_ENTERPRISES, {})]
        assert event_publisher.emitted == [(CACHE_ENTERPRISES, data)]

    @pytest.mark.asyncio
    async def test_list_from_cache(
        self, client: AsyncClient, auth_headers: dict, test_enterprise: Enterprise, event_publisher
    ):
        first = await client.get("/enterprises", headers=auth_headers)
        cached = first.json()["data"]
        cached[0]["name"] = "From Cache"
        event_publisher.replies[GET_ALL_ENTERPRISES] = cached
        event_publisher.emitted.clear()

        response = await client.get("/enterprises", headers=auth_headers)

        assert response.json()["data"][0]["name"] == "From Cache"
        assert event_publisher.emitted == []

    @pytest.mark.asyncio
    async def test_malformed_cache_reply_is_a_miss(
        self, client: AsyncClient, auth_headers: dict, test_enterprise: Enterprise, event_publisher
    ):
        event_publisher.replies[GET_ALL_ENTERPRISES] = [{"unexpected": True}]

        response = await client.get("/enterprises", headers=auth_headers)

        assert response.json()["data"][0]["name"] == "Test Enterprise"

    @pytest.mark.asyncio
    async def test_get_from_database(
        self, client: AsyncClient, auth_headers: dict, test_enterprise: Enterprise, event_publisher
    ):
        enterprise_id = str(test_enterprise.enterprise_id)

        response = await client.get(f"/enterprises/{enterprise_id}", headers=auth_headers)

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["enterprise_id"] == enterprise_id
        assert data["settings"]["report_generation_type"] == "batch"

        assert event_publisher.sent == [(GET_ENTERPRISE, {"id": enterprise_id})]
        assert event_publisher.emitted == [(CACHE_ENTERPRISE, {"id": enterprise_id, "data": data})]

    @pytest.mark.asyncio
    async def test_get_from_cache(
        self, client: AsyncClient, auth_headers: dict, test_enterprise: Enterprise, event_publisher
    ):
        enterprise_id = str(test_enterprise.enterprise_id)
        first = await client.get(f"/enterprises/{enterprise_id}", headers=auth_headers)
        event_publisher.replies[GET_ENTERPRISE] = {**first.json()["data"], "industry": "Cached"}
        event_publisher.emitted.clear()

        response = await client.get(f"/enterprises/{enterprise_id}", headers=auth_headers)

        assert response.json()["data"]["industry"] == "Cached"
        assert event_publisher.emitted == []

    @pytest.mark.asyncio
    async def test_get_missing(self, client: AsyncClient, auth_headers: dict):
        response = await client.get(f"/enterprises/{uuid4()}", headers=auth_headers)

        assert response.status_code == 404
        assert response.json()["statusCode"] == 404


class TestUpdateEnterprise:
    """Test PATCH and PUT /enterprises/{enterprise_id} endpoints."""

    @pytest.mark.asyncio
    async def test_patch_merges(
        self, client: AsyncClient, auth_headers: dict, test_enterprise: Enterprise, event_publisher
    ):
        enterprise_id = str(test_enterprise.enterprise_id)

        response = await client.patch(
            f"/enterprises/{enterprise_id}",
            json={"industry": "Retail", "settings": {"access_type": "custom"}},
            headers=auth_headers,
        )

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["name"] == "Test Enterprise"
        assert data["industry"] == "Retail"
        assert data["settings"]["access_type"] == "custom"
        assert data["settings"]["report_generation_type"] == "batch"

        assert event_publisher.emitted == [
            (
                ENTERPRISE_UPDATED,
                {
                    "enterpriseId": enterprise_id,
                    "updates": {"industry": "Retail", "settings": {"access_type": "custom"}},
                },
            ),
            (INVALIDATE_ENTERPRISE_CACHE, {"id": enterprise_id}),
        ]

    @pytest.mark.asyncio
    async def test_put_updates_existing(
        self, client: AsyncClient, auth_headers: dict, test_enterprise: Enterprise
    ):
        enterprise_id = str(test_enterprise.enterprise_id)

        response = await client.put(
            f"/enterprises/{enterprise_id}",
            json={**NEW_ENTERPRISE, "name": "Replaced"},
            headers=auth_headers,
        )

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["enterprise_id"] == enterprise_id
        assert data["name"] == "Replaced"
        assert data["description"] is None
        assert data["industry"] == "Manufacturing"
        assert data["website"] == "acme.com"
        assert data["settings"]["report_generation_type"] == "batch"

        listing = await client.get("/enterprises", headers=auth_headers)
        assert len(listing.json()["data"]) == 1

    @pytest.mark.asyncio
    async def test_patch_null_name_rejected(
        self, client: AsyncClient, auth_headers: dict, test_enterprise: Enterprise
    ):
        response = await client.patch(
            f"/enterprises/{test_enterprise.enterprise_id}",
            json={"name": None},
            headers=auth_headers,
        )

        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_patch_missing(self, client: AsyncClient, auth_headers: dict, event_publisher):
        response = await client.patch(
            f"/enterprises/{uuid4()}", json={"name": "Ghost"}, headers=auth_headers
        )

        assert response.status_code == 404
        assert event_publisher.emitted == []


class TestDeleteEnterprise:
    """Test DELETE /enterprises/{enterprise_id} endpoint."""

    @pytest.mark.asyncio
    async def test_delete(
        self, client: AsyncClient, auth_headers: dict, test_enterprise: Enterprise, event_publisher
    ):
        enterprise_id = str(test_enterprise.enterprise_id)

        response = await client.delete(f"/enterprises/{enterprise_id}", headers=auth_headers)

        assert response.status_code == 200
        assert response.json()["data"] == {"message": "Enterprise deleted successfully"}
        assert event_publisher.emitted == [
            (ENTERPRISE_DELETED, {"enterpriseId": enterprise_id}),
            (INVALIDATE_ENTERPRISE_CACHE, {"id": enterprise_id}),
        ]

        response = await client.get(f"/enterprises/{enterprise_id}", headers=auth_headers)
        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_delete_missing(self, client: AsyncClient, auth_headers: dict):
        response = await client.delete(f"/enterprises/{uuid4()}", headers=auth_headers)

        assert response.status_code == 404
