"""Tests for navigation API endpoint."""

import pytest
from aiohttp.test_utils import TestClient
from ethph_academy.config import Config
from ethph_academy.server import create_app


@pytest.fixture
def client(test_config: Config, aiohttp_client) -> TestClient:
    app = create_app(test_config)
    return aiohttp_client(app)


class TestGetNavigation:
    """Tests for GET /api/navigation."""

    @pytest.mark.asyncio
    async def test__sections__returned_in_order(self, client) -> None:
        test_client = await client
        response = await test_client.get("/api/navigation")

        assert response.status == 200
        data = await response.json()
        titles = [section["title"] for section in data["items"]]
        assert titles[0] == "Getting Started"
        assert titles[-1] == "WAGMI"
        assert len(titles) == 7

    @pytest.mark.asyncio
    async def test__default_expansion__only_first_section(self, client) -> None:
        test_client = await client
        response = await test_client.get("/api/navigation")

        data = await response.json()
        assert [section["expanded"] for section in data["items"]] == [
            True,
            False,
            False,
            False,
            False,
            False,
            False,
        ]

    @pytest.mark.asyncio
    async def test__current_path__marks_single_item_active(self, client) -> None:
        """Exactly one item matches the current path."""
        test_client = await client
        response = await test_client.get("/api/navigation", params={"path": "/tutorials/erc721"})

        data = await response.json()
        active = [
            item["path"]
            for section in data["items"]
            for item in section["items"]
            if item["active"]
        ]
        assert active == ["/tutorials/erc721"]

    @pytest.mark.asyncio
    async def test__unknown_path__marks_nothing_active(self, client) -> None:
        test_client = await client
        response = await test_client.get("/api/navigation", params={"path": "/tutorials/erc"})

        data = await response.json()
        assert not any(item["active"] for section in data["items"] for item in section["items"])


class TestToggleQuery:
    """Tests for the toggle parameter of GET /api/navigation."""

    @pytest.mark.asyncio
    async def test__toggle__flips_addressed_sections(self, client) -> None:
        test_client = await client
        response = await test_client.get(
            "/api/navigation",
            params=[("toggle", "0"), ("toggle", "2")],
        )

        assert response.status == 200
        data = await response.json()
        assert [section["expanded"] for section in data["items"]][:4] == [
            False,
            False,
            True,
            False,
        ]

    @pytest.mark.asyncio
    async def test__toggle_twice__restores_default(self, client) -> None:
        test_client = await client
        response = await test_client.get(
            "/api/navigation",
            params=[("toggle", "3"), ("toggle", "3")],
        )

        data = await response.json()
        assert data["items"][3]["expanded"] is False

    @pytest.mark.asyncio
    async def test__toggle__does_not_change_app_tree(self, client) -> None:
        """Toggles apply to the response only."""
        test_client = await client
        await test_client.get("/api/navigation", params={"toggle": "1"})

        response = await test_client.get("/api/navigation")

        data = await response.json()
        assert data["items"][1]["expanded"] is False

    @pytest.mark.asyncio
    @pytest.mark.parametrize("value", ["7", "-1", "first"])
    async def test__invalid_index__returns_400(self, client, value: str) -> None:
        test_client = await client
        response = await test_client.get("/api/navigation", params={"toggle": value})

        assert response.status == 400
        data = await response.json()
        assert data == {"error": "Invalid section index", "toggle": value}
