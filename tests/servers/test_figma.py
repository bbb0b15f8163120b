"""Tests for the Figma server."""

from __future__ import annotations

import pytest

from servers.figma.main import create_dispatcher
from tests.conftest import FakePlatform, make_dispatcher


@pytest.fixture
def fake():
    return FakePlatform()


@pytest.fixture
def dispatcher(settings, fake):
    return make_dispatcher("figma", settings, fake)


class TestFigma:

    @pytest.mark.asyncio
    async def test_token_header(self, dispatcher, fake):
        fake.add("GET", "/v1/me", {"handle": "designer"})

        result = await dispatcher.call("get_me", {})

        assert result.result == {"handle": "designer"}
        assert fake.requests[0].headers["x-figma-token"] == "figd_test"

    @pytest.mark.asyncio
    async def test_missing_token_sends_no_header(self, settings, fake):
        settings.figma_access_token = ""
        fake.add("GET", "/v1/me", {"status": 403, "err": "Invalid token"}, status=403)
        dispatcher = create_dispatcher(settings, fake.transport)

        result = await dispatcher.call("get_me", {})

        assert result.success is False
        assert "x-figma-token" not in fake.requests[0].headers

    @pytest.mark.asyncio
    async def test_get_file_optional_params(self, dispatcher, fake):
        fake.add("GET", "/v1/files/KEY", {"name": "Design System"})

        await dispatcher.call("get_file", {"file_key": "KEY", "depth": 2})

        params = fake.requests[0].url.params
        assert params["depth"] == "2"
        assert "version" not in params

    @pytest.mark.asyncio
    async def test_get_images(self, dispatcher, fake):
        fake.add("GET", "/v1/images/KEY", {"images": {"1:2": "https://cdn/1.png"}})

        await dispatcher.call("get_images", {"file_key": "KEY", "ids": "1:2,1:3", "format": "svg", "scale": 2})

        params = fake.requests[0].url.params
        assert params["ids"] == "1:2,1:3"
        assert params["format"] == "svg"

    @pytest.mark.asyncio
    async def test_get_images_rejects_unknown_format(self, dispatcher, fake):
        from shared.errors import InvalidParamsError

        with pytest.raises(InvalidParamsError):
            await dispatcher.call("get_images", {"file_key": "KEY", "ids": "1:2", "format": "gif"})
        assert fake.call_count == 0

    @pytest.mark.asyncio
    async def test_post_comment_on_node(self, dispatcher, fake):
        fake.add("POST", "/v1/files/KEY/comments", {"id": "c1"})

        await dispatcher.call("post_comment", {"file_key": "KEY", "message": "Nice", "node_id": "4:7"})

        body = fake.last_json("POST", "/v1/files/KEY/comments")
        assert body["message"] == "Nice"
        assert body["client_meta"]["node_id"] == "4:7"

    @pytest.mark.asyncio
    async def test_team_components_page_size(self, dispatcher, fake):
        fake.add("GET", "/v1/teams/T1/components", {"meta": {"components": []}})

        await dispatcher.call("get_team_components", {"team_id": "T1", "page_size": 50})

        assert fake.requests[0].url.params["page_size"] == "50"
