"""
Unit tests for the Cosmic content client wire format and error mapping
"""
import json

import httpx
import pytest

from ranch_site import config
from ranch_site.common.content_client import ContentClient, create_content_client
from ranch_site.common.errors import ContentStoreError, RetrievalError
from ranch_site.apps.product.repository import ProductRepository


def _client(handler) -> ContentClient:
    http_client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return ContentClient(
        bucket_slug="golden-hills",
        read_key="read-123",
        api_url="https://api.example.com/v3/",
        http_client=http_client,
    )


class TestFind:
    """ContentClient.find"""

    @pytest.mark.asyncio
    async def test_find_sends_query_props_and_depth(self):
        """Request carries the JSON query, comma-joined props, depth and read key"""
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["url"] = request.url
            return httpx.Response(200, json={"objects": [{"id": "1", "slug": "ribeye"}], "total": 1})

        client = _client(handler)
        response = await client.find(
            {"type": "products", "metadata.featured": True},
            props=["id", "title", "slug", "metadata"],
            depth=1,
        )

        url = seen["url"]
        assert url.path == "/v3/buckets/golden-hills/objects"
        assert json.loads(url.params["query"]) == {"type": "products", "metadata.featured": True}
        assert url.params["props"] == "id,title,slug,metadata"
        assert url.params["depth"] == "1"
        assert url.params["read_key"] == "read-123"
        assert "limit" not in url.params
        assert response.total == 1
        assert response.objects[0]["slug"] == "ribeye"

    @pytest.mark.asyncio
    async def test_find_omits_depth_when_not_given(self):
        """Types without relations are queried without a depth"""
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["params"] = request.url.params
            return httpx.Response(200, json={"objects": [], "total": 0})

        client = _client(handler)
        response = await client.find({"type": "blog-tags"})

        assert "depth" not in seen["params"]
        assert "props" not in seen["params"]
        assert response.objects == []

    @pytest.mark.asyncio
    async def test_not_found_maps_to_404_error(self):
        """The store's 'No objects found' becomes a not-found ContentStoreError"""
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(404, json={"status": 404, "message": "No objects found"})

        client = _client(handler)
        with pytest.raises(ContentStoreError) as exc_info:
            await client.find({"type": "products"})

        assert exc_info.value.is_not_found
        assert exc_info.value.message == "No objects found"

    @pytest.mark.asyncio
    async def test_server_error_keeps_status(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(500, text="upstream exploded")

        client = _client(handler)
        with pytest.raises(ContentStoreError) as exc_info:
            await client.find({"type": "products"})

        assert exc_info.value.status_code == 500
        assert not exc_info.value.is_not_found
        assert exc_info.value.message == "HTTP 500"

    @pytest.mark.asyncio
    async def test_transport_error_has_no_status(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        client = _client(handler)
        with pytest.raises(ContentStoreError) as exc_info:
            await client.find({"type": "products"})

        assert exc_info.value.status_code is None
        assert isinstance(exc_info.value.__cause__, httpx.ConnectError)

    @pytest.mark.asyncio
    async def test_non_object_body_is_store_error(self):
        """A 200 whose JSON is not an object is reported like any other bad response"""
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json=[{"id": "1"}])

        client = _client(handler)
        with pytest.raises(ContentStoreError) as exc_info:
            await client.find({"type": "products"})

        assert exc_info.value.status_code == 200
        assert not exc_info.value.is_not_found

    @pytest.mark.asyncio
    async def test_non_object_body_reaches_repository_as_retrieval_error(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json=["unexpected"])

        with pytest.raises(RetrievalError) as exc_info:
            await ProductRepository(_client(handler)).get_products()

        assert exc_info.value.operation == "fetch all"


class TestFindOne:
    """ContentClient.find_one"""

    @pytest.mark.asyncio
    async def test_find_one_limits_to_one_and_returns_object(self):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["params"] = request.url.params
            return httpx.Response(200, json={"objects": [{"id": "p1", "slug": "about"}], "total": 1})

        client = _client(handler)
        obj = await client.find_one({"type": "pages", "slug": "about"}, props=["id", "slug"])

        assert seen["params"]["limit"] == "1"
        assert obj == {"id": "p1", "slug": "about"}

    @pytest.mark.asyncio
    async def test_find_one_empty_result_is_not_found(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json={"objects": [], "total": 0})

        client = _client(handler)
        with pytest.raises(ContentStoreError) as exc_info:
            await client.find_one({"type": "pages", "slug": "missing"})

        assert exc_info.value.is_not_found


class TestLifecycle:
    @pytest.mark.asyncio
    async def test_aclose_leaves_injected_client_open(self):
        """An injected http client belongs to the caller"""
        http_client = httpx.AsyncClient(transport=httpx.MockTransport(lambda r: httpx.Response(200, json={})))
        client = ContentClient("bucket", "key", http_client=http_client)

        await client.aclose()

        assert not http_client.is_closed
        await http_client.aclose()

    @pytest.mark.asyncio
    async def test_aclose_closes_owned_client(self):
        client = ContentClient("bucket", "key")

        await client.aclose()

        assert client._http.is_closed


class TestConfiguration:
    @pytest.mark.asyncio
    async def test_default_api_url_is_staging(self):
        client = ContentClient("bucket", "key")

        assert client.api_url == config.COSMIC_API_URLS["staging"]
        await client.aclose()

    def test_api_url_follows_environment(self, monkeypatch):
        monkeypatch.delenv("COSMIC_API_URL", raising=False)
        monkeypatch.setattr(config, "COSMIC_API_ENVIRONMENT", "production")

        assert config.get_cosmic_api_url() == "https://api.cosmicjs.com/v3"

    def test_unknown_environment_uses_staging(self, monkeypatch):
        monkeypatch.delenv("COSMIC_API_URL", raising=False)
        monkeypatch.setattr(config, "COSMIC_API_ENVIRONMENT", "qa")

        assert config.get_cosmic_api_url() == "https://api.cosmic-staging.com/v3"

    def test_explicit_api_url_wins(self, monkeypatch):
        monkeypatch.setenv("COSMIC_API_URL", "http://localhost:4010/v3/")

        assert config.get_cosmic_api_url() == "http://localhost:4010/v3"

    def test_missing_bucket_slug_raises(self, monkeypatch):
        monkeypatch.delenv("COSMIC_BUCKET_SLUG", raising=False)

        with pytest.raises(ValueError, match="COSMIC_BUCKET_SLUG"):
            create_content_client()

    def test_create_from_environment(self, monkeypatch):
        monkeypatch.setenv("COSMIC_BUCKET_SLUG", "golden-hills")
        monkeypatch.setenv("COSMIC_READ_KEY", "read-123")
        monkeypatch.setenv("COSMIC_API_URL", "https://api.example.com/v3")

        client = create_content_client()

        assert client.objects_url == "https://api.example.com/v3/buckets/golden-hills/objects"
