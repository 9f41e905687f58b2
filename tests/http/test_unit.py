"""Unit tests for HttpClient using httpx.MockTransport."""

import httpx
import pytest  # type: ignore

from pkg.http.http import HttpClient, build_params
from pkg.http.type import ErrHTTPRequest, HttpClientConfig


def make_client(handler, max_retries: int = 1) -> HttpClient:
    return HttpClient(
        HttpClientConfig(
            base_url="https://api.example.test",
            service_name="Example",
            headers={"X-Key": "secret"},
            max_retries=max_retries,
            retry_backoff=0.001,
            transport=httpx.MockTransport(handler),
        )
    )


class TestBuildParams:
    """Query parameter cleaning."""

    def test_drops_none_and_empty(self):
        assert build_params({"a": None, "b": "", "c": 1}) == {"c": "1"}

    def test_booleans_lowercase(self):
        assert build_params({"x": True, "y": False}) == {"x": "true", "y": "false"}

    def test_none_input(self):
        assert build_params(None) == {}


class TestHttpClientConfig:
    """Config validation."""

    def test_empty_base_url(self):
        with pytest.raises(ValueError):
            HttpClientConfig(base_url="", service_name="x")

    def test_negative_retries(self):
        with pytest.raises(ValueError):
            HttpClientConfig(base_url="https://x", service_name="x", max_retries=-1)


class TestHttpClient:
    """Request behavior, error mapping and retries."""

    @pytest.mark.anyio
    async def test_get_json_sends_headers_and_params(self):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["key"] = request.headers.get("X-Key")
            seen["query"] = dict(request.url.params)
            return httpx.Response(200, json={"ok": True})

        client = make_client(handler)
        data = await client.get_json("/ping", params={"q": "art", "skip": None})
        await client.close()

        assert data == {"ok": True}
        assert seen == {"key": "secret", "query": {"q": "art"}}

    @pytest.mark.anyio
    async def test_post_json_sends_body(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, content=request.content)

        client = make_client(handler)
        data = await client.post_json("/echo", body={"a": 1})
        await client.close()
        assert data == {"a": 1}

    @pytest.mark.anyio
    async def test_non_retryable_status_raises_once(self):
        calls = []

        def handler(request: httpx.Request) -> httpx.Response:
            calls.append(1)
            return httpx.Response(404, json={"message": "not found"})

        client = make_client(handler)
        with pytest.raises(ErrHTTPRequest) as exc_info:
            await client.get_json("/missing")
        await client.close()

        assert exc_info.value.status_code == 404
        assert exc_info.value.message == "not found"
        assert exc_info.value.service == "Example"
        assert len(calls) == 1

    @pytest.mark.anyio
    async def test_retryable_status_is_retried(self):
        responses = [httpx.Response(503), httpx.Response(200, json=[1, 2])]

        def handler(request: httpx.Request) -> httpx.Response:
            return responses.pop(0)

        client = make_client(handler, max_retries=1)
        assert await client.get_json("/flaky") == [1, 2]
        await client.close()

    @pytest.mark.anyio
    async def test_retries_exhausted(self):
        calls = []

        def handler(request: httpx.Request) -> httpx.Response:
            calls.append(1)
            return httpx.Response(429)

        client = make_client(handler, max_retries=2)
        with pytest.raises(ErrHTTPRequest) as exc_info:
            await client.get_json("/limited")
        await client.close()

        assert exc_info.value.status_code == 429
        assert len(calls) == 3

    @pytest.mark.anyio
    async def test_transport_error_mapped(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        client = make_client(handler, max_retries=0)
        with pytest.raises(ErrHTTPRequest) as exc_info:
            await client.get_json("/down")
        await client.close()
        assert exc_info.value.status_code == 503

    @pytest.mark.anyio
    async def test_timeout_mapped(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("slow", request=request)

        client = make_client(handler, max_retries=0)
        with pytest.raises(ErrHTTPRequest) as exc_info:
            await client.get_json("/slow")
        await client.close()
        assert exc_info.value.status_code == 504

    @pytest.mark.anyio
    async def test_invalid_json_body(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, text="<html>")

        client = make_client(handler)
        with pytest.raises(ErrHTTPRequest):
            await client.get_json("/html")
        await client.close()
