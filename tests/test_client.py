import httpx
import pytest

from config import ElasticSettings, ConnectionSettings
from connection_management import (
    ElasticClient,
    ConnectionClosedError,
    ElasticHTTPError,
)
from elastic_ops_exceptions import TransportError


def make_client(handler, **connection):
    settings = ElasticSettings(connection=ConnectionSettings(url="http://es.test:9200", **connection))
    return ElasticClient(settings, transport=httpx.MockTransport(handler))


@pytest.mark.asyncio
async def test_perform_request_returns_raw_response():
    seen = {}

    def handler(request):
        seen["request"] = request
        return httpx.Response(200, content=b'{"ok":true}', headers={"X-Found": "yes"})

    client = make_client(handler)
    response = await client.perform_request(
        "POST", "idx/_search/template", params={"format": "json"}, body=b"{}"
    )

    assert response.status_code == 200
    assert response.body == b'{"ok":true}'
    assert response.header["x-found"] == "yes"

    request = seen["request"]
    assert request.url.path == "/idx/_search/template"
    assert request.url.params["format"] == "json"
    assert request.content == b"{}"
    await client.close()


@pytest.mark.asyncio
async def test_api_key_and_default_headers():
    seen = {}

    def handler(request):
        seen["request"] = request
        return httpx.Response(200, json={})

    client = make_client(handler, api_key="c2VjcmV0", headers={"X-Team": "search"})
    await client.perform_request("GET", "/")

    assert seen["request"].headers["authorization"] == "ApiKey c2VjcmV0"
    assert seen["request"].headers["x-team"] == "search"
    await client.close()


@pytest.mark.asyncio
async def test_basic_auth():
    seen = {}

    def handler(request):
        seen["request"] = request
        return httpx.Response(200, json={})

    client = make_client(handler, username="elastic", password="changeme")
    await client.perform_request("GET", "/")

    assert seen["request"].headers["authorization"].startswith("Basic ")
    await client.close()


@pytest.mark.asyncio
async def test_non_success_status_raises():
    def handler(request):
        return httpx.Response(
            400,
            json={"error": {"type": "parsing_exception", "reason": "unknown query [foo]"}},
            headers={"X-Elastic-Product": "Elasticsearch"},
        )

    client = make_client(handler)
    with pytest.raises(ElasticHTTPError) as exc_info:
        await client.perform_request("POST", "_search/template")

    err = exc_info.value
    assert isinstance(err, TransportError)
    assert err.status_code == 400
    assert err.reason == "unknown query [foo]"
    assert err.error_type == "parsing_exception"
    assert err.header["x-elastic-product"] == "Elasticsearch"
    await client.close()


@pytest.mark.asyncio
async def test_non_json_error_body():
    client = make_client(lambda request: httpx.Response(502, content=b"bad gateway"))

    with pytest.raises(ElasticHTTPError) as exc_info:
        await client.perform_request("POST", "_search/template")

    assert exc_info.value.reason is None
    assert exc_info.value.body == b"bad gateway"
    await client.close()


@pytest.mark.asyncio
async def test_closed_client_refuses_requests():
    client = make_client(lambda request: httpx.Response(200, json={}))
    async with client:
        pass

    assert client.closed
    with pytest.raises(ConnectionClosedError):
        await client.perform_request("GET", "/")
