"""HTTP surface tests.

Drives the FastAPI app in-process through httpx.ASGITransport, with the
downstream storage service replaced by httpx.MockTransport.
"""

import base64
import time

import httpx
import pytest

from config.config import Config, DownstreamConfig
from pkg.http_client import HTTPClient, HTTPClientConfig
from pkg.task_runner import TaskRunner
from internal.httpserver import Dependencies, create_app, shutdown


DOWNSTREAM_ENDPOINT = "http://html-storage.test"

EXAMPLE_BATCH = {
    "a": {"body": "<p>hi</p>", "blog": "x", "timestamp": 1},
    "b": {"body": "<p>bye</p>", "blog": "y", "timestamp": 2},
}


@pytest.fixture
async def deps(compressor, logger, downstream):
    deps = Dependencies(
        logger=logger,
        zstd=compressor,
        http_client=HTTPClient(HTTPClientConfig(timeout_seconds=5), transport=downstream.transport),
        runner=TaskRunner(name="test"),
        config=Config(downstream=DownstreamConfig(endpoint=DOWNSTREAM_ENDPOINT)),
    )
    yield deps
    await shutdown(deps)


@pytest.fixture
async def client(deps):
    app = create_app(deps)
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


class TestServiceEndpoints:
    @pytest.mark.anyio
    async def test_root(self, client):
        response = await client.get("/")

        assert response.status_code == 200
        assert response.json() == {"status": "ok"}

    @pytest.mark.anyio
    async def test_metrics(self, client):
        response = await client.get("/metrics")

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/plain")
        assert "html_storage_file_compression_duration_seconds" in response.text

    @pytest.mark.anyio
    async def test_request_id_generated(self, client):
        response = await client.get("/")

        assert response.headers.get("X-Request-ID")

    @pytest.mark.anyio
    async def test_request_id_propagated(self, client):
        response = await client.get("/", headers={"X-Request-ID": "req-42"})

        assert response.headers["X-Request-ID"] == "req-42"


class TestSingleEndpoint:
    @pytest.mark.anyio
    async def test_single_relays_in_background(self, client, deps, downstream, compressor):
        """Test the item reaches downstream under its id once the runner drains."""
        response = await client.post(
            "/abc123", json={"body": "<p>hi</p>", "blog": "x", "timestamp": 1}
        )

        assert response.status_code == 200
        assert response.json() == {"status": "success"}

        await deps.runner.shutdown(drain_timeout=5)

        assert len(downstream.requests) == 1
        request = downstream.requests[0]
        assert request.url.path == "/abc123"
        assert request.url.params["is_precompressed"] == "true"

        sent = downstream.json_bodies()[0]
        assert sent["blog"] == "x"
        assert sent["timestamp"] == 1
        assert compressor.decompress_text(base64.b64decode(sent["body"])) == "<p>hi</p>"

    @pytest.mark.anyio
    @pytest.mark.parametrize("unreachable", [False, True])
    async def test_single_acknowledges_within_50ms(self, client, downstream, unreachable):
        """Test the acknowledgment does not wait on a slow or dead downstream."""
        if unreachable:
            downstream.unreachable(delay=2.0)
        else:
            downstream.delay = 2.0
        await client.get("/")

        started = time.perf_counter()
        response = await client.post("/abc123", json={"body": "<p>hi</p>"})
        elapsed = time.perf_counter() - started

        assert response.status_code == 200
        assert elapsed < 0.05

    @pytest.mark.anyio
    async def test_single_null_fields(self, client, deps, downstream):
        response = await client.post("/abc123", json={"body": None, "blog": "x", "timestamp": None})
        await deps.runner.shutdown(drain_timeout=5)

        assert response.status_code == 200
        sent = downstream.json_bodies()[0]
        assert sent["blog"] == "x"
        assert sent["timestamp"] == 0

    @pytest.mark.anyio
    async def test_single_succeeds_with_unreachable_downstream(self, client, deps, downstream):
        """Test a downstream failure never reaches the caller of /{id}."""
        downstream.unreachable()

        response = await client.post("/abc123", json={"body": "<p>hi</p>"})
        await deps.runner.shutdown(drain_timeout=5)

        assert response.status_code == 200
        assert response.json() == {"status": "success"}
        assert len(downstream.requests) == 1

    @pytest.mark.anyio
    async def test_single_missing_fields(self, client, deps, downstream):
        response = await client.post("/abc123", json={})
        await deps.runner.shutdown(drain_timeout=5)

        assert response.status_code == 200
        assert downstream.json_bodies()[0]["blog"] == ""
        assert downstream.json_bodies()[0]["timestamp"] == 0

    @pytest.mark.anyio
    @pytest.mark.parametrize(
        "content",
        [b"not json", b'{"body": 123}', b"[]", b'{"timestamp": "5"}', b'{"timestamp": true}'],
    )
    async def test_single_invalid_json(self, client, deps, downstream, content):
        response = await client.post(
            "/abc123", content=content, headers={"Content-Type": "application/json"}
        )
        await deps.runner.shutdown(drain_timeout=1)

        assert response.status_code == 400
        assert response.json() == {"error": "Invalid JSON"}
        assert downstream.requests == []
        assert deps.runner.pending == 0


class TestBatchEndpoint:
    @pytest.mark.anyio
    async def test_batch_one_downstream_call(self, client, downstream, compressor):
        response = await client.post("/batch", json=EXAMPLE_BATCH)

        assert response.status_code == 200
        assert response.json() == {"status": "success"}

        assert len(downstream.requests) == 1
        request = downstream.requests[0]
        assert request.url.path == "/batch"
        assert request.url.params["is_precompressed"] == "true"

        sent = downstream.json_bodies()[0]
        assert set(sent) == {"a", "b"}
        for key, original in EXAMPLE_BATCH.items():
            assert sent[key]["blog"] == original["blog"]
            assert sent[key]["timestamp"] == original["timestamp"]
            assert (
                compressor.decompress_text(base64.b64decode(sent[key]["body"]))
                == original["body"]
            )

    @pytest.mark.anyio
    async def test_batch_route_wins_over_single(self, client, deps, downstream):
        """Test /batch is never treated as an item called "batch"."""
        response = await client.post("/batch", json={})

        assert response.status_code == 200
        assert deps.runner.pending == 0
        assert downstream.json_bodies() == [{}]

    @pytest.mark.anyio
    async def test_batch_upstream_error(self, client, downstream):
        downstream.status_code = 503

        response = await client.post("/batch", json=EXAMPLE_BATCH)

        assert response.status_code == 500
        assert response.json() == {"error": "Original endpoint returned non-OK status"}

    @pytest.mark.anyio
    async def test_batch_connection_error(self, client, downstream):
        downstream.unreachable()

        response = await client.post("/batch", json=EXAMPLE_BATCH)

        assert response.status_code == 500
        assert response.json() == {"error": "Failed to send to original endpoint"}

    @pytest.mark.anyio
    @pytest.mark.parametrize(
        "content",
        [
            b"not json",
            b'{"a": "<p/>"}',
            b'[{"body": "<p/>"}]',
            b'{"a": {"timestamp": 1.0}}',
        ],
    )
    async def test_batch_invalid_json(self, client, downstream, content):
        response = await client.post(
            "/batch", content=content, headers={"Content-Type": "application/json"}
        )

        assert response.status_code == 400
        assert response.json() == {"error": "Invalid JSON"}
        assert downstream.requests == []
