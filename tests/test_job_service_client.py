"""Tests for the HTTP adapter using httpx.MockTransport."""

import json

import httpx
import pytest

from adapters.http_client import AUTH_TOKEN_HEADER
from adapters.job_service_client import JobServiceClient
from core.config import AppSettings
from core.domain.formats import DuplicatePolicy, TransferFormat, UuidPolicy
from core.errors import ServiceError


def _client(handler) -> JobServiceClient:
    settings = AppSettings(url="https://rd.example.com", auth_token="secret", api_version=41)
    return JobServiceClient.from_settings(settings, transport=httpx.MockTransport(handler))


def test_list_jobs_by_filter_builds_request():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["url"] = request.url
        seen["token"] = request.headers.get(AUTH_TOKEN_HEADER)
        return httpx.Response(200, json=[{"id": "a", "name": "backup", "group": "ops", "project": "demo"}])

    with _client(handler) as client:
        records = client.list_jobs("demo", job_filter="backup", group_path="ops")

    assert seen["url"].path == "/api/41/project/demo/jobs"
    assert dict(seen["url"].params) == {"jobFilter": "backup", "groupPath": "ops"}
    assert seen["token"] == "secret"
    assert records[0].id == "a"
    assert records[0].to_basic_string() == "a ops/backup (demo)"


def test_list_jobs_by_ids():
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.params["idlist"] == "a,b"
        return httpx.Response(200, json=[])

    with _client(handler) as client:
        assert client.list_jobs_by_ids("demo", "a,b") == []


def test_get_job_info():
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.path == "/api/41/job/abc/info"
        return httpx.Response(
            200,
            json={"id": "abc", "name": "n", "averageDuration": 1200, "serverNodeUUID": "node-1"},
        )

    with _client(handler) as client:
        info = client.get_job_info("abc")
    assert info.average_duration == 1200
    assert info.to_map()["serverNodeUUID"] == "node-1"


def test_delete_jobs_posts_ids():
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.method == "POST"
        assert request.url.path == "/api/41/jobs/delete"
        assert json.loads(request.content) == {"ids": ["a", "b"]}
        return httpx.Response(200, json={"requestCount": 2, "allsuccessful": True})

    with _client(handler) as client:
        assert client.delete_jobs(["a", "b"])["requestCount"] == 2


def test_load_jobs_sends_body_with_media_type():
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.path == "/api/41/project/demo/jobs/import"
        assert dict(request.url.params) == {"fileformat": "yaml", "dupeOption": "skip", "uuidOption": "remove"}
        assert request.headers["content-type"] == "application/yaml"
        assert request.content == b"- name: a\n"
        return httpx.Response(200, json={"succeeded": [{"index": 1, "name": "a"}]})

    with _client(handler) as client:
        payload = client.load_jobs(
            "demo", b"- name: a\n", TransferFormat.YAML, DuplicatePolicy.SKIP, UuidPolicy.REMOVE
        )
    assert payload["succeeded"][0]["name"] == "a"


def test_export_jobs_streams_raw_body():
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.path == "/api/41/project/demo/jobs/export"
        assert dict(request.url.params) == {"format": "xml", "jobFilter": "backup"}
        return httpx.Response(200, content=b"<joblist/>", headers={"content-type": "application/xml"})

    with _client(handler) as client:
        with client.export_jobs("demo", TransferFormat.XML, job_filter="backup") as body:
            data = b"".join(body.chunks)
            content_type = body.content_type
    assert data == b"<joblist/>"
    assert content_type == "application/xml"


def test_error_response_raises_service_error_with_message():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(
            404, json={"error": True, "errorCode": "api.error.item.doesnotexist", "message": "Project does not exist"}
        )

    with _client(handler) as client:
        with pytest.raises(ServiceError, match="Project does not exist") as info:
            client.list_jobs("nope")
    assert info.value.status_code == 404
    assert info.value.error_code == "api.error.item.doesnotexist"


def test_export_error_raises_service_error():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(403, text="forbidden")

    with _client(handler) as client:
        with pytest.raises(ServiceError, match="forbidden"):
            with client.export_jobs("demo", TransferFormat.XML, idlist="a"):
                pass


def test_transport_errors_propagate():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("refused", request=request)

    with _client(handler) as client:
        with pytest.raises(httpx.ConnectError):
            client.get_job_info("a")
