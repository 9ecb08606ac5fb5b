from __future__ import annotations

from datetime import timezone

import httpx
import pytest

from activity_readme.domain.entities.errors import (
    ActivityFeedError,
    MissingCredentialError,
)
from activity_readme.infrastructure.gateways.github_events_gateway import (
    GitHubEventsGateway,
)

EVENTS = [
    {
        "id": "2",
        "type": "PushEvent",
        "repo": {"name": "owner/repoA"},
        "created_at": "2021-05-01T16:30:00Z",
    },
    {
        "id": "1",
        "type": "WatchEvent",
        "repo": {"name": "owner/repoB"},
        "created_at": "2021-05-01T09:00:00Z",
    },
]


class _StubResponse:
    def __init__(self, status_code: int, json_data=None, invalid_json: bool = False):
        self.status_code = status_code
        self._json = json_data
        self._invalid_json = invalid_json
        self.text = "error"

    def json(self):
        if self._invalid_json:
            raise ValueError("Expecting value")
        return self._json

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            request = httpx.Request("GET", "https://api.github.test")
            response = httpx.Response(self.status_code, request=request, text=self.text)
            raise httpx.HTTPStatusError("error", request=request, response=response)


class _StubAsyncClient:
    def __init__(self, response: _StubResponse | None = None, error=None):
        self._response = response
        self._error = error
        self.requests: list[tuple] = []

    async def __aenter__(self) -> "_StubAsyncClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        return None

    async def get(self, url, **kwargs):
        self.requests.append((url, kwargs))
        if self._error is not None:
            raise self._error
        return self._response


def _install(monkeypatch, client: _StubAsyncClient) -> None:
    monkeypatch.setattr("httpx.AsyncClient", lambda timeout: client)


@pytest.mark.asyncio
async def test_fetch_events_parses_records(monkeypatch) -> None:
    client = _StubAsyncClient(_StubResponse(200, EVENTS))
    _install(monkeypatch, client)

    gateway = GitHubEventsGateway("https://api.github.test/", token="t0k3n")
    records = await gateway.fetch_events("octocat", 100)

    assert [r.group for r in records] == ["owner/repoA", "owner/repoB"]
    assert records[0].category == "PushEvent"
    assert records[0].timestamp.tzinfo == timezone.utc

    url, kwargs = client.requests[0]
    assert url == "https://api.github.test/users/octocat/events"
    assert kwargs["params"] == {"per_page": "100"}
    assert kwargs["headers"]["Authorization"] == "Bearer t0k3n"


@pytest.mark.asyncio
async def test_fetch_events_truncates_to_limit(monkeypatch) -> None:
    _install(monkeypatch, _StubAsyncClient(_StubResponse(200, EVENTS)))

    gateway = GitHubEventsGateway("https://api.github.test", token="t0k3n")
    records = await gateway.fetch_events("octocat", 1)

    assert len(records) == 1


@pytest.mark.asyncio
async def test_missing_token_is_refused_before_any_request(monkeypatch) -> None:
    client = _StubAsyncClient(_StubResponse(200, EVENTS))
    _install(monkeypatch, client)

    gateway = GitHubEventsGateway("https://api.github.test", token="")
    with pytest.raises(MissingCredentialError):
        await gateway.fetch_events("octocat", 10)

    assert client.requests == []


@pytest.mark.asyncio
async def test_anonymous_access_when_token_not_required(monkeypatch) -> None:
    client = _StubAsyncClient(_StubResponse(200, EVENTS))
    _install(monkeypatch, client)

    gateway = GitHubEventsGateway("https://api.github.test", require_token=False)
    await gateway.fetch_events("octocat", 10)

    assert "Authorization" not in client.requests[0][1]["headers"]


@pytest.mark.asyncio
@pytest.mark.parametrize("limit", [0, 101])
async def test_fetch_events_validates_limit(limit: int) -> None:
    gateway = GitHubEventsGateway("https://api.github.test", token="t0k3n")
    with pytest.raises(ActivityFeedError):
        await gateway.fetch_events("octocat", limit)


@pytest.mark.asyncio
async def test_http_errors_are_wrapped(monkeypatch) -> None:
    _install(monkeypatch, _StubAsyncClient(_StubResponse(404)))

    gateway = GitHubEventsGateway("https://api.github.test", token="t0k3n")
    with pytest.raises(ActivityFeedError) as exc_info:
        await gateway.fetch_events("octocat", 10)

    assert exc_info.value.details["status_code"] == 404
    assert exc_info.value.details["stage"] == "fetch"


@pytest.mark.asyncio
async def test_request_errors_are_wrapped(monkeypatch) -> None:
    error = httpx.ConnectError(
        "connection refused", request=httpx.Request("GET", "https://api.github.test")
    )
    _install(monkeypatch, _StubAsyncClient(error=error))

    gateway = GitHubEventsGateway("https://api.github.test", token="t0k3n")
    with pytest.raises(ActivityFeedError):
        await gateway.fetch_events("octocat", 10)


@pytest.mark.asyncio
async def test_invalid_json_is_wrapped(monkeypatch) -> None:
    _install(monkeypatch, _StubAsyncClient(_StubResponse(200, invalid_json=True)))

    gateway = GitHubEventsGateway("https://api.github.test", token="t0k3n")
    with pytest.raises(ActivityFeedError):
        await gateway.fetch_events("octocat", 10)


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "payload",
    [{"message": "Not Found"}, [{"id": "1", "type": "PushEvent"}]],
)
async def test_unexpected_payloads_are_rejected(monkeypatch, payload) -> None:
    _install(monkeypatch, _StubAsyncClient(_StubResponse(200, payload)))

    gateway = GitHubEventsGateway("https://api.github.test", token="t0k3n")
    with pytest.raises(ActivityFeedError):
        await gateway.fetch_events("octocat", 10)
