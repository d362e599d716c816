"""Shared test fixtures and configuration.

Provides a fake wiki backend and a fake object storage, both served through
httpx.MockTransport, so the whole two-phase submission runs without network.
"""

from __future__ import annotations

import itertools
import json
from pathlib import Path
from typing import Any

import httpx
import pytest

from wiki_uploader.config import UploaderSettings
from wiki_uploader.gateway.client import ServerGateway
from wiki_uploader.storage.writer import ObjectStorageWriter

WIKI_URL = "https://wiki.test"
STORAGE_HOST = "storage.test"


class FakeBackend:
    """In-memory stand-in for the wiki server and the storage bucket.

    Attributes configure the answers; requests are recorded for assertions.
    """

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self.commits: list[dict[str, Any]] = []
        self.stored: dict[str, bytes] = {}

        # Phase 1 behaviour
        self.grant_status = 200
        self.grant_error_body = "You are not allowed to post here."
        self.grant_count_override: int | None = None
        self.legacy_grant_shape = False

        # Phase 2 behaviour
        self.commit_status = 200
        self.commit_error_body = "A post with this slug already exists."
        self.commit_redirect: str | None = "/art/dark-knight"

        # Storage behaviour
        self.failing_paths: set[str] = set()

        # Steps answered with a refused connection instead of a response
        self.unreachable_steps: set[str] = set()

        self._object_ids = itertools.count(1)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)

        if request.url.host == STORAGE_HOST:
            return self._storage(request)
        if request.method == "DELETE":
            return httpx.Response(200)
        if request.method == "GET":
            return httpx.Response(200, text="<html>post page</html>")

        body = json.loads(request.content)
        if body["step"] in self.unreachable_steps:
            raise httpx.ConnectError("connection refused", request=request)
        if body["step"] == "1":
            return self._grants(body)
        return self._commit(body)

    def _storage(self, request: httpx.Request) -> httpx.Response:
        if request.url.path in self.failing_paths:
            return httpx.Response(503, text="Slow down")
        self.stored[request.url.path] = request.content
        return httpx.Response(200)

    def _grants(self, body: dict) -> httpx.Response:
        if self.grant_status >= 400:
            return httpx.Response(self.grant_status, text=self.grant_error_body)

        requested = body.get("file_amount", body.get("art_amount"))
        count = requested if self.grant_count_override is None else self.grant_count_override
        urls = [
            f"https://{STORAGE_HOST}/uploads/{next(self._object_ids)}.bin?X-Amz-Signature=secret"
            for _ in range(count)
        ]
        if self.legacy_grant_shape:
            return httpx.Response(200, json={
                "thumbnail_presigned_url": urls[0],
                "art_presigned_urls": urls[1:],
            })
        return httpx.Response(200, json={"presigned_urls": urls})

    def _commit(self, body: dict) -> httpx.Response:
        self.commits.append(body)
        if self.commit_status >= 400:
            return httpx.Response(self.commit_status, text=self.commit_error_body)
        if self.commit_redirect:
            return httpx.Response(303, headers={"Location": self.commit_redirect})
        return httpx.Response(200, text="ok")

    # Recorded traffic helpers

    @property
    def grant_requests(self) -> list[dict]:
        return [
            json.loads(r.content) for r in self.requests
            if r.method == "POST" and json.loads(r.content)["step"] == "1"
        ]

    @property
    def puts(self) -> list[httpx.Request]:
        return [r for r in self.requests if r.method == "PUT"]


@pytest.fixture
def backend() -> FakeBackend:
    """A fresh fake backend per test."""
    return FakeBackend()


@pytest.fixture
def settings(tmp_path: Path) -> UploaderSettings:
    """Settings pointing at the fake wiki."""
    return UploaderSettings(base_url=WIKI_URL, log_dir=tmp_path / "logs")


@pytest.fixture
def gateway(settings: UploaderSettings, backend: FakeBackend) -> ServerGateway:
    return ServerGateway(settings, transport=backend.transport)


@pytest.fixture
def writer(settings: UploaderSettings, backend: FakeBackend) -> ObjectStorageWriter:
    return ObjectStorageWriter(settings, transport=backend.transport)


@pytest.fixture
def art_values() -> dict[str, Any]:
    """Valid field values of an art post."""
    return {
        "title": "Dark Knight",
        "creation_date": "2024-05-01",
        "creators": "alice, bob",
        "is_nsfw": False,
    }


@pytest.fixture
def character_values() -> dict[str, Any]:
    """Valid field values of a character sheet."""
    return {
        "name": "Iris Vale",
        "creator": "alice",
        "subtitles": "The Wanderer\nKeeper of Keys",
        "infobox": "Age: 27\nHome: Port Ash",
    }
