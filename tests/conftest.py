"""
Pytest configuration and shared fixtures for the DocVault client tests.

The remote API is replaced by FakeVaultServer behind an httpx.MockTransport;
no test makes a real network call.
"""

import json
import logging
from typing import Callable

import httpx
import pytest

from docvault.clients.vault.allsoft.VaultClientAllsoft import VaultClientAllsoft
from docvault.helper.HelperConfig import HelperConfig

BASE_URL = "https://vault.test/api/documentManagement"


class FakeVaultServer:
    """Answers requests by path and records every request it receives."""

    def __init__(self) -> None:
        self.routes: dict[str, tuple[int, object]] = {}
        self.requests: list[httpx.Request] = []

    def reply(self, path: str, status_code: int = 200, body: object = None) -> None:
        self.routes[path] = (status_code, body)

    def requests_to(self, path: str) -> list[httpx.Request]:
        return [r for r in self.requests if r.url.path.endswith(path)]

    def last_json(self, path: str) -> dict:
        return json.loads(self.requests_to(path)[-1].content)

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        for path, (status_code, body) in self.routes.items():
            if request.url.path.endswith(path):
                if isinstance(body, (bytes, str)):
                    return httpx.Response(status_code, content=body)
                return httpx.Response(status_code, json=body if body is not None else {})
        return httpx.Response(404, json={"message": "Not found"})


@pytest.fixture
def helper_config(monkeypatch) -> HelperConfig:
    monkeypatch.setenv("VAULT_ALLSOFT_BASE_URL", BASE_URL)
    monkeypatch.delenv("VAULT_TIMEOUT", raising=False)
    monkeypatch.delenv("VAULT_ENGINE", raising=False)
    return HelperConfig(logger=logging.getLogger("docvault.tests"))


@pytest.fixture
def server() -> FakeVaultServer:
    return FakeVaultServer()


@pytest.fixture
def make_client(helper_config: HelperConfig) -> Callable:
    """Returns a coroutine that builds a booted Allsoft client wired to a handler."""

    async def _make(handler) -> VaultClientAllsoft:
        client = VaultClientAllsoft(helper_config=helper_config)
        await client.boot(transport=httpx.MockTransport(handler))
        return client

    return _make
