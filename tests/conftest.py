"""Shared fixtures: an ApiClient wired to an in-process backend."""

import pytest

from tasklane.api.client import ApiClient
from tasklane.config import ClientConfig
from tasklane.testing import FakeBackend


@pytest.fixture
def base_url() -> str:
    return "http://test.local/api"


@pytest.fixture
def backend() -> FakeBackend:
    return FakeBackend()


@pytest.fixture
def api(backend: FakeBackend, base_url: str) -> ApiClient:
    return ApiClient(ClientConfig(base_url=base_url), transport=backend.transport())
