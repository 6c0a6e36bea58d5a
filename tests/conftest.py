"""Shared fixtures for resroute tests."""

from __future__ import annotations

from typing import Any

import pytest

from resroute import Registry, RegistryBuilder
from resroute.testing import StubRequest, register


@pytest.fixture
def registry() -> Registry[Any, Any]:
    return register(RegistryBuilder()).build()


@pytest.fixture
def stub_request() -> StubRequest:
    return StubRequest(method="GET", path="/api/items/42/thing")
