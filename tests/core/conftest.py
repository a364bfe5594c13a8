"""Fixtures for core resolver tests."""

import pytest

from driver_resolver.core.github import ProjectIdentity
from tests.core.fakes import FakeTransport, InMemoryCache


@pytest.fixture
def project() -> ProjectIdentity:
    return ProjectIdentity("mozilla", "geckodriver")


@pytest.fixture
def transport() -> FakeTransport:
    return FakeTransport()


@pytest.fixture
def memory_cache() -> InMemoryCache:
    return InMemoryCache()
