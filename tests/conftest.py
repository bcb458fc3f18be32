"""Pytest configuration and fixtures."""

import pytest
from fastapi.testclient import TestClient

from domain import REGISTERED_TYPES
from jsonapi_client import Connection, HTTPXTransport, default_registry
from jsonapi_client.connection import configure, reset_default_connection
from stub_server import StubRegistry, create_app


@pytest.fixture(autouse=True)
def registry():
    """Register the test domain types on a freshly flushed default registry."""
    default_registry.flush()
    for resource_type, factory in REGISTERED_TYPES.items():
        default_registry.register(resource_type, factory)
    yield default_registry
    default_registry.flush()


@pytest.fixture
def stubs():
    """Stubbed responses and recorded requests of the test server."""
    return StubRegistry()


@pytest.fixture
def http_client(stubs):
    """httpx client talking to the stub server in-process."""
    with TestClient(create_app(stubs)) as client:
        yield client


@pytest.fixture
def transport(http_client):
    return HTTPXTransport(client=http_client)


@pytest.fixture
def connection(transport):
    """Connection to the stub server without key formatting."""
    return Connection(transport=transport, key_format=None)


@pytest.fixture
def default_connection(transport):
    """Configure the process-wide default connection for Resource classes."""
    connection = configure(transport=transport)
    yield connection
    reset_default_connection()
