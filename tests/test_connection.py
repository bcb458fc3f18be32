import pytest
from pydantic import ValidationError

from jsonapi_client import Agent, Client, Connection, UnrecognizedKeyFormatterError, configure, default_connection
from jsonapi_client.config import ClientSettings, get_settings
from jsonapi_client.connection import reset_default_connection
from jsonapi_client.middleware import ErrorHandlerMiddleware, KeyFormatMiddleware
from payloads import VENUE_1


@pytest.fixture
def settings_env(monkeypatch):
    """Environment-driven settings, rebuilt for the test."""
    monkeypatch.setenv("JSONAPI_CLIENT_BASE_URL", "http://api.example.com/")
    monkeypatch.setenv("JSONAPI_CLIENT_KEY_FORMAT", "dasherize")
    monkeypatch.setenv("JSONAPI_CLIENT_TIMEOUT", "2.5")
    get_settings.cache_clear()
    reset_default_connection()
    yield get_settings()
    get_settings.cache_clear()
    reset_default_connection()


class TestSettings:
    def test_defaults(self):
        settings = ClientSettings(_env_file=None)
        assert settings.timeout == 10.0
        assert settings.key_format is None

    def test_environment(self, settings_env):
        assert settings_env.base_url == "http://api.example.com/"
        assert settings_env.key_format == "dasherize"
        assert settings_env.timeout == 2.5

    def test_invalid_key_format(self, monkeypatch):
        monkeypatch.setenv("JSONAPI_CLIENT_KEY_FORMAT", "shout")
        with pytest.raises(ValidationError):
            ClientSettings(_env_file=None)


class TestConnection:
    def test_middleware_chain(self, transport):
        connection = Connection(transport=transport, key_format="dasherize")
        assert isinstance(connection.transport, ErrorHandlerMiddleware)
        assert isinstance(connection.transport.transport, KeyFormatMiddleware)

    def test_settings_fill_unset_options(self):
        settings = ClientSettings(_env_file=None, base_url="http://api.example.com/", key_format="camelize")
        connection = Connection(settings=settings)
        assert connection.url == "http://api.example.com/"
        assert connection.key_format == "camelize"
        assert connection.timeout == 10.0

    def test_unrecognized_key_format(self, transport):
        with pytest.raises(UnrecognizedKeyFormatterError):
            Connection(transport=transport, key_format="shout")

    def test_key_format_can_change(self, transport, stubs):
        stubs.add("GET", "/venues/1", {"data": {"type": "venues", "id": "1", "attributes": {"seat-count": 500}}})
        connection = Connection(transport=transport)
        assert connection.request("GET", "venues/1").body["data"]["attributes"] == {"seat-count": 500}
        connection.key_format = "dasherize"
        assert connection.request("GET", "venues/1").body["data"]["attributes"] == {"seat_count": 500}

    def test_url_rebuilds_transport(self):
        connection = Connection("http://one.example.com/", settings=ClientSettings(_env_file=None))
        first = connection.base_transport
        connection.url = "http://two.example.com/"
        assert connection.base_transport.base_url == "http://two.example.com/"
        assert first.client.is_closed
        connection.close()

    def test_key_format_keeps_the_http_client(self):
        connection = Connection("http://one.example.com/", settings=ClientSettings(_env_file=None))
        first = connection.base_transport
        connection.key_format = "dasherize"
        assert connection.base_transport is first
        assert not first.client.is_closed
        connection.close()

    def test_close(self):
        with Connection("http://one.example.com/", settings=ClientSettings(_env_file=None)) as connection:
            http_client = connection.base_transport.client
        assert http_client.is_closed

    def test_close_leaves_custom_transport_open(self, transport):
        with Connection(transport=transport):
            pass
        assert not transport.client.is_closed

    def test_configure_closes_previous_default(self):
        first = configure("http://one.example.com/", settings=ClientSettings(_env_file=None))
        http_client = first.base_transport.client
        try:
            configure("http://two.example.com/", settings=ClientSettings(_env_file=None))
            assert http_client.is_closed
        finally:
            reset_default_connection()


class TestDefaultConnection:
    def test_configure(self, transport):
        connection = configure(transport=transport)
        try:
            assert default_connection() is connection
            assert Client(type_="venues").connection is connection
        finally:
            reset_default_connection()

    def test_built_from_settings(self, settings_env):
        connection = default_connection()
        assert connection is not None
        assert connection.url == "http://api.example.com/"
        assert connection.key_format == "dasherize"
        assert default_connection() is connection

    def test_unset(self):
        reset_default_connection()
        assert default_connection() is None


class TestAgent:
    def test_negotiate_path(self, connection):
        agent = Agent("venues", connection=connection)
        assert agent.negotiate_path() == "venues"
        assert agent.negotiate_path(id=1) == "venues/1"
        assert agent.negotiate_path("venues/nearby", id=1) == "venues/nearby"

    def test_verbs(self, connection, stubs):
        agent = Agent("venues", connection=connection)
        for method in ("PATCH", "PUT", "DELETE"):
            stubs.add(method, "/venues/1", VENUE_1)
        body = {"data": {"type": "venues", "id": "1"}}

        assert agent.patch(id=1, body=body).status == 200
        assert stubs.last.method == "PATCH"
        agent.put(id=1, body=body)
        assert stubs.last.method == "PUT"
        assert agent.delete(id=1).success
        assert stubs.last.method == "DELETE"
        assert stubs.last.body is None
