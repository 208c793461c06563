"""
MongoConnector and application lifespan tests
"""

import asyncio
import importlib

import pytest
from fastapi.testclient import TestClient
from pymongo.errors import ServerSelectionTimeoutError

from pizzagoland.app import create_app
from pizzagoland.config import settings
from pizzagoland.database import connection
from pizzagoland.database.connection import DatabaseConnectionError, MongoConnector


class StubAdmin:
    def __init__(self, error=None, delay=0):
        self.error = error
        self.delay = delay
        self.commands = []

    async def command(self, name):
        self.commands.append(name)
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.error is not None:
            raise self.error
        return {"ok": 1}


class StubClient:
    """Replaces AsyncMongoClient so no server is contacted"""
    admin_factory = StubAdmin
    instances = []

    def __init__(self, uri, **kwargs):
        self.uri = uri
        self.kwargs = kwargs
        self.admin = StubClient.admin_factory()
        self.closed = False
        StubClient.instances.append(self)

    def __getitem__(self, database_name):
        return {"users": f"{database_name}.users", "people": f"{database_name}.people"}

    async def close(self):
        self.closed = True


@pytest.fixture
def stub_client(monkeypatch):
    StubClient.instances = []
    StubClient.admin_factory = StubAdmin
    monkeypatch.setattr(connection, "AsyncMongoClient", StubClient)
    return StubClient


class TestMongoConnector:

    @pytest.mark.asyncio
    async def test_connect_pings_and_selects_collection(self, stub_client):
        connector = MongoConnector(uri="mongodb://db:27017", database_name="mongo", collection_name="users")
        await connector.connect()

        client = stub_client.instances[0]
        assert client.uri == "mongodb://db:27017"
        assert client.admin.commands == ["ping"]
        assert client.kwargs["serverSelectionTimeoutMS"] == 10000
        assert connector.collection == "mongo.users"

        await connector.close()
        assert client.closed
        with pytest.raises(RuntimeError):
            connector.collection

    @pytest.mark.asyncio
    async def test_connect_failure_is_fatal(self, stub_client):
        stub_client.admin_factory = lambda: StubAdmin(error=ServerSelectionTimeoutError("no servers"))
        connector = MongoConnector()

        with pytest.raises(DatabaseConnectionError):
            await connector.connect()

        assert stub_client.instances[0].closed
        assert connector.client is None

    @pytest.mark.asyncio
    async def test_connect_timeout_is_fatal(self, stub_client):
        stub_client.admin_factory = lambda: StubAdmin(delay=1)
        connector = MongoConnector(connect_timeout=0.05)

        with pytest.raises(DatabaseConnectionError):
            await connector.connect()

    def test_collection_before_connect(self):
        with pytest.raises(RuntimeError):
            MongoConnector().collection


class TestLifespan:

    def test_connector_opened_and_closed(self, connector):
        with TestClient(create_app(connector=connector)):
            assert connector.connected
            assert not connector.closed
        assert connector.closed

    def test_startup_aborts_without_database(self, stub_client):
        stub_client.admin_factory = lambda: StubAdmin(error=ServerSelectionTimeoutError("no servers"))
        app = create_app(connector=MongoConnector())

        with pytest.raises(DatabaseConnectionError):
            with TestClient(app):
                pass


class TestSettings:

    def test_defaults(self):
        assert settings.PORT == 8080
        assert settings.MONGO_DB == "mongo"
        assert settings.MONGO_COLLECTION == "users"
        assert settings.DB_TIMEOUT_SECONDS == 5
        assert settings.DB_CONNECT_TIMEOUT_SECONDS == 10

    def test_invalid_timeout_rejected(self, monkeypatch):
        monkeypatch.setenv("DB_TIMEOUT_SECONDS", "0")
        with pytest.raises(ValueError):
            importlib.reload(settings)

        monkeypatch.delenv("DB_TIMEOUT_SECONDS")
        importlib.reload(settings)
        assert settings.DB_TIMEOUT_SECONDS == 5
