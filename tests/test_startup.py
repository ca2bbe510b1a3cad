# tests/test_startup.py
from unittest.mock import MagicMock, patch

import pytest
from fastapi.testclient import TestClient
from pymongo.errors import ServerSelectionTimeoutError

from staff_directory.application.services.staff_service import TeacherService, UserService
from staff_directory.core.config import Settings
from staff_directory.di.container import DIContainer
from staff_directory.domain.repositories.teacher_repository import TeacherRepository
from staff_directory.domain.repositories.user_repository import UserRepository
from staff_directory.infrastructure.db.mongo_connection import MongoConnection
from staff_directory.infrastructure.db.mongo_teacher_repository import MongoTeacherRepository
from staff_directory.infrastructure.db.mongo_user_repository import MongoUserRepository
from staff_directory.main import create_application


@pytest.fixture
def settings(monkeypatch, tmp_path) -> Settings:
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("DATABASE_URL", "mongodb://localhost:27017")
    monkeypatch.setenv("DATABASE_NAME", "school")
    monkeypatch.delenv("COLLECTION_NAME", raising=False)
    monkeypatch.delenv("USERS_COLLECTION_NAME", raising=False)
    return Settings()


def test_connect_pings_server() -> None:
    with patch("staff_directory.infrastructure.db.mongo_connection.MongoClient") as client_cls:
        connection = MongoConnection("mongodb://localhost:27017", "school").connect()

    client_cls.return_value.admin.command.assert_called_once_with("ping")
    assert connection.get_collection("teachers") is client_cls.return_value["school"]["teachers"]


def test_unreachable_store_fails_fast() -> None:
    with patch("staff_directory.infrastructure.db.mongo_connection.MongoClient") as client_cls:
        client_cls.return_value.admin.command.side_effect = ServerSelectionTimeoutError("timeout")
        connection = MongoConnection("mongodb://localhost:27017", "school")
        with pytest.raises(RuntimeError):
            connection.connect()

    client_cls.return_value.close.assert_called_once()


def test_invalid_url_fails_fast() -> None:
    with pytest.raises(RuntimeError):
        MongoConnection("mongodb://localhost:notaport", "school").connect()


def test_container_wires_mongo_repositories(settings) -> None:
    connection = MagicMock(spec=MongoConnection)

    container = DIContainer(settings, connection)

    connection.get_collection.assert_any_call("teachers")
    connection.get_collection.assert_any_call("users")
    assert isinstance(container.get(TeacherRepository), MongoTeacherRepository)
    assert isinstance(container.get(UserRepository), MongoUserRepository)
    assert isinstance(container.get(TeacherService), TeacherService)
    assert isinstance(container.get(UserService), UserService)


def test_lifespan_connects_and_closes(settings) -> None:
    connection = MagicMock(spec=MongoConnection)
    connection.connect.return_value = connection
    app = create_application()

    with patch("staff_directory.main.get_settings", return_value=settings), \
            patch("staff_directory.main.MongoConnection", return_value=connection) as connection_cls:
        with TestClient(app) as client:
            assert client.get("/api/v1/health").status_code == 200
            assert isinstance(app.state.container, DIContainer)

    connection_cls.assert_called_once_with("mongodb://localhost:27017", "school")
    connection.close.assert_called_once()


def test_lifespan_refuses_to_start_without_store(settings) -> None:
    app = create_application()
    with patch("staff_directory.main.get_settings", return_value=settings), \
            patch("staff_directory.main.MongoConnection") as connection_cls:
        connection_cls.return_value.connect.side_effect = RuntimeError("Failed to connect to MongoDB")
        with pytest.raises(RuntimeError):
            with TestClient(app):
                pass


def test_container_rejects_unregistered_keys(settings) -> None:
    container = DIContainer(settings, MagicMock(spec=MongoConnection))
    with pytest.raises(LookupError):
        container.get("postgres_client")
    assert not hasattr(container, "register_factory")
