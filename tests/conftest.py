# tests/conftest.py
from typing import Any, Dict, List

import pytest
from bson import ObjectId
from fastapi.testclient import TestClient

from staff_directory.application.services.staff_service import TeacherService, UserService
from staff_directory.di.base_container import BaseContainer
from staff_directory.domain.models.specialties import Specialties
from staff_directory.domain.models.staff_member import Teacher, User
from staff_directory.main import create_application
from tests.fakes import InMemoryTeacherRepository, InMemoryUserRepository

MARIA_ID = "65a1f0c2e4b0a1b2c3d4e5f6"
JOHN_ID = "65a1f0c2e4b0a1b2c3d4e5f7"
ANA_ID = "65a1f0c2e4b0a1b2c3d4e5f8"
UNASSIGNED_ID = "65a1f0c2e4b0a1b2c3d4ffff"


def make_document(
    name: str,
    surname: str,
    oid: Any = None,
    position: int = 1,
    has_services: bool = False,
    **specialties: bool,
) -> Dict[str, Any]:
    """Build a stored document with every specialty code present."""
    doc: Dict[str, Any] = {
        "initial_position": position,
        "name": name,
        "surname": surname,
        "has_services": has_services,
        "specialties": Specialties(**specialties).to_dict(),
    }
    if oid is not None:
        doc["_id"] = ObjectId(oid) if isinstance(oid, str) else oid
    return doc


def sample_records(cls) -> List:
    return [
        cls(
            id=MARIA_ID,
            initial_position=1,
            name="MARIA",
            surname="LOPEZ",
            has_services=True,
            specialties=Specialties(inf=True),
        ),
        cls(
            id=JOHN_ID,
            initial_position=2,
            name="JOHN",
            surname="SMITH LOPEZ",
            has_services=False,
            specialties=Specialties(ing=True, mus=True),
        ),
        cls(
            id=ANA_ID,
            initial_position=3,
            name="ANA MARIA",
            surname="GARCIA",
            has_services=False,
            specialties=Specialties(inf=True, ef=True),
        ),
    ]


@pytest.fixture
def teachers() -> List[Teacher]:
    return sample_records(Teacher)


@pytest.fixture
def users() -> List[User]:
    return sample_records(User)


@pytest.fixture
def teacher_service(teachers) -> TeacherService:
    return TeacherService(InMemoryTeacherRepository(teachers))


@pytest.fixture
def user_service(users) -> UserService:
    return UserService(InMemoryUserRepository(users))


@pytest.fixture
def container(teacher_service, user_service) -> BaseContainer:
    container = BaseContainer()
    container.register_singleton(TeacherService, teacher_service)
    container.register_singleton(UserService, user_service)
    return container


@pytest.fixture
def client(container) -> TestClient:
    with TestClient(create_application(container)) as test_client:
        yield test_client
