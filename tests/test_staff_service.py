# tests/test_staff_service.py
from concurrent.futures import ThreadPoolExecutor

import pytest

from staff_directory.application.services.staff_service import TeacherService, UserService
from staff_directory.domain.errors import InternalError, NotFound
from staff_directory.domain.models.specialties import Specialties
from staff_directory.domain.models.staff_filter import StaffFilter
from staff_directory.domain.models.staff_member import Teacher
from tests.conftest import ANA_ID, JOHN_ID, MARIA_ID, UNASSIGNED_ID
from tests.fakes import FailingRepository, InMemoryTeacherRepository


def _ids(members):
    return sorted(member.id for member in members)


class TestListStaff:
    """Tests for the list operation and its not-found policy."""

    def test_no_criteria_returns_every_record(self, teacher_service, teachers) -> None:
        assert _ids(teacher_service.list_teachers(StaffFilter())) == _ids(teachers)

    def test_empty_collection_is_not_found(self) -> None:
        service = TeacherService(InMemoryTeacherRepository([]))
        with pytest.raises(NotFound):
            service.list_teachers(StaffFilter())

    def test_known_specialty_filters_records(self, teacher_service) -> None:
        result = teacher_service.list_teachers(StaffFilter(specialty="inf"))
        assert _ids(result) == sorted([MARIA_ID, ANA_ID])

    def test_specialty_nobody_holds_is_not_found(self, teacher_service) -> None:
        with pytest.raises(NotFound):
            teacher_service.list_teachers(StaffFilter(specialty="pt"))

    def test_unknown_specialty_is_not_found(self, teacher_service) -> None:
        with pytest.raises(NotFound):
            teacher_service.list_teachers(StaffFilter(specialty="chemistry"))

    def test_criteria_are_conjunctive(self) -> None:
        # Each record satisfies some criteria but only one satisfies all three
        records = [
            Teacher(id="a" * 24, initial_position=1, name="MARIA", surname="LOPEZ",
                    has_services=False, specialties=Specialties(pri=True)),
            Teacher(id="b" * 24, initial_position=2, name="MARIA", surname="LOPEZ",
                    has_services=False, specialties=Specialties(inf=True)),
            Teacher(id="c" * 24, initial_position=3, name="MARIA", surname="PEREZ",
                    has_services=False, specialties=Specialties(pri=True)),
            Teacher(id="d" * 24, initial_position=4, name="PEDRO", surname="LOPEZ",
                    has_services=False, specialties=Specialties(pri=True)),
        ]
        service = TeacherService(InMemoryTeacherRepository(records))

        result = service.list_teachers(StaffFilter(name="maria", surname="lopez", specialty="pri"))

        assert _ids(result) == ["a" * 24]

    def test_teacher_name_matches_substring(self, teacher_service) -> None:
        assert _ids(teacher_service.list_teachers(StaffFilter(name="john"))) == [JOHN_ID]
        assert _ids(teacher_service.list_teachers(StaffFilter(name="jo"))) == [JOHN_ID]
        assert _ids(teacher_service.list_teachers(StaffFilter(name="maria"))) == sorted([MARIA_ID, ANA_ID])

    def test_user_name_matches_exactly(self, user_service) -> None:
        assert _ids(user_service.list_users(StaffFilter(name="john"))) == [JOHN_ID]
        assert _ids(user_service.list_users(StaffFilter(name="maria"))) == [MARIA_ID]
        with pytest.raises(NotFound):
            user_service.list_users(StaffFilter(name="jo"))

    def test_surname_matches_substring_for_users(self, user_service) -> None:
        assert _ids(user_service.list_users(StaffFilter(surname="lopez"))) == sorted([MARIA_ID, JOHN_ID])

    def test_store_failure_propagates_as_internal_error(self) -> None:
        service = UserService(FailingRepository(InternalError()))
        with pytest.raises(InternalError):
            service.list_users(StaffFilter())


class TestGetStaffMember:
    """Tests for the get-by-id operation."""

    def test_existing_id_returns_record(self, teacher_service) -> None:
        assert teacher_service.get_teacher(MARIA_ID).name == "MARIA"

    def test_unassigned_id_is_not_found(self, teacher_service) -> None:
        with pytest.raises(NotFound):
            teacher_service.get_teacher(UNASSIGNED_ID)

    def test_malformed_id_is_not_found(self, user_service) -> None:
        with pytest.raises(NotFound):
            user_service.get_user("not-a-valid-id")

    def test_store_failure_propagates_as_internal_error(self) -> None:
        service = TeacherService(FailingRepository(InternalError()))
        with pytest.raises(InternalError):
            service.get_teacher(MARIA_ID)

    def test_concurrent_lookups_are_consistent(self, teacher_service) -> None:
        ids = [MARIA_ID, JOHN_ID, ANA_ID] * 30

        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(teacher_service.get_teacher, ids))

        assert [teacher.id for teacher in results] == ids
