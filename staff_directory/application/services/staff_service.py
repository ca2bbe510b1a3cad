"""
Staff Services
==============

Application services that coordinate staff lookups.
These services orchestrate the list and get use cases.
"""
from typing import List

from staff_directory.application.use_cases.staff import GetStaffMemberUseCase, ListStaffUseCase
from staff_directory.domain.models.staff_filter import StaffFilter
from staff_directory.domain.models.staff_member import StaffMember, Teacher, User
from staff_directory.domain.repositories.teacher_repository import TeacherRepository
from staff_directory.domain.repositories.user_repository import UserRepository


class StaffService:
    """
    Application service for staff lookups.

    Provides the list and get operations over one repository.
    """

    def __init__(self, repository):
        """
        Initialize service with repository.

        Args:
            repository: Repository exposing find_many and find_by_id
        """
        self._list_use_case = ListStaffUseCase(repository)
        self._get_use_case = GetStaffMemberUseCase(repository)

    def list_members(self, staff_filter: StaffFilter) -> List[StaffMember]:
        """
        List records with optional filters.

        Raises:
            NotFound: If no record matches
        """
        return self._list_use_case.execute(staff_filter)

    def get_member(self, member_id: str) -> StaffMember:
        """
        Get a record by ID.

        Raises:
            NotFound: If the record is absent or the ID is malformed
        """
        return self._get_use_case.execute(member_id)


class TeacherService(StaffService):
    """Staff service over teacher records."""

    def __init__(self, teacher_repository: TeacherRepository):
        super().__init__(teacher_repository)

    def list_teachers(self, staff_filter: StaffFilter) -> List[Teacher]:
        return self.list_members(staff_filter)

    def get_teacher(self, teacher_id: str) -> Teacher:
        return self.get_member(teacher_id)


class UserService(StaffService):
    """Staff service over user records."""

    def __init__(self, user_repository: UserRepository):
        super().__init__(user_repository)

    def list_users(self, staff_filter: StaffFilter) -> List[User]:
        return self.list_members(staff_filter)

    def get_user(self, user_id: str) -> User:
        return self.get_member(user_id)
