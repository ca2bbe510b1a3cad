"""
Get Staff Member Use Case
=========================

Use case for fetching a single staff record by identifier.
"""
from staff_directory.domain.errors import NotFound
from staff_directory.domain.models.staff_member import StaffMember


class GetStaffMemberUseCase:
    """Use case for getting a staff record by ID."""

    def __init__(self, repository):
        self._repository = repository

    def execute(self, member_id: str) -> StaffMember:
        """
        Get a record by its ID.

        Raises:
            NotFound: If the ID is malformed or no record has it
            InternalError: If the store fails
        """
        member = self._repository.find_by_id(member_id)
        if member is None:
            raise NotFound()
        return member
