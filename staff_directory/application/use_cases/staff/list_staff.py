"""
List Staff Use Case
===================

Use case for listing staff records that match optional criteria.
"""
import logging
from typing import List

from staff_directory.domain.errors import NotFound
from staff_directory.domain.models.staff_filter import StaffFilter
from staff_directory.domain.models.staff_member import StaffMember

logger = logging.getLogger(__name__)


class ListStaffUseCase:
    """Use case for listing staff records."""

    def __init__(self, repository):
        self._repository = repository

    def execute(self, staff_filter: StaffFilter) -> List[StaffMember]:
        """
        List records matching every present criterion.

        Args:
            staff_filter: Optional name, surname and specialty criteria

        Returns:
            Non-empty list of matching records

        Raises:
            NotFound: If no record matches
            InternalError: If the store fails
        """
        members = self._repository.find_many(staff_filter)
        if not members:
            logger.debug("No records match %s", staff_filter)
            raise NotFound()
        return members
