"""
Teacher Repository Interface
============================

Abstract interface for teacher data access.
Implementations should be in the infrastructure layer.
"""
from abc import ABC, abstractmethod
from typing import List, Optional

from staff_directory.domain.models.staff_filter import StaffFilter
from staff_directory.domain.models.staff_member import Teacher


class TeacherRepository(ABC):
    """
    Abstract repository for reading teacher records.

    Name criteria match as a case-insensitive substring.
    Store failures are raised as InternalError.
    """

    @abstractmethod
    def find_many(self, staff_filter: StaffFilter) -> List[Teacher]:
        """
        Find teachers matching every present criterion.

        Args:
            staff_filter: Optional name, surname and specialty criteria

        Returns:
            List of matching teachers, empty if nothing matches
        """
        pass

    @abstractmethod
    def find_by_id(self, teacher_id: str) -> Optional[Teacher]:
        """
        Find a teacher by its ID.

        Args:
            teacher_id: Store identifier as a hex string

        Returns:
            Teacher entity if found, None if absent or the ID is malformed
        """
        pass
