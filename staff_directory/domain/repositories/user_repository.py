"""
User Repository Interface
=========================

Abstract interface for user data access.
Implementations should be in the infrastructure layer.
"""
from abc import ABC, abstractmethod
from typing import List, Optional

from staff_directory.domain.models.staff_filter import StaffFilter
from staff_directory.domain.models.staff_member import User


class UserRepository(ABC):
    """
    Abstract repository for reading user records.

    Name criteria match as a case-insensitive exact value.
    Store failures are raised as InternalError.
    """

    @abstractmethod
    def find_many(self, staff_filter: StaffFilter) -> List[User]:
        """
        Find users matching every present criterion.

        Args:
            staff_filter: Optional name, surname and specialty criteria

        Returns:
            List of matching users, empty if nothing matches
        """
        pass

    @abstractmethod
    def find_by_id(self, user_id: str) -> Optional[User]:
        """
        Find a user by its ID.

        Args:
            user_id: Store identifier as a hex string

        Returns:
            User entity if found, None if absent or the ID is malformed
        """
        pass
