"""
MongoDB User Repository
=======================

Concrete implementation of UserRepository using MongoDB.
"""
from staff_directory.domain.models.staff_member import User
from staff_directory.domain.repositories.user_repository import UserRepository
from staff_directory.infrastructure.db.mongo_staff_repository import MongoStaffRepository
from staff_directory.infrastructure.db.query_builder import MatchMode


class MongoUserRepository(MongoStaffRepository[User], UserRepository):
    """
    MongoDB implementation of UserRepository.

    Name criteria match as a case-insensitive exact value.
    """

    ENTITY = User
    NAME_MATCH = MatchMode.EXACT
