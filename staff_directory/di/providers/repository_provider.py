from typing import TYPE_CHECKING
from ...domain.repositories.teacher_repository import TeacherRepository
from ...domain.repositories.user_repository import UserRepository
from ...infrastructure.db.mongo_teacher_repository import MongoTeacherRepository
from ...infrastructure.db.mongo_user_repository import MongoUserRepository

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class RepositoryProvider:
    """Repository registration provider - wires domain interfaces to infrastructure implementations"""
    
    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register all repository implementations.
        Gets collections from the database provider and creates repository instances.
        """
        # Domain interfaces -> Infrastructure implementations
        container.register_singleton(
            TeacherRepository,
            MongoTeacherRepository(container.get("teachers_collection"))
        )
        
        container.register_singleton(
            UserRepository,
            MongoUserRepository(container.get("users_collection"))
        )
