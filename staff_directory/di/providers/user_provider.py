from typing import TYPE_CHECKING
from ...domain.repositories.user_repository import UserRepository
from ...application.services.staff_service import UserService

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class UserProvider:
    """User service provider - registers user-related services"""
    
    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register user service.
        Service is created with repository from container.
        """
        container.register_singleton(
            UserService,
            UserService(
                user_repository=container.get(UserRepository)
            )
        )
