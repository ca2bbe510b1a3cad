from typing import TYPE_CHECKING
from ...domain.repositories.teacher_repository import TeacherRepository
from ...application.services.staff_service import TeacherService

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class TeacherProvider:
    """Teacher service provider - registers teacher-related services"""
    
    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register teacher service.
        Service is created with repository from container.
        """
        container.register_singleton(
            TeacherService,
            TeacherService(
                teacher_repository=container.get(TeacherRepository)
            )
        )
