"""
Dependency Container
====================

FastAPI dependencies resolving services from the application's DI container.
"""
from fastapi import Request

from staff_directory.application.services.staff_service import TeacherService, UserService
from staff_directory.di.base_container import BaseContainer


def get_container(request: Request) -> BaseContainer:
    """
    Get the DI container built at startup.
    
    Returns:
        Container stored on the application state
    """
    return request.app.state.container


def get_teacher_service(request: Request) -> TeacherService:
    """
    Get teacher service instance (singleton).
    
    Returns:
        TeacherService instance
    """
    return get_container(request).get(TeacherService)


def get_user_service(request: Request) -> UserService:
    """
    Get user service instance (singleton).
    
    Returns:
        UserService instance
    """
    return get_container(request).get(UserService)
