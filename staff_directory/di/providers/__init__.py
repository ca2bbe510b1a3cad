"""
Providers Package
=================

Dependency injection providers for registering dependencies.
"""
from .database_provider import DatabaseProvider
from .repository_provider import RepositoryProvider
from .teacher_provider import TeacherProvider
from .user_provider import UserProvider

__all__ = [
    "DatabaseProvider",
    "RepositoryProvider",
    "TeacherProvider",
    "UserProvider",
]
