# Local application imports
from staff_directory.core.config import Settings
from staff_directory.infrastructure.db.mongo_connection import MongoConnection
from .base_container import BaseContainer
from .providers import (
    DatabaseProvider,
    RepositoryProvider,
    TeacherProvider,
    UserProvider,
)


class DIContainer(BaseContainer):
    """
    Main dependency injection container.
    Composes all providers in the correct order.
    
    Registration order is important:
    1. Settings and the database connection (DatabaseProvider)
    2. Repositories (RepositoryProvider) - depends on database
    3. Services (TeacherProvider, UserProvider) - depend on repositories
    """
    
    def __init__(self, settings: Settings, connection: MongoConnection) -> None:
        super().__init__()
        self.register_singleton(Settings, settings)
        self.register_singleton(MongoConnection, connection)
        self.setup()
    
    def setup(self) -> None:
        """
        Setup dependency registrations by composing all providers.
        Order matters: database → repositories → services
        """
        DatabaseProvider.register(self)
        RepositoryProvider.register(self)
        TeacherProvider.register(self)
        UserProvider.register(self)
