from typing import TYPE_CHECKING
from ...core.config import Settings
from ...infrastructure.db.mongo_connection import MongoConnection

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class DatabaseProvider:
    """Centralized database provider - single source of truth for collection handles"""
    
    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register the collections used by repositories.
        The connection itself is opened at startup and handed to the container.
        """
        settings = container.get(Settings)
        connection = container.get(MongoConnection)
        
        container.register_singleton(
            "teachers_collection",
            connection.get_collection(settings.collection_name),
        )
        container.register_singleton(
            "users_collection",
            connection.get_collection(settings.users_collection_name),
        )
