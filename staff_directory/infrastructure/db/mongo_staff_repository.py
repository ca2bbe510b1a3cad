"""
MongoDB Staff Repository
========================

Shared MongoDB read logic for teacher and user records.
"""
import logging
from typing import Any, Dict, Generic, List, Optional, Type, TypeVar

from bson import ObjectId
from pymongo.collection import Collection
from pymongo.errors import PyMongoError

from staff_directory.domain.constants.staff_fields import StaffFields
from staff_directory.domain.errors import InternalError
from staff_directory.domain.models.specialties import Specialties
from staff_directory.domain.models.staff_filter import StaffFilter
from staff_directory.domain.models.staff_member import StaffMember
from staff_directory.infrastructure.db.query_builder import MatchMode, build_staff_query

logger = logging.getLogger(__name__)

EntityType = TypeVar("EntityType", bound=StaffMember)


def _typed(doc: Dict[str, Any], key: str, expected: type) -> Any:
    """Read a required field, rejecting values of another type."""
    value = doc[key]
    # bool is a subclass of int; a stored flag is not an ordering key
    if not isinstance(value, expected) or (expected is int and isinstance(value, bool)):
        raise TypeError(f"Field '{key}' must be {expected.__name__}, got {type(value).__name__}")
    return value


class MongoStaffRepository(Generic[EntityType]):
    """
    MongoDB read adapter for one staff collection.

    Subclasses choose the entity kind and the name match mode.
    Driver and decode failures are converted to InternalError here
    and nowhere else.
    """

    ENTITY: Type[StaffMember] = StaffMember
    NAME_MATCH: MatchMode = MatchMode.SUBSTRING

    def __init__(self, collection: Collection):
        """
        Initialize repository with a collection handle.

        Args:
            collection: Collection from the shared MongoConnection
        """
        self._collection = collection

    def _to_entity(self, doc: Dict[str, Any]) -> EntityType:
        """
        Convert MongoDB document to entity. Unknown keys are ignored.

        Raises:
            KeyError: If a required field is missing
            TypeError: If a field holds a value of the wrong type
        """
        raw_id = doc.get(StaffFields.MONGO_ID)
        return self.ENTITY(
            id=str(raw_id) if raw_id is not None else None,
            initial_position=_typed(doc, StaffFields.INITIAL_POSITION, int),
            name=_typed(doc, StaffFields.NAME, str),
            surname=_typed(doc, StaffFields.SURNAME, str),
            has_services=_typed(doc, StaffFields.HAS_SERVICES, bool),
            specialties=Specialties.from_mapping(doc[StaffFields.SPECIALTIES]),
        )

    def _decode(self, doc: Dict[str, Any]) -> EntityType:
        try:
            return self._to_entity(doc)
        except (KeyError, TypeError, ValueError) as exc:
            logger.error(
                "Malformed %s document %s: %s",
                self.ENTITY.__name__, doc.get(StaffFields.MONGO_ID), exc,
            )
            raise InternalError() from exc

    def find_many(self, staff_filter: StaffFilter) -> List[EntityType]:
        """Find all records matching the filter."""
        query = build_staff_query(staff_filter, self.NAME_MATCH)
        logger.debug("Querying %s with %s", self._collection.name, query)
        try:
            docs = list(self._collection.find(query))
        except PyMongoError as exc:
            logger.exception("Failed to query %s", self._collection.name)
            raise InternalError() from exc
        return [self._decode(doc) for doc in docs]

    def find_by_id(self, entity_id: str) -> Optional[EntityType]:
        """Find a record by its ID. Malformed IDs yield None."""
        if not ObjectId.is_valid(entity_id):
            logger.debug("Ignoring malformed %s id %r", self.ENTITY.__name__, entity_id)
            return None
        try:
            doc = self._collection.find_one({StaffFields.MONGO_ID: ObjectId(entity_id)})
        except PyMongoError as exc:
            logger.exception("Failed to fetch %s from %s", entity_id, self._collection.name)
            raise InternalError() from exc
        if not doc:
            return None
        return self._decode(doc)
