"""Constants for staff record field names"""


class StaffFields:
    """Field name constants for Teacher and User documents"""
    INITIAL_POSITION = "initial_position"
    NAME = "name"
    SURNAME = "surname"
    HAS_SERVICES = "has_services"
    SPECIALTIES = "specialties"

    # MongoDB specific
    MONGO_ID = "_id"  # MongoDB's internal _id field
