"""Constants for Company model field names"""


class CompanyFields:
    """Field name constants for Company model"""
    ID = "id"
    NAME = "name"
    DESCRIPTION = "description"
    INDUSTRY = "industry"
    FOUNDED_YEAR = "founded_year"
    EMPLOYEE_COUNT = "employee_count"
    IS_ACTIVE = "is_active"
    TYPE = "type"
    CREATED_AT = "created_at"
    UPDATED_AT = "updated_at"

    # Lower-cased name, backs the case-insensitive unique index
    NAME_NORMALIZED = "name_normalized"

    # MongoDB specific
    MONGO_ID = "_id"  # MongoDB's internal _id field
