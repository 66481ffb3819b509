"""Constants for Transaction model field names"""


class TransactionFields:
    """Field name constants for Transaction model"""
    ID = "id"
    COMPANY_ID = "company_id"
    AMOUNT = "amount"
    TYPE = "type"
    DESCRIPTION = "description"
    TRANSACTION_DATE = "transaction_date"
    STATUS = "status"
    REFERENCE = "reference"
    CREATED_AT = "created_at"
    UPDATED_AT = "updated_at"

    # MongoDB specific
    MONGO_ID = "_id"
