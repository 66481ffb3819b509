"""
MongoDB Company Repository
==========================

Concrete implementation of CompanyRepository using MongoDB.
"""
import logging
import re
from typing import List, Optional

from pymongo import ASCENDING
from pymongo.errors import DuplicateKeyError

from company_ledger.domain.constants.company_fields import CompanyFields
from company_ledger.domain.errors import ConflictError, duplicate_company_name
from company_ledger.domain.models.company import (
    ENTERPRISE_MIN_EMPLOYEES,
    STARTUP_MAX_AGE_YEARS,
    STARTUP_MAX_EMPLOYEES,
    Company,
    CompanyType,
)
from company_ledger.domain.repositories.company_repository import (
    CREATED_RECENTLY_DAYS,
    CompanyRepository,
)
from company_ledger.infrastructure.db.mongo_connection import MongoClientManager
from company_ledger.utils.datetime_utils import now, rolling_window

logger = logging.getLogger(__name__)


class MongoCompanyRepository(CompanyRepository):
    """
    MongoDB implementation of CompanyRepository.

    A unique index on the lower-cased name makes duplicate names impossible
    even when two creations race past the use case's pre-check.
    """

    def __init__(self, client: MongoClientManager, collection_name: str = "companies"):
        self._collection = client.get_collection(collection_name)
        self._collection.create_index(
            [(CompanyFields.ID, ASCENDING)], unique=True
        )
        self._collection.create_index(
            [(CompanyFields.NAME_NORMALIZED, ASCENDING)], unique=True
        )

    def _to_entity(self, doc: dict) -> Company:
        """Convert MongoDB document to Company entity."""
        return Company(
            id=doc[CompanyFields.ID],
            name=doc[CompanyFields.NAME],
            description=doc.get(CompanyFields.DESCRIPTION),
            industry=doc[CompanyFields.INDUSTRY],
            founded_year=doc[CompanyFields.FOUNDED_YEAR],
            employee_count=doc[CompanyFields.EMPLOYEE_COUNT],
            is_active=doc[CompanyFields.IS_ACTIVE],
            type=doc[CompanyFields.TYPE],
            created_at=doc.get(CompanyFields.CREATED_AT, now()),
            updated_at=doc.get(CompanyFields.UPDATED_AT, now()),
        )

    def _to_document(self, company: Company) -> dict:
        """Convert Company entity to MongoDB document."""
        return {
            CompanyFields.ID: company.id,
            CompanyFields.NAME: company.name,
            CompanyFields.NAME_NORMALIZED: company.name.lower(),
            CompanyFields.DESCRIPTION: company.description,
            CompanyFields.INDUSTRY: company.industry,
            CompanyFields.FOUNDED_YEAR: company.founded_year,
            CompanyFields.EMPLOYEE_COUNT: company.employee_count,
            CompanyFields.IS_ACTIVE: company.is_active,
            CompanyFields.TYPE: company.type.value,
            CompanyFields.CREATED_AT: company.created_at,
            CompanyFields.UPDATED_AT: company.updated_at,
        }

    def _find_many(self, query: dict) -> List[Company]:
        docs = self._collection.find(query).sort(CompanyFields.CREATED_AT, ASCENDING)
        return [self._to_entity(doc) for doc in docs]

    def find_by_id(self, company_id: str) -> Optional[Company]:
        doc = self._collection.find_one({CompanyFields.ID: company_id})
        if not doc:
            return None
        return self._to_entity(doc)

    def find_all(self) -> List[Company]:
        return self._find_many({})

    def save(self, company: Company) -> Company:
        try:
            self._collection.replace_one(
                {CompanyFields.ID: company.id},
                self._to_document(company),
                upsert=True,
            )
        except DuplicateKeyError:
            logger.warning("Rejected duplicate company name '%s'", company.name)
            raise ConflictError(duplicate_company_name(company.name)) from None
        return company

    def delete(self, company_id: str) -> bool:
        result = self._collection.delete_one({CompanyFields.ID: company_id})
        return result.deleted_count > 0

    def find_by_name(self, name: str) -> Optional[Company]:
        doc = self._collection.find_one({CompanyFields.NAME_NORMALIZED: name.lower()})
        if not doc:
            return None
        return self._to_entity(doc)

    def find_by_industry(self, industry: str) -> List[Company]:
        pattern = f"^{re.escape(industry)}$"
        return self._find_many({CompanyFields.INDUSTRY: {"$regex": pattern, "$options": "i"}})

    def find_active_companies(self) -> List[Company]:
        return self._find_many({CompanyFields.IS_ACTIVE: True})

    def find_startups(self) -> List[Company]:
        return self._find_many({
            CompanyFields.FOUNDED_YEAR: {"$gte": now().year - STARTUP_MAX_AGE_YEARS},
            CompanyFields.EMPLOYEE_COUNT: {"$lte": STARTUP_MAX_EMPLOYEES},
        })

    def find_enterprises(self) -> List[Company]:
        return self._find_many({CompanyFields.EMPLOYEE_COUNT: {"$gt": ENTERPRISE_MIN_EMPLOYEES}})

    def find_by_employee_count_range(self, minimum: int, maximum: int) -> List[Company]:
        return self._find_many({CompanyFields.EMPLOYEE_COUNT: {"$gte": minimum, "$lte": maximum}})

    def find_by_founded_year_range(self, start_year: int, end_year: int) -> List[Company]:
        return self._find_many({CompanyFields.FOUNDED_YEAR: {"$gte": start_year, "$lte": end_year}})

    def find_by_type(self, company_type: CompanyType) -> List[Company]:
        return self._find_many({CompanyFields.TYPE: CompanyType(company_type).value})

    def find_companies_created_in_last_month(self) -> List[Company]:
        start, end = rolling_window(CREATED_RECENTLY_DAYS)
        return self._find_many({CompanyFields.CREATED_AT: {"$gte": start, "$lte": end}})
