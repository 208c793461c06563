"""
Base service layer for MongoDB collection operations
"""

import asyncio
import logging
from dataclasses import dataclass
from typing import Any, Awaitable, Dict, List, Optional

from bson.errors import InvalidId
from pymongo.errors import PyMongoError

from pizzagoland.config.settings import DB_TIMEOUT_SECONDS
from pizzagoland.models.user import parse_object_id

logger = logging.getLogger(__name__)


@dataclass
class ServiceResult:
    """Result from service operation"""
    success: bool
    data: Optional[List[Dict[str, Any]]] = None
    count: int = 0
    error: Optional[str] = None
    error_type: Optional[str] = None


class BaseService:
    """Base service wrapping a single collection.

    Every database call is bounded by ``timeout`` seconds. Failures are
    logged and returned as unsuccessful ``ServiceResult`` objects instead
    of being raised, so routes only have to map ``error_type`` to a status.
    """

    def __init__(self, collection, resource_name: str, timeout: float = DB_TIMEOUT_SECONDS):
        self.collection = collection
        self.resource_name = resource_name
        self.timeout = timeout

    async def _bounded(self, awaitable: Awaitable):
        return await asyncio.wait_for(awaitable, timeout=self.timeout)

    def _failure(self, operation: str, exc: Exception) -> ServiceResult:
        if isinstance(exc, asyncio.TimeoutError):
            logger.error(f"{operation} timed out for {self.resource_name} after {self.timeout}s")
            return ServiceResult(
                success=False,
                error=f"{operation} timed out",
                error_type="TIMEOUT"
            )

        logger.error(f"{operation} failed for {self.resource_name}: {exc}", exc_info=True)
        return ServiceResult(
            success=False,
            error=f"Database operation failed: {exc}",
            error_type="DATABASE_ERROR"
        )

    def parse_record_id(self, record_id: Optional[str]):
        """
        Validate a record id taken from a request

        Returns:
            Tuple of (ObjectId, None) on success or (None, ServiceResult) on failure
        """
        if not record_id:
            return None, ServiceResult(
                success=False,
                error="ID is not specified",
                error_type="MISSING_PARAMETER"
            )

        try:
            return parse_object_id(record_id), None
        except InvalidId:
            return None, ServiceResult(
                success=False,
                error="Invalid ID",
                error_type="INVALID_ID"
            )

    async def read(self, filters: Optional[Dict[str, Any]] = None) -> ServiceResult:
        """
        Read every document matching the filters

        Args:
            filters: MongoDB filter document (default: match all)

        Returns:
            ServiceResult with raw documents
        """
        try:
            cursor = self.collection.find(filters or {})
            documents = await self._bounded(cursor.to_list(None))
        except (PyMongoError, asyncio.TimeoutError) as e:
            return self._failure("Read operation", e)

        return ServiceResult(success=True, data=documents, count=len(documents))

    async def get_by_id(self, record_id: Optional[str]) -> ServiceResult:
        """
        Get a single document by its id

        Args:
            record_id: 24-character hex id

        Returns:
            ServiceResult with a single document, or RESOURCE_NOT_FOUND
        """
        object_id, id_error = self.parse_record_id(record_id)
        if id_error:
            return id_error

        try:
            document = await self._bounded(self.collection.find_one({"_id": object_id}))
        except (PyMongoError, asyncio.TimeoutError) as e:
            return self._failure("Get operation", e)

        if document is None:
            return ServiceResult(
                success=False,
                error=f"Record with id {record_id} not found",
                error_type="RESOURCE_NOT_FOUND"
            )

        return ServiceResult(success=True, data=[document], count=1)

    async def create(self, document: Dict[str, Any]) -> ServiceResult:
        """
        Insert a document; MongoDB assigns _id when it is absent

        Returns:
            ServiceResult whose data holds the inserted id
        """
        try:
            result = await self._bounded(self.collection.insert_one(document))
        except (PyMongoError, asyncio.TimeoutError) as e:
            return self._failure("Create operation", e)

        return ServiceResult(success=True, data=[{"_id": result.inserted_id}], count=1)

    async def update(self, record_id: Optional[str], fields: Dict[str, Any]) -> ServiceResult:
        """
        Apply ``$set`` with the given fields to the matching document

        A missing document is not an error; ``count`` holds the matched count.
        """
        object_id, id_error = self.parse_record_id(record_id)
        if id_error:
            return id_error

        try:
            result = await self._bounded(
                self.collection.update_one({"_id": object_id}, {"$set": fields})
            )
        except (PyMongoError, asyncio.TimeoutError) as e:
            return self._failure("Update operation", e)

        logger.info(f"Updated {self.resource_name} {record_id}: matched {result.matched_count}")
        return ServiceResult(success=True, count=result.matched_count)

    async def delete(self, record_id: Optional[str]) -> ServiceResult:
        """
        Delete the matching document

        A missing document is not an error; ``count`` holds the deleted count.
        """
        object_id, id_error = self.parse_record_id(record_id)
        if id_error:
            return id_error

        try:
            result = await self._bounded(self.collection.delete_one({"_id": object_id}))
        except (PyMongoError, asyncio.TimeoutError) as e:
            return self._failure("Delete operation", e)

        logger.info(f"Deleted {self.resource_name} {record_id}: removed {result.deleted_count}")
        return ServiceResult(success=True, count=result.deleted_count)
