"""
Users service - business logic for the users collection
"""

import logging
from typing import Optional

from fastapi import Request
from pydantic import ValidationError

from pizzagoland.models.user import User
from pizzagoland.services.base_service import BaseService, ServiceResult

logger = logging.getLogger(__name__)


class UsersService(BaseService):
    """Service for user operations"""

    def __init__(self, collection, **kwargs):
        super().__init__(collection, "users", **kwargs)

    def _decode_failure(self, e: ValidationError) -> ServiceResult:
        logger.error(f"Failed to decode stored user document: {e}")
        return ServiceResult(
            success=False,
            error="Stored user document could not be decoded",
            error_type="DECODE_ERROR"
        )

    async def list_users(self) -> ServiceResult:
        """
        Get all users

        Returns:
            ServiceResult with user dicts ({"id", "name", "age"})
        """
        result = await self.read()
        if not result.success:
            return result

        try:
            users = [User.from_document(doc).model_dump() for doc in result.data]
        except ValidationError as e:
            return self._decode_failure(e)

        return ServiceResult(success=True, data=users, count=len(users))

    async def add_user(self, user: User) -> ServiceResult:
        """
        Insert a new user

        Args:
            user: User to insert; an id is assigned when absent

        Returns:
            ServiceResult with [{"id": <assigned id>}]
        """
        logger.info(f"Creating new user: {user.name}")
        result = await self.create(user.to_document())
        if not result.success:
            return result

        inserted_id = str(result.data[0]["_id"])
        return ServiceResult(success=True, data=[{"id": inserted_id}], count=1)

    async def get_user(self, user_id: Optional[str]) -> ServiceResult:
        """
        Get a user by id

        Args:
            user_id: 24-character hex id from the request

        Returns:
            ServiceResult with a single user dict
        """
        result = await self.get_by_id(user_id)
        if not result.success:
            return result

        try:
            user = User.from_document(result.data[0])
        except ValidationError as e:
            return self._decode_failure(e)

        return ServiceResult(success=True, data=[user.model_dump()], count=1)

    async def update_user(self, user_id: Optional[str], user: User) -> ServiceResult:
        """
        Replace the name and age of a user with the supplied values

        Fields absent from the request were decoded to their zero values
        and overwrite the stored ones.
        """
        logger.info(f"Updating user {user_id}")
        return await self.update(user_id, user.update_fields())

    async def delete_user(self, user_id: Optional[str]) -> ServiceResult:
        """Delete a user by id"""
        logger.info(f"Deleting user {user_id}")
        return await self.delete(user_id)


def get_users_service(request: Request) -> UsersService:
    """FastAPI dependency building the users service from the app's connector"""
    connector = request.app.state.connector
    return UsersService(connector.collection)
