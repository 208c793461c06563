"""
User management API routes
Each route performs exactly one collection operation through UsersService.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Request
from fastapi.responses import JSONResponse, PlainTextResponse
from pydantic import ValidationError

from pizzagoland.api.routes.root import ALL_METHODS
from pizzagoland.models.user import User
from pizzagoland.services.base_service import ServiceResult
from pizzagoland.services.users_service import UsersService, get_users_service

router = APIRouter()
logger = logging.getLogger(__name__)

CLIENT_ERROR_TYPES = {"MISSING_PARAMETER", "INVALID_ID", "INVALID_REQUEST"}


def raise_for_result(result: ServiceResult, server_error_detail: str):
    """Map a failed ServiceResult to an HTTPException"""
    if result.success:
        return

    if result.error_type in CLIENT_ERROR_TYPES:
        raise HTTPException(status_code=400, detail=result.error)
    elif result.error_type == "RESOURCE_NOT_FOUND":
        raise HTTPException(status_code=404, detail="User not found")
    else:
        # Driver errors and timeouts keep their details in the logs only
        raise HTTPException(status_code=500, detail=server_error_detail)


async def parse_user_body(request: Request) -> User:
    """Decode the request body into a User or reject it with 400"""
    try:
        return User.model_validate_json(await request.body())
    except ValidationError as e:
        logger.warning(f"Rejected user payload: {e.error_count()} errors")
        raise HTTPException(status_code=400, detail="Invalid request format")


@router.get("/users")
async def list_users(users_service: UsersService = Depends(get_users_service)):
    """Get all users"""
    result = await users_service.list_users()
    raise_for_result(result, "Failed to read users from the database")
    return result.data


@router.post("/add_user", status_code=201)
async def add_user(
    request: Request,
    users_service: UsersService = Depends(get_users_service)
):
    """Create a user and return the assigned id"""
    user = await parse_user_body(request)

    result = await users_service.add_user(user)
    raise_for_result(result, "Failed to add user to the database")

    return JSONResponse(status_code=201, content=result.data[0]["id"])


@router.get("/user")
async def get_user(
    user_id: Optional[str] = Query(None, alias="id"),
    users_service: UsersService = Depends(get_users_service)
):
    """Get a user by id"""
    result = await users_service.get_user(user_id)
    raise_for_result(result, "Failed to get user")
    return result.data[0]


# Update and delete accept any verb
@router.api_route("/update-user", methods=ALL_METHODS, response_class=PlainTextResponse)
async def update_user(
    request: Request,
    user_id: Optional[str] = Query(None, alias="id"),
    users_service: UsersService = Depends(get_users_service)
):
    """Replace a user's fields with the request body"""
    _, id_error = users_service.parse_record_id(user_id)
    if id_error:
        raise_for_result(id_error, "Failed to update user")

    user = await parse_user_body(request)

    result = await users_service.update_user(user_id, user)
    raise_for_result(result, "Failed to update user")

    return "User updated"


@router.api_route("/delete-user", methods=ALL_METHODS, response_class=PlainTextResponse)
async def delete_user(
    user_id: Optional[str] = Query(None, alias="id"),
    users_service: UsersService = Depends(get_users_service)
):
    """Delete a user by id"""
    result = await users_service.delete_user(user_id)
    raise_for_result(result, "Failed to delete user")

    return "User deleted"
