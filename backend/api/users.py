from fastapi import APIRouter, Body, Depends
from fastapi.responses import PlainTextResponse
from typing import List, Optional

from constants import HTTPStatus, Messages
from dependencies import get_user_service
from dtos.mappers import to_user_dto, to_user_record
from dtos.request import UserCreateRequest, UserUpdateRequest
from dtos.response import UserDto, UserRecord
from services.interfaces import IUserService
from utils.error_handlers import handle_api_errors

router = APIRouter()


@router.get("", response_model=List[UserRecord])
@handle_api_errors("List users")
def list_users(service: IUserService = Depends(get_user_service)):
    """Get all users"""
    return [to_user_record(user) for user in service.list_users()]


@router.post(
    "",
    response_model=UserRecord,
    status_code=HTTPStatus.CREATED,
    responses={HTTPStatus.BAD_REQUEST: {"description": "Invalid input data or email already exists"}},
)
@handle_api_errors("Create user")
def create_user(
    request: UserCreateRequest,
    service: IUserService = Depends(get_user_service)
):
    """Create a user. The password is stored as a one-way hash and never returned."""
    return to_user_record(service.create_user(request))


@router.put(
    "/{user_id}",
    response_class=PlainTextResponse,
    responses={
        HTTPStatus.BAD_REQUEST: {"description": "User data is null"},
        HTTPStatus.NOT_FOUND: {"description": "User not found"},
    },
)
@handle_api_errors("Update user")
def update_user(
    user_id: int,
    request: Optional[UserUpdateRequest] = Body(None),
    service: IUserService = Depends(get_user_service)
):
    """Update first name, last name and/or email. Empty values are ignored."""
    user = service.update_user(user_id, request)
    return Messages.USER_UPDATED.format(first_name=user.first_name)


@router.delete(
    "/{user_id}",
    response_class=PlainTextResponse,
    responses={HTTPStatus.NOT_FOUND: {"description": "User not found"}},
)
@handle_api_errors("Delete user")
def delete_user(user_id: int, service: IUserService = Depends(get_user_service)):
    """Delete a user and every book in its collection"""
    user = service.delete_user(user_id)
    return Messages.USER_DELETED.format(first_name=user.first_name)


@router.get(
    "/{user_id}/with-books",
    response_model=UserDto,
    responses={HTTPStatus.NOT_FOUND: {"description": "User not found"}},
)
@handle_api_errors("Get user with books")
def get_user_with_books(user_id: int, service: IUserService = Depends(get_user_service)):
    """Get a user along with its books"""
    user, books = service.get_user_with_books(user_id)
    return to_user_dto(user, books)
