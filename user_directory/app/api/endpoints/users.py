"""
User endpoints.

Create, list, rename and delete users.  The ``user_id`` path parameter
is accepted as a string and parsed by the service: ids that are not
integers are reported as ``404 User not found`` rather than as a
request validation error, and a blank name is reported before the id
is looked up.
"""

from typing import List

from fastapi import APIRouter, Depends, status

from user_directory.app.api.dependencies import get_user_service
from user_directory.app.schemas.user import ErrorResponse, UserCreate, UserDeleted, UserRead, UserUpdate
from user_directory.app.services.user_service import UserService


router = APIRouter()

NAME_ERROR = {status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse, "description": "Name is required"}}
NOT_FOUND_ERROR = {status.HTTP_404_NOT_FOUND: {"model": ErrorResponse, "description": "User not found"}}


@router.get("", response_model=List[UserRead])
async def list_users(service: UserService = Depends(get_user_service)) -> List[UserRead]:
    """Return every user in insertion order."""
    return await service.list_users()


@router.post("", response_model=UserRead, status_code=status.HTTP_201_CREATED, responses=NAME_ERROR)
async def create_user(payload: UserCreate, service: UserService = Depends(get_user_service)) -> UserRead:
    """Create a user.

    The server assigns the id; the stored name is the trimmed input.
    """
    return await service.create_user(payload.name)


@router.put("/{user_id}", response_model=UserRead, responses={**NAME_ERROR, **NOT_FOUND_ERROR})
async def update_user(
    user_id: str,
    payload: UserUpdate,
    service: UserService = Depends(get_user_service),
) -> UserRead:
    """Replace the name of an existing user; the id never changes."""
    return await service.update_user(user_id, payload.name)


@router.delete("/{user_id}", response_model=UserDeleted, responses=NOT_FOUND_ERROR)
async def delete_user(user_id: str, service: UserService = Depends(get_user_service)) -> UserDeleted:
    """Delete a user and echo the removed record."""
    return await service.delete_user(user_id)
