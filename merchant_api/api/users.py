"""
User registration API endpoints
"""
from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends

from merchant_api.constants import HTTPStatus
from merchant_api.dependencies import get_current_user, get_optional_user, get_user_service
from merchant_api.dtos.response import UserResponse
from merchant_api.models import User
from merchant_api.services import UserService
from merchant_api.utils.error_handlers import handle_api_errors

router = APIRouter()


@router.post(
    "/users",
    response_model=UserResponse,
    status_code=HTTPStatus.CREATED,
)
@handle_api_errors("Register user")
def register_user(
    payload: Dict[str, Any] = Body(...),
    service: UserService = Depends(get_user_service),
    caller: Optional[User] = Depends(get_optional_user),
):
    """
    Register a user. Returns 409 if the username is taken.

    Creating an ADMIN account requires ADMIN credentials (403 otherwise).
    """
    return service.register(payload, granted_by=caller)


@router.get("/users/me", response_model=UserResponse)
@handle_api_errors("Get current user")
def get_me(
    user: User = Depends(get_current_user),
    service: UserService = Depends(get_user_service),
):
    return service.mapper.to_response(user)
