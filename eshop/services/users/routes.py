from fastapi import APIRouter, Depends, Response, status

from eshop.config import settings
from eshop.services.auth.cookies import clear_session_cookie, set_session_cookie
from eshop.services.auth.dependencies import AuthContext, get_current_user, require_admin
from eshop.services.users.dependencies import get_user_service
from eshop.services.users.service import UserService
from eshop.shared.models.user_dto import (
    AddressDTO,
    CreateUserRequest,
    LoginRequest,
    UpdateAvatarRequest,
    UpdatePasswordRequest,
    UpdateUserInfoRequest,
)

router = APIRouter(prefix="/user", tags=["Users"])


@router.post("/create-user", status_code=status.HTTP_201_CREATED)
async def create_user(
    request: CreateUserRequest,
    response: Response,
    service: UserService = Depends(get_user_service),
):
    user, token = await service.register_user(request)
    set_session_cookie(response, settings.auth.USER_COOKIE_NAME, token)
    return {"success": True, "user": user, "token": token}


@router.post("/login-user", status_code=status.HTTP_201_CREATED)
async def login_user(
    request: LoginRequest,
    response: Response,
    service: UserService = Depends(get_user_service),
):
    user, token = await service.login(request)
    set_session_cookie(response, settings.auth.USER_COOKIE_NAME, token)
    return {"success": True, "user": user, "token": token}


@router.get("/getuser")
async def get_user(
    auth: AuthContext = Depends(get_current_user),
    service: UserService = Depends(get_user_service),
):
    user = await service.get_user(auth.user_id)
    return {"success": True, "user": user}


@router.get("/logout", status_code=status.HTTP_201_CREATED)
async def logout(response: Response):
    clear_session_cookie(response, settings.auth.USER_COOKIE_NAME)
    return {"success": True, "message": "Log out successful!"}


@router.put("/update-user-info", status_code=status.HTTP_201_CREATED)
async def update_user_info(
    request: UpdateUserInfoRequest,
    auth: AuthContext = Depends(get_current_user),
    service: UserService = Depends(get_user_service),
):
    user = await service.update_info(auth.user_id, request)
    return {"success": True, "user": user}


@router.put("/update-avatar")
async def update_avatar(
    request: UpdateAvatarRequest,
    auth: AuthContext = Depends(get_current_user),
    service: UserService = Depends(get_user_service),
):
    user = await service.update_avatar(auth.user_id, request)
    return {"success": True, "user": user}


@router.put("/update-user-addresses")
async def update_user_addresses(
    request: AddressDTO,
    auth: AuthContext = Depends(get_current_user),
    service: UserService = Depends(get_user_service),
):
    user = await service.update_addresses(auth.user_id, request)
    return {"success": True, "user": user}


@router.delete("/delete-user-address/{address_id}")
async def delete_user_address(
    address_id: str,
    auth: AuthContext = Depends(get_current_user),
    service: UserService = Depends(get_user_service),
):
    user = await service.delete_address(auth.user_id, address_id)
    return {"success": True, "user": user}


@router.put("/update-user-password")
async def update_user_password(
    request: UpdatePasswordRequest,
    auth: AuthContext = Depends(get_current_user),
    service: UserService = Depends(get_user_service),
):
    await service.update_password(auth.user_id, request)
    return {"success": True, "message": "Password updated successfully!"}


@router.get("/user-info/{user_id}", status_code=status.HTTP_201_CREATED)
async def user_info(
    user_id: str,
    service: UserService = Depends(get_user_service),
):
    user = await service.get_user_info(user_id)
    return {"success": True, "user": user}


@router.get("/admin-all-users", status_code=status.HTTP_201_CREATED)
async def admin_all_users(
    auth: AuthContext = Depends(require_admin),
    service: UserService = Depends(get_user_service),
):
    users = await service.get_all_users()
    return {"success": True, "users": users}


@router.delete("/delete-user/{user_id}", status_code=status.HTTP_201_CREATED)
async def delete_user(
    user_id: str,
    auth: AuthContext = Depends(require_admin),
    service: UserService = Depends(get_user_service),
):
    await service.delete_user(user_id)
    return {"success": True, "message": "User deleted successfully!"}
