from fastapi import Depends

from eshop.infra.database import get_db
from eshop.services.users.repository import UserRepository
from eshop.services.users.service import UserService


def get_user_repository() -> UserRepository:
    return UserRepository(get_db())


def get_user_service(repository: UserRepository = Depends(get_user_repository)) -> UserService:
    return UserService(repository)
