from fastapi import APIRouter, Depends, status
from controller.users import UserOp
from core.dependencies import get_storage
from schema.users import UserIn, UserOut
from service.storage import StorageInterface

router = APIRouter(tags=["Users"])


@router.post("/users", response_model=UserOut, status_code=status.HTTP_201_CREATED)
def register(user_details: UserIn, storage: StorageInterface = Depends(get_storage)):
    """
    Register a new user
    - Username must be unique
    - The password is never returned
    """
    return UserOp.register(storage, user_details)


@router.get("/users/by-username/{username}", response_model=UserOut)
def get_user_by_username(username: str, storage: StorageInterface = Depends(get_storage)):
    return UserOp.get_user_by_username(storage, username)


@router.get("/users/{user_id}", response_model=UserOut)
def get_user(user_id: int, storage: StorageInterface = Depends(get_storage)):
    return UserOp.get_user(storage, user_id)
