from schema.users import UserIn, UserRecord
from service.storage import StorageInterface
import error


class UserOp:
    @staticmethod
    def register(storage: StorageInterface, user_details: UserIn) -> UserRecord:
        if storage.get_user_by_username(user_details.username):
            raise error.ConflictError(msg="Username already exists")
        return storage.create_user(user_details)

    @staticmethod
    def get_user(storage: StorageInterface, user_id: int) -> UserRecord:
        user = storage.get_user(user_id)
        if not user:
            raise error.ResourceNotFoundError("User not found")
        return user

    @staticmethod
    def get_user_by_username(storage: StorageInterface, username: str) -> UserRecord:
        user = storage.get_user_by_username(username)
        if not user:
            raise error.ResourceNotFoundError("User not found")
        return user
