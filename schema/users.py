from pydantic import BaseModel, ConfigDict


class UserIn(BaseModel):
    username: str
    password: str


class UserOut(BaseModel):
    id: int
    username: str

    model_config = ConfigDict(from_attributes=True)


class UserRecord(UserOut):
    """Stored user. The password is kept exactly as supplied."""
    password: str
