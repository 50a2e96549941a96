from pydantic import BaseModel, ConfigDict, Field


class RegisterRequest(BaseModel):
    # Stored exactly as sent; login looks up the same string.
    email: str = Field(min_length=1)
    password: str = Field(min_length=1)


class LoginRequest(BaseModel):
    # Plain str so malformed and unknown addresses get the same answer.
    email: str
    password: str


class LoginResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    token: str
    is_admin: bool = Field(alias="isAdmin")


class TokenClaims(BaseModel):
    """Identity decoded from a verified access token."""
    id: int
    email: str
    is_admin: bool = False


class PendingUser(BaseModel):
    id: int
    email: str
    role: str

    model_config = {"from_attributes": True}


class PendingUsersResponse(BaseModel):
    users: list[PendingUser]
