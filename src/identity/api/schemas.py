"""Pydantic request/response schemas for the authentication API."""

from pydantic import BaseModel, Field


class RegisterRequest(BaseModel):
    username: str = Field(min_length=1, max_length=100)
    password: str = Field(min_length=1, max_length=255)

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "username": "jane",
                    "password": "s3cret-passw0rd",
                }
            ]
        }
    }


class LoginRequest(BaseModel):
    username: str
    password: str


class UserResponse(BaseModel):
    """Public view of a user. Never carries the password hash."""

    id: str
    username: str
    is_admin: bool = False


class StatusResponse(BaseModel):
    status: str = "ok"
