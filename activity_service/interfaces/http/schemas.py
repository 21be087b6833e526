from pydantic import BaseModel, model_validator

from ...domain.entities import Role

# Request fields are optional so that missing values are reported by the
# use case instead of as a schema error.

class RegisterReq(BaseModel):
    username: str | None = None
    password: str | None = None
    role: str | None = None

class LoginReq(BaseModel):
    username: str | None = None
    password: str | None = None

    @model_validator(mode="before")
    @classmethod
    def drop_non_strings(cls, data):
        # unusable credentials are just wrong credentials (401), not a bad request
        if not isinstance(data, dict):
            return {}
        return {k: v for k, v in data.items() if k in ("username", "password") and isinstance(v, str)}

class UserResp(BaseModel):
    id: int
    username: str
    role: Role
    class Config: from_attributes = True

class RegisterResp(BaseModel):
    message: str
    data: UserResp

class TokenResp(BaseModel):
    message: str
    token: str
    token_type: str = "bearer"

class ActivityCreate(BaseModel):
    title: str | None = None
    description: str | None = None
    date: str | None = None

class ActivityUpdate(BaseModel):
    title: str | None = None
    description: str | None = None
    date: str | None = None

class ActivityOut(BaseModel):
    id: int
    title: str
    description: str
    date: str
    participants: list[str]
    class Config: from_attributes = True

class ActivityResp(BaseModel):
    message: str
    data: ActivityOut

class MessageResp(BaseModel):
    message: str
