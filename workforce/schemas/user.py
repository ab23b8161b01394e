from pydantic import BaseModel, EmailStr, Field, field_validator
from typing import Optional

from workforce.models.user import UserRole


class UserRegister(BaseModel):
    email: EmailStr
    password: str = Field(max_length=100)
    role: Optional[UserRole] = None

    @field_validator("email", mode="before")
    @classmethod
    def strip_email(cls, v):
        if isinstance(v, str):
            v = v.strip()
            if len(v) > 255:
                raise ValueError("Email must be 255 characters or less")
        return v


class UserLogin(BaseModel):
    email: EmailStr
    password: str = Field(min_length=1)

    @field_validator("email", mode="before")
    @classmethod
    def strip_email(cls, v):
        return v.strip() if isinstance(v, str) else v


class UserOut(BaseModel):
    id: int
    email: str
    role: UserRole

    model_config = {
        "from_attributes": True
    }
