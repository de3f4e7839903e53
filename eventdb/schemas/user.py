# eventdb/schemas/user.py
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, EmailStr, Field, field_validator


class UserBase(BaseModel):
    username: str = Field(..., max_length=50, json_schema_extra={"example": "alice"})
    email: EmailStr = Field(..., json_schema_extra={"example": "alice@example.com"})
    first_name: str = Field(..., max_length=50)
    last_name: str = Field(..., max_length=50)
    phone: Optional[str] = Field(None, max_length=20)

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v: str) -> str:
        # Stored lower-cased so uniqueness ignores case
        return v.lower()


class UserCreate(UserBase):
    # Produced by the credential service; never a plain-text password
    password_hash: str = Field(..., max_length=255)


class UserUpdate(BaseModel):
    username: Optional[str] = Field(None, max_length=50)
    email: Optional[EmailStr] = None
    password_hash: Optional[str] = Field(None, max_length=255)
    first_name: Optional[str] = Field(None, max_length=50)
    last_name: Optional[str] = Field(None, max_length=50)
    phone: Optional[str] = Field(None, max_length=20)

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v: Optional[str]) -> Optional[str]:
        return v.lower() if v is not None else v


class User(UserBase):
    user_id: int
    is_active: bool
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class RoleBase(BaseModel):
    role_name: str = Field(..., max_length=30, json_schema_extra={"example": "organizer"})
    description: Optional[str] = Field(None, max_length=255)


class RoleCreate(RoleBase):
    pass


class RoleUpdate(BaseModel):
    role_name: Optional[str] = Field(None, max_length=30)
    description: Optional[str] = Field(None, max_length=255)


class Role(RoleBase):
    role_id: int

    model_config = {"from_attributes": True}
