from typing import List, Optional

from pydantic import EmailStr, Field

from usermodel.core.schemas import BaseSchema
from usermodel.api.v1.schemas.useremails import Useremail, UseremailCreate
from usermodel.api.v1.schemas.user_roles import UserRoles, UserRolesCreate


class UserBase(BaseSchema):
    username: str = Field(..., min_length=1, max_length=255)
    primaryemail: EmailStr


class UserCreate(UserBase):
    """Inbound payload. ``password`` is accepted here and nowhere on the way out."""
    password: str = Field(..., min_length=1, max_length=255)
    useremails: List[UseremailCreate] = []
    roles: List[UserRolesCreate] = []


class UserUpdate(BaseSchema):
    """Partial update: only the fields present in the payload are applied."""
    username: Optional[str] = Field(None, min_length=1, max_length=255)
    password: Optional[str] = Field(None, min_length=1, max_length=255)
    primaryemail: Optional[EmailStr] = None
    useremails: Optional[List[UseremailCreate]] = None
    roles: Optional[List[UserRolesCreate]] = None


class User(UserBase):
    """Outbound representation. Has no password field, so it can never be emitted."""
    userid: int
    useremails: List[Useremail] = []
    roles: List[UserRoles] = []
