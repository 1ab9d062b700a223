from typing import List, Optional

from pydantic import EmailStr

from usermodel.core.schemas import BaseSchema
from usermodel.api.v1.schemas.refs import UserRef
from usermodel.api.v1.schemas.user_roles import UserRoles


class UseremailBase(BaseSchema):
    useremail: EmailStr


class UseremailCreate(UseremailBase):
    user: Optional[UserRef] = None


class Useremail(UseremailBase):
    """Nested in a User: the ``user`` back-reference is omitted."""
    useremailid: int


class UseremailOwner(BaseSchema):
    """User summary shown on a standalone e-mail (no e-mail list, no password)."""
    userid: int
    username: str
    primaryemail: EmailStr
    roles: List[UserRoles] = []


class UseremailRead(Useremail):
    """Standalone e-mail, including a summary of its owner."""
    user: UseremailOwner
