from typing import Optional

from usermodel.core.schemas import BaseSchema
from usermodel.api.v1.schemas.refs import UserRef
from usermodel.api.v1.schemas.roles import Role, RoleRef


class UserRolesCreate(BaseSchema):
    role: RoleRef
    user: Optional[UserRef] = None


class UserRoles(BaseSchema):
    """Nested in a User: the ``user`` back-reference is omitted."""
    role: Role
