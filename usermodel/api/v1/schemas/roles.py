from typing import Optional

from pydantic import model_validator

from usermodel.core.schemas import BaseSchema


class RoleBase(BaseSchema):
    name: str


class RoleCreate(RoleBase):
    pass


class Role(RoleBase):
    roleid: int


class RoleRef(BaseSchema):
    """Inbound reference to an existing role, by id or by name."""
    roleid: Optional[int] = None
    name: Optional[str] = None

    @model_validator(mode="after")
    def _require_key(self):
        if self.roleid is None and self.name is None:
            raise ValueError("A role reference needs a roleid or a name")
        return self
