from functools import lru_cache
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from usermodel.api.v1.models import Role as RoleModel
from usermodel.api.v1.schemas import RoleRef
from usermodel.core.models import ResourceNotFoundError


class RoleRepository:
    """
    Repository for Role entity, resolving the role references carried by user payloads.
    """
    def __init__(self):
        self.model = RoleModel

    async def get_by_id(self, db: AsyncSession, role_id: int) -> Optional[RoleModel]:
        return await db.get(self.model, role_id)

    async def get_by_name(self, db: AsyncSession, name: str) -> Optional[RoleModel]:
        result = await db.execute(select(self.model).where(self.model.name == name))
        return result.scalars().first()

    async def resolve(self, db: AsyncSession, ref: RoleRef) -> RoleModel:
        """
        Look up the Role a payload refers to.

        Args:
            db: Database session
            ref: Role reference carrying a roleid or a name

        Returns:
            The Role ORM instance

        Raises:
            ResourceNotFoundError: when no such role exists
        """
        if ref.roleid is not None:
            role = await self.get_by_id(db, ref.roleid)
        else:
            role = await self.get_by_name(db, ref.name)
        if role is None:
            key = ref.roleid if ref.roleid is not None else ref.name
            raise ResourceNotFoundError(f"Role {key} not found")
        return role


@lru_cache()
def get_role_repository() -> RoleRepository:
    return RoleRepository()
