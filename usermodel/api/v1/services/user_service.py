import logging
from functools import lru_cache
from typing import List

from sqlalchemy.ext.asyncio import AsyncSession

from usermodel.api.v1.models import Role as RoleModel, User as UserModel, Useremail as UseremailModel, \
    UserRoles as UserRolesModel
from usermodel.api.v1.repositories import RoleRepository, get_role_repository
from usermodel.api.v1.schemas import (
    User,
    UserCreate,
    UseremailCreate,
    UseremailRead,
    UserRolesCreate,
    UserUpdate,
)

logger = logging.getLogger(__name__)


class UserService:
    """
    Maps inbound user payloads onto the User aggregate and renders it back out.
    """

    def __init__(self, role_repository: RoleRepository):
        self.role_repository = role_repository

    async def _resolve_roles(self, db: AsyncSession, refs: List[UserRolesCreate]) -> List[RoleModel]:
        return [await self.role_repository.resolve(db, ur.role) for ur in refs]

    @staticmethod
    def _attach_useremails(user: UserModel, emails: List[UseremailCreate]) -> None:
        # any inbound ``user`` reference is superseded by the owner being built;
        # appending on the parent side cascades the child into the session
        for ue in emails:
            user.useremails.append(UseremailModel(useremail=ue.useremail))

    async def build_user(self, db: AsyncSession, payload: UserCreate) -> UserModel:
        """
        Create a new, not yet persisted, User from an inbound payload.

        Role references are resolved against the session; every child row points
        back to the new user before it is added to the session.

        Raises:
            ResourceNotFoundError: when a role reference does not resolve
        """
        roles = await self._resolve_roles(db, payload.roles)
        user = UserModel(
            payload.username,
            payload.password,
            payload.primaryemail,
            [UserRolesModel(role=role) for role in roles],
        )
        self._attach_useremails(user, payload.useremails)
        db.add(user)
        logger.debug("Built user %s with %d roles", user.username, len(roles))
        return user

    async def apply_user_update(self, db: AsyncSession, user: UserModel, payload: UserUpdate) -> UserModel:
        """
        Apply a partial update. Fields missing from the payload, or sent as null,
        are left untouched.

        A supplied ``useremails`` list replaces the owned e-mails (detached rows
        are deleted). A supplied ``roles`` list replaces the role assignments;
        junctions are not orphan-removed, so the ones being replaced are deleted
        explicitly.
        """
        update_values = payload.model_dump(exclude_unset=True, exclude_none=True)

        for key in ("username", "password", "primaryemail"):
            if key in update_values:
                setattr(user, key, update_values[key])

        if payload.useremails is not None:
            user.useremails.clear()
            self._attach_useremails(user, payload.useremails)

        if payload.roles is not None:
            wanted = await self._resolve_roles(db, payload.roles)
            wanted_ids = {role.roleid for role in wanted}
            for ur in list(user.roles):
                if ur.roleid not in wanted_ids:
                    await db.delete(ur)
                    user.roles.remove(ur)
            current_ids = {ur.roleid for ur in user.roles}
            for role in wanted:
                if role.roleid not in current_ids:
                    user.roles.append(UserRolesModel(role=role))
                    current_ids.add(role.roleid)

        logger.debug("Updated user %s fields %s", user.userid, sorted(update_values))
        return user

    @staticmethod
    def render_user(user: UserModel) -> User:
        """Outbound representation of a user, without password or child back-references."""
        return User.model_validate(user)

    @staticmethod
    def render_useremail(useremail: UseremailModel) -> UseremailRead:
        """Outbound representation of a single e-mail, with its owner summarized."""
        return UseremailRead.model_validate(useremail)


@lru_cache()
def get_user_service() -> UserService:
    return UserService(role_repository=get_role_repository())
