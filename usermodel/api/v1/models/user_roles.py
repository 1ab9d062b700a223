from typing import Optional

from sqlalchemy import ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship

from usermodel.core.models import Auditable, Base


class UserRoles(Auditable, Base):
    """
    Junction table linking a User to a Role.
    The composite primary key allows a role to be assigned to a user only once.
    """
    __tablename__ = "userroles"

    # --- Composite Primary Keys ---
    userid: Mapped[int] = mapped_column(
        ForeignKey("users.userid", ondelete="CASCADE"), primary_key=True
    )
    roleid: Mapped[int] = mapped_column(
        ForeignKey("roles.roleid", ondelete="CASCADE"), primary_key=True
    )

    user: Mapped["User"] = relationship(back_populates="roles")
    role: Mapped["Role"] = relationship(back_populates="users", lazy="selectin")

    def __init__(self, user: Optional["User"] = None, role: Optional["Role"] = None, **kwargs):
        super().__init__(**kwargs)
        if role is not None:
            self.role = role
        if user is not None:
            self.user = user

    def __repr__(self):
        return f"<UserRoles(userid='{self.userid}', roleid='{self.roleid}')>"
