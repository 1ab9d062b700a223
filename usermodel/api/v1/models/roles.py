from typing import List

from sqlalchemy import BigInteger, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from usermodel.core.models import Auditable, Base


class Role(Auditable, Base):
    """A named role that users can be assigned."""
    __tablename__ = "roles"

    roleid: Mapped[int] = mapped_column(
        BigInteger().with_variant(Integer, "sqlite"), primary_key=True, autoincrement=True
    )
    name: Mapped[str] = mapped_column(String(100), unique=True, index=True, nullable=False)

    # Relationship to user assignments
    users: Mapped[List["UserRoles"]] = relationship(back_populates="role", cascade="all")

    def __repr__(self):
        return f"<Role(roleid='{self.roleid}', name='{self.name}')>"
