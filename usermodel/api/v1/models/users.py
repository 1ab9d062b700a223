from typing import List, Optional

from sqlalchemy import BigInteger, Integer, String, event, inspect
from sqlalchemy.ext.hybrid import hybrid_property
from sqlalchemy.orm import Mapped, Session, mapped_column, relationship
from sqlalchemy.orm.attributes import set_committed_value

from usermodel.core.models import Auditable, Base
from usermodel.core.models.validators import ensure_valid_email


class User(Auditable, Base):
    """
    The entity allowing interaction with the users table.

    ``username`` and ``primaryemail`` are always stored and exposed in lower case.
    ``password`` is persisted but never part of an outbound schema.
    """
    __tablename__ = "users"

    # BIGINT in production; sqlite only auto-increments an INTEGER primary key
    userid: Mapped[int] = mapped_column(
        BigInteger().with_variant(Integer, "sqlite"), primary_key=True, autoincrement=True
    )
    _username: Mapped[str] = mapped_column("username", String(255), unique=True, index=True, nullable=False)
    password: Mapped[str] = mapped_column(String(255), nullable=False)
    _primaryemail: Mapped[str] = mapped_column("primaryemail", String(255), unique=True, index=True, nullable=False)

    # Fully owned: children follow the parent and are deleted once detached
    useremails: Mapped[List["Useremail"]] = relationship(
        back_populates="user",
        cascade="all, delete-orphan",
        order_by="Useremail.useremailid",
        lazy="selectin",
    )

    # Junctions follow inserts/updates/deletes of the user but are not orphan-removed;
    # one dropped from the list keeps its row (see _keep_dropped_junctions)
    roles: Mapped[List["UserRoles"]] = relationship(
        back_populates="user",
        cascade="all",
        lazy="selectin",
    )

    def __init__(
            self,
            username: Optional[str] = None,
            password: Optional[str] = None,
            primaryemail: Optional[str] = None,
            roles: Optional[List["UserRoles"]] = None,
            **kwargs,
    ):
        super().__init__(**kwargs)
        if username is not None:
            self.username = username
        if password is not None:
            self.password = password
        if primaryemail is not None:
            self.primaryemail = primaryemail
        if roles is not None:
            # Point every junction at this user before the list is attached
            for ur in roles:
                ur.user = self
            self.roles = list(roles)

    @hybrid_property
    def username(self) -> Optional[str]:
        # unset while a partial update is being applied
        if self._username is None:
            return None
        return self._username.lower()

    @username.setter
    def username(self, value: Optional[str]) -> None:
        self._username = value.lower() if value is not None else None

    @username.expression
    def username(cls):
        return cls._username

    @hybrid_property
    def primaryemail(self) -> Optional[str]:
        if self._primaryemail is None:
            return None
        return self._primaryemail.lower()

    @primaryemail.setter
    def primaryemail(self, value: Optional[str]) -> None:
        self._primaryemail = value.lower() if value is not None else None

    @primaryemail.expression
    def primaryemail(cls):
        return cls._primaryemail

    def __repr__(self):
        return f"<User(userid='{self.userid}', username='{self.username}')>"


@event.listens_for(User, "before_insert")
@event.listens_for(User, "before_update")
def _check_primaryemail(mapper, connection, target: User) -> None:
    ensure_valid_email(target.primaryemail, "primaryemail")


@event.listens_for(Session, "before_flush")
def _keep_dropped_junctions(session, flush_context, instances) -> None:
    """
    Leave the row of a junction removed from ``User.roles`` untouched.

    Its ``userid`` is part of the junction's primary key, so the usual
    de-association (blanking the foreign key) cannot be flushed. The pending
    collection and back-reference changes are committed as-is instead: the
    in-memory link is gone and the row still points at the user. Junctions
    explicitly deleted, or moved to another user, are flushed normally.
    """
    for obj in list(session.dirty):
        if not isinstance(obj, User):
            continue
        history = inspect(obj).attrs.roles.history
        dropped = [
            ur for ur in history.deleted
            if ur not in session.deleted and inspect(ur).dict.get("user") is None
        ]
        if not dropped:
            continue
        set_committed_value(obj, "roles", list(obj.roles))
        for ur in dropped:
            set_committed_value(ur, "user", None)
