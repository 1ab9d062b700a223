from typing import Optional

from sqlalchemy import BigInteger, ForeignKey, Integer, String, event
from sqlalchemy.ext.hybrid import hybrid_property
from sqlalchemy.orm import Mapped, mapped_column, relationship

from usermodel.core.models import Auditable, Base
from usermodel.core.models.validators import ensure_valid_email


class Useremail(Auditable, Base):
    """Additional e-mail address owned by a user."""
    __tablename__ = "useremails"

    useremailid: Mapped[int] = mapped_column(
        BigInteger().with_variant(Integer, "sqlite"), primary_key=True, autoincrement=True
    )
    _useremail: Mapped[str] = mapped_column("useremail", String(255), nullable=False)
    userid: Mapped[int] = mapped_column(
        ForeignKey("users.userid", ondelete="CASCADE"), nullable=False, index=True
    )

    user: Mapped["User"] = relationship(back_populates="useremails", lazy="selectin")

    def __init__(self, user: Optional["User"] = None, useremail: Optional[str] = None, **kwargs):
        super().__init__(**kwargs)
        if useremail is not None:
            self.useremail = useremail
        if user is not None:
            self.user = user

    @hybrid_property
    def useremail(self) -> Optional[str]:
        if self._useremail is None:
            return None
        return self._useremail.lower()

    @useremail.setter
    def useremail(self, value: Optional[str]) -> None:
        self._useremail = value.lower() if value is not None else None

    @useremail.expression
    def useremail(cls):
        return cls._useremail

    def __repr__(self):
        return f"<Useremail(useremailid='{self.useremailid}', useremail='{self.useremail}')>"


@event.listens_for(Useremail, "before_insert")
@event.listens_for(Useremail, "before_update")
def _check_useremail(mapper, connection, target: Useremail) -> None:
    ensure_valid_email(target.useremail, "useremail")
