from typing import Optional

from usermodel.core.schemas import BaseSchema


class UserRef(BaseSchema):
    """
    Inbound back-reference to the owning user.

    Accepted on nested children so payloads echoing a previous response still
    validate; the owner is always the user the child is attached to.
    """
    userid: Optional[int] = None
    username: Optional[str] = None
