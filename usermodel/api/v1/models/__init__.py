from .roles import Role
from .users import User
from .useremail import Useremail
from .user_roles import UserRoles


__all__ = [
    "Role",
    "User",
    "Useremail",
    "UserRoles",
]
