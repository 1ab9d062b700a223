from .roles import RoleCreate, Role, RoleRef
from .refs import UserRef
from .useremails import UseremailCreate, Useremail, UseremailRead
from .user_roles import UserRolesCreate, UserRoles
from .users import UserBase, UserCreate, UserUpdate, User

__all__ = [
    "RoleCreate",
    "Role",
    "RoleRef",
    "UserRef",
    "UseremailCreate",
    "Useremail",
    "UseremailRead",
    "UserRolesCreate",
    "UserRoles",
    "UserBase",
    "UserCreate",
    "UserUpdate",
    "User",
]
