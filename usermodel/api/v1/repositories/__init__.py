from .role_repository import RoleRepository, get_role_repository

__all__ = [
    "RoleRepository",
    "get_role_repository",
]
