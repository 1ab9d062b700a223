from .base import Base
from .auditable import Auditable, auditor, get_current_auditor
from .exceptions import UserModelError, ConstraintViolationError, ResourceNotFoundError

__all__ = [
    "Base",
    "Auditable",
    "auditor",
    "get_current_auditor",
    "UserModelError",
    "ConstraintViolationError",
    "ResourceNotFoundError",
]
