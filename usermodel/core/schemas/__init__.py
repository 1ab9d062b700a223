from usermodel.core.schemas.base import BaseSchema

__all__ = ["BaseSchema"]
