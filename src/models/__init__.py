from .base import Base, BaseModel

__all__ = [
    "Base",
    "BaseModel",
]
