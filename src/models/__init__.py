from .base import Base, BaseModel, CreatedStamp

__all__ = [
    "Base",
    "BaseModel",
    "CreatedStamp",
]
