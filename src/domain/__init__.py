from src.domain.base import BaseModel, generate_uuid
from src.domain.enums import ProjectStatus
from src.domain.project import Project

__all__ = [
    # Base
    "BaseModel",
    "generate_uuid",
    # Enums
    "ProjectStatus",
    # Entities
    "Project",
]
