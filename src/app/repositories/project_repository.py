from abc import ABC, abstractmethod
from typing import List, Optional
from src.domain import Project


class ProjectRepository(ABC):
    """Repository interface for Project entity"""

    @abstractmethod
    async def create(self, project: Project) -> Project:
        """Create a new project"""
        pass

    @abstractmethod
    async def get_by_id(self, project_id: str) -> Optional[Project]:
        """Get project by ID"""
        pass

    @abstractmethod
    async def list_all(self) -> List[Project]:
        """Get all projects, newest first"""
        pass

    @abstractmethod
    async def update(self, project: Project) -> Project:
        """Update an existing project"""
        pass

    @abstractmethod
    async def delete(self, project: Project) -> None:
        """Hard delete a project"""
        pass
