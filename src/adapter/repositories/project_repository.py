from typing import List, Optional
from sqlmodel.ext.asyncio.session import AsyncSession
from sqlmodel import select
from src.app.repositories import ProjectRepository
from src.domain import Project


class SqlAlchemyProjectRepository(ProjectRepository):
    """SQLAlchemy implementation of ProjectRepository"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, project: Project) -> Project:
        """Create a new project"""
        self.session.add(project)
        await self.session.flush()
        await self.session.refresh(project)
        return project

    async def get_by_id(self, project_id: str) -> Optional[Project]:
        """Get project by ID"""
        statement = select(Project).where(Project.id == project_id)
        result = await self.session.exec(statement)
        return result.first()

    async def list_all(self) -> List[Project]:
        """Get all projects ordered by created_at descending"""
        statement = select(Project).order_by(Project.created_at.desc())
        result = await self.session.exec(statement)
        return list(result.all())

    async def update(self, project: Project) -> Project:
        """Update an existing project"""
        self.session.add(project)
        await self.session.flush()
        await self.session.refresh(project)
        return project

    async def delete(self, project: Project) -> None:
        """Hard delete a project"""
        await self.session.delete(project)
        await self.session.flush()
