import logging
from typing import List
from sqlalchemy.exc import SQLAlchemyError
from libs.result import Result, Error, Return
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories import ProjectRepository
from src.adapter.repositories import SqlAlchemyProjectRepository
from .dtos import ProjectDTO

logger = logging.getLogger(__name__)


class GetProjectsUseCase:
    """Use case for getting every project, newest first"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self) -> Result[List[ProjectDTO]]:
        try:
            async with self.uow as session:
                project_repo: ProjectRepository = SqlAlchemyProjectRepository(session.session)

                projects = await project_repo.list_all()

                return Return.ok([ProjectDTO.from_entity(project) for project in projects])
        except (SQLAlchemyError, OSError) as e:
            logger.error(f"Error fetching projects: {e}")
            return Return.err(
                Error(code="STORE_ERROR", message="Failed to fetch projects", reason=str(e))
            )
