import logging
from sqlalchemy.exc import SQLAlchemyError
from libs.result import Result, Error, Return
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories import ProjectRepository
from src.adapter.repositories import SqlAlchemyProjectRepository
from .dtos import ProjectDTO

logger = logging.getLogger(__name__)


class GetProjectByIdUseCase:
    """Use case for getting a single project by ID"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, project_id: str) -> Result[ProjectDTO]:
        """
        Execute the get project by ID use case

        Args:
            project_id: ID of the project to retrieve

        Returns:
            Result[ProjectDTO]: Success with project data or error
        """
        try:
            async with self.uow as session:
                project_repo: ProjectRepository = SqlAlchemyProjectRepository(session.session)

                project = await project_repo.get_by_id(project_id)

                if project is None:
                    return Return.err(Error(code="NOT_FOUND", message="Project not found"))

                return Return.ok(ProjectDTO.from_entity(project))
        except (SQLAlchemyError, OSError) as e:
            logger.error(f"Error fetching project {project_id}: {e}")
            return Return.err(
                Error(code="STORE_ERROR", message="Failed to fetch project", reason=str(e))
            )
