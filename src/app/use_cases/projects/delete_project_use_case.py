import logging
from sqlalchemy.exc import SQLAlchemyError
from libs.result import Result, Error, Return
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories import ProjectRepository
from src.adapter.repositories import SqlAlchemyProjectRepository
from .dtos import DeleteProjectResponse

logger = logging.getLogger(__name__)


class DeleteProjectUseCase:
    """Use case for permanently removing a project"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, project_id: str) -> Result[DeleteProjectResponse]:
        try:
            async with self.uow as session:
                project_repo: ProjectRepository = SqlAlchemyProjectRepository(session.session)

                project = await project_repo.get_by_id(project_id)

                if project is None:
                    return Return.err(Error(code="NOT_FOUND", message="Project not found"))

                await project_repo.delete(project)
                await self.uow.commit()

                logger.info(f"Project deleted: {project_id}")
                return Return.ok(DeleteProjectResponse(success=True, id=str(project_id)))
        except (SQLAlchemyError, OSError) as e:
            logger.error(f"Error deleting project {project_id}: {e}")
            return Return.err(
                Error(code="STORE_ERROR", message="Failed to delete project", reason=str(e))
            )
