import logging
from sqlalchemy.exc import SQLAlchemyError
from libs.result import Result, Error, Return
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories import ProjectRepository
from src.adapter.repositories import SqlAlchemyProjectRepository
from .dtos import UpdateProjectCommand, ProjectDTO
from .validation import validate_project_fields

logger = logging.getLogger(__name__)


class UpdateProjectUseCase:
    """Use case for replacing every mutable field of an existing project"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, command: UpdateProjectCommand) -> Result[ProjectDTO]:
        """
        Execute the update project use case

        Validation runs before the project is loaded, so an invalid payload for
        an unknown id reports the validation error.

        Returns:
            Result[ProjectDTO]: Success with updated project data or error
        """
        error = validate_project_fields(command)
        if error is not None:
            return Return.err(error)

        try:
            async with self.uow as session:
                project_repo: ProjectRepository = SqlAlchemyProjectRepository(session.session)

                project = await project_repo.get_by_id(command.project_id)

                if project is None:
                    return Return.err(Error(code="NOT_FOUND", message="Project not found"))

                project.replace_fields(
                    name=command.name.strip(),
                    description=command.description,
                    status=command.status,
                    start_date=command.start_date,
                    end_date=command.end_date,
                )

                updated_project = await project_repo.update(project)
                await self.uow.commit()

                logger.info(f"Project updated: {updated_project.id}")
                return Return.ok(ProjectDTO.from_entity(updated_project))
        except (SQLAlchemyError, OSError) as e:
            logger.error(f"Error updating project {command.project_id}: {e}")
            return Return.err(
                Error(code="STORE_ERROR", message="Failed to update project", reason=str(e))
            )
