import logging
from sqlalchemy.exc import SQLAlchemyError
from libs.result import Result, Error, Return
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories import ProjectRepository
from src.adapter.repositories import SqlAlchemyProjectRepository
from src.domain import Project
from .dtos import CreateProjectCommand, ProjectDTO
from .validation import validate_project_fields

logger = logging.getLogger(__name__)


class CreateProjectUseCase:
    """Use case for creating a new project"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, command: CreateProjectCommand) -> Result[ProjectDTO]:
        """
        Execute the create project use case

        Returns:
            Result[ProjectDTO]: Success with the created project (generated id and
            timestamps included) or a validation / store error
        """
        error = validate_project_fields(command)
        if error is not None:
            return Return.err(error)

        try:
            async with self.uow as session:
                project_repo: ProjectRepository = SqlAlchemyProjectRepository(session.session)

                project = Project.new(
                    name=command.name.strip(),
                    description=command.description,
                    status=command.status,
                    start_date=command.start_date,
                    end_date=command.end_date,
                )

                created_project = await project_repo.create(project)
                await self.uow.commit()

                logger.info(f"Project created: {created_project.id}")
                return Return.ok(ProjectDTO.from_entity(created_project))
        except (SQLAlchemyError, OSError) as e:
            logger.error(f"Error creating project: {e}")
            return Return.err(
                Error(code="STORE_ERROR", message="Failed to create project", reason=str(e))
            )
