from src.app.use_cases.projects.create_project_use_case import CreateProjectUseCase
from src.app.use_cases.projects.update_project_use_case import UpdateProjectUseCase
from src.app.use_cases.projects.delete_project_use_case import DeleteProjectUseCase
from src.app.use_cases.projects.get_projects_use_case import GetProjectsUseCase
from src.app.use_cases.projects.get_project_by_id_use_case import GetProjectByIdUseCase
from src.app.use_cases.projects.dtos import (
    CreateProjectRequest,
    CreateProjectCommand,
    UpdateProjectRequest,
    UpdateProjectCommand,
    ProjectDTO,
    DeleteProjectResponse,
)
from src.app.use_cases.projects.validation import REQUIRED_FIELDS, validate_project_fields

__all__ = [
    "CreateProjectUseCase",
    "UpdateProjectUseCase",
    "DeleteProjectUseCase",
    "GetProjectsUseCase",
    "GetProjectByIdUseCase",
    "CreateProjectRequest",
    "CreateProjectCommand",
    "UpdateProjectRequest",
    "UpdateProjectCommand",
    "ProjectDTO",
    "DeleteProjectResponse",
    "REQUIRED_FIELDS",
    "validate_project_fields",
]
