from typing import List
from fastapi import APIRouter, Depends, status
from libs.result import Error
from src.api.error import ClientError, ServerError
from src.app.services.unit_of_work import UnitOfWork
from src.depends import get_unit_of_work
from src.app.use_cases.projects import (
    CreateProjectUseCase,
    CreateProjectRequest,
    CreateProjectCommand,
    UpdateProjectUseCase,
    UpdateProjectRequest,
    UpdateProjectCommand,
    DeleteProjectUseCase,
    DeleteProjectResponse,
    GetProjectsUseCase,
    GetProjectByIdUseCase,
    ProjectDTO,
)

router = APIRouter()


def _raise_for_error(error: Error):
    """Map a use case error code onto the HTTP status it is reported with"""
    if error.code == "NOT_FOUND":
        raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
    elif error.code == "STORE_ERROR":
        raise ServerError(error)
    else:
        raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)


@router.get("/projects", response_model=List[ProjectDTO], status_code=status.HTTP_200_OK)
async def get_projects(uow: UnitOfWork = Depends(get_unit_of_work)):
    """Get all projects, newest first"""
    use_case = GetProjectsUseCase(uow)
    result = await use_case.execute()

    if result.is_err():
        _raise_for_error(result.error)

    return result.value


@router.get("/projects/{project_id}", response_model=ProjectDTO, status_code=status.HTTP_200_OK)
async def get_project_by_id(
    project_id: str,
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Get a single project by ID"""
    use_case = GetProjectByIdUseCase(uow)
    result = await use_case.execute(project_id=project_id)

    if result.is_err():
        _raise_for_error(result.error)

    return result.value


@router.post("/projects", response_model=ProjectDTO, status_code=status.HTTP_201_CREATED)
async def create_project(
    request: CreateProjectRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Create a new project"""
    command = CreateProjectCommand(**request.model_dump())

    use_case = CreateProjectUseCase(uow)
    result = await use_case.execute(command)

    if result.is_err():
        _raise_for_error(result.error)

    return result.value


@router.put("/projects/{project_id}", response_model=ProjectDTO, status_code=status.HTTP_200_OK)
async def update_project(
    project_id: str,
    request: UpdateProjectRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Replace every mutable field of an existing project"""
    # Convert request DTO to command DTO, adding project_id from path
    command = UpdateProjectCommand(project_id=project_id, **request.model_dump())

    use_case = UpdateProjectUseCase(uow)
    result = await use_case.execute(command)

    if result.is_err():
        _raise_for_error(result.error)

    return result.value


@router.delete(
    "/projects/{project_id}", response_model=DeleteProjectResponse, status_code=status.HTTP_200_OK
)
async def delete_project(
    project_id: str,
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Permanently delete a project"""
    use_case = DeleteProjectUseCase(uow)
    result = await use_case.execute(project_id=project_id)

    if result.is_err():
        _raise_for_error(result.error)

    return result.value
