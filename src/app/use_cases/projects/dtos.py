from typing import Optional
from pydantic import BaseModel, ConfigDict, Field
from datetime import date, datetime
from src.domain.enums import ProjectStatus


class _ProjectFields(BaseModel):
    """
    Mutable project fields as they arrive on the wire.

    Every field is optional at the parsing layer so that a missing field is
    reported by the use case as a 400 listing the required fields, instead of
    being rejected by request parsing.
    """

    model_config = ConfigDict(populate_by_name=True)

    name: Optional[str] = None
    description: Optional[str] = None
    status: Optional[str] = None
    start_date: Optional[date] = Field(default=None, alias="startDate")
    end_date: Optional[date] = Field(default=None, alias="endDate")


class CreateProjectRequest(_ProjectFields):
    """Request DTO for creating a project (API layer - from user input)"""

    pass


class CreateProjectCommand(_ProjectFields):
    """Command DTO for creating a project (Use case layer)"""

    pass


class UpdateProjectRequest(_ProjectFields):
    """Request DTO for updating a project (API layer). All fields are replaced."""

    pass


class UpdateProjectCommand(_ProjectFields):
    """Command DTO for updating a project (Use case layer)"""

    project_id: str


class ProjectDTO(BaseModel):
    """Project DTO for listing, single project retrieval and write responses"""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    name: str
    description: str
    status: ProjectStatus
    start_date: date = Field(alias="startDate")
    end_date: date = Field(alias="endDate")
    created_at: datetime = Field(alias="createdAt")
    updated_at: datetime = Field(alias="updatedAt")

    @classmethod
    def from_entity(cls, project) -> "ProjectDTO":
        return cls(
            id=str(project.id),
            name=project.name,
            description=project.description,
            status=project.status,
            start_date=project.start_date,
            end_date=project.end_date,
            created_at=project.created_at,
            updated_at=project.updated_at,
        )


class DeleteProjectResponse(BaseModel):
    """Response DTO for DeleteProjectUseCase"""

    success: bool = True
    id: str
