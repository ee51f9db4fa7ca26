from datetime import date, datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator
from src.domain.enums import ProjectStatus


class ProjectRecord(BaseModel):
    """A project as held in the client cache"""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    name: str
    description: Optional[str] = None
    status: str
    start_date: Optional[date] = Field(default=None, alias="startDate")
    end_date: Optional[date] = Field(default=None, alias="endDate")
    created_at: Optional[datetime] = Field(default=None, alias="createdAt")
    updated_at: Optional[datetime] = Field(default=None, alias="updatedAt")

    @field_validator("created_at", "updated_at", mode="before")
    @classmethod
    def _lenient_timestamp(cls, value):
        # Unparseable timestamps become None so sorting can treat them as epoch zero
        if value is None or isinstance(value, datetime):
            return value
        try:
            return datetime.fromisoformat(str(value).replace("Z", "+00:00"))
        except ValueError:
            return None


class ProjectForm(BaseModel):
    """The five fields a user fills in to create or edit a project"""

    model_config = ConfigDict(populate_by_name=True)

    name: str
    description: str
    status: ProjectStatus
    start_date: date = Field(alias="startDate")
    end_date: date = Field(alias="endDate")

    def to_payload(self) -> dict:
        return self.model_dump(by_alias=True, mode="json")
