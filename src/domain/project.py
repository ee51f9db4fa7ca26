from datetime import date, datetime, timedelta
from sqlalchemy import CheckConstraint, String, Text
from sqlmodel import Column, Field
from src.domain.base import BaseModel, generate_uuid


class Project(BaseModel, table=True):
    __tablename__ = "projects"
    __table_args__ = (
        CheckConstraint(
            "status IN ('active', 'completed', 'on-hold')", name="ck_projects_status"
        ),
    )

    id: str = Field(default_factory=generate_uuid, primary_key=True)
    name: str = Field(max_length=255, nullable=False)
    description: str = Field(sa_column=Column(Text, nullable=False))
    # Stored as the enum value ("on-hold"), not the member name
    status: str = Field(sa_column=Column(String(20), nullable=False, index=True))
    start_date: date = Field(nullable=False)
    end_date: date = Field(nullable=False)
    created_at: datetime = Field(default_factory=datetime.utcnow, nullable=False, index=True)
    updated_at: datetime = Field(default_factory=datetime.utcnow, nullable=False)

    @classmethod
    def new(
        cls,
        name: str,
        description: str,
        status: str,
        start_date: date,
        end_date: date,
    ) -> "Project":
        """Build a fresh project whose created_at and updated_at share one clock reading"""
        now = datetime.utcnow()
        return cls(
            name=name,
            description=description,
            status=status,
            start_date=start_date,
            end_date=end_date,
            created_at=now,
            updated_at=now,
        )

    def replace_fields(
        self,
        name: str,
        description: str,
        status: str,
        start_date: date,
        end_date: date,
    ) -> None:
        """Overwrite every mutable field and bump updated_at"""
        self.name = name
        self.description = description
        self.status = status
        self.start_date = start_date
        self.end_date = end_date

        now = datetime.utcnow()
        if self.updated_at is not None and now <= self.updated_at:
            now = self.updated_at + timedelta(microseconds=1)
        self.updated_at = now
