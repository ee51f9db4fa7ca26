from src.app.repositories.project_repository import ProjectRepository

__all__ = [
    "ProjectRepository",
]
