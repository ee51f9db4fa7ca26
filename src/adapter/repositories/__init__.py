from src.adapter.repositories.project_repository import SqlAlchemyProjectRepository

__all__ = [
    "SqlAlchemyProjectRepository",
]
