from abc import ABC, abstractmethod
from src.app.repositories import ProjectRepository


class UnitOfWork(ABC):
    """Transaction boundary shared by the repositories of one request"""

    projects: ProjectRepository

    @abstractmethod
    async def __aenter__(self):
        pass

    @abstractmethod
    async def __aexit__(self, *args):
        pass

    @abstractmethod
    async def commit(self):
        pass

    @abstractmethod
    async def rollback(self):
        pass
