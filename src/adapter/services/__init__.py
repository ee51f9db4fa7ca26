from src.adapter.services.database import Database
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork

__all__ = ["Database", "SqlAlchemyUnitOfWork"]
