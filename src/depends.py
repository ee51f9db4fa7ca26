from fastapi import Depends, Request
from src.adapter.services.database import Database
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork


def get_database(request: Request) -> Database:
    """The Database built by create_app for this application instance"""
    return request.app.state.database


async def get_unit_of_work(database: Database = Depends(get_database)):
    async with database.session_factory() as session:
        yield SqlAlchemyUnitOfWork(session)
