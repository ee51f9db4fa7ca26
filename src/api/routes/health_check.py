import logging
from datetime import datetime
from fastapi import APIRouter, Depends, status
from sqlalchemy.exc import SQLAlchemyError
from libs.result import Error
from src.adapter.services.database import Database
from src.api.error import ServerError
from src.api.schemas.health_response import HealthResponse
from src.depends import get_database

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/health", response_model=HealthResponse, status_code=status.HTTP_200_OK)
async def health_check(database: Database = Depends(get_database)):
    """Report healthy only when the record store answers a trivial query"""
    try:
        await database.ping()
    except (SQLAlchemyError, OSError) as e:
        raise ServerError(
            Error(code="STORE_UNREACHABLE", message="Database connection failed", reason=str(e))
        )

    return HealthResponse(status="Healthy", timestamp=datetime.utcnow())
