import pytest
from unittest.mock import AsyncMock, MagicMock


@pytest.fixture
def mock_uow():
    """Unit of work whose context manager yields itself; commit/rollback are recorded"""
    uow = MagicMock()
    uow.session = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    # Falsy return so exceptions raised inside the block propagate
    uow.__aexit__ = AsyncMock(return_value=None)
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()
    return uow
