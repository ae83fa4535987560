# =============================================================================
# app/dependencies.py - Shared Dependencies
# =============================================================================
# FastAPI dependency injection for shared resources.
# These are injected into route handlers using Depends().
# =============================================================================

from typing import Annotated, AsyncIterator

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from core.services.product_service import ProductService
from lib.database import Database


def get_database(request: Request) -> Database:
    """
    Get the database handle owned by the running application.

    Created and connected in the lifespan handler in app/main.py.
    """
    return request.app.state.database


async def get_db_session(
    database: Annotated[Database, Depends(get_database)],
) -> AsyncIterator[AsyncSession]:
    """Open one session per request and close it when the response is sent."""
    async with database.session() as session:
        yield session


def get_product_service(
    session: Annotated[AsyncSession, Depends(get_db_session)],
) -> ProductService:
    return ProductService(session)


# Type aliases for dependency injection
DatabaseDep = Annotated[Database, Depends(get_database)]
ProductServiceDep = Annotated[ProductService, Depends(get_product_service)]
