# app/middleware/db_middleware.py
"""
Lazy Database Connection Middleware.

Retries the MongoDB connection before API requests when startup
connection failed.
"""

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
import logging

from database import Database
from settings import settings

logger = logging.getLogger(__name__)


class LazyDatabaseMiddleware(BaseHTTPMiddleware):
    """Middleware to ensure database connection before handling requests."""

    async def dispatch(self, request: Request, call_next):
        """
        Connect to the database if it is configured but not yet connected.

        Only ``/api`` routes need the database; health checks, the landing
        page and static files are served without it.
        """
        if not request.url.path.startswith("/api"):
            return await call_next(request)

        if settings.database_configured and not Database._initialized:
            try:
                logger.info("Lazy initializing MongoDB connection...")
                await Database.connect_db(
                    database_url=settings.MONGO_URI,
                    database_name=settings.DATABASE_NAME
                )
            except Exception as e:
                logger.error(f"Failed to initialize database: {e}")
                # Let the request proceed - the store reports the error

        return await call_next(request)
