# database.py
"""
Exercise Tracker MongoDB Database Connection.

Uses Motor async driver with Beanie ODM.
"""

from motor.motor_asyncio import AsyncIOMotorClient
from beanie import init_beanie
from typing import Optional
import asyncio
import logging

logger = logging.getLogger(__name__)


class Database:
    """MongoDB database connection manager."""

    client: Optional[AsyncIOMotorClient] = None
    _initialized: bool = False
    _connect_lock = asyncio.Lock()

    @classmethod
    async def connect_db(cls, database_url: Optional[str], database_name: str):
        """
        Connect to MongoDB and initialise the Beanie document models.

        A missing connection string is logged and skipped so the
        process keeps serving; store calls then fail with a 500. Concurrent
        callers are serialised, and a client that fails to connect is closed.

        Args:
            database_url: MongoDB connection string
            database_name: Database name to use
        """
        async with cls._connect_lock:
            # Skip if already initialized (prevents multiple worker initialization)
            if cls._initialized:
                return

            if not database_url:
                logger.error(
                    "MONGO_URI is not defined in environment variables; "
                    "database operations will fail until it is configured"
                )
                return

            client = AsyncIOMotorClient(
                database_url,
                serverSelectionTimeoutMS=5000,  # 5 second timeout
            )
            try:
                # Test connection with ping
                await client.admin.command('ping')
                logger.info(f"MongoDB connected successfully: {database_name}")

                await cls.init_models(client[database_name])
            except Exception as e:
                logger.error(f"MongoDB connection failed. Check MONGO_URI variable: {e}")
                client.close()
                raise

            cls.client = client
            cls._initialized = True

    @classmethod
    async def init_models(cls, database):
        """Bind the Beanie document models to a database."""
        from app.models import DOCUMENT_MODELS

        await init_beanie(database=database, document_models=DOCUMENT_MODELS)
        logger.info("Beanie ODM initialized with all models")

    @classmethod
    async def close_db(cls):
        """Close MongoDB connection."""
        if cls.client:
            cls.client.close()
            cls.client = None
            cls._initialized = False
            logger.info("MongoDB connection closed")

    @classmethod
    async def ping(cls) -> bool:
        """Test MongoDB connection."""
        if not cls.client:
            return False
        try:
            await cls.client.admin.command('ping')
            return True
        except Exception:
            return False
