import logging
import asyncio
from motor.motor_asyncio import AsyncIOMotorClient
from beanie import init_beanie
from app.models.analysis import SavedAnalysis
from app.models.user import User
from app.services.config import settings

logger = logging.getLogger("uvicorn.error")

_db_initialized = False
_client = None
_db_lock = asyncio.Lock()


async def init_db():
    global _db_initialized, _client

    if _db_initialized:
        logger.debug("Database already initialized")
        return

    if not settings.MONGO_URI or not settings.DB_NAME:
        raise ValueError("Missing MONGO_URI or DB_NAME in environment variables")

    logger.info("Connecting to MongoDB...")
    _client = AsyncIOMotorClient(settings.MONGO_URI)
    db = _client[settings.DB_NAME]

    logger.info("Initializing Beanie with models...")
    await init_beanie(database=db, document_models=[User, SavedAnalysis])

    _db_initialized = True
    logger.info("Database initialized successfully.")


async def ensure_db_initialized():
    async with _db_lock:
        if not _db_initialized:
            logger.info("Beanie not initialized. Initializing now...")
            await init_db()
        else:
            logger.debug("Beanie already initialized")
