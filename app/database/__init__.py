import logging
from .mysql import init_mysql_db, close_mysql_db, check_mysql_connection, get_db, AsyncSessionLocal
from .seed import seed_demo_data
from app.core.config import settings

logger = logging.getLogger(__name__)


async def init_databases():
    """Initialize database and optional demo data"""
    try:
        await init_mysql_db()

        if settings.seed_demo_data:
            async with AsyncSessionLocal() as session:
                await seed_demo_data(session)

        logger.info("All databases initialized successfully")
    except Exception as e:
        logger.error(f"Database initialization failed: {e}")
        raise


async def close_databases():
    """Close all database connections"""
    try:
        await close_mysql_db()
        logger.info("All database connections closed")
    except Exception as e:
        logger.error(f"Error closing database connections: {e}")


async def check_database_health():
    """Check health of the database connection"""
    db_status = await check_mysql_connection()

    return {
        "database": db_status,
        "overall": db_status
    }

__all__ = [
    "init_databases",
    "close_databases",
    "check_database_health",
    "get_db",
]
