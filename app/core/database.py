from contextlib import contextmanager
from typing import Iterator
import logging

from bson import ObjectId
from bson.errors import InvalidId
import pymongo
from pymongo import MongoClient
from pymongo.collection import Collection
from pymongo.errors import PyMongoError

from .config import Settings, settings as default_settings
from .exceptions import InvalidIdentifierException, StorageUnavailableException

logger = logging.getLogger(__name__)

# =============================================================================
# CLIENT CONFIGURATION
# =============================================================================

def create_mongo_client(config: Settings = default_settings) -> MongoClient:
    """
    Build the MongoDB client for the whole process.

    The client owns a connection pool and is safe to share between threads,
    so one instance is created at startup and handed to every request.
    Connecting is lazy: an unreachable server only shows up on first use.
    """
    logger.info(f"Creating MongoDB client for {config.masked_mongodb_url()}")
    return MongoClient(
        config.MONGODB_URL,
        maxPoolSize=config.MONGO_MAX_POOL_SIZE,
        serverSelectionTimeoutMS=config.MONGO_SERVER_SELECTION_TIMEOUT_MS,
    )


def get_collection(client: MongoClient, config: Settings = default_settings) -> Collection:
    """Resolve the configured database/collection pair to a collection handle."""
    return client[config.MONGO_DB][config.MONGO_COLLECTION]


# =============================================================================
# DATABASE UTILITIES
# =============================================================================

def parse_object_id(value: str) -> ObjectId:
    """
    Parse a path identifier into an ObjectId.

    Raises:
        InvalidIdentifierException: value is not 24 hex characters
    """
    # ObjectId(None) would generate a fresh id
    if not isinstance(value, str):
        raise InvalidIdentifierException(value)
    try:
        return ObjectId(value)
    except (InvalidId, TypeError) as e:
        raise InvalidIdentifierException(value) from e


@contextmanager
def storage_errors(operation: str) -> Iterator[None]:
    """Turn driver failures inside the block into StorageUnavailableException."""
    try:
        yield
    except PyMongoError as e:
        logger.error(f"MongoDB {operation} failed: {e}")
        raise StorageUnavailableException(str(e)) from e


def check_database_connection(client: MongoClient, timeout_ms: int = default_settings.MONGO_PING_TIMEOUT_MS) -> bool:
    """
    Check if database connection is working.

    The ping runs under its own short deadline (server selection included)
    instead of the client-wide serverSelectionTimeoutMS.

    Returns:
        bool: True if the server answered a ping, False otherwise
    """
    try:
        with pymongo.timeout(timeout_ms / 1000):
            client.admin.command("ping")
        logger.info("MongoDB connection successful")
        return True
    except PyMongoError as e:
        logger.error(f"MongoDB connection failed: {e}")
        return False


# =============================================================================
# INITIALIZATION
# =============================================================================

def init_db(client: MongoClient, timeout_ms: int = default_settings.MONGO_PING_TIMEOUT_MS) -> bool:
    """
    Check the store when the application starts.

    An unreachable server is logged but does not stop the process; requests
    fail individually with 503 until the server comes back.
    """
    logger.info("Initializing database...")

    if not check_database_connection(client, timeout_ms):
        logger.warning("MongoDB is not reachable yet, serving anyway")
        return False

    logger.info("Database initialized successfully")
    return True


# =============================================================================
# TEST DATABASE CONNECTION
# =============================================================================

if __name__ == "__main__":
    """Test database connection when running this file directly."""
    logging.basicConfig(level=logging.INFO)

    from .config import print_config
    print_config()

    mongo_client = create_mongo_client()
    if check_database_connection(mongo_client):
        print("Connection successful!")
    else:
        print("Connection failed!")
