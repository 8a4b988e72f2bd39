import logging

from pymongo.collection import Collection
from pymongo.errors import PyMongoError

from app.core.database import create_mongo_client, get_collection
from app.schemas.student import StudentCreate

# Setup logging to see output
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

SAMPLE_STUDENTS = [
    StudentCreate(name="Ana", age=20, subject="Math"),
    StudentCreate(name="Bruno", age=22, subject="Physics"),
    StudentCreate(name="Carla", age=19, subject="History"),
]


def seed_data(collection: Collection) -> int:
    """
    Insert the sample students into an empty collection.

    Returns the number of inserted documents (0 when data already exists).
    """
    try:
        # Check if data already exists to avoid duplication
        if collection.find_one({}) is not None:
            logger.info("Collection already contains data. Skipping seed.")
            return 0

        logger.info("Seeding data...")
        result = collection.insert_many([student.model_dump() for student in SAMPLE_STUDENTS])
        logger.info(f"Seeded {len(result.inserted_ids)} students")
        return len(result.inserted_ids)

    except PyMongoError as e:
        logger.error(f"Error seeding data: {e}")
        raise


if __name__ == "__main__":
    seed_data(get_collection(create_mongo_client()))
