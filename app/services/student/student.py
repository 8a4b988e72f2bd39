import logging
from typing import List, Optional

from pymongo.collection import Collection
from pymongo.results import DeleteResult, InsertOneResult, UpdateResult

from app.core.database import parse_object_id, storage_errors
from app.core.exceptions import BadRequestException, InvalidIdentifierException
from app.schemas.student import Student, StudentCreate, StudentUpdate

logger = logging.getLogger(__name__)


def get_students(collection: Collection) -> List[Student]:
    """Every student, in the collection's natural order"""
    with storage_errors("find"):
        documents = list(collection.find({}))
    return [Student.model_validate(doc) for doc in documents]


def get_student(collection: Collection, student_id: str) -> Optional[Student]:
    """
    One student by ID.

    A malformed ID is treated the same as a missing document and gives None.
    """
    try:
        object_id = parse_object_id(student_id)
    except InvalidIdentifierException:
        return None

    with storage_errors("find_one"):
        document = collection.find_one({"_id": object_id})
    if document is None:
        return None
    return Student.model_validate(document)


def create_student(collection: Collection, student: StudentCreate) -> InsertOneResult:
    """Insert a new student, MongoDB assigns the _id"""
    with storage_errors("insert_one"):
        result = collection.insert_one(student.model_dump())
    logger.info(f"Created student {result.inserted_id}")
    return result


def update_student(collection: Collection, student_id: str, student: StudentUpdate) -> UpdateResult:
    """
    $set the fields present in the patch, leaving the others and the _id alone.

    Raises InvalidIdentifierException for a malformed ID. A well-formed ID
    that matches nothing is not an error: result.matched_count is 0.
    """
    object_id = parse_object_id(student_id)
    changes = student.model_dump(exclude_unset=True, exclude_none=True)
    if not changes:
        raise BadRequestException("No fields to update", details={"fields": ["name", "age", "subject"]})

    with storage_errors("update_one"):
        result = collection.update_one({"_id": object_id}, {"$set": changes})
    logger.info(f"Updated student {student_id}: matched={result.matched_count} fields={sorted(changes)}")
    return result


def delete_student(collection: Collection, student_id: str) -> DeleteResult:
    """Remove a student; result.deleted_count is 0 when nothing matched"""
    object_id = parse_object_id(student_id)

    with storage_errors("delete_one"):
        result = collection.delete_one({"_id": object_id})
    logger.info(f"Deleted student {student_id}: deleted={result.deleted_count}")
    return result
