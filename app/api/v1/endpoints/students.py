from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse
from pymongo.collection import Collection
from typing import List
from app.api.deps import get_collection
from app.core.exceptions import NotFoundException
from app.services.student import student as crud_student
from app.schemas.student import Student, StudentCreate, StudentUpdate

router = APIRouter()


@router.get("", response_model=List[Student], response_model_exclude_none=True)
@router.get("/", response_model=List[Student], response_model_exclude_none=True, include_in_schema=False)
def get_students(collection: Collection = Depends(get_collection)):
    """
    List every student
    """
    return crud_student.get_students(collection)


@router.post("", response_class=PlainTextResponse)
@router.post("/", response_class=PlainTextResponse, include_in_schema=False)
def create_student(
    student: StudentCreate,
    collection: Collection = Depends(get_collection)
):
    """
    Create a new student

    Required:
    - **name**: student name
    - **age**: age, 0 to 255
    - **subject**: subject studied

    The `_id` is assigned by the database.
    """
    crud_student.create_student(collection, student)
    return "Student added successfully"


@router.get("/{student_id}", response_model=Student, response_model_exclude_none=True)
def get_student(
    student_id: str,
    collection: Collection = Depends(get_collection)
):
    """
    Get one student by ID; 404 when the ID is malformed or unknown
    """
    student = crud_student.get_student(collection, student_id)
    if student is None:
        raise NotFoundException("Student not found")
    return student


@router.put("/{student_id}", response_class=PlainTextResponse)
def update_student(
    student_id: str,
    student: StudentUpdate,
    collection: Collection = Depends(get_collection)
):
    """
    Update the fields sent in the body, the others keep their value
    """
    result = crud_student.update_student(collection, student_id, student)
    if result.matched_count == 0:
        raise NotFoundException("Student not found")
    return "Student updated successfully"


@router.delete("/{student_id}", response_class=PlainTextResponse)
def delete_student(
    student_id: str,
    collection: Collection = Depends(get_collection)
):
    """
    Delete a student
    """
    result = crud_student.delete_student(collection, student_id)
    if result.deleted_count == 0:
        raise NotFoundException("Student not found")
    return "Student deleted successfully"
