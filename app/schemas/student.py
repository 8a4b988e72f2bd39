from typing import Annotated, Optional

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field

# ObjectId coming out of MongoDB, sent over the wire as its hex string
PyObjectId = Annotated[str, BeforeValidator(str)]

Age = Annotated[int, Field(ge=0, le=255)]


class StudentBase(BaseModel):
    name: str
    age: Age
    subject: str


class StudentCreate(StudentBase):
    pass


class StudentUpdate(BaseModel):
    """Partial update: only the fields sent are written."""
    name: Optional[str] = None
    age: Optional[Age] = None
    subject: Optional[str] = None


class Student(StudentBase):
    id: Optional[PyObjectId] = Field(default=None, alias="_id")

    model_config = ConfigDict(populate_by_name=True)
