"""Person Schemas — student and teacher payloads.

No routes are mounted for these yet; they share the validator contract with
courses and semesters so future endpoints get identical 400 messages.
"""

from pydantic import EmailStr, Field

from catalog_api.schemas.fields import CamelModel, IsoDateString


class StudentIn(CamelModel):
    first_name: str = Field(min_length=1, max_length=100)
    last_name: str = Field(min_length=1, max_length=100)
    email: EmailStr
    major: str = Field(min_length=1, max_length=100)


class TeacherIn(CamelModel):
    first_name: str = Field(min_length=1, max_length=100)
    last_name: str = Field(min_length=1, max_length=100)
    email: EmailStr
    department: str = Field(min_length=1, max_length=100)
    hire_date: IsoDateString
