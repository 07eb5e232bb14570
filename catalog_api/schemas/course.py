"""Course Schemas — request body contract for /courses writes.

Invariants:
    - courseName 1-200, courseCode 3-20, credits integer 1-6, department 1-100
    - credits rejects booleans; description rejects explicit null
    - description optional (10-1000), stored as null when absent
    - prerequisites optional, defaults to [], each entry 3-20 chars
    - courseCode format and uniqueness are not checked
"""

from typing import Annotated

from pydantic import Field, StringConstraints

from catalog_api.schemas.fields import CamelModel, OmittableString, StrictNumber

CourseCode = Annotated[str, StringConstraints(min_length=3, max_length=20)]
Credits = Annotated[int, Field(ge=1, le=6), StrictNumber]
Description = Annotated[str, StringConstraints(min_length=10, max_length=1000)]


class CourseIn(CamelModel):
    """Full course payload — used for both create and full replace."""
    course_name: str = Field(min_length=1, max_length=200)
    course_code: CourseCode
    credits: Credits
    department: str = Field(min_length=1, max_length=100)
    description: Annotated[Description | None, OmittableString] = None
    prerequisites: list[CourseCode] = Field(default_factory=list)
