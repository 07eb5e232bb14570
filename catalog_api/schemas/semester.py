"""Semester Schemas — request body contract for /semesters writes.

Invariants:
    - year, semesterSeason, semesterStart, semesterEnd all required
    - semesterStart/semesterEnd must parse as ISO-8601 dates
    - semesterSeason is free text (Fall, Winter, Spring, Summer by convention)
    - No ordering check between start and end
"""

from catalog_api.schemas.fields import CamelModel, IsoDateString


class SemesterIn(CamelModel):
    """Full semester payload — used for both create and full replace."""
    year: str
    semester_season: str
    semester_start: IsoDateString
    semester_end: IsoDateString
