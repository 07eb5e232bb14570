"""Domain Types — resource descriptors and insert outcomes.

Tests:
    - Fixed messages derive from the resource name
    - Fallback phrases exist for every operation
    - InsertOutcome renders the id as a string
"""

from bson import ObjectId

from catalog_api.core.domain_types import (
    COURSE, SEMESTER, InsertOutcome, Operation,
)


def test_course_messages():
    assert COURSE.not_found_message == "Course not found"
    assert COURSE.create_failed_message == "Failed to create course"
    assert COURSE.deleted_message == "Course deleted successfully"


def test_semester_messages():
    assert SEMESTER.not_found_message == "Semester not found"
    assert SEMESTER.deleted_message == "Semester deleted successfully"


def test_fallback_message_for_every_operation():
    assert COURSE.fallback_message(Operation.LIST) == "Error retrieving courses"
    assert COURSE.fallback_message(Operation.GET) == "Error retrieving course"
    assert COURSE.fallback_message(Operation.CREATE) == "Error creating course"
    assert SEMESTER.fallback_message(Operation.REPLACE) == "Error updating semester"
    assert SEMESTER.fallback_message(Operation.DELETE) == "Error deleting semester"


def test_insert_outcome_response():
    oid = ObjectId()
    assert InsertOutcome(True, oid).to_response() == {
        "acknowledged": True, "insertedId": str(oid),
    }
    assert InsertOutcome(False).to_response() == {
        "acknowledged": False, "insertedId": None,
    }
