"""Domain Types — resource descriptors and repository result types.

Invariants:
    - A Resource names everything user-facing about one collection:
      display name, plural, and every fixed response message
    - Resource instances are immutable and module-level (COURSE, SEMESTER)
    - InsertOutcome mirrors the driver's insert result without leaking driver types

Design Decisions:
    - Frozen dataclass over per-resource subclasses: both resources follow the
      identical status mapping, only names differ (ADR: one service, two descriptors)
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, NewType

ResourceId = NewType("ResourceId", str)
Document = dict[str, Any]


class Operation(str, Enum):
    """The five request handler operations."""
    LIST = "list"
    GET = "get"
    CREATE = "create"
    REPLACE = "replace"
    DELETE = "delete"


@dataclass(frozen=True)
class Resource:
    """Names and messages for one resource type."""
    name: str
    plural: str

    @property
    def not_found_message(self) -> str:
        return f"{self.name} not found"

    @property
    def create_failed_message(self) -> str:
        return f"Failed to create {self.name.lower()}"

    @property
    def deleted_message(self) -> str:
        return f"{self.name} deleted successfully"

    def fallback_message(self, operation: Operation) -> str:
        """Message used when a raised error carries no text of its own."""
        singular = self.name.lower()
        return {
            Operation.LIST: f"Error retrieving {self.plural}",
            Operation.GET: f"Error retrieving {singular}",
            Operation.CREATE: f"Error creating {singular}",
            Operation.REPLACE: f"Error updating {singular}",
            Operation.DELETE: f"Error deleting {singular}",
        }[operation]


COURSE = Resource(name="Course", plural="courses")
SEMESTER = Resource(name="Semester", plural="semesters")


@dataclass(frozen=True)
class InsertOutcome:
    """Result of a single-document insert."""
    acknowledged: bool
    inserted_id: Any = None

    def to_response(self) -> dict:
        return {
            "acknowledged": self.acknowledged,
            "insertedId": (
                str(self.inserted_id) if self.inserted_id is not None else None
            ),
        }
