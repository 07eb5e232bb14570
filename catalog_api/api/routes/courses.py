"""Course Routes — CRUD over the courses collection.

Invariants:
    - POST and PUT validate the body (CourseIn) before the service is called
    - GET and DELETE never read a body
    - The collection path answers with or without a trailing slash, no redirect
    - PUT is a full replace; success is 204 with an empty body

Design Decisions:
    - Routes only bind HTTP to ResourceService; status mapping lives in the service
      and in api/error_handlers.py
"""

from fastapi import APIRouter, Depends, Response, status

from catalog_api.api.dependencies import get_course_service, validated_body
from catalog_api.schemas.course import CourseIn
from catalog_api.services.resource_service import ResourceService

router = APIRouter(prefix="/courses", tags=["courses"])


@router.get("")
@router.get("/", include_in_schema=False)
async def list_courses(service: ResourceService = Depends(get_course_service)):
    """All courses, database order."""
    return await service.list_all()


@router.get("/{course_id}")
async def get_course(
    course_id: str,
    service: ResourceService = Depends(get_course_service),
):
    return await service.get(course_id)


@router.post("", status_code=status.HTTP_201_CREATED)
@router.post("/", status_code=status.HTTP_201_CREATED, include_in_schema=False)
async def create_course(
    course: CourseIn = Depends(validated_body(CourseIn)),
    service: ResourceService = Depends(get_course_service),
):
    """Create a course. Body: courseName, courseCode, credits, department required."""
    return await service.create(course)


@router.put("/{course_id}", status_code=status.HTTP_204_NO_CONTENT)
async def update_course(
    course_id: str,
    course: CourseIn = Depends(validated_body(CourseIn)),
    service: ResourceService = Depends(get_course_service),
):
    await service.replace(course_id, course)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{course_id}")
async def delete_course(
    course_id: str,
    service: ResourceService = Depends(get_course_service),
):
    return await service.delete(course_id)
