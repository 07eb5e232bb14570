"""Semester Routes — CRUD over the semester collection.

Invariants:
    - POST and PUT validate the body (SemesterIn) before the service is called
    - GET and DELETE never read a body
    - The collection path answers with or without a trailing slash, no redirect
    - PUT success is 204 with an empty body (older API docs said 200; 204 is what
      clients have always received)
"""

from fastapi import APIRouter, Depends, Response, status

from catalog_api.api.dependencies import get_semester_service, validated_body
from catalog_api.schemas.semester import SemesterIn
from catalog_api.services.resource_service import ResourceService

router = APIRouter(prefix="/semesters", tags=["semesters"])


@router.get("")
@router.get("/", include_in_schema=False)
async def list_semesters(
    service: ResourceService = Depends(get_semester_service),
):
    return await service.list_all()


@router.get("/{semester_id}")
async def get_semester(
    semester_id: str,
    service: ResourceService = Depends(get_semester_service),
):
    return await service.get(semester_id)


@router.post("", status_code=status.HTTP_201_CREATED)
@router.post("/", status_code=status.HTTP_201_CREATED, include_in_schema=False)
async def create_semester(
    semester: SemesterIn = Depends(validated_body(SemesterIn)),
    service: ResourceService = Depends(get_semester_service),
):
    return await service.create(semester)


@router.put("/{semester_id}", status_code=status.HTTP_204_NO_CONTENT)
async def update_semester(
    semester_id: str,
    semester: SemesterIn = Depends(validated_body(SemesterIn)),
    service: ResourceService = Depends(get_semester_service),
):
    await service.replace(semester_id, semester)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{semester_id}")
async def delete_semester(
    semester_id: str,
    service: ResourceService = Depends(get_semester_service),
):
    return await service.delete(semester_id)
