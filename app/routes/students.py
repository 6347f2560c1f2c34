"""
Roster API - Student Route Handlers
====================================

What:  CRUD endpoints for student records keyed on (class, section, rollid).
How:   Each handler collects its raw inputs, calls StudentService, and hands
       the outcome to the response mapper. Handlers hold no logic of their own.

Request flow:
    RECEIVED → VALIDATED → EXECUTED → RESPONDED
    RECEIVED | VALIDATED → FAILED → RESPONDED   (400 / 404 / 500)

Bodies are read as plain JSON objects (not Pydantic models) so the service
can report every field violation at once with a 400.
"""

from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Body, Depends
from fastapi.responses import JSONResponse

from app.responses import message_response, rows_response
from app.schemas.student import (
    ErrorResponse,
    MessageResponse,
    StudentRecord,
    ValidationErrorResponse,
)
from app.services.query_executor import QueryExecutor, get_query_executor
from app.services.student_service import identity_params, student_service

router = APIRouter(prefix="/api", tags=["Students"])

IDENTITY_PATH = "/students/{class_name}/{section}/{rollid}"

_CREATE_EXAMPLE = {"NAME": "Asha", "TITLE": "Mr", "CLASS": "10A", "SECTION": "B", "ROLLID": "12"}


@router.get(
    "/students",
    response_model=List[StudentRecord],
    responses={500: {"description": "Server error", "model": ErrorResponse}},
    summary="Retrieve all students",
)
async def list_students(
    executor: QueryExecutor = Depends(get_query_executor),
) -> JSONResponse:
    return rows_response(await student_service.list_students(executor))


@router.post(
    "/students",
    status_code=201,
    response_model=MessageResponse,
    responses={
        201: {"description": "Student added successfully"},
        400: {"description": "Invalid input", "model": ValidationErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Add a new student",
    description="Create a new student record. NAME, TITLE, CLASS, SECTION and ROLLID are all required.",
)
async def create_student(
    payload: Optional[Dict[str, Any]] = Body(default=None, examples=[_CREATE_EXAMPLE]),
    executor: QueryExecutor = Depends(get_query_executor),
) -> JSONResponse:
    outcome = await student_service.create_student(executor, payload)
    return message_response(outcome, "Student added successfully", status_code=201)


@router.put(
    IDENTITY_PATH,
    response_model=MessageResponse,
    responses={
        400: {"description": "Invalid input", "model": ValidationErrorResponse},
        404: {"description": "Student not found", "model": ErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Update a student",
    description="Replace a student's NAME and TITLE, both required, by Class, Section and Roll ID.",
)
async def replace_student(
    class_name: str,
    section: str,
    rollid: str,
    payload: Optional[Dict[str, Any]] = Body(default=None, examples=[{"NAME": "Asha", "TITLE": "Ms"}]),
    executor: QueryExecutor = Depends(get_query_executor),
) -> JSONResponse:
    outcome = await student_service.replace_student(
        executor, identity_params(class_name, section, rollid), payload
    )
    return message_response(outcome, "Student updated successfully")


@router.patch(
    IDENTITY_PATH,
    response_model=MessageResponse,
    responses={
        400: {"description": "Invalid input, or neither NAME nor TITLE supplied", "model": ValidationErrorResponse},
        404: {"description": "Student not found", "model": ErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Partially update a student",
    description="Update only the supplied fields among NAME and TITLE. At least one is required.",
)
async def patch_student(
    class_name: str,
    section: str,
    rollid: str,
    payload: Optional[Dict[str, Any]] = Body(default=None, examples=[{"NAME": "Asha R"}]),
    executor: QueryExecutor = Depends(get_query_executor),
) -> JSONResponse:
    outcome = await student_service.patch_student(
        executor, identity_params(class_name, section, rollid), payload
    )
    return message_response(outcome, "Student updated successfully")


@router.delete(
    IDENTITY_PATH,
    response_model=MessageResponse,
    responses={
        400: {"description": "Invalid path parameters", "model": ValidationErrorResponse},
        404: {"description": "Student not found", "model": ErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Delete a student",
)
async def delete_student(
    class_name: str,
    section: str,
    rollid: str,
    executor: QueryExecutor = Depends(get_query_executor),
) -> JSONResponse:
    outcome = await student_service.delete_student(
        executor, identity_params(class_name, section, rollid)
    )
    return message_response(outcome, "Student deleted successfully")
