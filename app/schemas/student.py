"""
Roster API - Pydantic Response Schemas
=======================================

What:  Response models for the student, catalog and health endpoints.
Why:   FastAPI serializes responses through these and documents them in the
       OpenAPI schema served at /docs.
How:   Python attribute names are snake_case; the wire names are the
       upper-case column names (NAME, TITLE, ...) via field aliases.

Request bodies are deliberately NOT Pydantic models: the student routes
validate raw JSON with app.validators so that every violation is reported
in a single 400 response.
"""

from typing import List, Optional

from pydantic import BaseModel, Field


# ══════════════════════════════════════════════════════════════════════════
# Records
# ══════════════════════════════════════════════════════════════════════════


class StudentRecord(BaseModel):
    """One row of the `student` table as returned by GET /api/students."""

    name: str = Field(alias="NAME", description="Name of the student")
    title: str = Field(alias="TITLE", description="Title of the student")
    student_class: str = Field(alias="CLASS", description="Class of the student")
    section: str = Field(alias="SECTION", description="Section of the student")
    rollid: int = Field(alias="ROLLID", description="Roll ID of the student")

    model_config = {"populate_by_name": True}


class FoodItemRecord(BaseModel):
    """One row of the `foods` table."""

    item_id: str = Field(alias="ITEM_ID", description="The unique ID of the food item", examples=["F12345"])
    item_name: str = Field(alias="ITEM_NAME", description="The name of the food item", examples=["Pizza"])
    item_unit: str = Field(alias="ITEM_UNIT", description="Unit of measurement", examples=["pcs"])
    company_id: str = Field(alias="COMPANY_ID", description="Supplying company ID", examples=["C12345"])

    model_config = {"populate_by_name": True}


# ══════════════════════════════════════════════════════════════════════════
# Messages & Errors
# ══════════════════════════════════════════════════════════════════════════


class MessageResponse(BaseModel):
    message: str = Field(description="Human-readable confirmation")


class FieldErrorItem(BaseModel):
    field: str = Field(description="Name of the offending field or path parameter")
    message: str = Field(description="Why the value was rejected")
    location: str = Field(description="Where the field came from: body or params")


class ValidationErrorResponse(BaseModel):
    """
    What:  400 body listing every violated field rule.

    Example:
        {
            "errors": [
                {"field": "NAME", "message": "Name is required", "location": "body"},
                {"field": "ROLLID", "message": "RollID must be a decimal with up to 3 digits", "location": "body"}
            ],
            "request_id": "a1b2c3d4"
        }
    """
    errors: List[FieldErrorItem]
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class ErrorResponse(BaseModel):
    """404 and 500 body."""

    error: str = Field(description="Error description")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
