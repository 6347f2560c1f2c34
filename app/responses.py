"""
Roster API - Response Mapper
=============================

What:  Turns service outcomes into HTTP responses.
Why:   One table of outcome → status code for every route; handlers never
       pick status codes themselves.

Mapping:
    QueryResult (read)    → 200  [row, row, ...]
    QueryResult (create)  → 201  {"message": ...}
    QueryResult (write)   → 200  {"message": ...}
    ValidationError       → 400  {"errors": [{field, message, location}, ...]}
    NotFoundError         → 404  {"error": "Student not found"}
    DataAccessError       → 500  {"error": <driver message>}

Error bodies also carry the request ID from RequestIDMiddleware.
"""

import logging
from typing import Union

from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from app.errors import DataAccessError, Failure, NotFoundError, ValidationError
from app.middleware.request_id import request_id_var
from app.services.query_executor import QueryResult

logger = logging.getLogger(__name__)


def error_response(failure: Failure) -> JSONResponse:
    """Map a failure outcome to its status code and JSON body."""
    rid = request_id_var.get("")
    if isinstance(failure, ValidationError):
        logger.warning(
            "[%s] Validation failed: %s",
            rid,
            ", ".join(f"{e.field}: {e.message}" for e in failure.errors),
        )
        content = {"errors": [e.to_dict() for e in failure.errors]}
    elif isinstance(failure, NotFoundError):
        content = {"error": failure.message}
    elif isinstance(failure, DataAccessError):
        content = {"error": failure.message}
    else:
        raise TypeError(f"Not a failure outcome: {failure!r}")
    content["request_id"] = rid
    return JSONResponse(status_code=failure.status_code, content=content)


def rows_response(outcome: Union[QueryResult, Failure]) -> JSONResponse:
    """200 with the row set, or the mapped failure."""
    if not isinstance(outcome, QueryResult):
        return error_response(outcome)
    return JSONResponse(status_code=200, content=jsonable_encoder(outcome.rows))


def message_response(
    outcome: Union[QueryResult, Failure],
    message: str,
    status_code: int = 200,
) -> JSONResponse:
    """status_code with {"message": message}, or the mapped failure."""
    if not isinstance(outcome, QueryResult):
        return error_response(outcome)
    return JSONResponse(status_code=status_code, content={"message": message})
