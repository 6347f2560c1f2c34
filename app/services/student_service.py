"""
Roster API - Student Service
============================

What:  The validate → execute → classify pipeline for student records.
Why:   Keeps the HTTP layer thin; each operation can be tested with a real
       or fake executor and no HTTP machinery.
How:   Validators run first and short-circuit with a ValidationError value.
       Valid input becomes one fixed statement, run by the QueryExecutor.
       Writes that match zero rows become a NotFoundError value.
Who:   Called by app.routes.students.

Every method returns an outcome value, never raises for expected failures:
    QueryResult | ValidationError | NotFoundError | DataAccessError
"""

import logging
from typing import Any, Dict, Mapping, Optional, Union

from app.errors import DataAccessError, FieldError, NotFoundError, ValidationError
from app.services import student_statements as statements
from app.services.query_executor import QueryExecutor, QueryResult
from app.services.student_statements import FieldUpdateSet, StudentIdentity
from app.validators import (
    STUDENT_CREATE_RULES,
    STUDENT_IDENTITY_RULES,
    STUDENT_PATCH_RULES,
    STUDENT_REPLACE_RULES,
    validate,
)

logger = logging.getLogger(__name__)

StudentOutcome = Union[QueryResult, ValidationError, NotFoundError, DataAccessError]

EMPTY_PATCH_MESSAGE = "At least one of NAME or TITLE must be provided"


def identity_params(student_class: str, section: str, rollid: str) -> Dict[str, str]:
    """Path parameters keyed the way validation errors report them."""
    return {"class": student_class, "section": section, "rollid": rollid}


class StudentService:
    """
    Business logic for the student resource.

    Stateless: the executor is passed to every call.
    """

    async def list_students(self, executor: QueryExecutor) -> Union[QueryResult, DataAccessError]:
        return await executor.execute(statements.select_students())

    async def create_student(
        self,
        executor: QueryExecutor,
        payload: Optional[Mapping[str, Any]],
    ) -> StudentOutcome:
        """
        Insert a student from a body carrying all five fields.

        No pre-insert lookup: a duplicate identity is rejected by the store's
        key constraint and comes back as DataAccessError.
        """
        payload = payload or {}
        errors = validate(STUDENT_CREATE_RULES, payload)
        if errors:
            return ValidationError(errors)

        identity = StudentIdentity.from_values(payload["CLASS"], payload["SECTION"], payload["ROLLID"])
        outcome = await executor.execute(
            statements.insert_student(identity, payload["NAME"], payload["TITLE"])
        )
        if isinstance(outcome, QueryResult):
            logger.info("Student created: %s", identity)
        return outcome

    async def replace_student(
        self,
        executor: QueryExecutor,
        path: Mapping[str, str],
        payload: Optional[Mapping[str, Any]],
    ) -> StudentOutcome:
        """Full replace of NAME and TITLE at the given identity."""
        payload = payload or {}
        errors = validate(STUDENT_IDENTITY_RULES, path, "params") + validate(STUDENT_REPLACE_RULES, payload)
        if errors:
            return ValidationError(errors)

        identity = self._identity(path)
        return await self._write(
            executor,
            statements.replace_student(identity, payload["NAME"], payload["TITLE"]),
        )

    async def patch_student(
        self,
        executor: QueryExecutor,
        path: Mapping[str, str],
        payload: Optional[Mapping[str, Any]],
    ) -> StudentOutcome:
        """
        Update only the fields present in the body.

        A body with neither NAME nor TITLE is rejected with 400 before any
        statement is built; the store is never asked to run an UPDATE with
        an empty SET clause.
        """
        payload = payload or {}
        errors = validate(STUDENT_IDENTITY_RULES, path, "params") + validate(STUDENT_PATCH_RULES, payload)
        fields = FieldUpdateSet.from_payload(payload)
        if not errors and fields.is_empty():
            errors.append(FieldError("body", EMPTY_PATCH_MESSAGE))
        if errors:
            return ValidationError(errors)

        identity = self._identity(path)
        return await self._write(executor, statements.update_student_fields(identity, fields))

    async def delete_student(
        self,
        executor: QueryExecutor,
        path: Mapping[str, str],
    ) -> StudentOutcome:
        errors = validate(STUDENT_IDENTITY_RULES, path, "params")
        if errors:
            return ValidationError(errors)
        return await self._write(executor, statements.delete_student(self._identity(path)))

    @staticmethod
    def _identity(path: Mapping[str, str]) -> StudentIdentity:
        return StudentIdentity.from_values(path["class"], path["section"], path["rollid"])

    @staticmethod
    async def _write(executor: QueryExecutor, statement) -> StudentOutcome:
        # Zero matched rows means the identity does not exist
        outcome = await executor.execute(statement)
        if isinstance(outcome, QueryResult) and outcome.affected_rows == 0:
            return NotFoundError(resource="Student")
        return outcome


student_service = StudentService()
