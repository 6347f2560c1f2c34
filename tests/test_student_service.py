"""
Roster API - Student Service Unit Tests
========================================

What:  Outcome classification in StudentService.
How:   The executor is an AsyncMock, so each test controls exactly what the
       store "reports" and can assert whether a statement was issued at all.

What we test:
    ✅ Invalid input returns ValidationError without touching the executor
    ✅ Zero affected rows on update/delete returns NotFoundError
    ✅ DataAccessError from the executor is passed through unchanged
    ✅ An empty PATCH body is rejected before a statement is built
"""

from unittest.mock import AsyncMock, MagicMock

import pytest

from app.errors import DataAccessError, FieldError, NotFoundError, ValidationError
from app.services.query_executor import QueryResult
from app.services.student_service import EMPTY_PATCH_MESSAGE, StudentService, identity_params

PATH = identity_params("10A", "B", "12")


def make_executor(outcome):
    executor = MagicMock()
    executor.execute = AsyncMock(return_value=outcome)
    return executor


class TestCreateStudent:

    def setup_method(self):
        self.service = StudentService()

    @pytest.mark.asyncio
    async def test_create_success(self, student_payload):
        executor = make_executor(QueryResult(affected_rows=1))
        outcome = await self.service.create_student(executor, student_payload)
        assert outcome == QueryResult(affected_rows=1)
        executor.execute.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_create_invalid_never_reaches_store(self):
        executor = make_executor(QueryResult(affected_rows=1))
        outcome = await self.service.create_student(executor, {"NAME": "Asha"})
        assert isinstance(outcome, ValidationError)
        assert [e.field for e in outcome.errors] == ["TITLE", "CLASS", "SECTION", "ROLLID"]
        executor.execute.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_create_without_body(self):
        executor = make_executor(QueryResult(affected_rows=1))
        outcome = await self.service.create_student(executor, None)
        assert len(outcome.errors) == 5

    @pytest.mark.asyncio
    async def test_create_store_failure_passed_through(self, student_payload):
        failure = DataAccessError(message="Duplicate entry '10A-B-12' for key 'PRIMARY'")
        outcome = await self.service.create_student(make_executor(failure), student_payload)
        assert outcome is failure


class TestWriteStudent:

    def setup_method(self):
        self.service = StudentService()

    @pytest.mark.asyncio
    async def test_replace_found(self):
        executor = make_executor(QueryResult(affected_rows=1))
        outcome = await self.service.replace_student(executor, PATH, {"NAME": "Asha", "TITLE": "Ms"})
        assert outcome == QueryResult(affected_rows=1)

    @pytest.mark.asyncio
    async def test_replace_not_found(self):
        executor = make_executor(QueryResult(affected_rows=0))
        outcome = await self.service.replace_student(executor, PATH, {"NAME": "Asha", "TITLE": "Ms"})
        assert outcome == NotFoundError(resource="Student")
        assert outcome.message == "Student not found"

    @pytest.mark.asyncio
    async def test_replace_collects_path_and_body_errors(self):
        executor = make_executor(QueryResult(affected_rows=1))
        path = identity_params("10A", "BB", "12")
        outcome = await self.service.replace_student(executor, path, {"NAME": "Asha"})
        assert [(e.field, e.location) for e in outcome.errors] == [
            ("section", "params"),
            ("TITLE", "body"),
        ]
        executor.execute.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_patch_empty_body_rejected(self):
        executor = make_executor(QueryResult(affected_rows=1))
        outcome = await self.service.patch_student(executor, PATH, {})
        assert outcome == ValidationError([FieldError("body", EMPTY_PATCH_MESSAGE)])
        executor.execute.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_patch_single_field(self):
        executor = make_executor(QueryResult(affected_rows=1))
        outcome = await self.service.patch_student(executor, PATH, {"TITLE": "Ms"})
        assert outcome == QueryResult(affected_rows=1)
        statement = executor.execute.await_args.args[0]
        assert "NAME" not in str(statement)

    @pytest.mark.asyncio
    async def test_delete_not_found(self):
        outcome = await self.service.delete_student(make_executor(QueryResult(affected_rows=0)), PATH)
        assert isinstance(outcome, NotFoundError)

    @pytest.mark.asyncio
    async def test_delete_invalid_rollid(self):
        executor = make_executor(QueryResult(affected_rows=1))
        outcome = await self.service.delete_student(executor, identity_params("10A", "B", "1234"))
        assert [e.field for e in outcome.errors] == ["rollid"]
        executor.execute.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_delete_store_failure(self):
        failure = DataAccessError(message="Lost connection to MySQL server during query")
        outcome = await self.service.delete_student(make_executor(failure), PATH)
        assert outcome is failure
