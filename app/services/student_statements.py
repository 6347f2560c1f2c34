"""
Roster API - Student Statement Builders
========================================

What:  Fixed SQLAlchemy statements for every student operation.
Why:   Values only ever travel as bound parameters; no SQL text is assembled
       from request data.
How:   StudentIdentity carries the composite key, FieldUpdateSet records which
       of NAME/TITLE a partial update carries, and each builder returns one
       Core statement against the `student` table.
"""

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

from sqlalchemy import Delete, Insert, Select, Update, and_, delete, insert, select, update
from sqlalchemy.sql.elements import ColumnElement

from app.models.student import Student

student_table = Student.__table__


@dataclass(frozen=True)
class StudentIdentity:
    """The (CLASS, SECTION, ROLLID) triple that targets one student."""

    student_class: str
    section: str
    rollid: int

    @classmethod
    def from_values(cls, student_class: str, section: str, rollid: Any) -> "StudentIdentity":
        # rollid has already passed is_decimal, so int() cannot fail here
        return cls(student_class=student_class, section=section, rollid=int(rollid))

    def where_clause(self) -> ColumnElement[bool]:
        return and_(
            student_table.c.CLASS == self.student_class,
            student_table.c.SECTION == self.section,
            student_table.c.ROLLID == self.rollid,
        )


@dataclass(frozen=True)
class FieldUpdateSet:
    """
    Which updatable fields a PATCH carries.

    None means "not supplied"; only supplied fields reach the SET clause.
    """

    name: Optional[str] = None
    title: Optional[str] = None

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "FieldUpdateSet":
        return cls(name=payload.get("NAME"), title=payload.get("TITLE"))

    def is_empty(self) -> bool:
        return self.name is None and self.title is None

    def values(self) -> Dict[str, str]:
        values = {}
        if self.name is not None:
            values["NAME"] = self.name
        if self.title is not None:
            values["TITLE"] = self.title
        return values


def select_students() -> Select:
    return select(student_table)


def insert_student(identity: StudentIdentity, name: str, title: str) -> Insert:
    return insert(student_table).values(
        NAME=name,
        TITLE=title,
        CLASS=identity.student_class,
        SECTION=identity.section,
        ROLLID=identity.rollid,
    )


def replace_student(identity: StudentIdentity, name: str, title: str) -> Update:
    return (
        update(student_table)
        .where(identity.where_clause())
        .values(NAME=name, TITLE=title)
    )


def update_student_fields(identity: StudentIdentity, fields: FieldUpdateSet) -> Update:
    """
    UPDATE with a SET clause of exactly the supplied fields.

    Raises:
        ValueError: fields is empty (an UPDATE with no SET clause is invalid SQL).
    """
    if fields.is_empty():
        raise ValueError("FieldUpdateSet is empty; nothing to update")
    return (
        update(student_table)
        .where(identity.where_clause())
        .values(**fields.values())
    )


def delete_student(identity: StudentIdentity) -> Delete:
    return delete(student_table).where(identity.where_clause())
