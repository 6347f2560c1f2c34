"""
Roster API - Student SQLAlchemy Model
======================================

What:  ORM model for the `student` table.
Why:   Gives the statement builders typed column objects, so every value
       reaches the driver as a bound parameter.
Who:   Used by app.services.student_statements and by Alembic.

Identity:
    (CLASS, SECTION, ROLLID) is the composite identity used by update and
    delete. It is declared as the primary key so the ORM can map the table;
    the service itself never checks for collisions before inserting.
"""

from sqlalchemy import SmallInteger, String
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base


class Student(Base):
    __tablename__ = "student"

    # Column names are upper-case in the existing schema; the JSON API uses
    # the same names.
    name: Mapped[str] = mapped_column("NAME", String(30), nullable=False)
    title: Mapped[str] = mapped_column("TITLE", String(25), nullable=False)
    student_class: Mapped[str] = mapped_column("CLASS", String(5), primary_key=True)
    section: Mapped[str] = mapped_column("SECTION", String(1), primary_key=True)
    rollid: Mapped[int] = mapped_column("ROLLID", SmallInteger, primary_key=True, autoincrement=False)

    def __repr__(self) -> str:
        return (
            f"<Student(class='{self.student_class}', section='{self.section}', "
            f"rollid={self.rollid}, name='{self.name}')>"
        )
