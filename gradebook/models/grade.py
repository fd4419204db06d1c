import enum

from sqlalchemy import CheckConstraint, Column, Float, ForeignKey, Integer
from sqlalchemy.orm import declared_attr
from gradebook.core.database import Base


class Subject(str, enum.Enum):
    MATH = "math"
    SCIENCE = "science"
    HISTORY = "history"


class GradeMixin:
    """Columns shared by the per-subject grade tables."""

    id = Column(Integer, primary_key=True, index=True)
    grade = Column(Float, nullable=False)

    @declared_attr
    def student_id(cls):
        return Column(Integer, ForeignKey("students.id"), index=True, nullable=False)

    @declared_attr
    def __table_args__(cls):
        return (
            CheckConstraint("grade >= 0 AND grade <= 100", name=f"ck_{cls.__tablename__}_range"),
        )


class MathGrade(GradeMixin, Base):
    __tablename__ = "math_grade"
    subject = Subject.MATH


class ScienceGrade(GradeMixin, Base):
    __tablename__ = "science_grade"
    subject = Subject.SCIENCE


class HistoryGrade(GradeMixin, Base):
    __tablename__ = "history_grade"
    subject = Subject.HISTORY


GRADE_MODELS = {
    Subject.MATH: MathGrade,
    Subject.SCIENCE: ScienceGrade,
    Subject.HISTORY: HistoryGrade,
}
