"""
Gradebook operations used by the HTTP layer.

Every lookup that fails (unknown student id, unknown grade id, unknown
subject tag) raises ``StudentOrGradeNotFoundException``; the reason code
only shows up in logs.
"""
import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from gradebook.core.exceptions import NotFoundReason, StudentOrGradeNotFoundException
from gradebook.models.grade import Subject
from gradebook.models.student import Student
from gradebook.schemas.grade import Grade, StudentGrades, StudentProfile
from gradebook.schemas.student import StudentCreate
from gradebook.services.grade.grade import get_grade_store, grade_stores
from gradebook.services.student import student as crud_student

logger = logging.getLogger(__name__)


def grade_point_average(values: List[float]) -> Optional[float]:
    if not values:
        return None
    return round(sum(values) / len(values), 2)


def _require_student(db: Session, student_id: int) -> Student:
    db_student = crud_student.get_student(db, student_id)
    if db_student is None:
        raise StudentOrGradeNotFoundException(
            NotFoundReason.STUDENT, details={"student_id": student_id}
        )
    return db_student


def _require_grade_store(grade_type: str):
    store = get_grade_store(grade_type)
    if store is None:
        raise StudentOrGradeNotFoundException(
            NotFoundReason.SUBJECT, details={"grade_type": grade_type}
        )
    return store


def _build_profile(db: Session, db_student: Student) -> StudentProfile:
    results = {}
    averages = {}
    for subject, store in grade_stores.items():
        grades = store.get_grades_by_student(db, db_student.id)
        results[subject] = [Grade.model_validate(g) for g in grades]
        averages[subject] = grade_point_average([g.grade for g in grades])

    return StudentProfile(
        id=db_student.id,
        firstname=db_student.firstname,
        lastname=db_student.lastname,
        email_address=db_student.email_address,
        student_grades=StudentGrades(
            math_grade_results=results[Subject.MATH],
            science_grade_results=results[Subject.SCIENCE],
            history_grade_results=results[Subject.HISTORY],
            math_grade_average=averages[Subject.MATH],
            science_grade_average=averages[Subject.SCIENCE],
            history_grade_average=averages[Subject.HISTORY],
        ),
    )


def list_students(db: Session) -> List[Student]:
    return crud_student.get_students(db)


def create_student(db: Session, student: StudentCreate) -> List[Student]:
    """Store a new student and return the full, updated student list."""
    db_student = crud_student.create_student(db, student)
    logger.info(f"Created student {db_student.id} <{db_student.email_address}>")
    return crud_student.get_students(db)


def delete_student(db: Session, student_id: int) -> List[Student]:
    """Remove a student and all their grades; return the remaining students."""
    if not crud_student.delete_student(db, student_id):
        raise StudentOrGradeNotFoundException(
            NotFoundReason.STUDENT, details={"student_id": student_id}
        )
    return crud_student.get_students(db)


def get_student_profile(db: Session, student_id: int) -> StudentProfile:
    return _build_profile(db, _require_student(db, student_id))


def create_grade(db: Session, student_id: int, grade_type: str, value: float) -> StudentProfile:
    """
    Add a grade for a student in one subject.

    The student is checked before the subject tag; both failures surface
    as the same not-found error.
    """
    db_student = _require_student(db, student_id)
    store = _require_grade_store(grade_type)

    db_grade = store.create_grade(db, student_id, value)
    logger.info(f"Created {store.subject.value} grade {db_grade.id} for student {student_id}")
    return _build_profile(db, db_student)


def delete_grade(db: Session, grade_id: int, grade_type: str) -> StudentProfile:
    """Remove one grade and return its owner's refreshed profile."""
    store = _require_grade_store(grade_type)
    db_grade = store.get_grade(db, grade_id)
    if db_grade is None:
        raise StudentOrGradeNotFoundException(
            NotFoundReason.GRADE, details={"grade_id": grade_id, "grade_type": grade_type}
        )

    student_id = db_grade.student_id
    store.delete_grade(db, grade_id)
    logger.info(f"Deleted {store.subject.value} grade {grade_id} of student {student_id}")
    return get_student_profile(db, student_id)
