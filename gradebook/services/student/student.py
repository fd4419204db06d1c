import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from gradebook.core.exceptions import BadRequestException
from gradebook.models.student import Student
from gradebook.schemas.student import StudentCreate
from gradebook.services.grade.grade import grade_stores
from typing import List, Optional

logger = logging.getLogger(__name__)


def get_student(db: Session, student_id: int) -> Optional[Student]:
    """Fetch one student by id"""
    return db.query(Student).filter(Student.id == student_id).first()


def get_student_by_email(db: Session, email: str) -> Optional[Student]:
    """Fetch one student by email address"""
    return db.query(Student).filter(Student.email_address == email).first()


def get_students(db: Session) -> List[Student]:
    """All students, oldest first"""
    return db.query(Student).order_by(Student.id).all()


def create_student(db: Session, student: StudentCreate) -> Student:
    db_student = Student(
        firstname=student.firstname,
        lastname=student.lastname,
        email_address=student.email_address,
    )
    db.add(db_student)
    try:
        db.commit()
    except IntegrityError:
        # Another request registered the same email since the caller checked
        db.rollback()
        logger.warning(f"Duplicate email rejected on insert: {student.email_address}")
        raise BadRequestException(
            "Email address is already in use",
            details={"emailAddress": student.email_address}
        )
    db.refresh(db_student)
    return db_student


def delete_student(db: Session, student_id: int) -> bool:
    """
    Delete a student together with every grade they own.

    Grades of all subjects and the student row go out in one commit.
    Returns False when no student has this id.
    """
    db_student = get_student(db, student_id)
    if db_student is None:
        return False

    removed = 0
    for store in grade_stores.values():
        removed += store.delete_grades_by_student(db, student_id)
    db.delete(db_student)
    db.commit()
    logger.info(f"Deleted student {student_id} and {removed} grade(s)")
    return True
