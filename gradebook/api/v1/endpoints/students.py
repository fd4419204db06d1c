from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List
from gradebook.api.deps import get_db
from gradebook.core.exceptions import BadRequestException
from gradebook.services.gradebook import gradebook as gradebook_service
from gradebook.services.student import student as crud_student
from gradebook.schemas.grade import StudentProfile
from gradebook.schemas.student import Student, StudentCreate

router = APIRouter()


@router.get("/", response_model=List[Student])
def get_students(db: Session = Depends(get_db)):
    """
    List every student, oldest first
    """
    return gradebook_service.list_students(db)


@router.post("/", response_model=List[Student])
def create_student(
    student: StudentCreate,
    db: Session = Depends(get_db)
):
    """
    Create a student and return the updated list

    - **firstname**, **lastname**: required
    - **emailAddress**: required, must be unique
    """
    if crud_student.get_student_by_email(db, email=student.email_address):
        raise BadRequestException(
            "Email address is already in use",
            details={"emailAddress": student.email_address}
        )

    return gradebook_service.create_student(db, student)


@router.delete("/student/{student_id}", response_model=List[Student])
def delete_student(
    student_id: int,
    db: Session = Depends(get_db)
):
    """
    Delete a student and all of their grades, return the remaining students
    """
    return gradebook_service.delete_student(db, student_id)


@router.get("/studentInformation/{student_id}", response_model=StudentProfile)
def get_student_information(
    student_id: int,
    db: Session = Depends(get_db)
):
    """
    Student record plus grades and averages per subject
    """
    return gradebook_service.get_student_profile(db, student_id)
