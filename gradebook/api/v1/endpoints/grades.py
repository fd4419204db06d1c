from fastapi import APIRouter, Depends, Form
from sqlalchemy.orm import Session
from gradebook.api.deps import get_db
from gradebook.services.gradebook import gradebook as gradebook_service
from gradebook.schemas.grade import StudentProfile

router = APIRouter()


@router.post("/grades", response_model=StudentProfile)
def create_grade(
    grade: float = Form(..., ge=0.0, le=100.0),
    grade_type: str = Form(..., alias="gradeType"),
    student_id: int = Form(..., alias="studentId"),
    db: Session = Depends(get_db)
):
    """
    Record a grade for a student

    - **grade**: value between 0 and 100
    - **gradeType**: math, science or history
    - **studentId**: owner of the grade
    """
    return gradebook_service.create_grade(db, student_id, grade_type, grade)


@router.delete("/grades/{grade_id}/{grade_type}", response_model=StudentProfile)
def delete_grade(
    grade_id: int,
    grade_type: str,
    db: Session = Depends(get_db)
):
    """
    Delete one grade and return the owner's refreshed profile
    """
    return gradebook_service.delete_grade(db, grade_id, grade_type)
