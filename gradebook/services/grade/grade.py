from typing import Dict, List, Optional, Type

from sqlalchemy.orm import Session
from gradebook.models.grade import GRADE_MODELS, GradeMixin, Subject


class GradeStore:
    """
    Grade table access for a single subject.

    One instance per subject lives in ``grade_stores``; callers are expected
    to have checked that the owning student exists before ``create_grade``.
    """

    def __init__(self, subject: Subject, model: Type[GradeMixin]):
        self.subject = subject
        self.model = model

    def get_grade(self, db: Session, grade_id: int) -> Optional[GradeMixin]:
        return db.query(self.model).filter(self.model.id == grade_id).first()

    def get_grades_by_student(self, db: Session, student_id: int) -> List[GradeMixin]:
        return (
            db.query(self.model)
            .filter(self.model.student_id == student_id)
            .order_by(self.model.id)
            .all()
        )

    def create_grade(self, db: Session, student_id: int, value: float) -> GradeMixin:
        db_grade = self.model(student_id=student_id, grade=value)
        db.add(db_grade)
        db.commit()
        db.refresh(db_grade)
        return db_grade

    def delete_grade(self, db: Session, grade_id: int) -> bool:
        db_grade = self.get_grade(db, grade_id)
        if db_grade is None:
            return False
        db.delete(db_grade)
        db.commit()
        return True

    def delete_grades_by_student(self, db: Session, student_id: int) -> int:
        # No commit: part of the student's cascading delete
        return (
            db.query(self.model)
            .filter(self.model.student_id == student_id)
            .delete(synchronize_session="fetch")
        )

    def __repr__(self) -> str:
        return f"GradeStore({self.subject.value!r})"


grade_stores: Dict[Subject, GradeStore] = {
    subject: GradeStore(subject, model) for subject, model in GRADE_MODELS.items()
}


def get_grade_store(grade_type: str) -> Optional[GradeStore]:
    """Resolve a raw subject tag ("math", "science", "history") to its store."""
    try:
        return grade_stores[Subject(grade_type)]
    except ValueError:
        return None
