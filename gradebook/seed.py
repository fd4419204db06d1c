import logging

from sqlalchemy.orm import Session
from gradebook.core.database import SessionLocal, create_database_tables
from gradebook.models.grade import GRADE_MODELS
from gradebook.models.student import Student

logger = logging.getLogger(__name__)


def seed_data(db: Session):
    """
    Insert the demo student with one grade of 100 in every subject.
    """
    # Avoid duplicating data on an already populated database
    if db.query(Student).first():
        logger.info("Database already contains students. Skipping seed.")
        return

    logger.info("Seeding data...")

    try:
        student = Student(
            firstname="Eric",
            lastname="Roby",
            email_address="eric.roby@gradebook-school.com",
        )
        db.add(student)
        db.flush()

        db.add_all(
            model(student_id=student.id, grade=100.00) for model in GRADE_MODELS.values()
        )
        db.commit()
    except Exception:
        logger.error("❌ Error seeding data", exc_info=True)
        db.rollback()
        raise

    logger.info("✅ Data seeded successfully!")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)

    create_database_tables()
    session = SessionLocal()
    try:
        seed_data(session)
    finally:
        session.close()
