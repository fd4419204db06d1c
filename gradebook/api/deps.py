from typing import Generator
from gradebook.core.database import SessionLocal


def get_db() -> Generator:
    """
    Request-scoped database session.
    The session is closed once the request has been handled.
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
