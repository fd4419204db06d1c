from sqlalchemy import Column, Integer, String
from gradebook.core.database import Base


class Student(Base):
    __tablename__ = "students"

    id = Column(Integer, primary_key=True, index=True)
    firstname = Column(String, nullable=False)
    lastname = Column(String, nullable=False)
    email_address = Column(String, unique=True, index=True, nullable=False)
