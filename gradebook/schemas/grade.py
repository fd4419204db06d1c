from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from gradebook.schemas.student import Student


class Grade(BaseModel):
    id: int
    student_id: int
    grade: float

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


class StudentGrades(BaseModel):
    """Grades of one student grouped by subject. Averages are None for empty subjects."""
    math_grade_results: List[Grade] = Field(default_factory=list)
    science_grade_results: List[Grade] = Field(default_factory=list)
    history_grade_results: List[Grade] = Field(default_factory=list)
    math_grade_average: Optional[float] = None
    science_grade_average: Optional[float] = None
    history_grade_average: Optional[float] = None

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class StudentProfile(Student):
    student_grades: StudentGrades
