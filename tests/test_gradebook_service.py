# tests/test_gradebook_service.py

import pytest

from gradebook.core.exceptions import NotFoundReason, StudentOrGradeNotFoundException
from gradebook.models.grade import Subject
from gradebook.schemas.student import StudentCreate
from gradebook.services.grade.grade import grade_stores
from gradebook.services.gradebook import gradebook as gradebook_service
from gradebook.services.student import student as crud_student


@pytest.fixture
def new_student():
    return StudentCreate(
        firstname="Solomon", lastname="Chow", email_address="solomon1d24@gmail.com"
    )


def test_list_students_is_stable(db):
    first = [s.id for s in gradebook_service.list_students(db)]
    second = [s.id for s in gradebook_service.list_students(db)]

    assert first == second == [1]


def test_create_student_adds_one(db, new_student):
    before = len(gradebook_service.list_students(db))

    students = gradebook_service.create_student(db, new_student)

    assert len(students) == before + 1
    stored = crud_student.get_student_by_email(db, "solomon1d24@gmail.com")
    assert stored.firstname == "Solomon"
    assert stored.lastname == "Chow"
    assert stored.email_address == "solomon1d24@gmail.com"
    assert stored.id not in (None, 1)


def test_delete_student_cascades(db):
    students = gradebook_service.delete_student(db, 1)

    assert students == []
    assert crud_student.get_student(db, 1) is None
    for store in grade_stores.values():
        assert store.get_grades_by_student(db, 1) == []


def test_delete_student_not_found(db):
    with pytest.raises(StudentOrGradeNotFoundException) as exc_info:
        gradebook_service.delete_student(db, 0)

    assert exc_info.value.reason == NotFoundReason.STUDENT
    assert exc_info.value.status_code == 404
    assert exc_info.value.message == "Student or Grade was not found"


def test_get_student_profile(db):
    gradebook_service.create_grade(db, 1, "science", 80.0)

    profile = gradebook_service.get_student_profile(db, 1)

    assert profile.full_name == "Eric Roby"
    assert [g.grade for g in profile.student_grades.science_grade_results] == [100.0, 80.0]
    assert profile.student_grades.science_grade_average == 90.0
    assert profile.student_grades.math_grade_average == 100.0


def test_get_student_profile_without_grades(db, new_student):
    gradebook_service.create_student(db, new_student)
    student = crud_student.get_student_by_email(db, "solomon1d24@gmail.com")

    profile = gradebook_service.get_student_profile(db, student.id)

    assert profile.student_grades.math_grade_results == []
    assert profile.student_grades.science_grade_results == []
    assert profile.student_grades.history_grade_results == []
    assert profile.student_grades.history_grade_average is None


def test_get_student_profile_not_found(db):
    with pytest.raises(StudentOrGradeNotFoundException) as exc_info:
        gradebook_service.get_student_profile(db, 0)

    assert exc_info.value.reason == NotFoundReason.STUDENT


def test_create_grade(db):
    profile = gradebook_service.create_grade(db, 1, "math", 75.0)

    assert len(profile.student_grades.math_grade_results) == 2
    assert profile.student_grades.math_grade_results[-1].grade == 75.0
    assert len(profile.student_grades.science_grade_results) == 1


@pytest.mark.parametrize("student_id", [0, 1])
def test_create_grade_unknown_subject(db, student_id):
    with pytest.raises(StudentOrGradeNotFoundException):
        gradebook_service.create_grade(db, student_id, "literature", 70.8)


def test_create_grade_unknown_subject_reason(db):
    with pytest.raises(StudentOrGradeNotFoundException) as exc_info:
        gradebook_service.create_grade(db, 1, "literature", 70.8)

    assert exc_info.value.reason == NotFoundReason.SUBJECT


def test_create_grade_unknown_student_reason(db):
    with pytest.raises(StudentOrGradeNotFoundException) as exc_info:
        gradebook_service.create_grade(db, 0, "math", 70.8)

    assert exc_info.value.reason == NotFoundReason.STUDENT


def test_delete_grade(db):
    profile = gradebook_service.create_grade(db, 1, "math", 60.0)
    new_id = profile.student_grades.math_grade_results[-1].id

    profile = gradebook_service.delete_grade(db, new_id, "math")

    assert new_id not in [g.id for g in profile.student_grades.math_grade_results]
    assert grade_stores[Subject.MATH].get_grade(db, new_id) is None


def test_delete_grade_not_found(db):
    with pytest.raises(StudentOrGradeNotFoundException) as exc_info:
        gradebook_service.delete_grade(db, 2, "math")

    assert exc_info.value.reason == NotFoundReason.GRADE


def test_delete_grade_unknown_subject(db):
    with pytest.raises(StudentOrGradeNotFoundException) as exc_info:
        gradebook_service.delete_grade(db, 1, "literature")

    assert exc_info.value.reason == NotFoundReason.SUBJECT
    assert grade_stores[Subject.MATH].get_grade(db, 1) is not None


def test_grade_point_average():
    assert gradebook_service.grade_point_average([]) is None
    assert gradebook_service.grade_point_average([100.0, 75.0]) == 87.5
    assert gradebook_service.grade_point_average([90.0, 80.0, 85.5]) == 85.17
