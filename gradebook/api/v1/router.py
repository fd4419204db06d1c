from fastapi import APIRouter
from gradebook.api.v1.endpoints import students
from gradebook.api.v1.endpoints import grades

api_router = APIRouter()

api_router.include_router(
    students.router,
    tags=["students"]
)

api_router.include_router(
    grades.router,
    tags=["grades"]
)
