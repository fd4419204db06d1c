from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from gradebook.core.config import settings
from gradebook.core.database import init_db
from gradebook.core.handlers import add_exception_handlers
from gradebook.api.v1.router import api_router


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db()
    yield


# debug=True makes Starlette answer 500s with a traceback page instead of the JSON handlers
app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.APP_VERSION,
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.BACKEND_CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Consistent JSON error bodies
add_exception_handlers(app)

# Include API router
app.include_router(api_router, prefix=settings.API_PREFIX)


@app.get("/health")
def health_check():
    """
    Health check endpoint
    """
    return {
        "message": "Welcome to Gradebook API",
        "docs": "/docs",
        "version": settings.APP_VERSION
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("gradebook.main:app", host=settings.HOST, port=settings.PORT, reload=settings.DEBUG)
