import logging
import os

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from database import create_db_and_tables
from errors import TaskApiError, Unauthenticated
from routes import auth, tasks
from schemas import ApiResponse

# Load environment variables
load_dotenv()

logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)

# Create FastAPI app
app = FastAPI(
    title="Task Management API",
    description="RESTful API for per-user task management with JWT authentication",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc"
)

# CORS configuration
cors_origins = [
    origin.strip()
    for origin in os.getenv("CORS_ORIGINS", "http://localhost:3000").split(",")
    if origin.strip()
]
app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(auth.router, prefix="/auth", tags=["auth"])
app.include_router(tasks.router, tags=["tasks"])


@app.exception_handler(TaskApiError)
async def task_api_error_handler(request: Request, exc: TaskApiError) -> JSONResponse:
    """Render domain errors in the ApiResponse envelope without internal details"""
    headers = {"WWW-Authenticate": "Bearer"} if isinstance(exc, Unauthenticated) else None
    body = ApiResponse(success=False, error={"code": exc.code, "message": exc.message})
    return JSONResponse(status_code=exc.status_code, content=body.model_dump(), headers=headers)


@app.on_event("startup")
def on_startup():
    """Create database tables on startup"""
    create_db_and_tables()
    logger.info("Task API started")


@app.get("/")
def read_root():
    """Root endpoint"""
    return {
        "message": "Task Management API is running",
        "version": "1.0.0",
        "docs": "/docs"
    }


@app.get("/health")
def health_check():
    """Health check endpoint"""
    return {"status": "healthy"}
