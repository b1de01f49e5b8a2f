from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pymongo.errors import DuplicateKeyError, PyMongoError
import logging

from app.config.security import SecurityConfig
from app.database import client, get_db, ensure_indexes
from app.routers import auth, user, work_sheet, payroll, progress
from app.utils.exceptions import EmployeeManagementError

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

app = FastAPI(title="Employee Management API")

app.add_middleware(
    CORSMiddleware,
    allow_origins=SecurityConfig.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Route registration
app.include_router(auth.router, tags=["Authentication"])
app.include_router(user.router, tags=["Users"])
app.include_router(work_sheet.router, tags=["Work Sheet"])
app.include_router(payroll.router, tags=["Payroll"])
app.include_router(progress.router, tags=["Progress"])


# Error handling
@app.exception_handler(EmployeeManagementError)
async def employee_management_error_handler(request: Request, exc: EmployeeManagementError):
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.detail})


@app.exception_handler(DuplicateKeyError)
async def duplicate_key_handler(request: Request, exc: DuplicateKeyError):
    logger.warning(f"Duplicate key on {request.method} {request.url.path}: {exc}")
    return JSONResponse(status_code=status.HTTP_409_CONFLICT, content={"detail": "Record already exists"})


@app.exception_handler(PyMongoError)
async def database_error_handler(request: Request, exc: PyMongoError):
    logger.error(f"Database error on {request.method} {request.url.path}", exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Database error"},
    )


# Startup and shutdown events
@app.on_event("startup")
def startup_event():
    """Check the database connection and make sure the unique indexes exist"""
    logger.info("Starting Employee Management API...")
    client.admin.command("ping")
    logger.info("Pinged your deployment. You successfully connected to MongoDB!")
    ensure_indexes(get_db())


@app.on_event("shutdown")
def shutdown_event():
    logger.info("Shutting down Employee Management API...")
    client.close()


# Root route
@app.get("/")
def read_root():
    return {"message": "Employee Management API"}


@app.get("/health")
def health():
    return {"status": "ok"}
