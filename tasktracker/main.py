# tasktracker/main.py

import logging
import os

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.encoders import jsonable_encoder

from tasktracker.api.activity_log import router as activity_log_router
from tasktracker.api.auth import router as auth_router
from tasktracker.api.task import router as task_router
from tasktracker.api.user import router as user_router
from tasktracker.core.exceptions import BaseAppException
from tasktracker.core.settings import settings
from tasktracker.database import init_db
from tasktracker.schemas.response import ErrorDetail, ErrorResponse

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger("TaskTracker")

app = FastAPI(
    title="Task Tracker API",
    version="1.0.0",
    description="Task assignment for leads and team members, with an activity log",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(auth_router)
app.include_router(user_router)
app.include_router(task_router)
app.include_router(activity_log_router)

@app.get("/health", tags=["Health"])
def health():
    return {"ok": True}

@app.on_event("startup")
def startup_event():
    init_db()
    logger.info("Starting Task Tracker API")

@app.on_event("shutdown")
def shutdown_event():
    logger.info("Stopping Task Tracker API")

def _error_response(status_code: int, code: str, message: str, details=None, headers=None) -> JSONResponse:
    body = ErrorResponse(detail=message, error=ErrorDetail(code=code, message=message, details=details))
    return JSONResponse(status_code=status_code, content=jsonable_encoder(body), headers=headers)

@app.exception_handler(BaseAppException)
async def app_exception_handler(request: Request, exc: BaseAppException):
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    headers = {"WWW-Authenticate": "Bearer"} if exc.status_code == 401 else None
    return _error_response(exc.status_code, exc.code, exc.message, exc.details, headers)

@app.exception_handler(RequestValidationError)
async def request_validation_exception_handler(request: Request, exc: RequestValidationError):
    return _error_response(400, "validation_error", "Invalid request", details=jsonable_encoder(exc.errors()))

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "tasktracker.main:app",
        host="0.0.0.0",
        port=int(os.getenv("PORT", 8000)),
        reload=settings.DEBUG,
    )
