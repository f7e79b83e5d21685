import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from app.config import settings
from app.core.errors import AppError, ValidationError
from app.db.session import Base, engine
from app.db import models  # noqa: F401  registers the tables on Base.metadata

from app.api.todo.routes import router as todo_router
from app.api.users.routes import router as users_router

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    Base.metadata.create_all(bind=engine)
    yield

app = FastAPI(lifespan=lifespan)

# Routers
app.include_router(todo_router, prefix="/todos", tags=["Todos"])
app.include_router(users_router, prefix="/users", tags=["Users"])


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError):
    return JSONResponse(status_code=exc.status_code, content=exc.to_body())


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    errors = []
    for err in exc.errors():
        # Drop the leading "body"/"path" location segment
        field = ".".join(str(part) for part in err["loc"][1:]) or None
        errors.append({"field": field, "reason": err["msg"]})
    error = ValidationError(errors=errors)
    return JSONResponse(status_code=error.status_code, content=error.to_body())


@app.exception_handler(SQLAlchemyError)
async def database_error_handler(request: Request, exc: SQLAlchemyError):
    logging.exception("Database error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"detail": "Internal server error"})


@app.get("/ping")
def ping():
    return {"message": "pong"}
