# This file loads env variables and must thus be imported before anything else.
from . import env_loader  # noqa: F401

import os
import logging

import psycopg
from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from todoapp.errors import TodoAppError
from .routers import (
    webhook_router,
    subscription_router,
    todos_router,
    admin_router,
)

"""FastAPI application setup for the to-do API.

Exposes the identity-provider webhook, subscription, to-do and admin role
routes. This module configures CORS, logging behavior, and the mapping from
application errors to HTTP responses.
"""

logger = logging.getLogger(__name__)

app = FastAPI()
app.include_router(webhook_router)
app.include_router(subscription_router)
app.include_router(todos_router)
app.include_router(admin_router)
app.add_middleware(
    CORSMiddleware,  # type: ignore[arg-type]
    allow_origins=[
        origin.strip()
        for origin in os.getenv("CORS_ALLOW_ORIGINS", "http://localhost:3000").split(",")
        if origin.strip()
    ],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Configure basic logging
logging.basicConfig(
    level=logging.WARNING,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s - %(filename)s:%(lineno)d",
    datefmt="%Y-%m-%d %H:%M:%S",
)
# Configure the logging for the API itself if the user specifies it.
if "LOG_LEVEL" in os.environ:
    match os.environ["LOG_LEVEL"].upper():
        case "DEBUG":
            log_level = logging.DEBUG
        case "INFO":
            log_level = logging.INFO
        case "WARNING":
            log_level = logging.WARNING
        case "ERROR":
            log_level = logging.ERROR
        case "CRITICAL":
            log_level = logging.CRITICAL
        case _:
            raise ValueError(f"Invalid log level: {os.environ['LOG_LEVEL']}")
    logging.getLogger("todoapp").setLevel(log_level)


@app.exception_handler(TodoAppError)
async def handle_app_error(request: Request, exc: TodoAppError) -> JSONResponse:
    """Render application errors with their mapped status code."""
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


@app.exception_handler(psycopg.Error)
async def handle_database_error(request: Request, exc: psycopg.Error) -> JSONResponse:
    """Log store failures and return a generic 500 without internal detail."""
    logger.error(
        f"Database error during {request.method} {request.url.path}", exc_info=exc
    )
    return JSONResponse(status_code=500, content={"error": "Internal server error"})


@app.get("/health")
@app.options("/health")
def health_check(response: Response) -> dict[str, str]:
    """Health check endpoint that returns 200 status with CORS from anywhere."""
    response.headers["Access-Control-Allow-Origin"] = "*"
    response.headers["Access-Control-Allow-Methods"] = "GET, OPTIONS"
    response.headers["Access-Control-Allow-Headers"] = "*"
    return {"status": "healthy"}
