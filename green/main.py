import logging
import sys
import time

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from green.api.v1.router import api_router
from green.core.config import settings
from green.core.exceptions import GreenError, NotYetDueError

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s  %(levelname)-8s  %(name)s: %(message)s",
    stream=sys.stdout,
)
logger = logging.getLogger("green.requests")


app = FastAPI(
    title="GREEN API",
    version="1.0.0",
    docs_url="/api/docs",
    redoc_url="/api/redoc",
    openapi_url="/api/openapi.json",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def log_requests(request: Request, call_next) -> Response:
    start = time.monotonic()
    response = await call_next(request)
    latency_ms = int((time.monotonic() - start) * 1000)
    logger.info(
        "%s %s -> %d (%d ms)",
        request.method, request.url.path, response.status_code, latency_ms,
    )
    return response


@app.exception_handler(GreenError)
async def green_error_handler(request: Request, exc: GreenError) -> JSONResponse:
    body = {"detail": exc.message}
    if isinstance(exc, NotYetDueError):
        body["due_date"] = exc.due_date.isoformat()
    return JSONResponse(status_code=exc.status_code, content=body)


@app.get("/api/health", tags=["health"])
async def health():
    return {"status": "ok"}


app.include_router(api_router, prefix="/api/v1")
