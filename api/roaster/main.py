from __future__ import annotations

import logging
import time
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, JSONResponse

from roaster.config import load_settings
from roaster.routers import health, roast
from roaster.services.gemini_client import GeminiClient
from roaster.services.github_client import GitHubClient
from roaster.services.roast_service import RoastService

STATIC_DIR = Path(__file__).resolve().parent / "static"

settings = load_settings()

app = FastAPI(title="GitHub Profile Roaster API", version=health.HEALTH_VERSION)
logger = logging.getLogger("roaster.api")
if not logger.handlers:
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s %(message)s"))
    logger.addHandler(handler)
logger.propagate = False
logger.setLevel(getattr(logging, settings.log_level, logging.INFO))

# Service loggers (roaster.services.*) share the API handler.
_services_logger = logging.getLogger("roaster.services")
if not _services_logger.handlers:
    _services_logger.handlers = list(logger.handlers)
_services_logger.propagate = False
_services_logger.setLevel(logger.level)

app.add_middleware(
    CORSMiddleware,
    allow_origins=list(settings.allowed_origins),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Process-wide, read-only upstream handles.
app.state.settings = settings
app.state.github_client = GitHubClient(base_url=settings.github_api_url)
app.state.text_generator = GeminiClient(
    api_key=settings.gemini_api_key,
    model=settings.gemini_model,
    base_url=settings.gemini_api_url,
)
app.state.roast_service = RoastService(app.state.github_client, app.state.text_generator)

if not settings.has_gemini_key:
    logger.warning("gemini_api_key_missing roasts will fail with upstream_unavailable until GEMINI_API_KEY is set")


@app.get("/", include_in_schema=False)
async def root():
    """Serve the roast form."""
    return FileResponse(STATIC_DIR / "index.html")


@app.exception_handler(Exception)
async def unhandled_exception(request: Request, exc: Exception):
    logger.exception("unhandled_exception method=%s path=%s", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"detail": "Internal server error"})


@app.middleware("http")
async def log_requests(request: Request, call_next):
    start = time.perf_counter()
    status_code = 500
    try:
        response = await call_next(request)
        status_code = response.status_code
        return response
    finally:
        elapsed_ms = (time.perf_counter() - start) * 1000.0
        if request.url.path.startswith("/api"):
            level = logging.WARNING if status_code >= 500 else logging.INFO
            logger.log(
                level,
                "api_request method=%s path=%s status=%s elapsed_ms=%.2f",
                request.method,
                request.url.path,
                status_code,
                elapsed_ms,
            )


app.include_router(roast.router, prefix="/api", tags=["roast"])
app.include_router(health.router, prefix="/api", tags=["health"])
