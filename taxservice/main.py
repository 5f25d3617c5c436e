"""
main.py — Indian Income Tax Calculator FastAPI application entry point.

Start with: uvicorn taxservice.main:app --reload --port 3000
       or:  python -m taxservice
"""
import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from taxservice.config import settings

# ---------------------------------------------------------------------------
# Logging — configured before anything else
# ---------------------------------------------------------------------------
logging.basicConfig(
    level=logging.DEBUG if settings.debug else logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s — %(message)s",
)
logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Lifespan — startup & shutdown hooks
# ---------------------------------------------------------------------------
@asynccontextmanager
async def lifespan(app: FastAPI):
    """Nothing to open or close: the engine is stateless. Logs only."""
    logger.info("%s v%s starting up", settings.app_name, settings.app_version)
    yield
    logger.info("%s shutting down", settings.app_name)


# ---------------------------------------------------------------------------
# FastAPI application instance
# ---------------------------------------------------------------------------
app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description=(
        "Computes Indian income tax under the new or old regime: slab tax, "
        "standard deduction, HRA exemption, Section 80C and 4% cess."
    ),
    lifespan=lifespan,
)

# ---------------------------------------------------------------------------
# CORS middleware
# ---------------------------------------------------------------------------
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ---------------------------------------------------------------------------
# Request logging middleware
# ---------------------------------------------------------------------------
@app.middleware("http")
async def log_requests(request: Request, call_next):
    logger.info("%s %s", request.method, request.url.path)
    return await call_next(request)


# ---------------------------------------------------------------------------
# Global exception handlers — registered BEFORE routers
# ---------------------------------------------------------------------------
@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """
    404, and 405 for a known path with the wrong method →
    {"error": "Not Found", "message": "Route GET /x not found"}.
    Any other HTTP error keeps its status and detail.
    """
    if exc.status_code in (404, 405):
        return JSONResponse(
            status_code=404,
            content={
                "error": "Not Found",
                "message": f"Route {request.method} {request.url.path} not found",
            },
        )
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": str(exc.detail), "message": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(Exception)
async def unhandled_exception_handler(
    request: Request, exc: Exception
) -> JSONResponse:
    """
    Catch-all for unexpected errors.
    DEBUG=true  → exception message in the body (dev only).
    DEBUG=false → generic message; full traceback logged server-side only.
    """
    logger.error(
        "Unhandled exception on %s %s",
        request.method,
        request.url.path,
        exc_info=True,
    )
    message = str(exc) if settings.debug else "Something went wrong"
    return JSONResponse(
        status_code=500,
        content={"error": "Internal Server Error", "message": message},
    )


# ---------------------------------------------------------------------------
# Service info & health (no auth required)
# ---------------------------------------------------------------------------
@app.get("/", tags=["System"])
async def service_info() -> dict:
    return {
        "name": settings.app_name,
        "version": settings.app_version,
        "endpoints": {
            "health": "GET /health",
            "calculateTax": "POST /calculate-tax",
            "compareRegimes": "POST /compare-regimes",
        },
    }


@app.get("/health", tags=["System"])
async def health_check() -> dict:
    """Liveness probe for load balancers and deployment pipelines."""
    return {
        "status": "ok",
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }


# ---------------------------------------------------------------------------
# Tax routers
# ---------------------------------------------------------------------------
from taxservice.engine.routes import router as tax_router

app.include_router(tax_router)
