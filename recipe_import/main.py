from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.middleware.cors import CORSMiddleware

from recipe_import.config import settings
from recipe_import.error_handler import APIError
from recipe_import.logging_config import get_logger, setup_logging
from recipe_import.routers import imports

# Setup logging on startup
setup_logging(log_level=settings.LOG_LEVEL, log_dir=settings.LOG_DIR)
logger = get_logger(__name__)

app = FastAPI(
    title=settings.API_TITLE,
    version=settings.API_VERSION,
    redirect_slashes=False,
)

logger.info(f"Enabling CORS for origins: {settings.allowed_origins_list}")
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Log anything the routers did not translate and return a generic 500."""
    error = APIError.handle_generic_error(f"{request.method} {request.url.path}", exc)
    return JSONResponse(status_code=error.status_code, content={"detail": error.detail})


app.include_router(imports.router, prefix="/import")


@app.get("/")
def health_check() -> dict:
    """Health check endpoint."""
    logger.debug("Health check called")
    return {"status": "ok", "version": settings.API_VERSION}
