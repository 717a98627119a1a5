from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from tracker_app.config import settings
from tracker_app.logging_config import setup_logging
from tracker_app.database.connection import engine, Base
from tracker_app.api.v1 import links, track

# Import models to ensure they're registered with Base
from tracker_app.models import TrackingLink, Location  # noqa: F401

logger = setup_logging(settings.log_level)

STATIC_DIR = Path(settings.static_dir) if settings.static_dir else Path(__file__).parent / "tracker_app" / "static"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create tables on startup; dispose the engine on shutdown"""
    Base.metadata.create_all(bind=engine)
    logger.info("%s %s started (%s)", settings.app_name, settings.app_version, settings.environment)
    yield
    engine.dispose()
    logger.info("%s stopped", settings.app_name)


# Create FastAPI app
app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="Tracking links with click counts and browser-reported locations",
    debug=settings.debug,
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(SQLAlchemyError)
async def storage_error_handler(request: Request, exc: SQLAlchemyError):
    """Storage failures become 500s carrying the database error text"""
    logger.error("Storage error on %s %s: %s", request.method, request.url.path, exc, exc_info=exc)
    return JSONResponse(status_code=500, content={"detail": str(exc)})


@app.get("/", include_in_schema=False)
def read_root():
    """Serve the dashboard page"""
    return FileResponse(STATIC_DIR / "index.html")


@app.get("/health")
def health_check():
    """Health check endpoint"""
    return {"status": "healthy", "environment": settings.environment}


######## Include routers
app.include_router(links.router, prefix="/api")
app.include_router(track.router)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("main:app", host=settings.host, port=settings.port, reload=settings.debug)
