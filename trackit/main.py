# Standard library imports
from pathlib import Path
from contextlib import asynccontextmanager
import logging

# External package imports
from dotenv import load_dotenv
from fastapi import FastAPI

# Local application imports
from .api.v1 import location_router
from .api.error_handlers import register_exception_handlers
from .api.middleware import BodySizeLimitMiddleware, SecurityHeadersMiddleware
from .core.config import get_settings
from .core.logging_config import setup_logging
from .di.container import get_container, reset_container
from .infrastructure.db.mongo_connection import close_mongo_connection

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup/shutdown events.
    
    Validates configuration, then builds the DI container, which opens the
    process-wide MongoDB client. A missing MONGO_URL or DEVICE_KEY raises
    ConfigurationError here and the application refuses to start.
    """
    settings = get_settings()
    settings.validate()
    
    get_container()
    logger.info("Trackit backend started")
    
    yield
    
    close_mongo_connection()
    reset_container()
    logger.info("Application shutdown complete")


def create_application() -> FastAPI:
    """
    Create and configure FastAPI application.
    
    This function sets up the FastAPI application with:
    - Environment variable loading
    - Logging configuration
    - Body size limit and security header middleware
    - {"error": ...} exception handlers
    - API route registration
    
    Returns:
        Configured FastAPI application instance
    """
    # Load environment variables from .env file
    env_path = Path(__file__).resolve().parent.parent / ".env"
    load_dotenv(env_path)
    
    settings = get_settings()
    setup_logging(settings.log_level)
    
    application = FastAPI(
        title="Trackit API",
        version="1.0.0",
        description="Device location check-ins stored as GeoJSON features",
        lifespan=lifespan
    )
    
    # Last added runs first: security headers wrap the body size guard
    application.add_middleware(BodySizeLimitMiddleware, max_body_bytes=settings.max_body_bytes)
    application.add_middleware(SecurityHeadersMiddleware)
    
    register_exception_handlers(application)
    
    application.include_router(location_router, prefix="/devices")
    
    return application


# Create application instance
app = create_application()
