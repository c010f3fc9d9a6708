from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from agenda.config import get_settings
from agenda.dependencies.services import get_api_client_cached

from agenda.health import router as health_router
from agenda.tools.appointment import router as appointment_router
from agenda.tools.calendar import router as calendar_router
from agenda.tools.session import router as session_router


def configure_logging() -> None:
    """Ensure application logs use the INFO level by default."""
    root_logger = logging.getLogger()
    if not root_logger.handlers:
        logging.basicConfig(
            level=logging.INFO,
            format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        )
    else:
        root_logger.setLevel(logging.INFO)

# Configure logging as soon as the module is loaded
configure_logging()

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Manages application startup and shutdown events.
    """
    settings = get_settings()

    settings_snapshot = settings.model_dump(exclude={"api_token"})
    logger.info("Application settings on startup: %s", settings_snapshot)

    client = get_api_client_cached()
    if client.use_mock_data:
        logger.info("No agenda API configured; serving the in-memory mock store.")
    logger.info("Application startup complete.")

    try:
        yield
    finally:
        logger.info("Closing agenda API client connection.")
        await client.close()
        logger.info("Application shutdown complete.")


settings = get_settings()
app = FastAPI(
    title=settings.app_name,
    lifespan=lifespan,
    redirect_slashes=False
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(appointment_router, prefix="/tools/appointments")
app.include_router(session_router, prefix="/tools/session")
app.include_router(calendar_router, prefix="/calendar")
app.include_router(health_router)
