"""Zen Sanctuary: the API server behind the ambient AI clock."""
import logging
from contextlib import asynccontextmanager
from typing import Optional

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from zen_sanctuary.controllers import (
    ChatController,
    ConfigController,
    ReminderController,
    WeatherController,
)
from zen_sanctuary.router import create_router
from zen_sanctuary.services import (
    ChatService,
    ConfigService,
    LLMService,
    ReminderService,
    SessionService,
    WeatherService,
)
from zen_sanctuary.utils.colored_logger import setup_colored_logging

# Load environment variables
load_dotenv()

# Configure colored logging
setup_colored_logging(level=logging.INFO)
logger = logging.getLogger(__name__)


def create_app(
    config_path: Optional[str] = None,
    llm_service: Optional[LLMService] = None,
    weather_service: Optional[WeatherService] = None
) -> FastAPI:
    """Create and configure FastAPI application.

    Args:
        config_path: Optional path to config file
        llm_service: Optional prebuilt LLM service (tests inject fakes)
        weather_service: Optional prebuilt weather service

    Returns:
        Configured FastAPI application
    """
    logger.info("Initializing services...")

    config_service = ConfigService(config_path)
    session_service = SessionService(
        history_limit=config_service.get_history_limit(),
        max_sessions=config_service.get_max_sessions(),
    )
    llm_service = llm_service or LLMService(config_service)
    weather_service = weather_service or WeatherService(config_service)

    chat_service = ChatService(
        session_service=session_service,
        llm_service=llm_service,
        weather_service=weather_service,
        config_service=config_service
    )
    reminder_service = ReminderService(llm_service, config_service)

    logger.info("Initializing controllers...")

    chat_controller = ChatController(
        chat_service=chat_service,
        session_service=session_service,
        config_service=config_service
    )
    reminder_controller = ReminderController(reminder_service=reminder_service)
    weather_controller = WeatherController(weather_service=weather_service)
    config_controller = ConfigController(
        config_service=config_service,
        llm_service=llm_service,
        weather_service=weather_service
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # Model handshake happens once, before the first request
        await llm_service.select_model()
        if not weather_service.is_configured:
            logger.warning("Weather API key not set; weather features disabled")
        yield
        logger.info("Server shutting down")

    app = FastAPI(
        title="Zen Sanctuary API",
        description="Chat, weather and reminder parsing for the Zen ambient clock",
        version="1.0.0",
        lifespan=lifespan
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(RequestValidationError)
    async def invalid_body_handler(request: Request, exc: RequestValidationError):
        logger.warning(f"Rejected malformed request to {request.url.path}")
        return JSONResponse(status_code=400, content={"error": "Invalid request body"})

    router = create_router(chat_controller, reminder_controller, weather_controller, config_controller)
    app.include_router(router)

    # Front-end assets; mounted last so /api routes take precedence
    static_dir = config_service.get_static_dir()
    if static_dir.is_dir():
        app.mount("/", StaticFiles(directory=str(static_dir), html=True), name="static")
    else:
        logger.warning("Static directory not found for front-end assets: %s", static_dir)

    app.state.config_service = config_service
    app.state.session_service = session_service
    app.state.llm_service = llm_service
    app.state.weather_service = weather_service

    logger.info("Application initialized successfully")
    logger.info(f"Model candidates: {config_service.get_model_candidates()}")

    return app
