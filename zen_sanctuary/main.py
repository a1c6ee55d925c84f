"""Main entry point for the application."""
import logging

from zen_sanctuary import create_app

logger = logging.getLogger(__name__)


# Create the FastAPI app instance
app = create_app()


if __name__ == "__main__":
    import uvicorn

    config_service = app.state.config_service
    logger.info("Starting Zen Sanctuary Server...")
    uvicorn.run(app, host=config_service.get_host(), port=config_service.get_port())
