"""Config controller for handling health and configuration operations."""
import logging
from typing import Dict

from zen_sanctuary.models import ConfigResponse, HealthResponse

logger = logging.getLogger(__name__)


class ConfigController:
    """Controller for configuration operations."""

    def __init__(self, config_service, llm_service, weather_service):
        """Initialize config controller.

        Args:
            config_service: Configuration service
            llm_service: LLM service (for the active model)
            weather_service: Weather service (for configuration state)
        """
        self.config_service = config_service
        self.llm_service = llm_service
        self.weather_service = weather_service

    def get_health(self) -> Dict:
        """Get health status.

        Returns:
            Health status dict; ``degraded`` when no model passed the handshake
        """
        ai_enabled = self.llm_service.is_available
        return HealthResponse(
            status="ok" if ai_enabled else "degraded",
            ai_enabled=ai_enabled,
            model=self.llm_service.model or "none",
            weather=self.weather_service.is_configured,
            city=self.weather_service.default_city,
        ).model_dump(by_alias=True)

    def get_config(self) -> Dict:
        """Get sanitized configuration.

        Returns:
            Safe configuration dict without sensitive data
        """
        return ConfigResponse(
            **self.config_service.get_safe_config(active_model=self.llm_service.model)
        ).model_dump()
