"""Weather controller for handling weather lookups."""
import logging
from typing import Dict, Optional, Union

from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class WeatherController:
    """Controller for weather operations."""

    def __init__(self, weather_service):
        self.weather_service = weather_service

    async def handle_weather(self, city: Optional[str] = None) -> Union[Dict, JSONResponse]:
        """Return the current weather snapshot for a city."""
        if not self.weather_service.is_configured:
            return JSONResponse(status_code=503, content={"error": "Weather not configured"})

        snapshot = await self.weather_service.get_current(city)
        if snapshot is None:
            return JSONResponse(status_code=500, content={"error": "Failed to fetch weather"})

        return snapshot.model_dump()
