"""Weather service: OpenWeather lookups behind a short-lived cache."""
import logging
import re
import time
from typing import Callable, Dict, List, Optional, Tuple

import httpx

from zen_sanctuary.models import WeatherSnapshot
from zen_sanctuary.utils.colored_logger import get_plugin_logger

logger = logging.getLogger(__name__)
plugin_logger = get_plugin_logger(__name__, 'weather')


class WeatherService:
    """Fetch current conditions and cache them per city for a fixed window."""

    def __init__(
        self,
        config_service,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        clock: Callable[[], float] = time.monotonic
    ):
        """Initialize weather service.

        Args:
            config_service: Configuration service
            transport: Optional httpx transport (tests pass a MockTransport)
            clock: Monotonic time source in seconds
        """
        self.config_service = config_service
        self.api_key = config_service.get_weather_api_key()
        self.default_city = config_service.get_default_city()
        self.ttl = config_service.get_weather_cache_ttl()
        self._transport = transport
        self._clock = clock
        self._cache: Dict[str, Tuple[WeatherSnapshot, float]] = {}
        self._keyword_re = _compile_keywords(config_service.get_weather_keywords())

    @property
    def is_configured(self) -> bool:
        return bool(self.api_key)

    def mentions_weather(self, text: str) -> bool:
        """Whether the text talks about the weather."""
        if self._keyword_re is None or not text:
            return False
        return bool(self._keyword_re.search(text))

    async def get_current(self, city: Optional[str] = None) -> Optional[WeatherSnapshot]:
        """Get current weather, served from cache when fresh.

        Args:
            city: City name; defaults to the configured city

        Returns:
            WeatherSnapshot, or None if weather is unconfigured or the fetch failed
        """
        if not self.is_configured:
            return None

        city = (city or self.default_city).strip()
        key = city.lower()

        cached = self._cache.get(key)
        if cached and self._clock() - cached[1] < self.ttl:
            logger.debug(f"Weather cache hit for {city}")
            return cached[0]

        snapshot = await self._fetch(city)
        if snapshot is not None:
            self._cache[key] = (snapshot, self._clock())
        return snapshot

    async def _fetch(self, city: str) -> Optional[WeatherSnapshot]:
        params = {"q": city, "units": "metric", "appid": self.api_key}
        try:
            async with httpx.AsyncClient(
                timeout=self.config_service.get_weather_timeout(),
                transport=self._transport,
            ) as client:
                resp = await client.get(self.config_service.get_weather_base_url(), params=params)
        except httpx.HTTPError as e:
            logger.error(f"Weather fetch error for {city}: {e}")
            return None

        if resp.status_code != 200:
            logger.error(f"Weather API returned {resp.status_code} for {city}")
            return None

        try:
            snapshot = _parse_openweather(resp.json(), city)
        except (ValueError, KeyError, TypeError, IndexError) as e:
            logger.error(f"Unexpected weather payload for {city}: {e}")
            return None

        plugin_logger.info(
            f"Live weather for {snapshot.city}: {snapshot.temp}°C, {snapshot.description}"
        )
        return snapshot

    @staticmethod
    def format_annotation(snapshot: WeatherSnapshot) -> str:
        """Bracketed weather note appended to a chat message."""
        return (
            f"[Current weather in {snapshot.city}: {snapshot.temp}°C "
            f"(feels like {snapshot.feels}°C), {snapshot.description}, "
            f"humidity {snapshot.humidity}%, wind {snapshot.wind} m/s]"
        )


def _compile_keywords(keywords: List[str]) -> Optional[re.Pattern]:
    if not keywords:
        return None
    alternatives = "|".join(re.escape(kw) for kw in keywords)
    return re.compile(rf"\b(?:{alternatives})\b", re.IGNORECASE)


def _parse_openweather(data: dict, requested_city: str) -> WeatherSnapshot:
    main = data["main"]
    weather_list = data.get("weather") or []
    description = weather_list[0].get("description", "") if weather_list else ""
    return WeatherSnapshot(
        city=data.get("name") or requested_city,
        temp=round(float(main["temp"])),
        feels=round(float(main.get("feels_like", main["temp"]))),
        description=description,
        humidity=round(float(main.get("humidity", 0))),
        wind=round(float((data.get("wind") or {}).get("speed", 0))),
    )
