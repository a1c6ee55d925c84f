"""Configuration service for managing application config."""
import logging
import os
from pathlib import Path
from typing import Dict, List, Optional, Tuple

import yaml

logger = logging.getLogger(__name__)

REPO_ROOT = Path(__file__).resolve().parent.parent.parent


class ConfigService:
    """Service for managing application configuration.

    Values come from config.yml; deployment-specific values (API keys,
    default city, port) may be overridden by environment variables.
    """

    def __init__(self, config_path: Optional[str] = None):
        """Initialize configuration service.

        Args:
            config_path: Path to config file. If None, will search default locations.
        """
        self._config: Optional[Dict] = None
        self._config_path = config_path
        self.load_config()

    def _resolve_path(self) -> Path:
        if self._config_path:
            return Path(self._config_path)

        for candidate in (
            Path("config.yml"),
            Path("config/config.yml"),
            REPO_ROOT / "config.yml",
        ):
            if candidate.exists():
                return candidate
        return Path("config.yml")

    def load_config(self) -> Dict:
        """Load configuration from YAML file.

        Returns:
            Configuration dictionary

        Raises:
            FileNotFoundError: If config file not found
        """
        config_path = self._resolve_path()
        if not config_path.exists():
            raise FileNotFoundError(
                "config.yml not found in current directory or config/ directory"
            )

        with open(config_path, 'r', encoding='utf-8') as f:
            self._config = yaml.safe_load(f) or {}

        logger.info(f"Configuration loaded from {config_path}")
        return self._config

    @property
    def config(self) -> Dict:
        """Get current configuration."""
        if self._config is None:
            raise RuntimeError("Configuration not loaded")
        return self._config

    def _section(self, name: str) -> Dict:
        return self.config.get(name) or {}

    # Server

    def get_host(self) -> str:
        return os.getenv("HOST") or self._section("server").get("host", "0.0.0.0")

    def get_port(self) -> int:
        port = os.getenv("PORT") or self._section("server").get("port", 8080)
        try:
            return int(port)
        except (TypeError, ValueError):
            logger.warning(f"Invalid port {port!r}, using 8080")
            return 8080

    def get_static_dir(self) -> Path:
        return Path(self._section("server").get("static_dir", "public"))

    # LLM

    def get_llm_base_url(self) -> Optional[str]:
        return self._section("llm").get("base_url")

    def get_llm_api_key(self) -> Optional[str]:
        api_key_env = self._section("llm").get("api_key_env", "GEMINI_API_KEY")
        return os.getenv(api_key_env) or None

    def get_model_candidates(self) -> List[str]:
        """Get ordered list of model identifiers to try at startup."""
        return list(self._section("llm").get("model_candidates") or [])

    def get_temperature(self, purpose: str = "chat") -> float:
        llm = self._section("llm")
        if purpose == "reminder":
            return float(llm.get("reminder_temperature", 0.1))
        return float(llm.get("temperature", 0.7))

    # Chat

    def get_history_limit(self) -> int:
        """Get how many turns of conversation history to keep.

        Defaults to 12 (six exchanges) if missing or invalid.
        """
        limit = self._section("chat").get("history_limit", 12)
        try:
            return max(int(limit), 0)
        except (TypeError, ValueError):
            return 12

    def get_max_sessions(self) -> int:
        """Get how many conversations are held in memory at once.

        Defaults to 100 if missing or invalid; never less than 1.
        """
        limit = self._section("chat").get("max_sessions", 100)
        try:
            return max(int(limit), 1)
        except (TypeError, ValueError):
            return 100

    def get_persona(self) -> Tuple[str, str]:
        """Get the (instruction, acknowledgement) pair that opens each chat."""
        chat = self._section("chat")
        return (
            chat.get("persona_prompt", ""),
            chat.get("persona_ack", "Understood."),
        )

    def get_chat_phrase(self, key: str) -> str:
        """Get a soft in-character phrase for error responses."""
        return self._section("chat").get(f"{key}_response", "")

    # Weather

    def get_weather_api_key(self) -> Optional[str]:
        api_key_env = self._section("weather").get("api_key_env", "OPENWEATHER_API_KEY")
        return os.getenv(api_key_env) or None

    def get_weather_base_url(self) -> str:
        return self._section("weather").get(
            "base_url", "https://api.openweathermap.org/data/2.5/weather"
        )

    def get_default_city(self) -> str:
        return os.getenv("DEFAULT_CITY") or self._section("weather").get("default_city", "London")

    def get_weather_cache_ttl(self) -> float:
        return float(self._section("weather").get("cache_ttl_seconds", 600))

    def get_weather_timeout(self) -> float:
        return float(self._section("weather").get("timeout_seconds", 5.0))

    def get_weather_keywords(self) -> List[str]:
        return [kw.lower() for kw in self._section("weather").get("keywords") or []]

    def get_safe_config(self, active_model: Optional[str] = None) -> Dict:
        """Get sanitized configuration without sensitive data.

        Returns:
            Safe configuration dictionary
        """
        return {
            "model_candidates": self.get_model_candidates(),
            "active_model": active_model,
            "history_limit": self.get_history_limit(),
            "weather": {
                "configured": bool(self.get_weather_api_key()),
                "default_city": self.get_default_city(),
                "cache_ttl_seconds": self.get_weather_cache_ttl(),
                "keywords_count": len(self.get_weather_keywords()),
            },
        }
