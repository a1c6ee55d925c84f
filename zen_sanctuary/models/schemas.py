"""Pydantic models and schemas for the application."""
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class ChatRequest(BaseModel):
    """Chat request model.

    ``message`` is validated by the controller so that a missing or
    non-string value is answered with a 400 instead of a schema error.
    """
    model_config = ConfigDict(populate_by_name=True)

    message: Any = Field(None, description="User's message")
    client_time: Optional[str] = Field(None, alias="clientTime", description="Client wall-clock time as displayed")
    session_id: Optional[str] = Field(None, alias="sessionId", description="Conversation identifier")


class ChatClearRequest(BaseModel):
    """Conversation reset request."""
    model_config = ConfigDict(populate_by_name=True)

    session_id: Optional[str] = Field(None, alias="sessionId", description="Conversation to reset")


class ReminderRequest(BaseModel):
    """Reminder parsing request."""
    model_config = ConfigDict(populate_by_name=True)

    message: Any = Field(None, description="Natural-language reminder request")
    client_time: Optional[str] = Field(None, alias="clientTime", description="Client wall-clock time as displayed")


class ReminderIntent(BaseModel):
    """Structured reminder extracted from natural language."""
    model_config = ConfigDict(populate_by_name=True)

    is_reminder: bool = Field(False, alias="isReminder")
    task: str = Field("")
    minutes_from_now: int = Field(0, ge=0, alias="minutesFromNow")
    recurring: bool = Field(False)
    interval_minutes: int = Field(0, ge=0, alias="intervalMinutes")

    def to_response(self) -> Dict:
        """Serialize with the camelCase keys the front end expects."""
        return self.model_dump(by_alias=True)


class WeatherSnapshot(BaseModel):
    """Current conditions for one city, rounded for display."""
    city: str
    temp: int = Field(..., description="Temperature in °C")
    feels: int = Field(..., description="Feels-like temperature in °C")
    description: str
    humidity: int = Field(..., description="Relative humidity in %")
    wind: int = Field(..., description="Wind speed in m/s")


class HealthResponse(BaseModel):
    """Health check response."""
    model_config = ConfigDict(populate_by_name=True)

    status: str
    ai_enabled: bool = Field(..., alias="aiEnabled")
    model: str
    weather: bool
    city: str


class ConfigResponse(BaseModel):
    """Configuration response (sanitized)."""
    model_config = ConfigDict(protected_namespaces=())

    model_candidates: List[str]
    active_model: Optional[str]
    history_limit: int
    weather: Dict
