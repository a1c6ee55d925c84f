"""LLM service for managing API communication with the language model."""
import logging
from enum import Enum
from typing import Dict, List, Optional

import openai
from openai import AsyncOpenAI

from zen_sanctuary.utils.colored_logger import get_plugin_logger

logger = logging.getLogger(__name__)
plugin_logger = get_plugin_logger(__name__, 'llm')


class LLMErrorKind(str, Enum):
    """Why an upstream model call failed."""
    RATE_LIMITED = "rate_limited"
    AUTH_FAILED = "auth_failed"
    UNAVAILABLE = "unavailable"
    UNKNOWN = "unknown"


HTTP_STATUS_BY_KIND = {
    LLMErrorKind.RATE_LIMITED: 429,
    LLMErrorKind.AUTH_FAILED: 503,
    LLMErrorKind.UNAVAILABLE: 503,
    LLMErrorKind.UNKNOWN: 500,
}


class LLMServiceError(Exception):
    """Raised when the model cannot produce a reply."""

    def __init__(self, kind: LLMErrorKind, message: str):
        super().__init__(message)
        self.kind = kind

    @property
    def status_code(self) -> int:
        return HTTP_STATUS_BY_KIND[self.kind]


def classify_error(error: Exception) -> LLMErrorKind:
    """Map an SDK exception to an LLMErrorKind."""
    if isinstance(error, LLMServiceError):
        return error.kind
    if isinstance(error, openai.RateLimitError):
        return LLMErrorKind.RATE_LIMITED
    if isinstance(error, (openai.AuthenticationError, openai.PermissionDeniedError)):
        return LLMErrorKind.AUTH_FAILED
    if isinstance(error, (openai.APIConnectionError, openai.NotFoundError)):
        return LLMErrorKind.UNAVAILABLE
    if isinstance(error, openai.APIStatusError) and error.status_code >= 500:
        return LLMErrorKind.UNAVAILABLE
    return LLMErrorKind.UNKNOWN


class LLMService:
    """Service for managing LLM API calls.

    The active model is chosen once at startup by ``select_model``; until a
    candidate answers the handshake the service is degraded and every
    generation raises ``LLMServiceError`` with ``UNAVAILABLE``.
    """

    def __init__(self, config_service, client: Optional[AsyncOpenAI] = None):
        """Initialize LLM service.

        Args:
            config_service: Configuration service
            client: Optional pre-built client (used by tests)
        """
        self.config_service = config_service
        self._client = client
        self.model: Optional[str] = None

    def _get_client(self) -> AsyncOpenAI:
        """Get or create the OpenAI-compatible client.

        Raises:
            LLMServiceError: If API key not found in environment
        """
        if self._client is None:
            api_key = self.config_service.get_llm_api_key()
            if not api_key:
                raise LLMServiceError(
                    LLMErrorKind.AUTH_FAILED, "LLM API key not set in environment variables"
                )
            self._client = AsyncOpenAI(
                api_key=api_key,
                base_url=self.config_service.get_llm_base_url(),
            )
            logger.info("Created LLM client")
        return self._client

    @property
    def is_available(self) -> bool:
        """Whether a model passed the startup handshake."""
        return self.model is not None

    async def select_model(self) -> Optional[str]:
        """Pick the first candidate model that answers a one-token request.

        Returns:
            The selected model identifier, or None if every candidate failed
        """
        self.model = None
        try:
            client = self._get_client()
        except LLMServiceError as e:
            logger.error(f"Cannot initialize AI: {e}")
            return None

        for model_name in self.config_service.get_model_candidates():
            plugin_logger.info(f"Attempting to initialize model: {model_name}...")
            try:
                await client.chat.completions.create(
                    model=model_name,
                    messages=[{"role": "user", "content": "hi"}],
                    max_tokens=1,
                )
            except Exception as e:
                # Any failure just moves on to the next candidate
                logger.warning(f"Model {model_name} failed the handshake ({classify_error(e).value}): {e}")
                continue

            self.model = model_name
            plugin_logger.info(f"Using model: {model_name}")
            return model_name

        logger.critical("All model initialization attempts failed; AI features disabled")
        return None

    async def _complete(
        self,
        messages: List[Dict],
        temperature: Optional[float] = None,
        max_tokens: Optional[int] = None
    ) -> str:
        if self.model is None:
            raise LLMServiceError(LLMErrorKind.UNAVAILABLE, "No model is available")

        api_params = {
            "model": self.model,
            "messages": messages,
        }
        if temperature is not None:
            api_params["temperature"] = temperature
        if max_tokens:
            api_params["max_tokens"] = max_tokens

        logger.debug(f"Calling LLM with model {self.model} ({len(messages)} messages)")

        try:
            response = await self._get_client().chat.completions.create(**api_params)
        except openai.OpenAIError as e:
            kind = classify_error(e)
            logger.error(f"LLM API error ({kind.value}): {e}")
            raise LLMServiceError(kind, str(e)) from e

        # Blocked prompts come back with no choices at all
        if not response.choices:
            logger.error(f"LLM returned no choices (model {self.model})")
            raise LLMServiceError(LLMErrorKind.UNKNOWN, "Model returned no choices")

        content = response.choices[0].message.content or ""

        preview = content[:150] + "..." if len(content) > 150 else content
        plugin_logger.info(f"LLM Response ({self.model}): {len(content)} chars")
        plugin_logger.debug(f"   {preview}")

        return content

    async def generate_text(self, prompt: str, temperature: Optional[float] = None) -> str:
        """Single-shot generation from one user prompt."""
        return await self._complete(
            [{"role": "user", "content": prompt}], temperature=temperature
        )

    async def generate_chat(self, messages: List[Dict], temperature: Optional[float] = None) -> str:
        """Generate the next assistant turn for a conversation.

        Args:
            messages: List of message dicts with 'role' and 'content'
            temperature: Optional temperature override

        Returns:
            Generated response text
        """
        if temperature is None:
            temperature = self.config_service.get_temperature("chat")
        return await self._complete(messages, temperature=temperature)
