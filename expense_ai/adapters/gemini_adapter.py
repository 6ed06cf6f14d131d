"""
Generative model adapter for the Expense AI system.

This adapter implements the LLMProvider interface for Gemini, talking to its
OpenAI-compatible endpoint through the OpenAI client.
"""

import logging
from typing import Any, Dict, Optional

from openai import (
    AsyncOpenAI,
    AuthenticationError,
    OpenAIError,
    PermissionDeniedError,
)
import logfire

from expense_ai.domains.enums import GenerationErrorKind
from expense_ai.domains.errors import GenerationError
from expense_ai.interfaces.providers.llm import LLMProvider

# Setup logger for this module
logger = logging.getLogger(__name__)

DEFAULT_MODEL = "gemini-1.5-flash-latest"
DEFAULT_BASE_URL = "https://generativelanguage.googleapis.com/v1beta/openai/"

JSON_MIME_TYPE = "application/json"


class GeminiAdapter(LLMProvider):
    """Gemini implementation of LLMProvider using the Chat Completions API."""

    def __init__(
        self,
        api_key: str,
        model: Optional[str] = None,
        base_url: Optional[str] = None,
        logfire_api_key: Optional[str] = None,
    ):
        self.api_key = api_key or ""
        self.model = model or DEFAULT_MODEL
        self.base_url = base_url or DEFAULT_BASE_URL

        # Without a key the adapter still exists; every call fails at request time
        if self.api_key:
            self.client = AsyncOpenAI(api_key=self.api_key, base_url=self.base_url)
        else:
            logger.warning(
                "No Gemini API key configured. Generative calls will fail until one is set."
            )
            self.client = None

        self.logfire = False
        if logfire_api_key and self.client is not None:
            try:
                logfire.configure(token=logfire_api_key)
                logfire.instrument_openai(self.client)
                self.logfire = True
                logger.info("Logfire configured and Gemini client instrumented successfully.")
            except Exception as e:
                logger.error(f"Failed to configure Logfire: {e}")
                self.logfire = False

    async def generate_text(
        self,
        prompt: str,
        model: Optional[str] = None,
        response_mime_type: Optional[str] = None,
        temperature: Optional[float] = None,
    ) -> str:
        """Generate text for a single user prompt."""
        if self.client is None:
            raise GenerationError(
                GenerationErrorKind.CREDENTIAL_MISSING, "Gemini API key is not set"
            )

        request_params: Dict[str, Any] = {
            "model": model or self.model,
            "messages": [{"role": "user", "content": prompt}],
        }
        if response_mime_type == JSON_MIME_TYPE:
            request_params["response_format"] = {"type": "json_object"}
        if temperature is not None:
            request_params["temperature"] = temperature

        logger.debug(
            f"Sending {len(prompt)} character prompt to '{request_params['model']}'"
        )

        try:
            completion = await self.client.chat.completions.create(**request_params)
        except (AuthenticationError, PermissionDeniedError) as e:
            raise GenerationError(GenerationErrorKind.CREDENTIAL_MISSING, str(e)) from e
        except OpenAIError as e:
            raise GenerationError(GenerationErrorKind.TRANSPORT, str(e)) from e

        text = ""
        if completion.choices:
            text = completion.choices[0].message.content or ""
        if not text:
            raise GenerationError(
                GenerationErrorKind.EMPTY_RESPONSE, "No response from AI"
            )

        if getattr(completion, "usage", None):
            logger.info(
                f"Gemini API Usage: Input={completion.usage.prompt_tokens}, Output={completion.usage.completion_tokens}, Total={completion.usage.total_tokens}"
            )
        return text
