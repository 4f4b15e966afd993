"""
Rhythm90 Backend — Google Gemini Service
=========================================

What:  LLMService implementation backed by the Google Gemini API.
Why:   Gemini's flash model is fast and cheap enough for one-paragraph
       marketing suggestions.
How:   Configures the SDK once with the API key, then sends each request as
       a two-part content list: role instructions, then the request.
Who:   Used by AssistantService through the LLMService interface.
"""

import logging
import time
import uuid

import google.generativeai as genai

from rhythm90.config import settings
from rhythm90.exceptions import LLMServiceError
from rhythm90.services.llm_base import LLMService

logger = logging.getLogger(__name__)

# Suggestions are short; a slow answer is not worth holding the request for
REQUEST_TIMEOUT_SECONDS = 30


class GeminiService(LLMService):

    def __init__(self):
        # The SDK keeps auth in module-level state
        if settings.gemini_api_key:
            genai.configure(api_key=settings.gemini_api_key)
        self.model = genai.GenerativeModel(settings.gemini_model)
        logger.info("GeminiService initialized with model=%s", settings.gemini_model)

    async def generate(self, system: str, prompt: str) -> str:
        # Per-call ID for correlating the start/finish log lines
        call_id = str(uuid.uuid4())[:8]
        start_time = time.time()

        try:
            response = await self.model.generate_content_async(
                [system, prompt],
                request_options={"timeout": REQUEST_TIMEOUT_SECONDS},
            )
        except Exception as e:
            duration_ms = (time.time() - start_time) * 1000
            logger.error(
                "[%s] Gemini call failed after %.0fms: %s",
                call_id,
                duration_ms,
                str(e),
                exc_info=True,
            )
            raise LLMServiceError(
                message="The AI assistant could not answer right now. Please try again later.",
                context={"call_id": call_id, "error_type": type(e).__name__},
            )

        duration_ms = (time.time() - start_time) * 1000
        text = _response_text(response)
        logger.info(
            "[%s] Gemini call completed in %.0fms, %d chars",
            call_id,
            duration_ms,
            len(text),
        )
        return text


def _response_text(response) -> str:
    """
    The SDK's .text accessor raises ValueError when the candidate was blocked
    or has no parts; both mean "no usable answer".
    """
    try:
        text = response.text
    except ValueError:
        logger.warning("Gemini returned no usable candidate")
        return ""
    return text.strip() if text else ""


# ── Singleton Instance ────────────────────────────────────────────────────
gemini_service = GeminiService()
