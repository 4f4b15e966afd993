"""
Rhythm90 Backend — Marketing Assistant Service
===============================================

What:  Turns a signal observation into a recommendation, and a play name
       into a business hypothesis.
How:   Builds the prompt, asks the configured LLMService once, and falls
       back to a fixed sentence when the model returns nothing.
Who:   Called by rhythm90.routes.assistant.
"""

import logging
from typing import Optional

from rhythm90.services.llm_base import LLMService

logger = logging.getLogger(__name__)

SIGNAL_SYSTEM = "You are a marketing signals assistant."
HYPOTHESIS_SYSTEM = "You are a marketing strategy assistant."

NO_SUGGESTION = "No suggestion."
NO_HYPOTHESIS = "No hypothesis generated."


class AssistantService:
    """
    Args:
        llm: Provider to use. Defaults to the Gemini singleton, resolved on
             first use so importing this module never configures the SDK.
    """

    def __init__(self, llm: Optional[LLMService] = None):
        self._llm = llm

    @property
    def llm(self) -> LLMService:
        if self._llm is None:
            from rhythm90.services.gemini_service import gemini_service
            self._llm = gemini_service
        return self._llm

    async def suggest_for_signal(self, observation: str) -> str:
        text = await self.llm.generate(
            SIGNAL_SYSTEM,
            f"Give a short recommendation based on this observation: {observation}",
        )
        return text or NO_SUGGESTION

    async def hypothesis_for_play(self, play_name: str) -> str:
        text = await self.llm.generate(
            HYPOTHESIS_SYSTEM,
            "Generate a short hypothesis about why running the following play could "
            f"help the marketing team: {play_name}. Focus on business impact.",
        )
        return text or NO_HYPOTHESIS


# ── Singleton Instance ────────────────────────────────────────────────────
assistant_service = AssistantService()
