"""
Rhythm90 Backend — Abstract LLM Service Interface
==================================================

What:  Abstract base class for the text-generation provider behind the
       marketing assistant.
Why:   The assistant only needs "prompt in, text out". Keeping that behind an
       interface lets tests substitute a canned provider and lets the
       deployment switch providers without touching the assistant.
How:   Concrete implementations inherit from LLMService and implement generate().
Who:   Called by AssistantService.
"""

from abc import ABC, abstractmethod


class LLMService(ABC):
    """
    Contract:
        - generate() returns the model's text, or "" when it produced none
        - Provider-specific errors are wrapped in LLMServiceError
        - No retries: one call, one answer or one error
    """

    @abstractmethod
    async def generate(self, system: str, prompt: str) -> str:
        """
        Produce a short completion.

        Args:
            system: Role instructions for the model.
            prompt: The user-facing request.

        Returns:
            Generated text, stripped. Empty string when the model returned
            nothing usable (blocked or empty candidate). Never None.

        Raises:
            LLMServiceError: the provider call failed.
        """
        ...
