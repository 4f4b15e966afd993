"""
Rhythm90 Backend — AI Assistant Tests (Mocked)
===============================================

What:  AssistantService prompting and fallbacks, GeminiService error
       wrapping, and the 503 mapping on the /ai-* routes.
Why:   Tests must never call the real Gemini API (costs money, needs network).
How:   A canned LLMService for the assistant; a mocked model object for
       GeminiService.

What we test:
    ✅ Suggestion and hypothesis text passes through
    ✅ Empty model output falls back to a fixed sentence
    ✅ SDK exceptions become LLMServiceError
    ✅ Blocked candidates (ValueError from .text) become ""
    ❌ Real API calls
"""

from unittest.mock import AsyncMock, MagicMock, PropertyMock, patch

import pytest

from rhythm90.exceptions import LLMServiceError
from rhythm90.services.assistant_service import (
    HYPOTHESIS_SYSTEM,
    NO_HYPOTHESIS,
    NO_SUGGESTION,
    SIGNAL_SYSTEM,
    AssistantService,
    assistant_service,
)
from rhythm90.services.gemini_service import GeminiService
from rhythm90.services.llm_base import LLMService


class CannedLLM(LLMService):
    def __init__(self, answer: str = ""):
        self.answer = answer
        self.calls = []

    async def generate(self, system: str, prompt: str) -> str:
        self.calls.append((system, prompt))
        return self.answer


class TestAssistantService:

    @pytest.mark.asyncio
    async def test_signal_suggestion(self):
        llm = CannedLLM("Run a retargeting test.")
        service = AssistantService(llm=llm)

        result = await service.suggest_for_signal("Cart abandonment up 10%")

        assert result == "Run a retargeting test."
        system, prompt = llm.calls[0]
        assert system == SIGNAL_SYSTEM
        assert "Cart abandonment up 10%" in prompt

    @pytest.mark.asyncio
    async def test_hypothesis(self):
        llm = CannedLLM("Shorter forms raise conversion.")
        service = AssistantService(llm=llm)

        result = await service.hypothesis_for_play("Boost Conversion")

        assert result == "Shorter forms raise conversion."
        system, prompt = llm.calls[0]
        assert system == HYPOTHESIS_SYSTEM
        assert "Boost Conversion" in prompt

    @pytest.mark.asyncio
    async def test_empty_answers_fall_back(self):
        service = AssistantService(llm=CannedLLM(""))

        assert await service.suggest_for_signal("x") == NO_SUGGESTION
        assert await service.hypothesis_for_play("x") == NO_HYPOTHESIS


class TestGeminiServiceMocked:

    @pytest.mark.asyncio
    async def test_generate_returns_stripped_text(self):
        with patch("rhythm90.services.gemini_service.genai") as mock_genai:
            mock_response = MagicMock()
            mock_response.text = "  A suggestion.  \n"
            mock_model = MagicMock()
            mock_model.generate_content_async = AsyncMock(return_value=mock_response)
            mock_genai.GenerativeModel.return_value = mock_model

            service = GeminiService()
            result = await service.generate("system", "prompt")

            assert result == "A suggestion."
            args, _ = mock_model.generate_content_async.call_args
            assert args[0] == ["system", "prompt"]

    @pytest.mark.asyncio
    async def test_sdk_failure_becomes_llm_error(self):
        with patch("rhythm90.services.gemini_service.genai") as mock_genai:
            mock_model = MagicMock()
            mock_model.generate_content_async = AsyncMock(side_effect=RuntimeError("quota"))
            mock_genai.GenerativeModel.return_value = mock_model

            service = GeminiService()
            with pytest.raises(LLMServiceError) as exc_info:
                await service.generate("system", "prompt")

            assert exc_info.value.context["error_type"] == "RuntimeError"

    @pytest.mark.asyncio
    async def test_blocked_candidate_is_empty(self):
        with patch("rhythm90.services.gemini_service.genai") as mock_genai:
            mock_response = MagicMock()
            type(mock_response).text = PropertyMock(side_effect=ValueError("blocked"))
            mock_model = MagicMock()
            mock_model.generate_content_async = AsyncMock(return_value=mock_response)
            mock_genai.GenerativeModel.return_value = mock_model

            service = GeminiService()
            assert await service.generate("system", "prompt") == ""


class TestAssistantRoutes:

    @pytest.mark.asyncio
    async def test_ai_signal(self, test_client):
        with patch.object(assistant_service, "_llm", CannedLLM("Do more email.")):
            response = await test_client.post("/ai-signal", json={"observation": "Opens up"})

        assert response.status_code == 200
        assert response.json() == {"suggestion": "Do more email."}

    @pytest.mark.asyncio
    async def test_ai_hypothesis_fallback(self, test_client):
        with patch.object(assistant_service, "_llm", CannedLLM("")):
            response = await test_client.post("/ai-hypothesis", json={"play_name": "Play A"})

        assert response.json() == {"hypothesis": NO_HYPOTHESIS}

    @pytest.mark.asyncio
    async def test_provider_failure_is_503(self, test_client):
        failing = MagicMock(spec=LLMService)
        failing.generate = AsyncMock(side_effect=LLMServiceError())

        with patch.object(assistant_service, "_llm", failing):
            response = await test_client.post("/ai-signal", json={"observation": "x"})

        assert response.status_code == 503
        assert response.json()["error"] == "llm_service_error"
