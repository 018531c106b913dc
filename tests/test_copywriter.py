# =============================================================================
# tests/test_copywriter.py - Copywriter Agent Tests
# =============================================================================
# Tests for the About Us and content-improvement flows (mocked OpenAI).
# =============================================================================

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from agents.base import GenerationError
from agents.copywriter import CopywriterAgent
from agents.prompts.copywriter_system import build_about_prompt, build_improve_prompt


@pytest.fixture
def openai_client():
    return MagicMock()


@pytest.fixture
def agent(openai_client):
    return CopywriterAgent(client=openai_client)


class TestPrompts:
    """Test the copywriter user messages."""

    def test_about_prompt_with_tagline(self):
        prompt = build_about_prompt("Cozy Corner", "Books & tea")
        assert prompt == "Store Name: Cozy Corner\nTagline: Books & tea"

    def test_about_prompt_without_tagline(self):
        assert build_about_prompt("Cozy Corner") == "Store Name: Cozy Corner"

    def test_improve_prompt_wraps_content(self):
        prompt = build_improve_prompt("we sell stuff")
        assert prompt == "<website_content>\nwe sell stuff\n</website_content>"


class TestGenerateAboutText:
    """Test CopywriterAgent.generate_about_text."""

    def test_returns_trimmed_text(self, agent, openai_client, mock_openai_response):
        openai_client.chat.completions.create.return_value = mock_openai_response({
            "about_text": "  Cozy Corner is a neighbourhood bookshop.  ",
        })

        text = agent.generate_about_text("Cozy Corner", "Books & tea")

        assert text == "Cozy Corner is a neighbourhood bookshop."
        user_message = openai_client.chat.completions.create.call_args.kwargs["messages"][1]["content"]
        assert "Tagline: Books & tea" in user_message

    def test_missing_field(self, agent, openai_client, mock_openai_response):
        openai_client.chat.completions.create.return_value = mock_openai_response({"text": "hi"})

        with pytest.raises(GenerationError) as exc_info:
            agent.generate_about_text("Cozy Corner")

        assert exc_info.value.code == "VALIDATION_ERROR"

    def test_api_failure(self, agent, openai_client):
        openai_client.chat.completions.create.side_effect = TimeoutError("timed out")

        with pytest.raises(GenerationError) as exc_info:
            agent.generate_about_text("Cozy Corner")

        assert exc_info.value.code == "OPENAI_ERROR"

    def test_whitespace_about_text_rejected(self, agent, openai_client, mock_openai_response):
        openai_client.chat.completions.create.return_value = mock_openai_response({"about_text": "   \n "})

        with pytest.raises(GenerationError) as exc_info:
            agent.generate_about_text("Cozy Corner")

        assert exc_info.value.code == "EMPTY_CONTENT"


class TestImproveContent:
    """Test CopywriterAgent.improve_content."""

    def test_returns_improved_content(self, agent, openai_client, mock_openai_response):
        openai_client.chat.completions.create.return_value = mock_openai_response({
            "improved_content": "Handpicked books and fresh tea, every day.",
        })

        assert agent.improve_content("we sell books and tea") == "Handpicked books and fresh tea, every day."

    def test_empty_improvement_rejected(self, agent, openai_client, mock_openai_response):
        openai_client.chat.completions.create.return_value = mock_openai_response({"improved_content": ""})

        with pytest.raises(GenerationError) as exc_info:
            agent.improve_content("we sell books")

        assert exc_info.value.code == "VALIDATION_ERROR"

    def test_whitespace_improvement_rejected(self, agent, openai_client, mock_openai_response):
        openai_client.chat.completions.create.return_value = mock_openai_response({"improved_content": "   "})

        with pytest.raises(GenerationError) as exc_info:
            agent.improve_content("we sell books")

        assert exc_info.value.code == "EMPTY_CONTENT"
