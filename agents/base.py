# =============================================================================
# agents/base.py - Shared JSON-mode OpenAI Call
# =============================================================================
# Both agents make a single chat completion in JSON mode and validate the
# result against a Pydantic schema. This module holds that call, the
# parsing step and the error type they raise.
#
# No retries: a failed call surfaces immediately and the user retries.
# =============================================================================

from __future__ import annotations

import json
import logging
from typing import Any, TypeVar

from openai import OpenAI
from pydantic import BaseModel, ValidationError

from app.config import settings
from lib.utils import ApplicationError

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)


# =============================================================================
# Exceptions
# =============================================================================

class GenerationError(ApplicationError):
    """
    Error during a generation call.

    Codes:
        OPENAI_ERROR: the API call raised
        EMPTY_RESPONSE: the model returned no message content
        JSON_PARSE_ERROR: the content was not valid JSON
        VALIDATION_ERROR: the JSON did not match the expected schema
        EMPTY_CONTENT: the schema matched but the document was blank
    """

    def __init__(
        self,
        message: str,
        code: str = "GENERATION_ERROR",
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message, code=code, suggestion=suggestion, details=details)


# =============================================================================
# Base Agent
# =============================================================================

class JsonAgent:
    """
    Base class for agents that make one JSON-mode completion.

    Attributes:
        model: OpenAI model to use (default from settings)
        temperature: Generation temperature
    """

    def __init__(
        self,
        model: str | None = None,
        temperature: float = 0.7,
        client: OpenAI | None = None,
    ):
        self.client = client or OpenAI(
            api_key=settings.OPENAI_API_KEY,
            timeout=settings.OPENAI_TIMEOUT_SECONDS,
        )
        self.model = model or settings.OPENAI_MODEL
        self.temperature = temperature

        logger.info(f"{type(self).__name__} initialized with model={self.model}, temp={self.temperature}")

    def _complete_json(self, system_prompt: str, user_prompt: str) -> str:
        """
        Run the completion and return the raw message content.

        Raises:
            GenerationError: OPENAI_ERROR or EMPTY_RESPONSE
        """
        try:
            response = self.client.chat.completions.create(
                model=self.model,
                temperature=self.temperature,
                response_format={"type": "json_object"},
                messages=[
                    {"role": "system", "content": system_prompt},
                    {"role": "user", "content": user_prompt},
                ],
            )
        except Exception as e:
            raise GenerationError(
                message=f"OpenAI API call failed: {e}",
                code="OPENAI_ERROR",
                suggestion="Check your OPENAI_API_KEY and network connection",
                details={"model": self.model}
            )

        choices = getattr(response, "choices", None) or []
        content = choices[0].message.content if choices else None

        if not content or not content.strip():
            raise GenerationError(
                message="Model returned no content",
                code="EMPTY_RESPONSE",
                suggestion="Try again; the model occasionally returns an empty message",
                details={"model": self.model}
            )

        logger.debug(f"OpenAI response: {content[:200]}...")
        return content

    def _parse_response(self, response_text: str, schema: type[T]) -> T:
        """
        Parse a JSON response into the given schema.

        Raises:
            GenerationError: JSON_PARSE_ERROR or VALIDATION_ERROR
        """
        try:
            data = json.loads(response_text)
        except json.JSONDecodeError as e:
            raise GenerationError(
                message=f"Invalid JSON response from model: {e}",
                code="JSON_PARSE_ERROR",
                suggestion="The model didn't return valid JSON. Try again.",
                details={"raw_response": response_text[:500]}
            )

        try:
            return schema.model_validate(data)
        except ValidationError as e:
            errors = [f"{err['loc']}: {err['msg']}" for err in e.errors()]
            raise GenerationError(
                message=f"Invalid response structure: {'; '.join(errors)}",
                code="VALIDATION_ERROR",
                suggestion="The model's response was valid JSON but missing required fields.",
                details={"validation_errors": errors}
            )
