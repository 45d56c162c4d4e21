"""Anthropic Content Generator — wraps AsyncAnthropic for the career tools.

Invariants:
    - Every SDK failure is mapped to ExternalServiceError (core/errors.py)
    - Only text blocks of the response are returned, joined in order
    - An empty completion is an error, never an empty 200

Design Decisions:
    - Retry policy left to the SDK's max_retries setting (0 by default), no
      custom backoff loop
    - Client constructed lazily from settings via the FastAPI dependency, so
      tests swap in a fake ContentGenerator without touching the SDK
"""

import logging

import anthropic
from anthropic import (
    APIConnectionError,
    APIError,
    APIStatusError,
    APITimeoutError,
    RateLimitError,
)

from introflow.core.domain_types import CareerTool
from introflow.core.errors import ExternalServiceError

logger = logging.getLogger(__name__)

_SERVICE = "Anthropic"


class AnthropicContentGenerator:
    """ContentGenerator backed by the Anthropic Messages API."""

    def __init__(
        self,
        api_key: str,
        model: str,
        max_tokens: int = 2048,
        max_retries: int = 0,
        timeout_seconds: int = 120,
    ):
        self.client = anthropic.AsyncAnthropic(
            api_key=api_key,
            max_retries=max_retries,
            timeout=timeout_seconds,
        )
        self.model = model
        self.max_tokens = max_tokens

    async def generate(
        self, tool: CareerTool, system_prompt: str, user_prompt: str,
    ) -> str:
        try:
            response = await self.client.messages.create(
                model=self.model,
                max_tokens=self.max_tokens,
                system=system_prompt,
                messages=[{"role": "user", "content": user_prompt}],
            )
        except RateLimitError:
            raise ExternalServiceError(_SERVICE, "rate limit exceeded")
        except APITimeoutError:
            raise ExternalServiceError(_SERVICE, "request timed out")
        except APIConnectionError as e:
            raise ExternalServiceError(_SERVICE, f"connection error: {e}")
        except APIStatusError as e:
            raise ExternalServiceError(_SERVICE, f"HTTP {e.status_code}")
        except APIError as e:
            raise ExternalServiceError(_SERVICE, str(e))

        text = "".join(
            block.text for block in response.content
            if getattr(block, "type", None) == "text"
        ).strip()
        usage = response.usage
        logger.info(
            "Career tool generated",
            extra={
                "service": _SERVICE,
                "resource_type": tool.value,
                "input_tokens": usage.input_tokens,
                "output_tokens": usage.output_tokens,
            },
        )
        if not text:
            raise ExternalServiceError(_SERVICE, "empty completion")
        return text
