"""Anthropic content generator — text extraction and SDK error mapping."""

import httpx
import pytest
from anthropic import APIConnectionError

from introflow.core.domain_types import CareerTool
from introflow.core.errors import ExternalServiceError
from introflow.infrastructure.anthropic_client import AnthropicContentGenerator


class _Block:
    def __init__(self, type, text=""):
        self.type = type
        self.text = text


class _Usage:
    input_tokens = 120
    output_tokens = 40


class _Response:
    def __init__(self, content):
        self.content = content
        self.usage = _Usage()


class _Messages:
    def __init__(self, result):
        self.result = result
        self.kwargs = None

    async def create(self, **kwargs):
        self.kwargs = kwargs
        if isinstance(self.result, Exception):
            raise self.result
        return self.result


def _generator(result) -> tuple[AnthropicContentGenerator, _Messages]:
    generator = AnthropicContentGenerator(api_key="sk-ant-test", model="test-model")
    messages = _Messages(result)
    generator.client = type("_Client", (), {"messages": messages})()
    return generator, messages


async def test_joins_text_blocks():
    generator, messages = _generator(_Response([
        _Block("text", "Hello "), _Block("thinking"), _Block("text", "world"),
    ]))
    text = await generator.generate(CareerTool.RESUME, "sys", "user")
    assert text == "Hello world"
    assert messages.kwargs["system"] == "sys"
    assert messages.kwargs["model"] == "test-model"
    assert messages.kwargs["messages"] == [{"role": "user", "content": "user"}]


async def test_empty_completion_is_an_error():
    generator, _ = _generator(_Response([_Block("text", "   ")]))
    with pytest.raises(ExternalServiceError):
        await generator.generate(CareerTool.RESUME, "sys", "user")


async def test_sdk_errors_map_to_external_service_error():
    request = httpx.Request("POST", "https://api.anthropic.com/v1/messages")
    generator, _ = _generator(APIConnectionError(request=request))
    with pytest.raises(ExternalServiceError) as exc:
        await generator.generate(CareerTool.COVER_LETTER, "sys", "user")
    assert exc.value.service == "Anthropic"
