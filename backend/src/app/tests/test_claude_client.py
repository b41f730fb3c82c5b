"""Tests for the Claude extraction client with the Anthropic SDK mocked out."""
import asyncio
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock, patch

import anthropic
import httpx
import pytest

from app.core.claude_client import (
    NO_TEXT_MESSAGE,
    PARSE_FAILED_MESSAGE,
    RESUME_EXTRACTION_PROMPT,
    ClaudeExtractionClient,
)
from app.core.exceptions import ExtractionError, ExtractionParseError, PayloadTooLargeError

_REQUEST = httpx.Request("POST", "https://api.anthropic.com/v1/messages")


def _message(*blocks):
    return SimpleNamespace(content=list(blocks))


def _text(text):
    return SimpleNamespace(type="text", text=text)


def _status_error(cls, status, message):
    return cls(message, response=httpx.Response(status, request=_REQUEST), body=None)


def _client(create):
    mock_sdk = MagicMock()
    mock_sdk.messages.create = create
    with patch("app.core.claude_client.anthropic.AsyncAnthropic", return_value=mock_sdk):
        client = ClaudeExtractionClient(api_key="k", model="m", max_tokens=100)
    return client, mock_sdk


def test_returns_contact_info():
    create = AsyncMock(return_value=_message(_text('{"fullName": "Ada", "email": "ada@example.com"}')))
    client, _ = _client(create)
    info = asyncio.run(client.extract_contact_info("JVBE"))
    assert info.fullName == "Ada"
    assert info.email == "ada@example.com"


def test_sends_document_and_prompt():
    create = AsyncMock(return_value=_message(_text("{}")))
    client, _ = _client(create)
    asyncio.run(client.extract_contact_info("JVBE"))
    kwargs = create.await_args.kwargs
    assert kwargs["model"] == "m"
    assert kwargs["max_tokens"] == 100
    document, prompt = kwargs["messages"][0]["content"]
    assert document["source"] == {"type": "base64", "media_type": "application/pdf", "data": "JVBE"}
    assert prompt == {"type": "text", "text": RESUME_EXTRACTION_PROMPT}


def test_unparseable_reply_raises_parse_error():
    create = AsyncMock(return_value=_message(_text("Sorry, no contact info here.")))
    client, _ = _client(create)
    with pytest.raises(ExtractionParseError, match=PARSE_FAILED_MESSAGE):
        asyncio.run(client.extract_contact_info("JVBE"))


def test_no_text_block_raises():
    create = AsyncMock(return_value=_message(SimpleNamespace(type="tool_use")))
    client, _ = _client(create)
    with pytest.raises(ExtractionError, match=NO_TEXT_MESSAGE):
        asyncio.run(client.extract_contact_info("JVBE"))


def test_empty_content_raises():
    client, _ = _client(AsyncMock(return_value=_message()))
    with pytest.raises(ExtractionError, match=NO_TEXT_MESSAGE):
        asyncio.run(client.extract_contact_info("JVBE"))


def test_prompt_too_long_maps_to_payload_too_large():
    error = _status_error(anthropic.BadRequestError, 400, "prompt is too long: 250000 tokens > 200000 maximum")
    client, _ = _client(AsyncMock(side_effect=error))
    with pytest.raises(PayloadTooLargeError, match="too large"):
        asyncio.run(client.extract_contact_info("JVBE"))


def test_http_413_maps_to_payload_too_large():
    error = _status_error(anthropic.APIStatusError, 413, "request_too_large")
    client, _ = _client(AsyncMock(side_effect=error))
    with pytest.raises(PayloadTooLargeError):
        asyncio.run(client.extract_contact_info("JVBE"))


def test_other_api_error_keeps_message():
    error = _status_error(anthropic.InternalServerError, 500, "overloaded")
    client, _ = _client(AsyncMock(side_effect=error))
    with pytest.raises(ExtractionError, match="overloaded") as exc_info:
        asyncio.run(client.extract_contact_info("JVBE"))
    assert not isinstance(exc_info.value, PayloadTooLargeError)


def test_connection_error_is_extraction_error():
    client, _ = _client(AsyncMock(side_effect=anthropic.APIConnectionError(request=_REQUEST)))
    with pytest.raises(ExtractionError, match="Connection error"):
        asyncio.run(client.extract_contact_info("JVBE"))


def test_no_retries():
    with patch("app.core.claude_client.anthropic.AsyncAnthropic") as sdk_cls:
        ClaudeExtractionClient(api_key="k")
    assert sdk_cls.call_args.kwargs["max_retries"] == 0
