"""Tests for the Gemini text-generation client (respx-mocked)."""

import json

import httpx
import pytest
import respx
from httpx import Response

from roaster.services.gemini_client import (
    GeminiClient,
    GeminiResponseError,
    GeminiUnavailableError,
    extract_text,
)

URL = "https://generativelanguage.googleapis.com/v1beta/models/gemini-2.5-flash:generateContent"


def _ok(text: str = "You have 5 repos.") -> Response:
    return Response(
        200,
        json={"candidates": [{"content": {"parts": [{"text": text}], "role": "model"}, "finishReason": "STOP"}]},
    )


@respx.mock
def test_generate_sends_prompt_and_key():
    route = respx.post(URL).mock(return_value=_ok())

    text = GeminiClient(api_key="k-123").generate("roast me")

    assert text == "You have 5 repos."
    request = route.calls[0].request
    assert request.headers["x-goog-api-key"] == "k-123"
    assert json.loads(request.content) == {"contents": [{"parts": [{"text": "roast me"}]}]}


@respx.mock
def test_generate_model_override():
    route = respx.post(
        "https://generativelanguage.googleapis.com/v1beta/models/gemini-2.0-pro:generateContent"
    ).mock(return_value=_ok("hi"))

    assert GeminiClient(api_key="k").generate("p", model="gemini-2.0-pro") == "hi"
    assert route.called


def test_generate_without_key_makes_no_request():
    with respx.mock(assert_all_called=False) as mock:
        route = mock.post(URL).mock(return_value=_ok())
        with pytest.raises(GeminiUnavailableError):
            GeminiClient(api_key="  ").generate("p")
        assert not route.called


@pytest.mark.parametrize("status", [400, 401, 403, 429, 500])
@respx.mock
def test_generate_error_status_is_unavailable(status: int):
    respx.post(URL).mock(return_value=Response(status, json={"error": {"message": "quota exceeded"}}))

    with pytest.raises(GeminiUnavailableError) as exc_info:
        GeminiClient(api_key="k").generate("p")

    assert str(status) in str(exc_info.value)


@respx.mock
def test_generate_transport_error_is_unavailable():
    respx.post(URL).mock(side_effect=httpx.ReadTimeout("slow"))

    with pytest.raises(GeminiUnavailableError):
        GeminiClient(api_key="k").generate("p")


@respx.mock
def test_generate_missing_text_is_malformed():
    respx.post(URL).mock(return_value=Response(200, json={"candidates": [{"content": {"parts": []}}]}))

    with pytest.raises(GeminiResponseError):
        GeminiClient(api_key="k").generate("p")


@respx.mock
def test_generate_non_json_success_is_malformed():
    respx.post(URL).mock(return_value=Response(200, text="not json"))

    with pytest.raises(GeminiResponseError):
        GeminiClient(api_key="k").generate("p")


def test_extract_text_joins_parts():
    data = {"candidates": [{"content": {"parts": [{"text": "Hello "}, {"inlineData": {}}, {"text": "world"}]}}]}
    assert extract_text(data) == "Hello world"


def test_extract_text_blocked_prompt():
    with pytest.raises(GeminiResponseError) as exc_info:
        extract_text({"promptFeedback": {"blockReason": "SAFETY"}})
    assert "SAFETY" in str(exc_info.value)
