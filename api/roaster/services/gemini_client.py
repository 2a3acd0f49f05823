"""Minimal Gemini client for single-prompt text generation.

Plain REST over httpx against ``models/{model}:generateContent``. The API key
comes from process configuration and is passed in by the caller.
"""

from __future__ import annotations

import logging
import time
from typing import Any, Optional

import httpx

logger = logging.getLogger(__name__)


class GeminiError(RuntimeError):
    pass


class GeminiUnavailableError(GeminiError):
    """Auth, quota and transport failures."""


class GeminiResponseError(GeminiError):
    """A 2xx response that carries no generated text."""


def extract_text(data: Any) -> str:
    """Concatenate ``candidates[0].content.parts[*].text``."""
    if not isinstance(data, dict):
        raise GeminiResponseError(f"Unexpected Gemini payload type: {type(data).__name__}")

    candidates = data.get("candidates")
    if not isinstance(candidates, list) or not candidates:
        feedback = data.get("promptFeedback") if isinstance(data.get("promptFeedback"), dict) else {}
        reason = feedback.get("blockReason") or "no candidates"
        raise GeminiResponseError(f"Gemini payload missing candidates ({reason})")

    first = candidates[0] if isinstance(candidates[0], dict) else {}
    content = first.get("content") if isinstance(first.get("content"), dict) else {}
    parts = content.get("parts") if isinstance(content.get("parts"), list) else []
    texts = [part["text"] for part in parts if isinstance(part, dict) and isinstance(part.get("text"), str)]
    text = "".join(texts)
    if not text.strip():
        raise GeminiResponseError("Gemini payload missing candidates[0].content.parts[].text")
    return text


class GeminiClient:
    def __init__(
        self,
        api_key: str,
        model: str = "gemini-2.5-flash",
        base_url: str = "https://generativelanguage.googleapis.com/v1beta",
        timeout_s: float = 45.0,
    ) -> None:
        self._api_key = (api_key or "").strip()
        self._model = model
        self._base_url = base_url.rstrip("/")
        self._timeout_s = timeout_s

    @property
    def model(self) -> str:
        return self._model

    def generate(self, prompt: str, model: Optional[str] = None) -> str:
        """Send one prompt and return the generated text."""
        if not self._api_key:
            raise GeminiUnavailableError("GEMINI_API_KEY is not configured")

        model_id = model or self._model
        url = f"{self._base_url}/models/{model_id}:generateContent"
        headers = {
            "x-goog-api-key": self._api_key,
            "Content-Type": "application/json",
        }
        payload: dict[str, Any] = {"contents": [{"parts": [{"text": prompt}]}]}

        started = time.perf_counter()
        try:
            with httpx.Client(timeout=self._timeout_s, headers=headers) as client:
                resp = client.post(url, json=payload)
        except httpx.HTTPError as exc:
            raise GeminiUnavailableError(f"Gemini unreachable: {exc.__class__.__name__}") from exc
        elapsed_ms = int(round((time.perf_counter() - started) * 1000))

        status = int(resp.status_code)
        logger.info("gemini_generate model=%s status=%s elapsed_ms=%s", model_id, status, elapsed_ms)

        if status >= 400:
            message = ""
            try:
                body = resp.json()
            except ValueError:
                body = None
            if isinstance(body, dict) and isinstance(body.get("error"), dict):
                message = str(body["error"].get("message") or "")
            raise GeminiUnavailableError(f"Gemini error (status={status}): {message or (resp.text or '')[:200]}")

        try:
            data = resp.json()
        except ValueError as exc:
            raise GeminiResponseError(f"Gemini response was not JSON (status={status})") from exc
        return extract_text(data)
