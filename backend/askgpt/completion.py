from __future__ import annotations

import logging
import time
from typing import List, Optional

import requests
from pydantic import BaseModel, ValidationError

from .config import Settings
from .errors import CompletionError


class Message(BaseModel):
    role: str
    content: str


class ChatCompletionRequest(BaseModel):
    model: str
    messages: List[Message]
    temperature: float


class Choice(BaseModel):
    message: Message
    finish_reason: Optional[str] = None


class ChatCompletionResponse(BaseModel):
    id: str = ""
    object: str = ""
    model: str = ""
    choices: List[Choice] = []


def _post_chat(api_key: str, req: ChatCompletionRequest, settings: Settings) -> requests.Response:
    headers = {
        "Content-Type": "application/json",
        "Authorization": f"Bearer {api_key}",
    }
    try:
        return requests.post(
            settings.api_url,
            json=req.model_dump(),
            headers=headers,
            timeout=settings.timeout,
        )
    except requests.RequestException as e:
        raise CompletionError(f"Request to {settings.api_url} failed: {e}") from e


def get_answer(
    api_key: str,
    messages: List[Message],
    settings: Settings,
    log: logging.Logger,
) -> str:
    """
    Send one chat completion request and return the first choice, trimmed.
    Network errors, non-200 responses and unparseable bodies raise CompletionError.
    """
    req = ChatCompletionRequest(
        model=settings.model,
        messages=messages,
        temperature=settings.temperature,
    )
    log.debug("POST %s model=%s messages=%d", settings.api_url, req.model, len(req.messages))

    t0 = time.perf_counter()
    r = _post_chat(api_key, req, settings)
    log.debug("completion status=%s elapsed_s=%.3f", r.status_code, time.perf_counter() - t0)

    if r.status_code != 200:
        raise CompletionError(
            f"Completion request failed with status {r.status_code}: {r.text[:300]}",
            status_code=r.status_code,
        )

    try:
        data = r.json()
    except ValueError as e:
        raise CompletionError(f"Completion response is not JSON: {e}") from e

    try:
        resp = ChatCompletionResponse.model_validate(data)
    except ValidationError as e:
        raise CompletionError(f"Unexpected completion response: {e.errors()[0]['msg']}") from e

    if not resp.choices:
        raise CompletionError("Completion response contained no choices")

    return resp.choices[0].message.content.strip()
