# -*- coding: utf-8 -*-
"""
OpenAI request builders (thin, focused).

- Models listing: GET, no body.
- Legacy completion (davinci engine): POST {prompt, max_tokens, n, stop}.
- Chat completion: POST {model, messages, temperature}.

A payload that cannot be encoded does not abort construction: the request is
returned with body=None and a warning is logged.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Literal, Optional, Sequence, Union

import orjson

from ..endpoints import resolve_endpoint, to_url
from ..headers import build_openai_headers
from ..messages import build_user_message
from ..prompts import goal_tree_from
from ....core.config import (
    DEFAULT_CHAT_MODEL,
    DEFAULT_TEMPERATURE,
    DEFAULT_MAX_TOKENS,
    DEFAULT_N,
    DEFAULT_STOP_SEQUENCES,
)
from ....models.api_models import EndpointKind, Message, RequestSpec
from ....utils.helpers import orjson_dumps_bytes_wrapper

logger = logging.getLogger("AiAPI.Services.Requests.OpenAIBuilder")

ChatMessages = Sequence[Union[Message, Dict[str, Any]]]


def _target_url(url: Optional[str], kind: EndpointKind) -> str:
    # A caller-supplied address must parse; an unaddressable request is a hard failure.
    return to_url(url) if url is not None else resolve_endpoint(kind)


def _encode_body(payload: Dict[str, Any], url: str) -> Optional[bytes]:
    try:
        return orjson_dumps_bytes_wrapper(payload)
    except (orjson.JSONEncodeError, TypeError) as _e:
        logger.warning(f"Failed to encode request body for {url}, sending without body: {_e}")
        return None


def _build_request(
    api_key: Optional[str],
    url: str,
    http_method: Literal["GET", "POST"],
    payload: Optional[Dict[str, Any]] = None,
) -> RequestSpec:
    body = _encode_body(payload, url) if payload is not None else None
    logger.debug(f"Prepared {http_method} request for {url} (body: {len(body) if body else 0} bytes)")
    return RequestSpec(
        url=url,
        http_method=http_method,
        headers=build_openai_headers(api_key),
        body=body,
    )


def prepare_models_request(api_key: Optional[str], url: Optional[str] = None) -> RequestSpec:
    """
    GET the model listing endpoint.
    """
    target_url = _target_url(url, EndpointKind.MODEL_LISTING)
    return _build_request(api_key, target_url, "GET")


def prepare_completion_request(
    api_key: Optional[str],
    prompt: str,
    url: Optional[str] = None,
    max_tokens: int = DEFAULT_MAX_TOKENS,
    n: int = DEFAULT_N,
    stop: Optional[List[str]] = None,
) -> RequestSpec:
    """
    Build a legacy completion request against the davinci engine.

    - prompt: text prompt sent to the API
    - max_tokens: maximum number of tokens to generate
    - n: number of generated responses to return
    - stop: sequence(s) where generation stops, defaults to a newline
    """
    target_url = _target_url(url, EndpointKind.LEGACY_COMPLETION)
    payload: Dict[str, Any] = {
        "prompt": prompt,
        "max_tokens": max_tokens,
        "n": n,
        "stop": list(DEFAULT_STOP_SEQUENCES) if stop is None else stop,
    }
    return _build_request(api_key, target_url, "POST", payload)


def prepare_chat_request(
    api_key: Optional[str],
    messages: ChatMessages,
    temperature: float = DEFAULT_TEMPERATURE,
    url: Optional[str] = None,
    model: str = DEFAULT_CHAT_MODEL,
) -> RequestSpec:
    """
    Build a chat completion request.

    messages: role/content entries, either Message models or plain dicts with
    "role" ("user" or "assistant") and "content".
    temperature: randomness of the reply; higher values (e.g. 1.0) are more
    random, lower values (e.g. 0.1) more deterministic.
    """
    target_url = _target_url(url, EndpointKind.CHAT_COMPLETION)
    payload: Dict[str, Any] = {
        "model": model,
        "messages": list(messages),
        "temperature": temperature,
    }
    return _build_request(api_key, target_url, "POST", payload)


def prepare_goal_tree_request(goal: str, api_key: Optional[str]) -> RequestSpec:
    """
    Ask the chat endpoint to decompose `goal` into a JSON task tree.
    """
    return prepare_chat_request(
        api_key,
        build_user_message(goal_tree_from(goal)),
    )
