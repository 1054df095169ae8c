# -*- coding: utf-8 -*-
"""
Endpoint resolution: logical endpoint kind + API version -> concrete URL.

URL formation is fallible by contract. A version that is not a non-negative
integer, or a result that does not parse as an absolute URL, raises
MalformedURLError instead of producing a broken request.
"""

from __future__ import annotations

import httpx

from ...core.config import API_PROVIDER, API_URL_TEMPLATE, DEFAULT_API_VERSION
from ...core.errors import MalformedURLError
from ...models.api_models import EndpointKind

ENDPOINT_PATHS = {
    EndpointKind.LEGACY_COMPLETION: "engines/davinci/completions",
    EndpointKind.CHAT_COMPLETION: "chat/completions",
    EndpointKind.MODEL_LISTING: "models",
}


def to_url(text: str) -> str:
    """
    Parse `text` as an absolute URL and return it in normalized string form.
    """
    try:
        parsed = httpx.URL(text)
    except (httpx.InvalidURL, TypeError) as e:
        raise MalformedURLError(str(text), reason=f"invalid url ({e})") from e
    if not parsed.scheme or not parsed.host:
        raise MalformedURLError(str(text))
    return str(parsed)


def resolve_endpoint(
    kind: EndpointKind,
    version: int = DEFAULT_API_VERSION,
    provider: str = API_PROVIDER,
) -> str:
    """
    resolve_endpoint(kind, version=1) -> "https://api.<provider>.com/v<version>/<path>"
    """
    if isinstance(version, bool) or not isinstance(version, int) or version < 0:
        raise MalformedURLError(
            repr(version), reason="api version must be a non-negative integer"
        )
    path = ENDPOINT_PATHS[EndpointKind(kind)]
    return to_url(API_URL_TEMPLATE.format(provider=provider, version=version, path=path))


def davinci_url(version: int = DEFAULT_API_VERSION) -> str:
    return resolve_endpoint(EndpointKind.LEGACY_COMPLETION, version)


def gpt35_turbo_url(version: int = DEFAULT_API_VERSION) -> str:
    return resolve_endpoint(EndpointKind.CHAT_COMPLETION, version)


def models_url(version: int = DEFAULT_API_VERSION) -> str:
    return resolve_endpoint(EndpointKind.MODEL_LISTING, version)
