"""
Headers builders for request construction.
"""

from __future__ import annotations

from typing import Dict, Optional


def build_openai_headers(api_key: Optional[str]) -> Dict[str, str]:
    """
    Build headers for OpenAI endpoints, in this order:
      - Authorization: Bearer <api_key>
      - Content-Type: application/json

    A missing key is rendered as an empty bearer token rather than rejected.
    """
    api_key = api_key or ""
    return {
        "Authorization": f"Bearer {api_key}",
        "Content-Type": "application/json",
    }
