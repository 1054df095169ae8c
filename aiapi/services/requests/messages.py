"""
Chat message builders.

Each builder returns a single-message conversation seed for the chat endpoint.
"""

from __future__ import annotations

from typing import List

from ...models.api_models import Message


def build_user_message(content: str) -> List[Message]:
    return [Message(role="user", content=content)]


def build_assistant_message(content: str) -> List[Message]:
    return [Message(role="assistant", content=content)]
