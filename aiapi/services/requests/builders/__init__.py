# -*- coding: utf-8 -*-
"""
Request builders package.

Contains thin, focused builders for the OpenAI request shapes
(model listing, legacy completion, chat completion).
"""
from .openai_builder import (
    prepare_models_request,
    prepare_completion_request,
    prepare_chat_request,
    prepare_goal_tree_request,
)

__all__ = [
    "prepare_models_request",
    "prepare_completion_request",
    "prepare_chat_request",
    "prepare_goal_tree_request",
]
