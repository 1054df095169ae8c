"""
Requests building package.

Endpoint resolution, prompt composition, chat messages and the request
builders that turn them into RequestSpec objects.
"""

from .endpoints import (
    resolve_endpoint,
    to_url,
    davinci_url,
    gpt35_turbo_url,
    models_url,
)
from .prompt_composer import (
    render_fragment,
    load_fragment,
    compose_prompt,
    compose_good_prompt,
)
from .prompts import goal_tree_from
from .messages import build_user_message, build_assistant_message
from .builders import (
    prepare_models_request,
    prepare_completion_request,
    prepare_chat_request,
    prepare_goal_tree_request,
)

__all__ = [
    "resolve_endpoint",
    "to_url",
    "davinci_url",
    "gpt35_turbo_url",
    "models_url",
    "render_fragment",
    "load_fragment",
    "compose_prompt",
    "compose_good_prompt",
    "goal_tree_from",
    "build_user_message",
    "build_assistant_message",
    "prepare_models_request",
    "prepare_completion_request",
    "prepare_chat_request",
    "prepare_goal_tree_request",
]
