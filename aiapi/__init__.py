"""
AiAPI: prompt composition and OpenAI request construction.

Builds transport-agnostic RequestSpec objects; sending them is left to a
transport such as aiapi.core.http_client.send_request_spec.
"""

from .core.config import APP_VERSION
from .core.errors import AiApiError, MalformedURLError
from .models.api_models import (
    EndpointKind,
    InstructionPrompt,
    ExamplePrompt,
    ChainOfThoughtPrompt,
    PromptChain,
    GraphBasedPrompt,
    PromptFragment,
    GoodPrompt,
    Message,
    RequestSpec,
)
from .services.requests import (
    resolve_endpoint,
    to_url,
    render_fragment,
    load_fragment,
    compose_prompt,
    compose_good_prompt,
    goal_tree_from,
    build_user_message,
    build_assistant_message,
    prepare_models_request,
    prepare_completion_request,
    prepare_chat_request,
    prepare_goal_tree_request,
)

__version__ = APP_VERSION

__all__ = [
    "AiApiError",
    "MalformedURLError",
    "EndpointKind",
    "InstructionPrompt",
    "ExamplePrompt",
    "ChainOfThoughtPrompt",
    "PromptChain",
    "GraphBasedPrompt",
    "PromptFragment",
    "GoodPrompt",
    "Message",
    "RequestSpec",
    "resolve_endpoint",
    "to_url",
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
