"""
Pytest configuration and shared fixtures for the request-construction tests.
"""

import pytest

from aiapi.core.logging_utils import recent_request_log
from aiapi.models.api_models import (
    ExamplePrompt,
    ChainOfThoughtPrompt,
    PromptChain,
    GraphBasedPrompt,
)


@pytest.fixture
def api_key():
    """Deterministic fake credential."""
    return "sk-test-0123456789"


@pytest.fixture
def sample_examples():
    return [
        ExamplePrompt(example_input="2 + 2", example_output="4"),
        ExamplePrompt(example_input="3 + 5", example_output="8"),
    ]


@pytest.fixture
def chain_of_thought():
    return ChainOfThoughtPrompt(
        description="Work through the sum step by step.",
        thought_process=["Add the units.", "Carry if needed."],
    )


@pytest.fixture
def prompt_chain():
    return PromptChain(
        initial_prompt="Summarize the report.",
        subsequent_prompts=["List the risks.", "Rank them."],
    )


@pytest.fixture
def graph_prompt():
    return GraphBasedPrompt(
        graph_description="Revenue rises from Q1 to Q3.",
        reasoning_from_graph="Growth is steady.",
    )


@pytest.fixture(autouse=True)
def clear_memory_logs():
    recent_request_log.clear()
    yield
    recent_request_log.clear()
