# -*- coding: utf-8 -*-
"""
Prompt composer: renders prompt fragments and joins them into one prompt.

Composition order is fixed: instructions, examples block, chain-of-thought,
prompt chain, graph prompt. Absent pieces and pieces that render to "" are
dropped, so no stray separators appear.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional, Union

from pydantic import TypeAdapter

from ...models.api_models import (
    InstructionPrompt,
    ExamplePrompt,
    ChainOfThoughtPrompt,
    PromptChain,
    GraphBasedPrompt,
    PromptFragment,
    GoodPrompt,
)

_FRAGMENT_ADAPTER = TypeAdapter(PromptFragment)


def load_fragment(data: Dict[str, Any]) -> PromptFragment:
    """
    load_fragment(data: dict) -> PromptFragment
    Validates a plain mapping into the variant named by its "type" key.
    """
    return _FRAGMENT_ADAPTER.validate_python(data)


def render_fragment(fragment: PromptFragment) -> str:
    """
    render_fragment(fragment) -> str
    Single rendering entry point for every fragment variant.
    """
    fragment_type = getattr(fragment, "type", None)

    if fragment_type == "instruction":
        return fragment.text
    if fragment_type == "example":
        return f"Example Input: {fragment.example_input}\nExample Output: {fragment.example_output}"
    if fragment_type == "chain_of_thought":
        return fragment.description + "\n" + "\n".join(fragment.thought_process)
    if fragment_type == "prompt_chain":
        # No separator between the initial prompt and the first follow-up.
        return fragment.initial_prompt + "\n".join(fragment.subsequent_prompts)
    if fragment_type == "graph_based":
        return fragment.graph_description + "\n" + fragment.reasoning_from_graph

    raise TypeError(f"Unsupported prompt fragment: {type(fragment).__name__}")


def compose_prompt(
    instructions: Union[str, InstructionPrompt],
    examples: Iterable[ExamplePrompt] = (),
    what_i_dont_want: Optional[str] = None,
    chain_of_thought: Optional[ChainOfThoughtPrompt] = None,
    prompt_chain: Optional[PromptChain] = None,
    graph_prompt: Optional[GraphBasedPrompt] = None,
) -> str:
    """
    compose_prompt(...) -> str
    Computes the final combined prompt from all available components.

    Notes:
    - what_i_dont_want is accepted for parity with GoodPrompt but is not rendered
    """
    if not isinstance(instructions, str):
        instructions = render_fragment(instructions)

    pieces: List[Optional[str]] = [
        instructions,
        "\n".join(render_fragment(example) for example in examples),
        render_fragment(chain_of_thought) if chain_of_thought is not None else None,
        render_fragment(prompt_chain) if prompt_chain is not None else None,
        render_fragment(graph_prompt) if graph_prompt is not None else None,
    ]
    return "\n".join(piece for piece in pieces if piece)


def compose_good_prompt(prompt: GoodPrompt) -> str:
    return compose_prompt(
        prompt.instructions,
        prompt.examples,
        prompt.what_i_dont_want,
        prompt.chain_of_thought,
        prompt.prompt_chain,
        prompt.graph_prompt,
    )
