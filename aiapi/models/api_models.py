from enum import Enum
from pydantic import BaseModel, Field
from typing import List, Dict, Literal, Optional, Union, Annotated

# --- Endpoints ---

class EndpointKind(str, Enum):
    LEGACY_COMPLETION = "legacy_completion"
    CHAT_COMPLETION = "chat_completion"
    MODEL_LISTING = "model_listing"

# --- Prompt fragments ---
# Closed set of variants discriminated by `type`. Rendering lives in
# services/requests/prompt_composer.py.

class BasePromptFragment(BaseModel):
    type: str
    model_config = {"populate_by_name": True, "frozen": True}

class InstructionPrompt(BasePromptFragment):
    """Direct instructions for zero-shot prompting, usually a single question or command."""
    type: Literal["instruction"] = "instruction"
    text: str

class ExamplePrompt(BasePromptFragment):
    """Input/output pair used for few-shot demonstration."""
    type: Literal["example"] = "example"
    example_input: str = Field(alias="exampleInput")
    example_output: str = Field(alias="exampleOutput")

class ChainOfThoughtPrompt(BasePromptFragment):
    type: Literal["chain_of_thought"] = "chain_of_thought"
    description: str
    thought_process: List[str] = Field(default_factory=list, alias="thoughtProcess")

class PromptChain(BasePromptFragment):
    type: Literal["prompt_chain"] = "prompt_chain"
    initial_prompt: str = Field(alias="initialPrompt")
    subsequent_prompts: List[str] = Field(default_factory=list, alias="subsequentPrompts")

class GraphBasedPrompt(BasePromptFragment):
    type: Literal["graph_based"] = "graph_based"
    graph_description: str = Field(alias="graphDescription")
    reasoning_from_graph: str = Field(alias="reasoningFromGraph")

PromptFragment = Annotated[
    Union[
        InstructionPrompt,
        ExamplePrompt,
        ChainOfThoughtPrompt,
        PromptChain,
        GraphBasedPrompt,
    ],
    Field(discriminator="type")
]

class GoodPrompt(BaseModel):
    instructions: str
    examples: List[ExamplePrompt] = Field(default_factory=list)
    # Excluded content. Stored with the prompt but not rendered.
    what_i_dont_want: Optional[str] = Field(None, alias="whatIDontWant")
    chain_of_thought: Optional[ChainOfThoughtPrompt] = Field(None, alias="chainOfThought")
    prompt_chain: Optional[PromptChain] = Field(None, alias="promptChain")
    graph_prompt: Optional[GraphBasedPrompt] = Field(None, alias="graphPrompt")
    model_config = {"populate_by_name": True, "frozen": True}

# --- Chat messages ---

class Message(BaseModel):
    role: Literal["user", "assistant"]
    content: str
    model_config = {"frozen": True}

# --- Outgoing request ---

class RequestSpec(BaseModel):
    """Transport-agnostic description of one HTTP call."""
    url: str
    http_method: Literal["GET", "POST"] = Field(alias="httpMethod")
    headers: Dict[str, str]
    body: Optional[bytes] = None
    model_config = {"populate_by_name": True, "frozen": True}
