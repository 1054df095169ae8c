"""
Tests for the OpenAI request builders.

Covers URLs, methods, header order, JSON bodies and the soft-failure path for
payloads that cannot be encoded.
"""

import logging

import orjson
import pytest
from pydantic import ValidationError

from aiapi.core.errors import MalformedURLError
from aiapi.models.api_models import Message, RequestSpec
from aiapi.services.requests.messages import build_user_message, build_assistant_message
from aiapi.services.requests.prompts import goal_tree_from
from aiapi.services.requests.builders.openai_builder import (
    prepare_models_request,
    prepare_completion_request,
    prepare_chat_request,
    prepare_goal_tree_request,
)

BUILDER_LOGGER = "AiAPI.Services.Requests.OpenAIBuilder"


def _expected_headers(api_key):
    return {
        "Authorization": f"Bearer {api_key}",
        "Content-Type": "application/json",
    }


class TestModelsRequest:

    def test_get_without_body(self, api_key):
        spec = prepare_models_request(api_key)
        assert spec.url == "https://api.openai.com/v1/models"
        assert spec.http_method == "GET"
        assert spec.headers == _expected_headers(api_key)
        assert spec.body is None

    def test_header_order(self, api_key):
        spec = prepare_models_request(api_key)
        assert list(spec.headers) == ["Authorization", "Content-Type"]

    def test_custom_url(self, api_key):
        spec = prepare_models_request(api_key, url="https://api.openai.com/v4/models")
        assert spec.url == "https://api.openai.com/v4/models"


class TestCompletionRequest:

    def test_default_parameters(self, api_key):
        spec = prepare_completion_request(api_key, "Once upon a time")
        assert spec.url == "https://api.openai.com/v1/engines/davinci/completions"
        assert spec.http_method == "POST"
        assert spec.headers == _expected_headers(api_key)
        assert orjson.loads(spec.body) == {
            "prompt": "Once upon a time",
            "max_tokens": 50,
            "n": 1,
            "stop": ["\n"],
        }

    def test_custom_parameters(self, api_key):
        spec = prepare_completion_request(
            api_key,
            "List colors:",
            url="https://api.openai.com/v2/engines/davinci/completions",
            max_tokens=10,
            n=3,
            stop=["END", "\n\n"],
        )
        assert spec.url == "https://api.openai.com/v2/engines/davinci/completions"
        assert orjson.loads(spec.body) == {
            "prompt": "List colors:",
            "max_tokens": 10,
            "n": 3,
            "stop": ["END", "\n\n"],
        }

    def test_empty_stop_list_is_kept(self, api_key):
        spec = prepare_completion_request(api_key, "x", stop=[])
        assert orjson.loads(spec.body)["stop"] == []


class TestChatRequest:

    def test_body_round_trip(self, api_key):
        spec = prepare_chat_request(api_key, build_user_message("hi"))
        assert spec.url == "https://api.openai.com/v1/chat/completions"
        assert spec.http_method == "POST"
        assert spec.headers == _expected_headers(api_key)

        body = orjson.loads(spec.body)
        assert list(body) == ["model", "messages", "temperature"]
        assert body == {
            "model": "gpt-3.5-turbo",
            "messages": [{"role": "user", "content": "hi"}],
            "temperature": 0.7,
        }

    def test_explicit_values_round_trip(self, api_key):
        messages = build_user_message("Plan my week") + build_assistant_message("Sure.")
        spec = prepare_chat_request(
            api_key,
            messages,
            temperature=0.1,
            url="https://api.openai.com/v2/chat/completions",
            model="gpt-4o-mini",
        )
        body = orjson.loads(spec.body)
        assert spec.url == "https://api.openai.com/v2/chat/completions"
        assert body["model"] == "gpt-4o-mini"
        assert body["temperature"] == 0.1
        assert body["messages"] == [m.model_dump() for m in messages]

    def test_accepts_plain_dict_messages(self, api_key):
        messages = [{"role": "user", "content": "hi"}]
        spec = prepare_chat_request(api_key, messages)
        assert orjson.loads(spec.body)["messages"] == messages

    def test_is_idempotent(self, api_key):
        first = prepare_chat_request(api_key, build_user_message("hi"), temperature=0.3)
        second = prepare_chat_request(api_key, build_user_message("hi"), temperature=0.3)
        assert first == second
        assert first.body == second.body


class TestCallerSuppliedUrl:

    @pytest.mark.parametrize("url", ["not a url", "", "/v1/chat/completions"])
    def test_unparseable_url_raises(self, api_key, url):
        with pytest.raises(MalformedURLError):
            prepare_models_request(api_key, url=url)
        with pytest.raises(MalformedURLError):
            prepare_completion_request(api_key, "x", url=url)
        with pytest.raises(MalformedURLError):
            prepare_chat_request(api_key, build_user_message("hi"), url=url)

    def test_none_falls_back_to_default_endpoint(self, api_key):
        spec = prepare_chat_request(api_key, build_user_message("hi"), url=None)
        assert spec.url == "https://api.openai.com/v1/chat/completions"


class TestSerializationFailure:

    def test_cyclic_payload_yields_empty_body(self, api_key, caplog):
        message = {"role": "user", "content": "hi"}
        message["self"] = message

        with caplog.at_level(logging.WARNING, logger=BUILDER_LOGGER):
            spec = prepare_chat_request(api_key, [message])

        assert spec.body is None
        assert spec.url == "https://api.openai.com/v1/chat/completions"
        assert spec.http_method == "POST"
        assert spec.headers == _expected_headers(api_key)
        assert "Failed to encode request body" in caplog.text
        assert api_key not in caplog.text

    def test_unencodable_value_yields_empty_body(self, api_key):
        spec = prepare_completion_request(api_key, "x", stop=[object()])
        assert spec.body is None
        assert spec.url == "https://api.openai.com/v1/engines/davinci/completions"
        assert spec.headers == _expected_headers(api_key)


class TestCredentials:

    @pytest.mark.parametrize("api_key", ["", None])
    def test_missing_credential_is_not_an_error(self, api_key):
        spec = prepare_models_request(api_key)
        assert spec.headers["Authorization"] == "Bearer "


class TestGoalTreeRequest:

    def test_wraps_template_in_single_user_message(self, api_key):
        spec = prepare_goal_tree_request("learn to sail", api_key)
        body = orjson.loads(spec.body)
        assert spec.url == "https://api.openai.com/v1/chat/completions"
        assert body["messages"] == [{"role": "user", "content": goal_tree_from("learn to sail")}]
        assert body["model"] == "gpt-3.5-turbo"
        assert body["temperature"] == 0.7


def test_request_spec_is_immutable(api_key):
    spec = prepare_models_request(api_key)
    assert isinstance(spec, RequestSpec)
    with pytest.raises(ValidationError):
        spec.url = "https://example.com"


def test_request_spec_accepts_alias():
    spec = RequestSpec.model_validate({
        "url": "https://api.openai.com/v1/models",
        "httpMethod": "GET",
        "headers": {},
    })
    assert spec.http_method == "GET"
    assert spec.body is None


def test_message_models_are_encoded_as_objects(api_key):
    spec = prepare_chat_request(api_key, [Message(role="assistant", content="ok")])
    assert orjson.loads(spec.body)["messages"] == [{"role": "assistant", "content": "ok"}]
