"""
Unit tests for `llm.llm_client`: one POST per call and typed errors for every failure.
"""
from unittest import mock

import pytest
import requests

from config import AppConfig
from llm.llm_client import GatewayLLMClient, LocalLLMClient, get_llm_client
from fake_gateway import gateway_response
from utils.exceptions import (
    ConfigError,
    EmptyResponseError,
    UpstreamError,
    UpstreamPaymentRequiredError,
    UpstreamRateLimitError,
)

ENDPOINT = "https://ai.gateway.lovable.dev/v1/chat/completions"


def make_client(api_key="test-key"):
    return GatewayLLMClient(endpoint=ENDPOINT, api_key=api_key, model_name="google/gemini-3-flash-preview")


def test_sends_single_authenticated_request():
    with mock.patch("llm.llm_client.requests.post", return_value=gateway_response("  Feature: Login  ")) as post:
        text = make_client().generate_content(prompt="hello", temperature=0.2)

    assert text == "Feature: Login"
    post.assert_called_once()
    args, kwargs = post.call_args
    assert args[0] == ENDPOINT
    assert kwargs["headers"]["Authorization"] == "Bearer test-key"
    assert kwargs["json"] == {
        "model": "google/gemini-3-flash-preview",
        "messages": [{"role": "user", "content": "hello"}],
        "temperature": 0.2,
    }
    assert "timeout" not in kwargs


def test_missing_key_fails_before_network_call():
    with mock.patch("llm.llm_client.requests.post") as post:
        with pytest.raises(ConfigError):
            make_client(api_key=None).generate_content(prompt="hello", temperature=0.3)
    post.assert_not_called()


@pytest.mark.parametrize("status, error_class", [
    (429, UpstreamRateLimitError),
    (402, UpstreamPaymentRequiredError),
    (500, UpstreamError),
    (401, UpstreamError),
])
def test_status_mapping(status, error_class):
    response = gateway_response(status=status, text="upstream says no")
    with mock.patch("llm.llm_client.requests.post", return_value=response) as post:
        with pytest.raises(error_class) as excinfo:
            make_client().generate_content(prompt="hello", temperature=0.2)
    assert excinfo.value.detail == "upstream says no"
    assert post.call_count == 1


def test_generic_error_keeps_upstream_status():
    with mock.patch("llm.llm_client.requests.post", return_value=gateway_response(status=503, text="down")):
        with pytest.raises(UpstreamError) as excinfo:
            make_client().generate_content(prompt="hello", temperature=0.2)
    assert excinfo.value.status == 503
    assert excinfo.value.status_code == 500


def test_transport_error_is_upstream_error():
    with mock.patch("llm.llm_client.requests.post", side_effect=requests.exceptions.ConnectionError("refused")):
        with pytest.raises(UpstreamError):
            make_client().generate_content(prompt="hello", temperature=0.2)


@pytest.mark.parametrize("content", [None, "", "   \n "])
def test_empty_completion(content):
    with mock.patch("llm.llm_client.requests.post", return_value=gateway_response(content)):
        with pytest.raises(EmptyResponseError):
            make_client().generate_content(prompt="hello", temperature=0.2)


def test_no_choices_is_empty_response():
    response = gateway_response("x")
    response.json.return_value = {"choices": []}
    with mock.patch("llm.llm_client.requests.post", return_value=response):
        with pytest.raises(EmptyResponseError):
            make_client().generate_content(prompt="hello", temperature=0.2)


def test_local_client_posts_to_chat_api():
    response = gateway_response()
    response.json.return_value = {"message": {"role": "assistant", "content": "Feature: Local"}}
    with mock.patch("llm.llm_client.requests.post", return_value=response) as post:
        text = LocalLLMClient("http://localhost:11434/", "llama3").generate_content(prompt="hi", temperature=0.3)
    assert text == "Feature: Local"
    assert post.call_args[0][0] == "http://localhost:11434/api/chat"
    assert post.call_args[1]["json"]["stream"] is False


def test_factory_picks_provider():
    cloud = get_llm_client(AppConfig(_env_file=None, ai_gateway_api_key="k"))
    assert isinstance(cloud, GatewayLLMClient)
    assert cloud.api_key == "k"
    local = get_llm_client(AppConfig(_env_file=None, llm_provider="local"))
    assert isinstance(local, LocalLLMClient)


@pytest.mark.parametrize("body", [
    {"choices": [{"message": "hello"}]},
    {"choices": {"a": 1}},
    {"choices": ["hello"]},
    {"choices": [{"message": {"content": ["a", "b"]}}]},
    ["not", "an", "object"],
])
def test_malformed_completion_is_empty_response(body):
    response = gateway_response("x")
    response.json.return_value = body
    with mock.patch("llm.llm_client.requests.post", return_value=response):
        with pytest.raises(EmptyResponseError):
            make_client().generate_content(prompt="hello", temperature=0.2)


@pytest.mark.parametrize("body", [{"message": "hello"}, {"message": ["a"]}, {}])
def test_local_client_malformed_completion_is_empty_response(body):
    response = gateway_response()
    response.json.return_value = body
    with mock.patch("llm.llm_client.requests.post", return_value=response):
        with pytest.raises(EmptyResponseError):
            LocalLLMClient("http://localhost:11434", "llama3").generate_content(prompt="hi", temperature=0.3)
