"""
This module provides a unified client for sending one prompt to a Large Language Model (LLM)
and getting its text back. It supports the hosted AI gateway (an OpenAI-compatible
chat-completion endpoint) and a local Ollama-style endpoint, and maps every transport or
HTTP failure to one of the typed errors in `utils.exceptions`.

Each call is a single synchronous POST: no retries, no backoff, no timeout override.
"""
from abc import ABC, abstractmethod

import requests

from config import AppConfig
from utils.exceptions import (
    ConfigError,
    EmptyResponseError,
    UpstreamError,
    UpstreamPaymentRequiredError,
    UpstreamRateLimitError,
)

# Abstract LLM Client Interface
class AbstractLLMClient(ABC):
    """
    Abstract base class for LLM clients.
    Defines the common interface for generating content from an LLM.
    """
    @abstractmethod
    def generate_content(self, prompt: str, temperature: float) -> str:
        """
        Generates content for a single prompt.

        Args:
            prompt (str): The full prompt, sent as one user message.
            temperature (float): The sampling temperature.

        Returns:
            str: The stripped completion text, never empty.
        """
        pass

    def _post(self, url: str, headers: dict, payload: dict) -> dict:
        """
        Issues the POST request and maps failures to typed errors.

        Raises:
            UpstreamRateLimitError: On HTTP 429.
            UpstreamPaymentRequiredError: On HTTP 402.
            UpstreamError: On any other non-2xx status, a transport error or a non-JSON body.
        """
        try:
            response = requests.post(url, headers=headers, json=payload)
        except requests.exceptions.RequestException as e:
            raise UpstreamError(f"AI gateway request failed: {e}", detail=str(e)) from e

        if response.status_code == 429:
            raise UpstreamRateLimitError("AI gateway rate limit reached", detail=response.text)
        if response.status_code == 402:
            raise UpstreamPaymentRequiredError("AI gateway requires payment", detail=response.text)
        if not response.ok:
            raise UpstreamError(
                f"AI gateway error: {response.status_code}",
                detail=response.text,
                status=response.status_code,
            )

        try:
            return response.json()
        except ValueError as e:
            raise UpstreamError("AI gateway returned a non-JSON body", detail=response.text[:500]) from e


def _message_content(message):
    return message.get("content") if isinstance(message, dict) else None


def _require_text(content) -> str:
    text = content.strip() if isinstance(content, str) else ""
    if not text:
        raise EmptyResponseError("No content received from AI")
    return text


class GatewayLLMClient(AbstractLLMClient):
    """
    LLM client for the hosted AI gateway (OpenAI-compatible chat completions).
    """
    def __init__(self, endpoint: str, api_key: str | None, model_name: str):
        """
        Initializes the client. The API key is injected here once; a missing key is only
        reported when a generation is attempted, before any network call.

        Args:
            endpoint (str): Full URL of the chat-completions endpoint.
            api_key (str | None): Bearer credential for the gateway.
            model_name (str): Model identifier sent with every request.
        """
        self.endpoint = endpoint
        self.api_key = api_key
        self.model_name = model_name

    def generate_content(self, prompt: str, temperature: float) -> str:
        if not self.api_key:
            raise ConfigError("AI gateway API key is not configured")

        headers = {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        }
        data = {
            "model": self.model_name,
            "messages": [{"role": "user", "content": prompt}],
            "temperature": temperature,
        }
        json_response = self._post(self.endpoint, headers, data)

        choices = json_response.get("choices") if isinstance(json_response, dict) else None
        if not isinstance(choices, list) or not choices or not isinstance(choices[0], dict):
            raise EmptyResponseError("AI gateway returned no choices")
        return _require_text(_message_content(choices[0].get("message")))


class LocalLLMClient(AbstractLLMClient):
    """
    LLM client for interacting with local LLM endpoints (e.g., Ollama).
    """
    def __init__(self, endpoint: str, model_name: str):
        """
        Initializes the LocalLLMClient with the local LLM endpoint URL.

        Args:
            endpoint (str): The base URL of the local LLM API.
            model_name (str): The name of the local model to use.
        """
        self.endpoint = endpoint.rstrip("/")
        self.model_name = model_name

    def generate_content(self, prompt: str, temperature: float) -> str:
        headers = {"Content-Type": "application/json"}
        data = {
            "model": self.model_name,
            "messages": [{"role": "user", "content": prompt}],
            "options": {"temperature": temperature},
            "stream": False,
        }
        json_response = self._post(f"{self.endpoint}/api/chat", headers, data)
        message = json_response.get("message") if isinstance(json_response, dict) else None
        return _require_text(_message_content(message))


def get_llm_client(app_config: AppConfig) -> AbstractLLMClient:
    """
    Factory function to get the appropriate LLM client for the configured provider.

    Args:
        app_config (AppConfig): The configuration loaded at startup.

    Returns:
        AbstractLLMClient: A GatewayLLMClient for "cloud" or a LocalLLMClient for "local".

    Raises:
        ConfigError: If the provider is not supported.
    """
    if app_config.llm_provider == "cloud":
        return GatewayLLMClient(
            endpoint=str(app_config.ai_gateway_url),
            api_key=app_config.ai_gateway_api_key,
            model_name=app_config.ai_gateway_model,
        )
    elif app_config.llm_provider == "local":
        return LocalLLMClient(str(app_config.local_llm_endpoint), app_config.local_model_name)
    else:
        raise ConfigError(f"Unsupported LLM_PROVIDER: {app_config.llm_provider}. Must be 'cloud' or 'local'.")
