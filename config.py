from typing import Literal

from pydantic import AliasChoices, Field, HttpUrl
from pydantic_settings import BaseSettings, SettingsConfigDict

class AppConfig(BaseSettings):
    ai_gateway_api_key: str | None = Field(
        default=None,
        validation_alias=AliasChoices("LOVABLE_API_KEY", "AI_GATEWAY_API_KEY"),
    )
    ai_gateway_url: HttpUrl = "https://ai.gateway.lovable.dev/v1/chat/completions"
    ai_gateway_model: str = "google/gemini-3-flash-preview"
    llm_provider: Literal["cloud", "local"] = "cloud"
    local_llm_endpoint: HttpUrl = "http://localhost:11434"
    local_model_name: str = "llama3"
    output_format: Literal["markers", "json"] = "markers"
    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 8000

    model_config = SettingsConfigDict(env_file=".env", extra="ignore", populate_by_name=True)

config = AppConfig()
