"""Configuration models."""

from typing import Optional

from pydantic import BaseModel, Field

from ..generation.models import SearchSettings


class PostgresConfig(BaseModel):
    """Postgres configuration."""

    host: str = Field("localhost", description="Database host")
    port: int = Field(5432, description="Database port")
    database: str = Field("newsdesk", description="Database name")
    user: str = Field("newsdesk_user", description="Database user")
    password: Optional[str] = Field(None, description="Database password")
    password_env: Optional[str] = Field(None, description="Environment variable for password")
    pool_min_size: int = Field(1, description="Minimum pooled connections", ge=0)
    pool_max_size: int = Field(10, description="Maximum pooled connections", ge=1)


class LLMConfig(BaseModel):
    """LLM provider configuration for prompt testing."""

    provider: str = Field("openai", description="LLM provider (openai, perplexity, mock)")
    model: str = Field("llama-3.1-sonar-small-128k-online", description="Model name")
    api_key_env: Optional[str] = Field("PERPLEXITY_API_KEY", description="Environment variable for API key")
    api_key: Optional[str] = Field(None, description="API key (prefer api_key_env)")
    base_url: Optional[str] = Field(
        "https://api.perplexity.ai",
        description="Base URL of an OpenAI-compatible endpoint",
    )


class TemplateConfig(BaseModel):
    """Prompt template branding."""

    publication: str = Field("MortgagePoint", description="Outlet named in the prompt preamble")
    beat: str = Field(
        "mortgage lending, servicing, housing policy, regulation, and macroeconomic trends",
        description="Coverage area named in the prompt preamble",
    )
    top_theme_limit: int = Field(5, description="Themes used when none are selected", ge=1, le=20)


class ConfigModel(BaseModel):
    """Main configuration model."""

    postgres: PostgresConfig = Field(default_factory=PostgresConfig)
    llm: LLMConfig = Field(default_factory=LLMConfig)
    template: TemplateConfig = Field(default_factory=TemplateConfig)
    search_defaults: SearchSettings = Field(default_factory=SearchSettings)
