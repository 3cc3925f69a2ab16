"""Configuration management using pydantic-settings."""

from typing import List, Optional
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # Server Configuration
    host: str = Field(default="0.0.0.0", description="Server host")
    port: int = Field(default=7788, description="Server port")
    debug: bool = Field(default=False, description="Debug mode")

    # Storage Configuration
    database_path: str = Field(default="./data/omnibox.db", description="DuckDB database file")
    seed_demo_data: bool = Field(default=True, description="Seed demo inbox data into an empty database")

    # Channel Configuration
    enabled_channels: str = Field(
        default="website,instagram,facebook,messenger",
        description="Enabled channels (comma separated)"
    )
    website_webhook_url: Optional[str] = Field(default=None, description="Website chat widget relay URL")
    meta_graph_api_base: str = Field(default="https://graph.facebook.com/v19.0", description="Meta Graph API base URL")
    meta_page_id: Optional[str] = Field(default=None, description="Facebook page ID")
    meta_page_access_token: Optional[str] = Field(default=None, description="Facebook page access token")
    instagram_account_id: Optional[str] = Field(default=None, description="Instagram business account ID")
    delivery_timeout: float = Field(default=10.0, description="Channel delivery timeout in seconds")

    # Agent Configuration
    agent_name: str = Field(default="Nova", description="Display name of the drafting agent")
    agent_provider: str = Field(default="playbook", description="Agent provider: playbook or anthropic")
    agent_api_key: Optional[str] = Field(default=None, description="Anthropic API key for the drafting agent")
    agent_api_base: str = Field(default="https://api.anthropic.com", description="Anthropic API base URL")
    agent_model: str = Field(default="claude-3-5-haiku-latest", description="Model used for drafting")
    agent_timeout: float = Field(default=20.0, description="Agent drafting timeout in seconds")

    # Reply Pipeline Configuration
    auto_create_suggested_tasks: bool = Field(
        default=False,
        description="Persist agent follow-up suggestions as open tasks"
    )
    reply_sentiment: str = Field(
        default="positive",
        description="Sentiment recorded on delivered replies: a fixed label or \"keyword\""
    )

    # Metrics Configuration
    due_soon_hours: int = Field(default=24, description="Forward window for tasks due soon, in hours")

    # Logging Configuration
    log_level: str = Field(default="INFO", description="Log level")
    log_file: Optional[str] = Field(default="./logs/omnibox.log", description="Log file path")

    def get_enabled_channels(self) -> List[str]:
        """Get list of enabled channels."""
        return [channel.strip().lower() for channel in self.enabled_channels.split(",") if channel.strip()]

    def get_channel_config(self, channel: str) -> dict:
        """Get configuration for a specific channel adapter."""
        if channel == "website":
            return {
                "webhook_url": self.website_webhook_url,
                "timeout": self.delivery_timeout,
            }
        elif channel in ("facebook", "messenger", "instagram"):
            config = {
                "api_base": self.meta_graph_api_base,
                "timeout": self.delivery_timeout,
            }
            # Only add credentials that are actually set
            if self.meta_page_access_token:
                config["access_token"] = self.meta_page_access_token
            account_id = self.instagram_account_id if channel == "instagram" else self.meta_page_id
            if account_id:
                config["account_id"] = account_id
            return config
        else:
            raise ValueError(f"Unknown channel: {channel}")

    def get_agent_config(self) -> dict:
        """Get configuration for the drafting agent."""
        config = {
            "name": self.agent_name,
            "api_base": self.agent_api_base,
            "model": self.agent_model,
        }
        if self.agent_api_key:
            config["api_key"] = self.agent_api_key
        return config


# Global settings instance
settings = Settings()
