"""Reply-drafting agents."""

from .base import AgentDraft, BaseAgent
from .playbook import PlaybookAgent
from .anthropic import AnthropicAgent

AGENT_PROVIDERS = {
    "playbook": PlaybookAgent,
    "anthropic": AnthropicAgent,
}


def create_agent(settings) -> BaseAgent:
    """
    Build the drafting agent selected in settings.

    Falls back to the offline playbook when the LLM provider has no API key.

    Args:
        settings: Application settings instance

    Returns:
        BaseAgent instance

    Raises:
        ValueError: If the provider is unknown
    """
    provider = settings.agent_provider.lower()
    if provider not in AGENT_PROVIDERS:
        raise ValueError(
            f"Unknown agent provider: {settings.agent_provider}. "
            f"Available providers: {', '.join(AGENT_PROVIDERS.keys())}"
        )

    config = settings.get_agent_config()
    if provider == "anthropic" and not config.get("api_key"):
        return PlaybookAgent(config)
    return AGENT_PROVIDERS[provider](config)


__all__ = [
    "AgentDraft",
    "BaseAgent",
    "PlaybookAgent",
    "AnthropicAgent",
    "AGENT_PROVIDERS",
    "create_agent",
]
