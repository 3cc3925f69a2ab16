"""LLM drafting agent backed by the Anthropic Messages API."""

import json
from typing import Any, Dict, List, Optional

import httpx

from .base import AgentDraft, BaseAgent
from ..db.database_models import MessageDO
from ..errors import AgentError
from ..utils.logger import get_app_logger

ANTHROPIC_VERSION = "2023-06-01"

SYSTEM_PROMPT = """You are {name}, a customer messaging assistant for a small business inbox.
Given a conversation on the {channel} channel, write the next outbound reply.
Keep it short, friendly and specific to the customer's last message.
Respond with JSON only:
{{"reply": "<message to send>", "rationale": "<one sentence on why>", "suggestedTasks": ["<follow-up for a human>", ...]}}"""


def format_transcript(history: List[MessageDO]) -> str:
    """Render thread history as a plain transcript, oldest first."""
    lines = []
    for message in sorted(history, key=lambda m: m.created_at):
        speaker = "Customer" if message.direction == "inbound" else "Business"
        lines.append(f"[{message.created_at}] {speaker}: {message.body}")
    return "\n".join(lines) if lines else "(no messages yet)"


def parse_draft(raw: str) -> AgentDraft:
    """
    Parse the model's JSON answer.

    Code fences are stripped. Text that is not JSON is used as the reply
    with an empty rationale.
    """
    cleaned = raw.strip()
    if cleaned.startswith("```"):
        lines = [line for line in cleaned.split("\n") if not line.strip().startswith("```")]
        cleaned = "\n".join(lines)

    try:
        data = json.loads(cleaned)
    except json.JSONDecodeError:
        return AgentDraft(reply=raw.strip())

    if not isinstance(data, dict):
        return AgentDraft(reply=raw.strip())

    tasks = data.get("suggestedTasks") or data.get("suggested_tasks") or []
    if isinstance(tasks, str):
        tasks = [tasks]
    elif not isinstance(tasks, list):
        tasks = []
    return AgentDraft(
        reply=str(data.get("reply") or "").strip(),
        rationale=str(data.get("rationale") or ""),
        suggested_tasks=[str(task) for task in tasks if str(task).strip()]
    )


class AnthropicAgent(BaseAgent):
    """Drafts replies with a Claude model over HTTP."""

    def __init__(self, config: Optional[Dict[str, Any]] = None, client: Optional[httpx.AsyncClient] = None):
        super().__init__(config)
        self._client = client
        self.logger = get_app_logger("agent")

    @property
    def model(self) -> str:
        return self.config.get("model", "claude-3-5-haiku-latest")

    def _request(self, history: List[MessageDO], channel: str) -> Dict[str, Any]:
        return {
            "model": self.model,
            "max_tokens": 1024,
            "system": SYSTEM_PROMPT.format(name=self.name, channel=channel),
            "messages": [{"role": "user", "content": format_transcript(history)}],
        }

    async def draft(self, history: List[MessageDO], channel: str) -> AgentDraft:
        api_key = self.config.get("api_key")
        if not api_key:
            raise AgentError("Agent API key is not configured")

        url = f"{self.config.get('api_base', 'https://api.anthropic.com').rstrip('/')}/v1/messages"
        headers = {
            "x-api-key": api_key,
            "anthropic-version": ANTHROPIC_VERSION,
            "content-type": "application/json",
        }

        try:
            if self._client is not None:
                response = await self._client.post(url, json=self._request(history, channel), headers=headers)
            else:
                async with httpx.AsyncClient() as client:
                    response = await client.post(url, json=self._request(history, channel), headers=headers)
        except httpx.HTTPError as e:
            raise AgentError(f"Agent request failed: {e}")

        if response.is_error:
            raise AgentError(f"Agent responded {response.status_code}: {response.text}")

        body = response.json()
        text = "".join(
            block.get("text", "")
            for block in body.get("content", [])
            if block.get("type") == "text"
        )
        self.logger.debug(f"Agent usage: {body.get('usage')}")
        return parse_draft(text)
