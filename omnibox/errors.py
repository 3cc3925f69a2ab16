"""Inbox error taxonomy.

Each error carries the HTTP status it is surfaced with; the API layer
renders any OmniboxError as ``{"error": str(exc)}``.
"""


class OmniboxError(Exception):
    """Base class for all inbox errors."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(OmniboxError):
    """Missing or invalid user input."""

    status_code = 400


class UnknownChannel(OmniboxError):
    """No transport adapter is registered for the requested channel."""

    status_code = 400

    def __init__(self, channel: str, available=None):
        self.channel = channel
        message = f"Unknown channel: {channel}"
        if available:
            message += f". Available channels: {', '.join(available)}"
        super().__init__(message)


class TaskNotFound(OmniboxError):
    """Completing a task that does not exist."""

    status_code = 404

    def __init__(self, task_id: str):
        self.task_id = task_id
        super().__init__(f"Task not found: {task_id}")


class DeliveryFailure(OmniboxError):
    """A channel adapter failed to deliver a message.

    ``reason`` is the adapter's own error text, forwarded unchanged.
    """

    status_code = 502

    def __init__(self, reason: str, channel: str = None):
        self.reason = reason
        self.channel = channel
        super().__init__(reason)


class AgentError(OmniboxError):
    """The drafting agent failed to produce a draft."""

    status_code = 502


class AgentTimeout(AgentError):
    """The drafting agent did not answer in time."""

    status_code = 504

    def __init__(self, timeout: float):
        self.timeout = timeout
        super().__init__(f"Agent drafting timed out after {timeout:g}s")


class StoreFailure(OmniboxError):
    """The message store is unavailable or a write failed."""

    status_code = 503
