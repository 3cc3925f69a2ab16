"""Tests for API models."""

from omnibox.db.database_models import MessageDO, TaskDO
from omnibox.models import MessageResponse, SendMessageRequest, TaskResponse


class TestSendMessageRequest:
    """SUT: SendMessageRequest"""

    def test_camel_case_input(self):
        request = SendMessageRequest.model_validate(
            {"channel": "website", "contactId": "c1", "threadId": "t1", "useAgent": True}
        )
        assert request.contact_id == "c1"
        assert request.thread_id == "t1"
        assert request.use_agent is True
        assert request.body is None

    def test_snake_case_input(self):
        request = SendMessageRequest(channel="website", contact_id="c1", thread_id="t1", body="hi")
        assert request.use_agent is False


class TestResponses:
    """SUT: MessageResponse / TaskResponse"""

    def test_message_from_record(self):
        message = MessageDO(
            id="m1", channel="website", contact_id="c1", thread_id="t1", direction="outbound",
            body="Thanks!", status="responded", sentiment="positive", created_at="2025-01-01T10:00:00.000Z"
        )

        data = MessageResponse.model_validate(message).model_dump(by_alias=True)

        assert data["contactId"] == "c1"
        assert data["threadId"] == "t1"
        assert data["createdAt"] == "2025-01-01T10:00:00.000Z"

    def test_task_from_record(self):
        data = TaskResponse.model_validate(TaskDO(id="task_1", description="Call")).model_dump(by_alias=True)
        assert data["status"] == "open"
        assert data["dueAt"] is None
        assert "completedAt" in data
