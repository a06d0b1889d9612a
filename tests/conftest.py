from __future__ import annotations

from typing import Any, List

import pytest
from fastapi.testclient import TestClient
from langchain_core.messages import AIMessage

from prompt_enhancer.api.main import create_app


class RecordingChatModel:
    """
    Stand-in chat model that records every prompt and replies with canned text.
    """

    def __init__(self, reply: Any = "Enhanced prompt: Build a fast blog.", error: Exception | None = None) -> None:
        self.reply = reply
        self.error = error
        self.calls: List[Any] = []

    async def ainvoke(self, messages: Any, **_: Any) -> AIMessage:
        self.calls.append(messages)
        if self.error is not None:
            raise self.error
        return AIMessage(content=self.reply)


@pytest.fixture
def recording_model() -> RecordingChatModel:
    return RecordingChatModel()


@pytest.fixture
def client(recording_model: RecordingChatModel):
    app = create_app(chat_model=recording_model)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def chat_model_factory():
    return RecordingChatModel
