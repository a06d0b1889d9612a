"""
Agent that forwards an enhancement template to the configured chat model.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from langchain_core.language_models.chat_models import BaseChatModel
from langchain_core.messages import HumanMessage
from langchain_google_genai import ChatGoogleGenerativeAI
from langchain_openai import ChatOpenAI

from prompt_enhancer.agents.errors import EnhancementError, ErrorType
from prompt_enhancer.config import Settings

logger = logging.getLogger(__name__)


def build_chat_model(settings: Settings) -> BaseChatModel:
    """
    Instantiate the chat model for the configured provider.
    """

    if settings.provider == "openai":
        model: BaseChatModel = ChatOpenAI(model=settings.model, api_key=settings.api_key)
    else:
        model = ChatGoogleGenerativeAI(model=settings.model, google_api_key=settings.api_key)
    logger.info("Enhancement model initialized provider=%s model=%s", settings.provider, settings.model)
    return model


@dataclass
class EnhancementAgent:
    """
    Sends one template as a single user message and returns the completion text.

    No retries, no timeout override: a failed call fails the request.
    """

    model: BaseChatModel

    async def run(self, template: str) -> str:
        try:
            response = await self.model.ainvoke([HumanMessage(content=template)])
        except Exception as exc:
            logger.error("Completion request failed: %s", exc, exc_info=True)
            raise EnhancementError(
                ErrorType.UPSTREAM_FAILURE,
                "The completion service failed to respond.",
                details={"exception": type(exc).__name__},
            ) from exc

        text = _content_to_text(getattr(response, "content", ""))
        if not text.strip():
            raise EnhancementError(ErrorType.UPSTREAM_FAILURE, "The completion service returned no text.")
        return text


def _content_to_text(content: Any) -> str:
    if isinstance(content, str):
        return content
    if isinstance(content, list):
        parts = []
        for part in content:
            if isinstance(part, str):
                parts.append(part)
            elif isinstance(part, dict):
                parts.append(str(part.get("text", "")))
        return "".join(parts)
    return ""


__all__ = ["EnhancementAgent", "build_chat_model"]
